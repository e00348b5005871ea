# -*- coding: utf-8 -*-
"""Helpers , Aren't they useful ?"""

import numpy as np
from skimage import draw

from ..core.errors import InvalidInputError
from ..core.sequence import ImageSequence


def create_sample_sequence(width=100, height=100, n_frames=3, shapes=None, background=(0, 128, 128), name=None):
    """Create a synthetic image sequence with filled shapes painted on every frame.

    Parameters:
    -----------
    width, height : int
        Size of each frame
    n_frames : int
        Number of frames
    shapes : list of dict, optional
        Shapes to paint, each with a "kind" ("disk", "rectangle" or "ellipse"), its geometry and a "color".
        Geometry keys are "center" and "radius" for disks, "start" and "end" (inclusive, as (x, y)) for
        rectangles, "center", "radii" (x, y) and optional "rotation" (radians) for ellipses. An optional "frames"
        list restricts the shape to some frames.
    background : sequence of int
        Colour of the empty canvas
    name : str, optional
        Name of the sequence

    Returns:
    --------
    sequence : ImageSequence
        Sequence of uint8 frames shaped (height, width, 3)
    """
    frames = np.empty((n_frames, height, width, 3), dtype=np.uint8)
    frames[...] = np.asarray(background, dtype=np.uint8)

    for shape in shapes or []:
        kind = shape.get("kind")
        if kind == "disk":
            cx, cy = shape["center"]
            rr, cc = draw.disk((cy, cx), shape["radius"], shape=(height, width))
        elif kind == "rectangle":
            (x0, y0), (x1, y1) = shape["start"], shape["end"]
            rr, cc = draw.rectangle((y0, x0), end=(y1, x1), shape=(height, width))
        elif kind == "ellipse":
            cx, cy = shape["center"]
            rx, ry = shape["radii"]
            rr, cc = draw.ellipse(cy, cx, ry, rx, shape=(height, width), rotation=shape.get("rotation", 0.0))
        else:
            raise InvalidInputError(f"Unknown shape kind '{kind}'")

        targets = shape.get("frames", range(n_frames))
        for index in targets:
            frames[index, rr, cc] = np.asarray(shape["color"], dtype=np.uint8)

    return ImageSequence(frames, name=name, color_space="lab")


def get_channel_statistics(sequence, channel_names=None):
    """Calculate statistics for each channel of an image sequence.

    Parameters:
    -----------
    sequence : ImageSequence
        Image sequence to summarize
    channel_names : list of str, optional
        Names of the channels

    Returns:
    --------
    stats : dict
        Dictionary with channel statistics
    """
    if channel_names is None:
        channel_names = [f"Channel_{i + 1}" for i in range(3)]

    stats = {}

    for i, channel_name in enumerate(channel_names[:3]):
        channel_data = sequence.data[..., i]
        stats[channel_name] = {
            "min": float(np.min(channel_data)),
            "max": float(np.max(channel_data)),
            "mean": float(np.mean(channel_data)),
            "std": float(np.std(channel_data)),
            "median": float(np.median(channel_data)),
        }

    return stats
