# -*- coding: utf-8 -*-
"""Defines the ImageSequence class, the read-only volume every sampler reads from.

An image sequence is a time-ordered stack of equally sized 3-channel frames. Points address it as
(column, row, frame), which is the order used throughout volsampler; the underlying array is indexed
as (frame, row, column, channel). The sequence is shared by reference and never written to.
"""

import uuid

import cv2
import numpy as np

from .canvas import out_of_canvas
from .errors import InvalidInputError
from .types import Extent

_COLOR_CONVERSIONS = {
    "lab": cv2.COLOR_BGR2LAB,
    "rgb": cv2.COLOR_BGR2RGB,
}


class ImageSequence:
    """A stack of 3-channel frames addressed by (column, row, frame)."""

    def __init__(self, frames, name=None, color_space=None):
        """Initialize an ImageSequence.

        Parameters:
        -----------
        frames : numpy.ndarray or list of numpy.ndarray
            Array shaped (frames, height, width, 3), or a list of (height, width, 3) frames
        name : str, optional
            Name of the sequence. If None, a unique name will be generated.
        color_space : str, optional
            Label of the colour space the channels are expressed in
        """
        if isinstance(frames, (list, tuple)):
            if not frames:
                raise InvalidInputError("An image sequence needs at least one frame")
            shapes = {np.shape(frame) for frame in frames}
            if len(shapes) != 1:
                raise InvalidInputError(f"All frames must share one shape, got {sorted(shapes)}")
            data = np.stack([np.asarray(frame) for frame in frames])
        else:
            data = np.asarray(frames)

        if data.ndim != 4 or data.shape[-1] != 3:
            raise InvalidInputError(f"Expected frames shaped (n, height, width, 3), got {data.shape}")
        if 0 in data.shape:
            raise InvalidInputError(f"Image sequence must not be empty, got {data.shape}")

        self.id = str(uuid.uuid4())
        self.name = name if name else f"Sequence_{self.id[:8]}"
        self.color_space = color_space

        self.data = data.view()
        self.data.flags.writeable = False

    @classmethod
    def from_bgr(cls, frames, color_space="lab", name=None):
        """Build a sequence from 8-bit BGR frames, as returned by OpenCV readers.

        Parameters:
        -----------
        frames : list of numpy.ndarray
            BGR frames shaped (height, width, 3), dtype uint8
        color_space : str or None
            "lab" (default) or "rgb" to convert, None to keep BGR
        name : str, optional
            Name of the sequence

        Returns:
        --------
        sequence : ImageSequence
            Sequence holding the converted frames
        """
        if color_space is None:
            return cls(list(frames), name=name, color_space="bgr")
        if color_space not in _COLOR_CONVERSIONS:
            raise InvalidInputError(f"Unsupported colour space '{color_space}', choose from {sorted(_COLOR_CONVERSIONS)}")

        code = _COLOR_CONVERSIONS[color_space]
        converted = [cv2.cvtColor(np.asarray(frame, dtype=np.uint8), code) for frame in frames]
        return cls(converted, name=name, color_space=color_space)

    @property
    def n_frames(self):
        return self.data.shape[0]

    @property
    def height(self):
        return self.data.shape[1]

    @property
    def width(self):
        return self.data.shape[2]

    @property
    def bound(self):
        """Extent of the volume as (width, height, frame count)."""
        return Extent(self.width, self.height, self.n_frames)

    def frame(self, index):
        """Return one frame as a read-only (height, width, 3) array."""
        return self.data[index]

    def color(self, point):
        """Return the 3-channel colour at a (column, row, frame) point."""
        x, y, frame = (int(v) for v in point)
        if out_of_canvas((x, y, frame), self.bound):
            raise InvalidInputError(f"Point {(x, y, frame)} lies outside the sequence bound {tuple(self.bound)}")
        return self.data[frame, y, x]

    def brightness(self, point):
        """Return the first channel at a (column, row, frame) point."""
        return float(self.color(point)[0])

    def __len__(self):
        return self.n_frames

    def __str__(self):
        """String representation of the sequence."""
        space = self.color_space if self.color_space else "unknown"
        return f"ImageSequence '{self.name}' ({self.width}x{self.height}, frames: {self.n_frames}, colour space: {space})"
