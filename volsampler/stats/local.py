# -*- coding: utf-8 -*-
"""Local statistics around points of an image sequence.

Colour and variance are computed over an ellipsoidal neighbourhood of the point, the gradient over the 3x3 pixel
neighbourhood in the point's own frame. Batch variants evaluate the single-point function for every input point
and keep the input order; they can fan out over a thread pool since no call shares mutable state.
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from functools import partial

import numpy as np

from ..core.canvas import bound_local_region
from ..core.errors import EmptyRegionError
from ..core.types import as_point, as_vector

logger = logging.getLogger(__name__)

COLOR_RADIUS = (0, 0, 0)
VAR_RADIUS = (3, 3, 0)

SCHARR_X = np.array([[3, 10, 3], [0, 0, 0], [-3, -10, -3]], dtype=float) / 32
SCHARR_Y = np.array([[3, 0, -3], [10, 0, -10], [3, 0, -3]], dtype=float) / 32


def local_region(point, radius, bound):
    """Enumerate the lattice points inside the ellipsoid centred on ``point``.

    Parameters:
    -----------
    point : Point3 or sequence of int
        Centre of the ellipsoid
    radius : Vector3 or sequence of number
        Semi-axis length along each axis; 0 collapses that axis to the centre coordinate
    bound : Extent or sequence of int
        Size of the volume

    Returns:
    --------
    region : numpy.ndarray
        Integer array shaped (n, 3) of (column, row, frame), ordered by frame, then row, then column
    """
    point = as_point(point)
    radius = as_vector(radius)
    low, high = bound_local_region(point, radius, bound)

    axes = []
    for lo, hi in zip(low, high, strict=True):
        axes.append(np.arange(math.ceil(lo), math.floor(hi) + 1))

    frames, rows, cols = np.meshgrid(axes[2], axes[1], axes[0], indexing="ij")
    grid = np.column_stack([cols.ravel(), rows.ravel(), frames.ravel()])

    distance = np.zeros(len(grid))
    for axis in range(3):
        if radius[axis] > 0:
            distance += ((grid[:, axis] - point[axis]) / radius[axis]) ** 2

    return grid[distance <= 1.0]


def _region_colors(sequence, point, radius):
    region = local_region(point, radius, sequence.bound)
    if len(region) == 0:
        raise EmptyRegionError(f"Local region around {tuple(point)} with radius {tuple(radius)} holds no pixels")
    return sequence.data[region[:, 2], region[:, 1], region[:, 0]].astype(float)


def point_color_loc(sequence, point, radius=COLOR_RADIUS):
    """Average colour over the ellipsoidal neighbourhood of a point.

    Parameters:
    -----------
    sequence : ImageSequence
        Image sequence to sample
    point : Point3 or sequence of int
        Centre of the neighbourhood
    radius : Vector3 or sequence of number
        Ellipsoid semi-axes; the default samples the single pixel

    Returns:
    --------
    color : numpy.ndarray
        Mean value of each of the 3 channels
    """
    return _region_colors(sequence, point, radius).mean(axis=0)


def point_var_loc(sequence, point, radius=VAR_RADIUS):
    """Local variation score: the sum of the per-channel sample standard deviations.

    Parameters:
    -----------
    sequence : ImageSequence
        Image sequence to sample
    point : Point3 or sequence of int
        Centre of the neighbourhood
    radius : Vector3 or sequence of number
        Ellipsoid semi-axes

    Returns:
    --------
    score : float
        Sum over channels of the Bessel-corrected standard deviation, 0.0 for a single-pixel region
    """
    colors = _region_colors(sequence, point, radius)
    if len(colors) < 2:
        return 0.0
    return float(np.sqrt(colors.var(axis=0, ddof=1)).sum())


def point_scharr(sequence, point):
    """Scharr gradient magnitude of the brightness channel at a point.

    Parameters:
    -----------
    sequence : ImageSequence
        Image sequence to sample
    point : Point3 or sequence of int
        Point to evaluate

    Returns:
    --------
    gradient : float
        Magnitude of the two directional responses, 0.0 within one pixel of the frame border or outside the
        frame range
    """
    x, y, frame = as_point(point)
    if frame < 0 or frame >= sequence.n_frames:
        return 0.0
    if x < 1 or y < 1 or x > sequence.width - 2 or y > sequence.height - 2:
        return 0.0

    patch = sequence.data[frame, y - 1 : y + 2, x - 1 : x + 2, 0].astype(float)
    gx = float(np.sum(SCHARR_X * patch))
    gy = float(np.sum(SCHARR_Y * patch))
    return math.hypot(gx, gy)


def _map_points(function, points, max_workers):
    points = list(points)
    if max_workers is None or max_workers <= 1 or len(points) < 2:
        return [function(point) for point in points]

    logger.debug("evaluating %s on %d points with %d workers", function.func.__name__, len(points), max_workers)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(function, points))


def points_color_loc(sequence, points, radius=COLOR_RADIUS, max_workers=None):
    """Average colour around each point, in input order.

    Parameters:
    -----------
    sequence : ImageSequence
        Image sequence to sample
    points : iterable of Point3
        Points to evaluate
    radius : Vector3 or sequence of number
        Ellipsoid semi-axes
    max_workers : int, optional
        Size of the thread pool; None evaluates sequentially

    Returns:
    --------
    colors : list of numpy.ndarray
        One 3-channel colour per point
    """
    return _map_points(partial(point_color_loc, sequence, radius=radius), points, max_workers)


def points_var_loc(sequence, points, radius=VAR_RADIUS, max_workers=None):
    """Local variation score of each point, in input order."""
    return _map_points(partial(point_var_loc, sequence, radius=radius), points, max_workers)


def points_scharr(sequence, points, max_workers=None):
    """Scharr gradient magnitude of each point, in input order."""
    return _map_points(partial(point_scharr, sequence), points, max_workers)
