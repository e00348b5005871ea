# -*- coding: utf-8 -*-
"""Exact-lattice 3-D line rasterization over the (column, row, frame) volume.

Both the infinite line and the bounded segment are produced by the same 3-D Bresenham stepping routine: the axis
with the largest absolute delta drives, the two others advance when their error term turns positive. Points that
fall outside the volume are clipped from the result rather than reported as errors.
"""

import logging

from .canvas import out_of_canvas
from .types import Point3, as_extent, as_point, driving_axis

logger = logging.getLogger(__name__)


def _sign_steps(delta):
    # zero components step backwards, they never move anyway
    return tuple(1 if d > 0 else -1 for d in delta)


def bresenham_steps(origin, magnitudes, inc):
    """Yield the points of one Bresenham block starting after ``origin``.

    Parameters:
    -----------
    origin : Point3
        Point the block starts from (not yielded)
    magnitudes : tuple of int
        Absolute delta along each axis
    inc : tuple of int
        Unit step (+1 or -1) along each axis

    Yields:
    -------
    point : Point3
        One point per step of the driving axis, ``max(magnitudes)`` in total
    """
    major = driving_axis(*magnitudes).value
    minors = [axis for axis in range(3) if axis != major]
    steps = magnitudes[major]
    major2 = 2 * steps

    coords = list(origin)
    errors = {axis: 2 * magnitudes[axis] - steps for axis in minors}
    for _ in range(steps):
        for axis in minors:
            if errors[axis] > 0:
                coords[axis] += inc[axis]
                errors[axis] -= major2
            errors[axis] += 2 * magnitudes[axis]
        coords[major] += inc[major]
        yield Point3(*coords)


def _half_line(origin, magnitudes, inc, bound):
    """Walk from ``origin`` block after block until a step leaves the volume."""
    points = []
    current = origin
    while True:
        for point in bresenham_steps(current, magnitudes, inc):
            if out_of_canvas(point, bound):
                return points
            points.append(point)
        current = points[-1]


def get_line_points(point, direction, bound):
    """Rasterize the infinite line through a point, clipped to the volume.

    Parameters:
    -----------
    point : Point3 or sequence of int
        A point on the line
    direction : Vector3 or sequence of int
        Direction of the line, integer components
    bound : Extent or sequence of int
        Size of the volume

    Returns:
    --------
    points : list of Point3
        Points ordered from the ``-direction`` end to the ``+direction`` end, with ``point`` between the two halves.
        Empty when ``direction`` is the zero vector.
    """
    point = as_point(point)
    bound = as_extent(bound)
    delta = tuple(int(d) for d in direction)

    if not any(delta):
        return []

    magnitudes = tuple(abs(d) for d in delta)
    inc = _sign_steps(delta)
    backward_inc = tuple(-i for i in inc)

    forward = _half_line(point, magnitudes, inc, bound)
    backward = _half_line(point, magnitudes, backward_inc, bound)
    backward.reverse()

    middle = [] if out_of_canvas(point, bound) else [point]
    points = backward + middle + forward
    logger.debug("line through %s along %s: %d points", point, delta, len(points))
    return points


def get_line_seg_points(start, end, bound):
    """Rasterize the segment between two points, clipped to the volume.

    If only ``start`` lies outside the volume the endpoints are swapped, so the result then runs from ``end``
    towards ``start``.

    Parameters:
    -----------
    start : Point3 or sequence of int
        First endpoint
    end : Point3 or sequence of int
        Second endpoint
    bound : Extent or sequence of int
        Size of the volume

    Returns:
    --------
    points : list of Point3
        Points from the (possibly swapped) start to the end, both inclusive when inside the volume. Empty when the
        endpoints coincide or both lie outside the volume.
    """
    start = as_point(start)
    end = as_point(end)
    bound = as_extent(bound)

    if start == end:
        return []
    start_out = out_of_canvas(start, bound)
    end_out = out_of_canvas(end, bound)
    if start_out and end_out:
        return []
    if start_out:
        start, end = end, start
        end_out = True

    delta = tuple(e - s for s, e in zip(start, end, strict=True))
    magnitudes = tuple(abs(d) for d in delta)

    points = [start]
    for point in bresenham_steps(start, magnitudes, _sign_steps(delta)):
        if point == end or out_of_canvas(point, bound):
            break
        points.append(point)
    if not end_out:
        points.append(end)

    logger.debug("segment %s -> %s: %d points", start, end, len(points))
    return points
