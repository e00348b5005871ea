# -*- coding: utf-8 -*-
"""Clipping and containment tests against the extent of the volume."""


def out_of_canvas(point, bound):
    """Check whether a point lies outside the volume.

    Parameters:
    -----------
    point : Point3 or sequence of int
        Point to test (column, row, frame)
    bound : Extent or sequence of int
        Exclusive upper limit of each axis

    Returns:
    --------
    outside : bool
        True if any coordinate is negative or not below its bound
    """
    return any(coord < 0 or coord >= limit for coord, limit in zip(point, bound, strict=True))


def bound_local_region(point, radius, bound):
    """Clamp the box ``point +/- radius`` to the volume.

    Parameters:
    -----------
    point : Point3 or sequence of int
        Centre of the local region
    radius : Vector3 or sequence of number
        Per-axis half size of the box
    bound : Extent or sequence of int
        Exclusive upper limit of each axis

    Returns:
    --------
    corners : tuple of tuple
        Inclusive ``(min_corner, max_corner)`` of the clamped box
    """
    min_corner = []
    max_corner = []
    for coord, r, limit in zip(point, radius, bound, strict=True):
        low = coord - r
        high = coord + r
        min_corner.append(0 if low < 0 else low)
        max_corner.append(limit - 1 if high >= limit else high)
    return tuple(min_corner), tuple(max_corner)


def points_continuous(p1, p2):
    """True if two points are 26-connected neighbours (or identical)."""
    return all(abs(a - b) < 2 for a, b in zip(p1, p2, strict=True))
