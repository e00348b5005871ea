# -*- coding: utf-8 -*-
"""Value types for addressing the (column, row, frame) volume.

A ``Point3`` names one pixel in one frame, a ``Vector3`` is a displacement or
an ellipsoid radius, and an ``Extent`` is the exclusive upper limit of the
volume. They are all plain named triples, so anything that accepts a tuple
accepts them too.
"""

from enum import Enum
from typing import NamedTuple

import numpy as np

from .errors import InvalidInputError


class Point3(NamedTuple):
    """Integer lattice point: column, row and frame index."""

    x: int
    y: int
    frame: int


class Vector3(NamedTuple):
    """Direction or radius triple, with no frame semantics."""

    x: float
    y: float
    z: float


class Extent(NamedTuple):
    """Exclusive upper bound of the volume (width, height, frame count)."""

    width: int
    height: int
    frames: int


class DrivingAxis(Enum):
    """Axis that advances on every step of 3-D Bresenham stepping."""

    X = 0
    Y = 1
    Z = 2


def driving_axis(adx, ady, adz):
    """Classify absolute deltas into the driving axis.

    Ties are broken in favour of x, then y, then z.
    """
    if adx >= ady and adx >= adz:
        return DrivingAxis.X
    if ady > adx and ady >= adz:
        return DrivingAxis.Y
    return DrivingAxis.Z


def _triple(value, name):
    values = np.asarray(value).ravel()
    if values.shape[0] != 3:
        raise InvalidInputError(f"{name} must have exactly 3 components, got {values.shape[0]}")
    return values


def as_point(value):
    """Coerce a 3-sequence to a ``Point3`` of Python ints."""
    if isinstance(value, Point3):
        return value
    x, y, frame = _triple(value, "Point")
    return Point3(int(x), int(y), int(frame))


def as_vector(value):
    """Coerce a 3-sequence to a ``Vector3``, keeping ints as ints."""
    if isinstance(value, Vector3):
        return value
    values = _triple(value, "Vector")
    if np.issubdtype(values.dtype, np.integer):
        return Vector3(*(int(v) for v in values))
    return Vector3(*(float(v) for v in values))


def as_extent(value):
    """Coerce a 3-sequence to an ``Extent`` with strictly positive components."""
    if isinstance(value, Extent):
        return value
    width, height, frames = (int(v) for v in _triple(value, "Extent"))
    if width <= 0 or height <= 0 or frames <= 0:
        raise InvalidInputError(f"Extent components must be positive, got ({width}, {height}, {frames})")
    return Extent(width, height, frames)
