# -*- coding: utf-8 -*-
"""Exception types raised by the sampling core.

All of them derive from ``ValueError`` so callers that only guard against bad
arguments keep working.
"""


class SamplingError(ValueError):
    """Base class for every failure raised by volsampler."""


class InvalidInputError(SamplingError):
    """Raised when a call receives inputs it cannot work with."""


class DegenerateGeometryError(InvalidInputError):
    """Raised when a geometric computation has no finite answer."""


class EmptyRegionError(InvalidInputError):
    """Raised when a local region contains no lattice points to average over."""
