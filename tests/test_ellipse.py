# -*- coding: utf-8 -*-
"""Tests for ellipse rasterization and fitting."""

import math

import numpy as np
import pytest

from volsampler import DegenerateGeometryError, InvalidInputError, Point3, fit_ellipse, get_ellipse_points, out_of_canvas
from volsampler.core import ellipse
from volsampler.core.ellipse import ellipse_polygon

BOUND = (100, 100, 4)


def angle_difference(a, b):
    """Smallest difference between two axis angles, in degrees modulo 180."""
    diff = (a - b) % 180
    return min(diff, 180 - diff)


def test_polygon_is_closed():
    """The polygon starts and ends on the same vertex."""
    vertices = ellipse_polygon((50, 50, 0), (30, 15, 0))
    assert len(vertices) > 10
    assert tuple(vertices[0]) == tuple(vertices[-1])


def test_polygon_uses_smaller_axis_along_x():
    """With no rotation the smaller axis lies along x, whatever the parameter order."""
    for param in [(30, 15, 0), (15, 30, 0), (-30, 15, 0)]:
        vertices = ellipse_polygon((50, 50, 0), param)
        assert vertices[:, 0].max() - vertices[:, 0].min() == 30
        assert vertices[:, 1].max() - vertices[:, 1].min() == 60


def test_ellipse_points_stay_in_frame():
    """All points carry the centre's frame and lie on the ellipse."""
    points = get_ellipse_points((50, 50, 2), (30, 15, 0), BOUND)
    assert points
    assert {p.frame for p in points} == {2}
    for x, y, _ in points:
        value = ((x - 50) / 15) ** 2 + ((y - 50) / 30) ** 2
        assert 0.8 < value < 1.2


def test_ellipse_points_are_clipped():
    """An ellipse crossing the border only yields points inside the volume."""
    points = get_ellipse_points((5, 50, 0), (30, 15, 0), BOUND)
    assert points
    assert not any(out_of_canvas(p, BOUND) for p in points)


def test_fit_recovers_rasterized_ellipse():
    """Fitting the rasterization of a known ellipse recovers centre and axes."""
    points = get_ellipse_points((50, 50, 1), (30, 15, 0), BOUND)
    centre, (major, minor, angle) = fit_ellipse(points)

    assert abs(centre.x - 50) <= 2
    assert abs(centre.y - 50) <= 2
    assert centre.frame == 1
    assert abs(major - 30) <= 2
    assert abs(minor - 15) <= 2
    assert major >= minor
    assert angle_difference(angle, 0) <= 3


@pytest.mark.parametrize("angle", [30, 45, 120])
def test_fit_angle_round_trip(angle):
    """The fitted angle rasterizes back to the same orientation."""
    points = get_ellipse_points((50, 50, 0), (30, 15, angle), BOUND)
    _, (major, minor, fitted) = fit_ellipse(points)
    assert abs(major - 30) <= 2
    assert abs(minor - 15) <= 2
    assert angle_difference(fitted, angle) <= 3


def test_fit_from_analytic_points():
    """Points sampled from the ellipse equation give a tight fit."""
    t = np.linspace(0, 2 * math.pi, 40, endpoint=False)
    points = [Point3(int(round(70 + 25 * math.cos(a))), int(round(40 + 10 * math.sin(a))), 0) for a in t]
    centre, (major, minor, _) = fit_ellipse(points)
    assert abs(centre.x - 70) <= 1
    assert abs(centre.y - 40) <= 1
    assert abs(major - 25) <= 1
    assert abs(minor - 10) <= 1


def test_fit_needs_five_points():
    """Fewer than five points cannot be fitted."""
    with pytest.raises(InvalidInputError):
        fit_ellipse([Point3(0, 0, 0), Point3(1, 0, 0), Point3(0, 1, 0), Point3(1, 1, 0)])


def test_fit_rejects_parabola(monkeypatch):
    """A conic with b^2 - ac == 0 is reported as degenerate."""
    monkeypatch.setattr(ellipse, "_conic_coefficients", lambda xs, ys: np.array([1.0, 0.0, 0.0, 0.0, -1.0, 0.0]))
    with pytest.raises(DegenerateGeometryError):
        fit_ellipse([Point3(x, x * x, 0) for x in range(6)])


def test_fit_rejects_hyperbola(monkeypatch):
    """A conic without real ellipse axes is reported as degenerate."""
    monkeypatch.setattr(ellipse, "_conic_coefficients", lambda xs, ys: np.array([1.0, 0.0, -1.0, 0.0, 0.0, -1.0]))
    with pytest.raises(DegenerateGeometryError):
        fit_ellipse([Point3(x, x + 1, 0) for x in range(6)])


def test_fit_rounds_halves_away_from_zero(monkeypatch):
    """Centre and axis lengths on an exact half round up, not to the even neighbour."""
    # circle of radius 12.5 centred on (22.5, 10.5)
    x0, y0, r = 22.5, 10.5, 12.5
    coefficients = np.array([-1.0, 0.0, -1.0, 2 * x0, 2 * y0, r * r - x0 * x0 - y0 * y0])
    monkeypatch.setattr(ellipse, "_conic_coefficients", lambda xs, ys: coefficients)

    centre, (major, minor, angle) = fit_ellipse([Point3(x, 0, 2) for x in range(6)])
    assert centre == Point3(23, 11, 2)
    assert (major, minor) == (13.0, 13.0)
    assert angle == 180.0
