# -*- coding: utf-8 -*-
"""Ellipse rasterization and direct least-squares ellipse fitting on a single frame.

Ellipse parameters are ``(major, minor, angle)`` with the angle in degrees, stored with the 90 degree offset used by
OpenCV's ellipse drawing: the minor axis is laid along x and the whole shape is rotated by ``angle``.

The fitter follows Fitzgibbon, A.W., Pilu, M. and Fischer, R.B., "Direct least squares fitting of ellipses",
Proc. 13th International Conference on Pattern Recognition, pp. 253-257, Vienna, 1996.
"""

import logging
import math

import cv2
import numpy as np

from .errors import DegenerateGeometryError, InvalidInputError
from .rasterizer import get_line_seg_points
from .types import Point3, as_extent, as_point

logger = logging.getLogger(__name__)

POLY_DELTA = 3

# aT C a = 4ac - b^2, the ellipse-specific constraint
_CONSTRAINT = np.zeros((6, 6))
_CONSTRAINT[0, 2] = 2
_CONSTRAINT[2, 0] = 2
_CONSTRAINT[1, 1] = -1


def ellipse_polygon(centre, param, delta=POLY_DELTA):
    """Approximate an ellipse boundary by a closed polygon.

    Parameters:
    -----------
    centre : Point3 or sequence of int
        Centre of the ellipse, only column and row are used
    param : sequence of float
        Major and minor axis lengths and the angle in degrees
    delta : int
        Angular step between vertices, in degrees

    Returns:
    --------
    vertices : numpy.ndarray
        Integer vertices shaped (n, 2), first and last vertex coincide
    """
    width = abs(int(param[0]))
    height = abs(int(param[1]))
    if width > height:
        width, height = height, width

    vertices = cv2.ellipse2Poly((int(centre[0]), int(centre[1])), (width, height), int(param[2]), 0, 360, delta)
    return np.asarray(vertices, dtype=int).reshape(-1, 2)


def get_ellipse_points(centre, param, bound):
    """Rasterize the boundary of an ellipse lying in the frame of ``centre``.

    Parameters:
    -----------
    centre : Point3 or sequence of int
        Centre of the ellipse; its frame index is carried to every point
    param : sequence of float
        Major and minor axis lengths and the angle in degrees
    bound : Extent or sequence of int
        Size of the volume

    Returns:
    --------
    points : list of Point3
        Segment points of every polygon edge, concatenated in vertex order
    """
    centre = as_point(centre)
    bound = as_extent(bound)

    vertices = ellipse_polygon(centre, param)
    if len(vertices) == 0:
        return []

    points = []
    previous = Point3(int(vertices[0][0]), int(vertices[0][1]), centre.frame)
    for x, y in vertices[1:]:
        current = Point3(int(x), int(y), centre.frame)
        points.extend(get_line_seg_points(previous, current, bound))
        previous = current

    logger.debug("ellipse at %s with %s: %d vertices, %d points", centre, tuple(param), len(vertices), len(points))
    return points


def _round_half_away(value):
    # halves go away from zero, not to the even neighbour
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _conic_coefficients(xs, ys):
    design = np.column_stack([xs * xs, xs * ys, ys * ys, xs, ys, np.ones_like(xs)])
    scatter = design.T @ design
    try:
        eigvals, eigvecs = np.linalg.eig(np.linalg.inv(scatter) @ _CONSTRAINT)
    except np.linalg.LinAlgError as e:
        raise DegenerateGeometryError(f"Cannot fit an ellipse, scatter matrix is singular: {str(e)}") from e

    order = np.argsort(-np.abs(eigvals.real), kind="stable")
    coefficients = eigvecs[:, order[0]].real
    # the largest eigenvalue wins unless its conic is not an ellipse and another one is
    for index in order:
        candidate = eigvecs[:, index].real
        if 4 * candidate[0] * candidate[2] - candidate[1] ** 2 > 0:
            coefficients = candidate
            break
    # orient the conic so the angle formula yields the major axis direction
    if coefficients[0] + coefficients[2] > 0:
        coefficients = -coefficients
    return coefficients


def fit_ellipse(points):
    """Fit an ellipse to a set of points on one frame.

    Parameters:
    -----------
    points : sequence of Point3
        At least 5 points; only column and row are used, the frame of the first point is kept

    Returns:
    --------
    centre : Point3
        Rounded centre of the ellipse
    param : tuple of float
        ``(major, minor, angle)``, axis lengths and angle rounded to integers, angle in degrees
    """
    if len(points) < 5:
        raise InvalidInputError(f"Ellipse fitting needs at least 5 points, got {len(points)}")

    pts = np.asarray([(p[0], p[1]) for p in points], dtype=float)
    frame = int(points[0][2])

    coefficients = _conic_coefficients(pts[:, 0], pts[:, 1])
    a = coefficients[0]
    b = coefficients[1] / 2
    c = coefficients[2]
    d = coefficients[3] / 2
    f = coefficients[4] / 2
    g = coefficients[5]

    num = b * b - a * c
    if num == 0:
        raise DegenerateGeometryError("Degenerate conic, b^2 - ac is zero")

    x0 = (c * d - b * f) / num
    y0 = (a * f - b * d) / num

    up = 2 * (a * f * f + c * d * d + g * b * b - 2 * b * d * f - a * c * g)
    root = math.sqrt((a - c) ** 2 + 4 * b * b)
    down1 = num * (root - (c + a))
    down2 = num * (-root - (c + a))
    with np.errstate(divide="ignore", invalid="ignore"):
        res1 = np.sqrt(np.float64(up) / down1)
        res2 = np.sqrt(np.float64(up) / down2)
    if not (np.isfinite(res1) and np.isfinite(res2) and np.isfinite(x0) and np.isfinite(y0)):
        raise DegenerateGeometryError("Fitted conic is not an ellipse")

    if b == 0:
        angle = 0.0 if a > c else math.pi / 2
    else:
        slope = 2 * b / (a - c) if a != c else math.copysign(math.inf, b)
        angle = math.atan(slope) / 2
        if a <= c:
            angle += math.pi / 2
    angle = 90 + math.degrees(angle)

    major, minor = max(res1, res2), min(res1, res2)
    centre = Point3(_round_half_away(x0), _round_half_away(y0), frame)
    param = (float(_round_half_away(major)), float(_round_half_away(minor)), float(_round_half_away(angle)))
    logger.debug("fitted ellipse to %d points: centre %s, param %s", len(points), centre, param)
    return centre, param
