# -*- coding: utf-8 -*-
"""Threshold sampling of rasterized lines and segments.

The variance samplers keep every point whose local variation score reaches the threshold. The gradient samplers
thin the result: each run of continuous qualifying points collapses to its strongest point, and the first and last
rasterized points are always kept as boundary markers.
"""

import logging

from ..core.canvas import points_continuous
from ..core.rasterizer import get_line_points, get_line_seg_points
from ..stats.local import point_scharr, point_var_loc

logger = logging.getLogger(__name__)

VAR_THRESHOLD = 2.0
VAR_LOC_RADIUS = (5, 5, 0)
GRAD_THRESHOLD = 5.0


def select_by_variance(sequence, line_points, threshold=VAR_THRESHOLD, radius=VAR_LOC_RADIUS):
    """Keep the points whose local variation score is at least ``threshold``, in order."""
    selected = []
    for point in line_points:
        var = point_var_loc(sequence, point, radius)
        logger.debug("%s\t%.4f", tuple(point), var)
        if var >= threshold:
            selected.append(point)
    return selected


def select_by_gradient(sequence, line_points, threshold=GRAD_THRESHOLD):
    """Thin rasterized points to the gradient maxima of their continuous runs.

    Parameters:
    -----------
    sequence : ImageSequence
        Image sequence to sample
    line_points : sequence of Point3
        Rasterized points, in order
    threshold : float
        Minimum Scharr gradient of a qualifying point

    Returns:
    --------
    points : list of Point3
        First point, the strongest point of every run, last point. Empty if ``line_points`` is empty.
    """
    if not line_points:
        return []

    selected = [line_points[0]]
    run_last = None
    run_max = None
    run_grad = 0.0
    for point in line_points:
        grad = point_scharr(sequence, point)
        qualifies = grad >= threshold

        if run_last is not None and not (qualifies and points_continuous(run_last, point)):
            selected.append(run_max)
            run_last = None

        if not qualifies:
            continue
        if run_last is None or grad >= run_grad:
            run_max, run_grad = point, grad
        run_last = point

    if run_last is not None:
        selected.append(run_max)
    selected.append(line_points[-1])
    return selected


def line_pts_var_geq(sequence, point, direction, threshold=VAR_THRESHOLD, radius=VAR_LOC_RADIUS):
    """Points of the line through ``point`` whose local variation score reaches ``threshold``."""
    return select_by_variance(sequence, get_line_points(point, direction, sequence.bound), threshold, radius)


def line_seg_pts_var_geq(sequence, start, end, threshold=VAR_THRESHOLD, radius=VAR_LOC_RADIUS):
    """Points of the segment ``start``-``end`` whose local variation score reaches ``threshold``."""
    return select_by_variance(sequence, get_line_seg_points(start, end, sequence.bound), threshold, radius)


def line_pts_scharr_geq(sequence, point, direction, threshold=GRAD_THRESHOLD):
    """Gradient-thinned points of the line through ``point``."""
    return select_by_gradient(sequence, get_line_points(point, direction, sequence.bound), threshold)


def line_seg_pts_scharr_geq(sequence, start, end, threshold=GRAD_THRESHOLD):
    """Gradient-thinned points of the segment ``start``-``end``."""
    return select_by_gradient(sequence, get_line_seg_points(start, end, sequence.bound), threshold)


class VarianceSampler:
    """Samples lines for points of high local variation."""

    def __init__(self, threshold=VAR_THRESHOLD, radius=VAR_LOC_RADIUS):
        """Initialize the sampler.

        Parameters:
        -----------
        threshold : float
            Minimum local variation score of a kept point
        radius : sequence of number
            Ellipsoid semi-axes of the local region
        """
        self.threshold = threshold
        self.radius = radius

    def execute_line(self, sequence, point, direction):
        """Sample the infinite line through ``point`` along ``direction``."""
        points = line_pts_var_geq(sequence, point, direction, self.threshold, self.radius)
        logger.debug("variance sampler kept %d points on line through %s", len(points), tuple(point))
        return points

    def execute_segment(self, sequence, start, end):
        """Sample the segment between ``start`` and ``end``."""
        points = line_seg_pts_var_geq(sequence, start, end, self.threshold, self.radius)
        logger.debug("variance sampler kept %d points on segment %s -> %s", len(points), tuple(start), tuple(end))
        return points


class GradientSampler:
    """Samples lines for gradient maxima, one per continuous edge crossing."""

    def __init__(self, threshold=GRAD_THRESHOLD):
        """Initialize the sampler.

        Parameters:
        -----------
        threshold : float
            Minimum Scharr gradient of a qualifying point
        """
        self.threshold = threshold

    def execute_line(self, sequence, point, direction):
        """Sample the infinite line through ``point`` along ``direction``."""
        points = line_pts_scharr_geq(sequence, point, direction, self.threshold)
        logger.debug("gradient sampler kept %d points on line through %s", len(points), tuple(point))
        return points

    def execute_segment(self, sequence, start, end):
        """Sample the segment between ``start`` and ``end``."""
        points = line_seg_pts_scharr_geq(sequence, start, end, self.threshold)
        logger.debug("gradient sampler kept %d points on segment %s -> %s", len(points), tuple(start), tuple(end))
        return points
