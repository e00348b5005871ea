# -*- coding: utf-8 -*-
"""Tests for variance and gradient threshold sampling."""

from volsampler import (
    GradientSampler,
    Point3,
    VarianceSampler,
    line_pts_scharr_geq,
    line_pts_var_geq,
    line_seg_pts_scharr_geq,
    line_seg_pts_var_geq,
)
from volsampler.filters.threshold import select_by_gradient

EDGE_X = 50


def test_variance_on_flat_sequence_is_empty(flat_sequence):
    """Zero variation never reaches a positive threshold."""
    assert line_pts_var_geq(flat_sequence, (50, 50, 1), (1, 2, 0), threshold=0.5) == []
    assert line_seg_pts_var_geq(flat_sequence, (0, 0, 0), (99, 99, 2), threshold=0.5) == []


def test_variance_keeps_points_near_edge(edge_sequence):
    """Only points whose neighbourhood straddles the edge are kept, in line order."""
    points = line_pts_var_geq(edge_sequence, (20, 50, 0), (1, 0, 0), threshold=2.0, radius=(5, 5, 0))
    assert points
    assert all(abs(p.x - EDGE_X) <= 5 for p in points)
    assert [p.x for p in points] == sorted(p.x for p in points)


def test_variance_threshold_zero_keeps_everything(edge_sequence):
    """A zero threshold keeps every rasterized point."""
    points = line_seg_pts_var_geq(edge_sequence, (10, 10, 0), (30, 20, 0), threshold=0.0)
    assert len(points) == 21


def test_gradient_on_flat_sequence_keeps_boundary_markers(flat_sequence):
    """With no edges only the first and last points come back."""
    assert line_pts_scharr_geq(flat_sequence, (50, 50, 1), (1, 0, 0)) == [Point3(0, 50, 1), Point3(99, 50, 1)]
    assert line_seg_pts_scharr_geq(flat_sequence, (5, 5, 0), (40, 9, 0)) == [Point3(5, 5, 0), Point3(40, 9, 0)]


def test_gradient_single_edge(edge_sequence):
    """The run across the edge collapses to its strongest (last on ties) point."""
    points = line_pts_scharr_geq(edge_sequence, (20, 50, 0), (1, 0, 0), threshold=5.0)
    assert points == [Point3(0, 50, 0), Point3(50, 50, 0), Point3(99, 50, 0)]


def test_gradient_stripe_has_one_point_per_edge(stripe_sequence):
    """Two separate edges give two representatives between the markers."""
    points = line_seg_pts_scharr_geq(stripe_sequence, (0, 40, 0), (99, 40, 0), threshold=5.0)
    assert points == [Point3(0, 40, 0), Point3(30, 40, 0), Point3(60, 40, 0), Point3(99, 40, 0)]


def test_gradient_run_open_at_the_end(edge_sequence):
    """A run still open when the line ends is emitted before the last marker."""
    points = line_seg_pts_scharr_geq(edge_sequence, (40, 30, 0), (50, 30, 0), threshold=5.0)
    assert points == [Point3(40, 30, 0), Point3(50, 30, 0), Point3(50, 30, 0)]


def test_gradient_empty_line():
    """Nothing to sample gives nothing back."""
    assert select_by_gradient(None, []) == []


def test_samplers_match_functions(edge_sequence, stripe_sequence):
    """The sampler classes hold their parameters and delegate to the functions."""
    variance = VarianceSampler(threshold=2.0, radius=(5, 5, 0))
    assert variance.execute_line(edge_sequence, (20, 50, 0), (1, 0, 0)) == line_pts_var_geq(
        edge_sequence, (20, 50, 0), (1, 0, 0), 2.0, (5, 5, 0)
    )
    assert variance.execute_segment(edge_sequence, (0, 0, 0), (99, 60, 0)) == line_seg_pts_var_geq(
        edge_sequence, (0, 0, 0), (99, 60, 0), 2.0, (5, 5, 0)
    )

    gradient = GradientSampler(threshold=5.0)
    assert len(gradient.execute_line(stripe_sequence, (50, 50, 0), (1, 0, 0))) == 4
    assert len(gradient.execute_segment(stripe_sequence, (0, 10, 0), (99, 10, 0))) == 4
