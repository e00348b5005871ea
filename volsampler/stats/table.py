# -*- coding: utf-8 -*-
"""Tabulates sampled points together with their local statistics.

A sampled point set is usually handed on as a whole, so the statistics of every point are gathered into one
DataFrame row per point (coordinates, local colour, local variation score, gradient).
"""

import numpy as np
import pandas as pd

from ..core.types import as_point
from .local import COLOR_RADIUS, VAR_RADIUS, points_color_loc, points_scharr, points_var_loc

STAT_COLUMNS = ["c0", "c1", "c2", "variance", "gradient"]


def points_statistics_frame(sequence, points, color_radius=COLOR_RADIUS, var_radius=VAR_RADIUS, max_workers=None):
    """Build a table of local statistics for a set of points.

    Parameters:
    -----------
    sequence : ImageSequence
        Image sequence to sample
    points : sequence of Point3
        Points to describe
    color_radius : Vector3 or sequence of number
        Ellipsoid semi-axes for the local colour
    var_radius : Vector3 or sequence of number
        Ellipsoid semi-axes for the local variation score
    max_workers : int, optional
        Size of the thread pool used by the batch statistics

    Returns:
    --------
    table : pandas.DataFrame
        One row per point in input order, columns x, y, frame, c0, c1, c2, variance, gradient
    """
    points = [as_point(point) for point in points]
    table = pd.DataFrame(points, columns=["x", "y", "frame"])
    if not points:
        for column in STAT_COLUMNS:
            table[column] = pd.Series(dtype=float)
        return table

    colors = np.asarray(points_color_loc(sequence, points, color_radius, max_workers=max_workers))
    for channel in range(3):
        table[f"c{channel}"] = colors[:, channel]
    table["variance"] = points_var_loc(sequence, points, var_radius, max_workers=max_workers)
    table["gradient"] = points_scharr(sequence, points, max_workers=max_workers)
    return table


def summarize_points(table):
    """Summarize the statistic columns of a point table.

    Parameters:
    -----------
    table : pandas.DataFrame
        Table produced by ``points_statistics_frame``

    Returns:
    --------
    summary : dict
        ``{column: {"min", "max", "mean", "std"}}`` plus the point count under "count"
    """
    summary = {"count": len(table)}
    for column in STAT_COLUMNS:
        values = table[column]
        summary[column] = {
            "min": values.min(),
            "max": values.max(),
            "mean": values.mean(),
            "std": values.std(),
        }
    return summary
