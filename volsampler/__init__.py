# -*- coding: utf-8 -*-
# volsampler/__init__.py

"""
VolSampler: 3-D spatial sampling and local statistics over image sequences
=========================================================================

VolSampler treats a time-ordered sequence of colour frames as a volume
addressed by (column, row, frame) and produces point sets and statistics
for a reasoning layer to work with.

Key features:
- Exact-lattice rasterization of 3-D lines, segments and ellipses
- Local colour, variation and Scharr gradient statistics
- Threshold sampling of lines with run thinning
- Direct least-squares ellipse fitting
- Colour histogram comparison of point sets
"""

__version__ = "0.1.0"

from .core.canvas import bound_local_region, out_of_canvas, points_continuous
from .core.ellipse import fit_ellipse, get_ellipse_points
from .core.errors import DegenerateGeometryError, EmptyRegionError, InvalidInputError, SamplingError
from .core.rasterizer import get_line_points, get_line_seg_points
from .core.sequence import ImageSequence
from .core.types import DrivingAxis, Extent, Point3, Vector3, driving_axis

from .filters.threshold import (
    GradientSampler,
    VarianceSampler,
    line_pts_scharr_geq,
    line_pts_var_geq,
    line_seg_pts_scharr_geq,
    line_seg_pts_var_geq,
)

from .stats.histogram import compare_hist
from .stats.local import (
    local_region,
    point_color_loc,
    point_scharr,
    point_var_loc,
    points_color_loc,
    points_scharr,
    points_var_loc,
)
from .stats.table import points_statistics_frame, summarize_points

from .utils.helpers import create_sample_sequence, get_channel_statistics
