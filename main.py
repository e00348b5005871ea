# -*- coding: utf-8 -*-
"""Testing Working Document!

Just a workspace document to exercise the library on a synthetic sequence.
"""

import logging

from volsampler import (
    GradientSampler,
    VarianceSampler,
    compare_hist,
    create_sample_sequence,
    fit_ellipse,
    get_channel_statistics,
    get_ellipse_points,
    points_statistics_frame,
    summarize_points,
)

DIRECTIONS = [(1, 0, 0), (0, 1, 0), (1, 1, 0), (1, -1, 0), (2, 1, 0), (1, 2, 0), (2, -1, 0), (1, -2, 0)]


def run_example(width=160, height=120, n_frames=4):
    """Run Example."""
    shapes = [
        {"kind": "ellipse", "center": (80, 60), "radii": (45, 25), "rotation": 0.3, "color": (210, 150, 110)},
        {"kind": "disk", "center": (20, 20), "radius": 8, "color": (90, 60, 190), "frames": [2, 3]},
    ]
    sequence = create_sample_sequence(width, height, n_frames, shapes=shapes, background=(30, 128, 128), name="demo")
    print(sequence)
    print(f"Channel statistics: {get_channel_statistics(sequence, ['L', 'a', 'b'])}")

    print("\nSampling edge points...")
    sampler = GradientSampler(threshold=5.0)
    edge_points = []
    for direction in DIRECTIONS:
        points = sampler.execute_line(sequence, (80, 60, 1), direction)
        edge_points.extend(points[1:-1])
    print(f"Edge points: {len(edge_points)}")

    print("\nFitting ellipse...")
    centre, param = fit_ellipse(edge_points)
    print(f"Centre: {centre}, axes: {param[0]:.0f}/{param[1]:.0f}, angle: {param[2]:.0f}")

    outline = get_ellipse_points(centre, param, sequence.bound)
    print(f"Outline points: {len(outline)}")

    print("\nComparing colours inside and outside the ellipse...")
    inner = [(x, y, 1) for x in range(70, 91, 2) for y in range(55, 66, 2)]
    outer = [(x, y, 1) for x in range(140, 160, 2) for y in range(0, 120, 6)]
    print(f"Inner vs outer divergence: {compare_hist(sequence, inner, outer):.3f}")

    print("\nVariance sampling across frames...")
    variance_points = VarianceSampler(threshold=2.0, radius=(3, 3, 1)).execute_segment(sequence, (20, 20, 0), (20, 20, 3))
    print(f"Points changing over time: {variance_points}")

    table = points_statistics_frame(sequence, edge_points)
    print(table.head())
    print(summarize_points(table))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    run_example()
