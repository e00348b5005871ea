# -*- coding: utf-8 -*-
"""Shared fixtures: small synthetic image sequences."""

import numpy as np
import pytest

from volsampler import ImageSequence, create_sample_sequence

EDGE_X = 50


@pytest.fixture
def flat_sequence():
    """Fixture providing a 100x100, 3-frame sequence of one constant colour."""
    return create_sample_sequence(100, 100, 3, background=(90, 128, 128))


@pytest.fixture
def edge_sequence():
    """Fixture providing a single frame with a vertical brightness edge at x = 50."""
    frame = np.full((100, 100, 3), 128, dtype=np.uint8)
    frame[:, :EDGE_X, 0] = 0
    frame[:, EDGE_X:, 0] = 100
    return ImageSequence([frame], name="edge", color_space="lab")


@pytest.fixture
def stripe_sequence():
    """Fixture providing a single frame with a bright stripe covering columns 30 to 59."""
    frame = np.full((100, 100, 3), 128, dtype=np.uint8)
    frame[:, :, 0] = 0
    frame[:, 30:60, 0] = 100
    return ImageSequence([frame], name="stripe", color_space="lab")


@pytest.fixture
def ellipse_sequence():
    """Fixture providing one frame with a filled bright ellipse centred at (50, 50)."""
    shapes = [{"kind": "ellipse", "center": (50, 50), "radii": (30, 20), "color": (200, 150, 110)}]
    return create_sample_sequence(100, 100, 1, shapes=shapes, background=(20, 128, 128), name="ellipse")
