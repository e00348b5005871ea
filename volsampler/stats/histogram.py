# -*- coding: utf-8 -*-
"""Colour histogram comparison between two point sets.

Each point contributes its exact pixel colour. Channels are binned into 32 bins of width 8, smoothed with a
Dirichlet prior and compared with the symmetric Kullback-Leibler divergence.
"""

import logging

import numpy as np

from ..core.errors import InvalidInputError
from .local import point_color_loc

logger = logging.getLogger(__name__)

N_BINS = 32
BIN_WIDTH = 8
PRIOR = 1e-4


def color_histogram(colors, n_bins=N_BINS, bin_width=BIN_WIDTH, prior=PRIOR):
    """Build the smoothed per-channel histogram of a set of colours.

    Parameters:
    -----------
    colors : array-like
        Colours shaped (n, 3), channel values in [0, 255]
    n_bins : int
        Number of bins per channel
    bin_width : int
        Width of one bin in channel units
    prior : float
        Pseudo-count added to every bin

    Returns:
    --------
    histogram : numpy.ndarray
        Probabilities shaped (3, n_bins), each row sums to 1
    """
    colors = np.asarray(colors, dtype=float).reshape(-1, 3)
    if len(colors) == 0:
        raise InvalidInputError("Cannot build a histogram from an empty set of colours")

    bins = np.clip((colors // bin_width).astype(int), 0, n_bins - 1)
    freq = np.stack([np.bincount(bins[:, channel], minlength=n_bins) for channel in range(3)])
    return (freq + prior) / (freq.sum(axis=1, keepdims=True) + n_bins * prior)


def symmetric_kl(hist_1, hist_2):
    """Per-channel symmetric KL divergence (base 2) between two histograms."""
    d_1_2 = np.sum(hist_1 * np.log2(hist_1 / hist_2), axis=1)
    d_2_1 = np.sum(hist_2 * np.log2(hist_2 / hist_1), axis=1)
    return (d_1_2 + d_2_1) / 2


def compare_hist(sequence, points_1, points_2):
    """Colour dissimilarity of two point sets.

    Parameters:
    -----------
    sequence : ImageSequence
        Image sequence the points address
    points_1 : sequence of Point3
        First point set, not empty
    points_2 : sequence of Point3
        Second point set, not empty

    Returns:
    --------
    divergence : float
        Root mean square of the three per-channel symmetric KL divergences
    """
    if len(points_1) == 0 or len(points_2) == 0:
        raise InvalidInputError("Histogram comparison needs two non-empty point sets")

    colors_1 = [point_color_loc(sequence, point) for point in points_1]
    colors_2 = [point_color_loc(sequence, point) for point in points_2]

    kls = symmetric_kl(color_histogram(colors_1), color_histogram(colors_2))
    kl = float(np.sqrt(np.mean(kls**2)))
    logger.debug("compared %d and %d points: channel divergences %s, score %.4f", len(points_1), len(points_2), kls, kl)
    return kl
