# -*- coding: utf-8 -*-
"""Utility helpers: synthetic sequences and channel summaries."""
