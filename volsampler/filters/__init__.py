# -*- coding: utf-8 -*-
"""The filters package selects points along rasterized lines.

Main idea is to walk the points of a line or segment, evaluate a local statistic on each, and keep the ones that
pass a threshold, optionally thinning continuous runs down to a single representative.
"""
