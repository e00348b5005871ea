# -*- coding: utf-8 -*-
"""The core package holds the fundamental data structures and geometry of volsampler.

It defines the lattice value types, the image sequence the samplers read from, and the rasterization and fitting
routines that turn lines and ellipses into point sets.
"""
