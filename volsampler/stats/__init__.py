# -*- coding: utf-8 -*-
"""The stats package computes local statistics around points and compares point sets."""
