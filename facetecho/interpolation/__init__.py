# -*- coding: utf-8 -*-
"""
Interpolation - 1D resampling of time series onto a new grid.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

from facetecho.interpolation.base import Interpolator
from facetecho.interpolation.linear import LinearInterpolator

__all__ = [
    'Interpolator',
    'LinearInterpolator',
]
