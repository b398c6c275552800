# -*- coding: utf-8 -*-
"""
Interpolator Base - Abstract interface for 1D resampling.

Defines the ``Interpolator`` ABC used to move sampled series (for
example the transmitted-pulse envelope of every facet) onto a shifted
time axis. Every row of the input shares one coordinate vector, so the
neighbour search is done once per call.

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

# Standard library
from abc import ABC, abstractmethod

# Third-party
import numpy as np


class Interpolator(ABC):
    """Abstract base class for 1D interpolation along the last axis.

    All interpolators are callable with signature
    ``(x_old, y_old, x_new) -> y_new``.

    Parameters
    ----------
    x_old : np.ndarray
        Original sample coordinates, shape ``(N,)``. Must be
        monotonic (increasing or decreasing).
    y_old : np.ndarray
        Original sample values, shape ``(..., N)``.
    x_new : np.ndarray
        Target sample coordinates, shape ``(M,)``.

    Returns
    -------
    np.ndarray
        Interpolated values at ``x_new``, shape ``(..., M)``.
    """

    @abstractmethod
    def __call__(
        self,
        x_old: np.ndarray,
        y_old: np.ndarray,
        x_new: np.ndarray,
    ) -> np.ndarray:
        """Interpolate ``y_old`` at ``x_new``."""
        ...
