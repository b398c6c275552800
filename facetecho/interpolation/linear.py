# -*- coding: utf-8 -*-
"""
Linear Interpolator - Two-point linear resampling with constant fill.

Vectorised over leading axes: every row of ``y_old`` is resampled with
the same neighbour indices and weights. Points outside the span of
``x_old`` take ``fill_value``.

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

# Third-party
import numpy as np

# Facet echo internal
from facetecho.interpolation.base import Interpolator


class LinearInterpolator(Interpolator):
    """Linear interpolation along the last axis.

    Parameters
    ----------
    fill_value : float
        Value for points outside ``[x_old[0], x_old[-1]]``. Default 0.
    """

    def __init__(self, fill_value: float = 0.0) -> None:
        self.fill_value = fill_value

    def __call__(
        self,
        x_old: np.ndarray,
        y_old: np.ndarray,
        x_new: np.ndarray,
    ) -> np.ndarray:
        """Interpolate ``y_old`` at ``x_new``.

        Parameters
        ----------
        x_old : np.ndarray
            Original sample coordinates, shape ``(N,)``, ``N >= 2``.
        y_old : np.ndarray
            Original sample values, shape ``(..., N)``.
        x_new : np.ndarray
            Target sample coordinates, shape ``(M,)``.

        Returns
        -------
        np.ndarray
            Interpolated values, shape ``(..., M)``.

        Raises
        ------
        ValueError
            If ``x_old`` has fewer than two samples or its length does
            not match the last axis of ``y_old``.
        """
        x_old = np.asarray(x_old, dtype=np.float64)
        y_old = np.asarray(y_old)
        x_new = np.asarray(x_new, dtype=np.float64)
        if x_old.ndim != 1 or x_old.size < 2:
            raise ValueError(
                f"x_old must be 1D with at least 2 samples, got {x_old.shape}"
            )
        if y_old.shape[-1] != x_old.size:
            raise ValueError(
                f"y_old last axis ({y_old.shape[-1]}) does not match "
                f"x_old length ({x_old.size})"
            )

        if x_old[-1] < x_old[0]:
            x_old = x_old[::-1]
            y_old = y_old[..., ::-1]

        n = x_old.size
        right = np.clip(np.searchsorted(x_old, x_new, side='right'), 1, n - 1)
        left = right - 1
        span = x_old[right] - x_old[left]
        span = np.where(span == 0.0, 1.0, span)
        frac = (x_new - x_old[left]) / span

        result = y_old[..., left] * (1.0 - frac) + y_old[..., right] * frac

        oob = (x_new < x_old[0]) | (x_new > x_old[-1])
        if np.any(oob):
            result = np.where(oob, self.fill_value, result)
        return result
