# -*- coding: utf-8 -*-
"""
Stacking - Multi-look reduction of the single-look echoes.

The multi-looked waveform is the sample-by-sample sum of the weighted
single-look waveforms, always accumulated in beam order so the result
does not depend on how the beams were scheduled. Component waveforms
scale each beam's component fractions by that beam's power before the
sum; fractions are never averaged.

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
from typing import Tuple

# Third-party
import numpy as np


def stack_waveforms(single_look: np.ndarray) -> np.ndarray:
    """Sum single-look waveforms over beams.

    Parameters
    ----------
    single_look : np.ndarray
        Weighted single-look power, shape ``(N_b, T)``.

    Returns
    -------
    np.ndarray
        Multi-looked waveform, shape ``(T,)``. NaN entries count as 0.
    """
    single_look = np.asarray(single_look, dtype=np.float64)
    stacked = np.zeros(single_look.shape[1:])
    for row in single_look:
        stacked += np.nan_to_num(row, nan=0.0)
    return stacked


def stack_components(
    single_look: np.ndarray,
    fractions: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray]:
    """Per-beam and multi-looked component waveforms.

    Parameters
    ----------
    single_look : np.ndarray
        Weighted single-look power, shape ``(N_b, T)``.
    fractions : np.ndarray
        Component fractions, shape ``(N_b, T, 4)``.

    Returns
    -------
    per_beam : np.ndarray
        Component power per beam, shape ``(N_b, T, 4)``.
    stacked : np.ndarray
        Multi-looked component waveforms, shape ``(T, 4)``.
    """
    per_beam = np.asarray(fractions) * np.asarray(single_look)[..., np.newaxis]
    return per_beam, stack_waveforms(per_beam)
