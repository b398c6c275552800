# -*- coding: utf-8 -*-
"""
Beam Weighting - Taper applied across synthetic beams before stacking.

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
import logging

# Third-party
import numpy as np
from scipy.signal.windows import taylor as _taylor_window

# Facet echo internal
from facetecho.vocabulary import BeamWeighting, OperatingMode

logger = logging.getLogger(__name__)

_WINDOW_FUNCTIONS = {
    BeamWeighting.RECTANGULAR: None,
    BeamWeighting.HAMMING: np.hamming,
    BeamWeighting.HANNING: np.hanning,
    BeamWeighting.TAYLOR: lambda n: _taylor_window(n, nbar=4, sll=35, norm=True),
}


def beam_weights(
    n_beams: int,
    weighting: BeamWeighting,
    mode: OperatingMode = OperatingMode.SAR,
) -> np.ndarray:
    """Build the per-beam weighting taper.

    Parameters
    ----------
    n_beams : int
        Number of beams ``N_b``.
    weighting : BeamWeighting
        Taper selection. Windows are symmetric (``np.hamming`` convention).
    mode : OperatingMode
        In pulse-limited mode the taper is always rectangular.

    Returns
    -------
    np.ndarray
        Weights, shape ``(n_beams,)``.
    """
    if mode is OperatingMode.PULSE_LIMITED and weighting is not BeamWeighting.RECTANGULAR:
        logger.debug("Pulse-limited mode: ignoring %s taper", weighting.value)
        weighting = BeamWeighting.RECTANGULAR

    window = _WINDOW_FUNCTIONS[weighting]
    if window is None or n_beams == 1:
        return np.ones(n_beams)
    return np.asarray(window(n_beams), dtype=np.float64)
