# -*- coding: utf-8 -*-
"""
Radar Equation - Integrate facet backscatter into single-look waveforms.

Received power of facet ``j`` at sample ``t``:

``P_r = lambda^2 P_T / (4 pi)^3 * (c h / 2) * sigma0_j(t) G_j^2 P_m,j A_j / R_j^4``

Each scattering component is weighted and summed over facets on its
own (NaN treated as zero); the single-look waveform is the sum of the
four component waveforms, so the component shares add up to one
wherever the echo is non-zero.

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
from typing import NamedTuple

# Third-party
import numpy as np

# Facet echo internal
from facetecho.constants import SPEED_OF_LIGHT
from facetecho.scattering.mixing import ScatteringComponents


class SingleLookEcho(NamedTuple):
    """Weighted single-look echo of one beam.

    Attributes
    ----------
    power : np.ndarray
        Single-look power after the beam taper (W), shape ``(T,)``.
    fractions : np.ndarray
        Share of each ``ScatteringComponent`` in ``power``, shape
        ``(T, 4)``. Zero where ``power`` is zero.
    """

    power: np.ndarray
    fractions: np.ndarray


def radar_constant(wavelength: float, transmit_power: float, altitude: float) -> float:
    """Facet-independent factor ``lambda^2 P_T / (4 pi)^3 * c h / 2``."""
    return float(wavelength ** 2 * transmit_power / (4.0 * np.pi) ** 3
                 * 0.5 * SPEED_OF_LIGHT * altitude)


def facet_weights(
    antenna_gain: np.ndarray,
    synthetic_gain: np.ndarray,
    areas: np.ndarray,
    slant_range: np.ndarray,
) -> np.ndarray:
    """Per-facet factor ``G^2 P_m A / R^4``, shape ``(M,)``.

    Zero-area facets get weight zero.
    """
    antenna_gain = np.asarray(antenna_gain, dtype=np.float64)
    return antenna_gain ** 2 * synthetic_gain * areas / slant_range ** 4


def component_waveforms(
    components: ScatteringComponents,
    weights: np.ndarray,
    constant: float,
) -> np.ndarray:
    """Sum each component's received power over facets.

    Parameters
    ----------
    components : ScatteringComponents
        Backscatter density per component, each shape ``(M, T)``.
    weights : np.ndarray
        Facet weights from :func:`facet_weights`, shape ``(M,)``.
    constant : float
        Radar constant from :func:`radar_constant`.

    Returns
    -------
    np.ndarray
        Component waveforms, shape ``(T, 4)``.
    """
    column = weights[:, np.newaxis]
    summed = components.map(
        lambda density: constant * np.nansum(density * column, axis=0)
    )
    return summed.stack()


def single_look(waveforms: np.ndarray, beam_weight: float = 1.0) -> SingleLookEcho:
    """Form the weighted single-look echo from component waveforms.

    Parameters
    ----------
    waveforms : np.ndarray
        Component waveforms, shape ``(T, 4)``.
    beam_weight : float
        Taper weight of the beam.

    Returns
    -------
    SingleLookEcho
    """
    total = np.sum(waveforms, axis=1)
    nonzero = total != 0.0
    fractions = np.zeros_like(waveforms)
    fractions[nonzero] = waveforms[nonzero] / total[nonzero, np.newaxis]
    return SingleLookEcho(power=total * beam_weight, fractions=fractions)
