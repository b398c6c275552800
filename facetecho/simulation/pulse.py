# -*- coding: utf-8 -*-
"""
Pulse Timing - Per-facet delay offsets and the transmitted-pulse envelope.

The round-trip delay of each sea-ice facet is referenced to the nadir
delay ``2 h / c`` plus a slant-range time correction for the displaced
antenna position, giving the delay offset ``T`` of every facet at every
sample of the time grid. The transmitted power envelope is
``sinc^2(B T)``.

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
from facetecho.constants import EARTH_RADIUS, SPEED_OF_LIGHT


def slant_range_time_correction(antenna_offset: float, altitude: float) -> float:
    """Two-way delay correction for an antenna displaced from nadir.

    ``t_c = 2 (sqrt(x_0^2 (1 + h / Re) + h^2) - h) / c``

    Parameters
    ----------
    antenna_offset : float
        Antenna displacement ``x_0`` from the scene origin (m).
    altitude : float
        Satellite altitude ``h`` (m).

    Returns
    -------
    float
        Correction (s).
    """
    h = altitude
    range_ = np.sqrt(antenna_offset ** 2 * (1.0 + h / EARTH_RADIUS) + h ** 2)
    return float(2.0 * (range_ - h) / SPEED_OF_LIGHT)


def delay_offsets(
    time: np.ndarray,
    slant_range: np.ndarray,
    altitude: float,
    antenna_offset: float = 0.0,
) -> np.ndarray:
    """Delay offset ``T = t + 2 h / c + t_c - 2 R / c`` of every facet.

    Parameters
    ----------
    time : np.ndarray
        Time grid (s), shape ``(T,)``.
    slant_range : np.ndarray
        Facet slant ranges (m), shape ``(M,)``.
    altitude : float
        Satellite altitude (m).
    antenna_offset : float
        Antenna displacement ``x_0`` (m).

    Returns
    -------
    np.ndarray
        Delay offsets (s), shape ``(M, T)``.
    """
    reference = (np.asarray(time, dtype=np.float64)
                 + 2.0 * altitude / SPEED_OF_LIGHT
                 + slant_range_time_correction(antenna_offset, altitude))
    facet_delay = 2.0 * np.asarray(slant_range, dtype=np.float64) / SPEED_OF_LIGHT
    return reference[np.newaxis, :] - facet_delay[:, np.newaxis]


def pulse_envelope(delay_offset: np.ndarray, bandwidth: float) -> np.ndarray:
    """Transmitted power envelope ``(sin(pi B T) / (pi B T))^2``.

    ``np.sinc`` returns the analytic limit 1 at ``T = 0``.

    Parameters
    ----------
    delay_offset : np.ndarray
        Delay offsets ``T`` (s), any shape.
    bandwidth : float
        Pulse bandwidth ``B`` (Hz).

    Returns
    -------
    np.ndarray
        Envelope, same shape as *delay_offset*.
    """
    return np.sinc(bandwidth * np.asarray(delay_offset, dtype=np.float64)) ** 2
