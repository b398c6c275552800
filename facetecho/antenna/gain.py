# -*- coding: utf-8 -*-
"""
Antenna Gain - Real-aperture antenna pattern and synthetic beam gain.

Two independent gain factors are evaluated per facet and per beam:

1. **Antenna pattern gain** -- an elliptical 2-D Gaussian in the
   ground-referenced off-boresight angle, with separate along- and
   across-track widths (CryoSat-2 SIRAL form, Wingham et al. 2006).
2. **Synthetic beam gain** -- the ``N_b``-element uniform array factor
   ``sin^2(N u) / (N sin u)^2`` of the synthetic aperture, steered to
   the beam's look offset.

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

# |sin(u)| below this is treated as the central-lobe limit
_ARRAY_FACTOR_TOL = 1e-12


def antenna_pattern_gain(
    off_boresight: np.ndarray,
    azimuth: np.ndarray,
    peak_gain: float,
    gamma1: float,
    gamma2: float,
) -> np.ndarray:
    """Evaluate the two-dimensional Gaussian antenna pattern.

    ``G = G_0 exp(-theta^2 (cos^2(phi) / gamma1^2 + sin^2(phi) / gamma2^2))``

    Parameters
    ----------
    off_boresight : np.ndarray
        Off-boresight angle of each facet (rad).
    azimuth : np.ndarray
        Azimuth of each facet around boresight, measured from the
        along-track axis (rad).
    peak_gain : float
        Boresight gain ``G_0`` (linear).
    gamma1 : float
        Along-track pattern width (rad).
    gamma2 : float
        Across-track pattern width (rad).

    Returns
    -------
    np.ndarray
        One-way linear gain, same shape as *off_boresight*.
    """
    off_boresight = np.asarray(off_boresight, dtype=np.float64)
    azimuth = np.asarray(azimuth, dtype=np.float64)
    shape = (np.cos(azimuth) ** 2 / gamma1 ** 2
             + np.sin(azimuth) ** 2 / gamma2 ** 2)
    return peak_gain * np.exp(-off_boresight ** 2 * shape)


def synthetic_beam_gain(
    look_angle: np.ndarray,
    look_index: float,
    n_beams: int,
    wavenumber: float,
    pulse_spacing: float,
    beam_separation: float,
    peak_gain: float = 1.0,
) -> np.ndarray:
    """Evaluate the synthetic-aperture array factor for one beam.

    ``P_m = D_0 sin^2(N u) / (N sin u)^2`` with
    ``u = k0 dx sin(theta_l + m epsilon_b)``. Where ``sin u`` vanishes
    the analytic limit ``D_0`` is returned.

    Parameters
    ----------
    look_angle : np.ndarray
        Along-track look angle of each facet, without mis-pointing
        ground correction (rad).
    look_index : float
        Beam look index ``m``.
    n_beams : int
        Number of beams ``N_b`` in the synthetic aperture.
    wavenumber : float
        Free-space wavenumber ``k0`` (rad/m).
    pulse_spacing : float
        Along-track spacing of coherent pulses ``dx`` (m).
    beam_separation : float
        Angular separation of synthetic beams ``epsilon_b`` (rad).
    peak_gain : float
        Central-lobe peak ``D_0`` (linear). Default 1.

    Returns
    -------
    np.ndarray
        Linear synthetic beam gain, same shape as *look_angle*.
    """
    look_angle = np.asarray(look_angle, dtype=np.float64)
    u = wavenumber * pulse_spacing * np.sin(look_angle + look_index * beam_separation)
    sin_u = np.sin(u)
    central = np.abs(sin_u) < _ARRAY_FACTOR_TOL
    denominator = np.where(central, 1.0, n_beams * sin_u) ** 2
    ratio = np.sin(n_beams * u) ** 2 / denominator
    return peak_gain * np.where(central, 1.0, ratio)
