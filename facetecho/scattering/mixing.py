# -*- coding: utf-8 -*-
"""
Backscatter Mixing - Snow, ice and water contributions of every facet.

Composes the linear backscatter power density of each facet and time
sample from four terms, following the surface-plus-volume formulation
of Arthern et al. (2001) and Kurtz et al. (2014) as used by Landy et
al. (2019):

1. **Snow surface** -- snow-surface coefficient at the snow-mesh
   incidence angle, times the pulse envelope advanced by the two-way
   travel time through the snowpack. Zero when there is no snow.
2. **Snow volume** -- volume coefficient times ``kappa_e`` and an
   exponential extinction profile, inside the delay window spanned by
   the snowpack, times the advanced envelope.
3. **Ice surface** -- sea-ice facets only: ice coefficient times the
   squared air-snow transmission and ``exp(-kappa_e h_s / 2)``.
4. **Water** -- lead and melt-pond facets: the respective coefficient
   curve, with NaN (outside the tabulated range) replaced by zero.

The four terms travel together as a ``ScatteringComponents`` record and
are never summed before the radar equation, so each one's share of the
echo can be reported.

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
from typing import Callable, NamedTuple, Optional

# Third-party
import numpy as np

# Facet echo internal
from facetecho.config import SnowParameters
from facetecho.interpolation import Interpolator, LinearInterpolator
from facetecho.scattering.curves import ResponseCurve
from facetecho.scattering.signatures import ScatteringSignatures
from facetecho.vocabulary import ScatteringComponent, SurfaceType


class ScatteringComponents(NamedTuple):
    """One value (or array) per backscatter component.

    Field order matches ``ScatteringComponent`` and the last axis of
    every stacked component array.
    """

    snow_surface: np.ndarray
    snow_volume: np.ndarray
    ice_surface: np.ndarray
    water: np.ndarray

    def get(self, component: ScatteringComponent) -> np.ndarray:
        """Return the entry for *component*."""
        return getattr(self, ScatteringComponent(component).value)

    def map(self, func: Callable[[np.ndarray], np.ndarray]) -> 'ScatteringComponents':
        """Apply *func* to every component."""
        return ScatteringComponents(*(func(v) for v in self))

    def total(self) -> np.ndarray:
        """Sum of the four components, NaN treated as zero."""
        return sum(np.nan_to_num(np.asarray(v, dtype=np.float64), nan=0.0)
                   for v in self)

    def stack(self) -> np.ndarray:
        """Stack components along a new last axis of length 4."""
        return np.stack(self, axis=-1)


def db_to_linear(value_db: np.ndarray) -> np.ndarray:
    """Convert decibels to a linear power ratio."""
    return 10.0 ** (np.asarray(value_db, dtype=np.float64) / 10.0)


def delayed_envelope(
    envelope: np.ndarray,
    time: np.ndarray,
    delay: float,
    interpolator: Optional[Interpolator] = None,
) -> np.ndarray:
    """Advance the pulse envelope by *delay* seconds.

    The envelope sampled on ``time - delay`` is resampled onto ``time``,
    so ``out(t) = envelope(t + delay)``: the snow-surface return arrives
    *delay* before the ice-surface return. Samples that fall outside the
    time grid take the interpolator's fill value (zero by default).

    Parameters
    ----------
    envelope : np.ndarray
        Pulse envelope, shape ``(M, T)``.
    time : np.ndarray
        Time grid (s), shape ``(T,)``.
    delay : float
        Two-way snowpack travel time (s).
    interpolator : Interpolator, optional
        Resampler. Defaults to ``LinearInterpolator(fill_value=0)``.

    Returns
    -------
    np.ndarray
        Shifted envelope, shape ``(M, T)``.
    """
    if delay == 0.0:
        return envelope
    if interpolator is None:
        interpolator = LinearInterpolator()
    return interpolator(time - delay, envelope, time)


def snow_surface_term(
    curve: ResponseCurve,
    snow_incidence: np.ndarray,
    shifted_envelope: np.ndarray,
    snow: SnowParameters,
    degenerate: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Snow-surface backscatter, shape ``(M, T)``.

    Identically zero when ``snow.depth == 0``, and for the facets flagged
    in the optional *degenerate* mask, shape ``(M,)``.
    """
    if snow.depth == 0.0:
        return np.zeros_like(shifted_envelope)
    coefficient = db_to_linear(curve.evaluate(snow_incidence))
    if degenerate is not None:
        coefficient = np.where(degenerate, 0.0, coefficient)
    return coefficient[:, np.newaxis] * shifted_envelope


def snow_volume_term(
    curve: ResponseCurve,
    incidence: np.ndarray,
    delay_offset: np.ndarray,
    shifted_envelope: np.ndarray,
    snow: SnowParameters,
) -> np.ndarray:
    """Snow-volume backscatter, shape ``(M, T)``.

    Non-zero only where ``-2 h_s / c_s <= T < 0``; inside that window
    the volume coefficient is scaled by
    ``kappa_e exp(-c_s kappa_e (T + 2 h_s / c_s))``.

    Parameters
    ----------
    curve : ResponseCurve
        Snow-volume backscattering coefficient (dB).
    incidence : np.ndarray
        Sea-ice mesh incidence angles, shape ``(M,)``.
    delay_offset : np.ndarray
        Per-facet delay offset ``T`` (s), shape ``(M, T)``.
    shifted_envelope : np.ndarray
        Envelope advanced by the snowpack travel time, shape ``(M, T)``.
    snow : SnowParameters
        Snowpack parameters.
    """
    out = np.zeros_like(shifted_envelope)
    if snow.depth == 0.0:
        return out

    travel = snow.two_way_delay
    window = (delay_offset >= -travel) & (delay_offset < 0.0)
    if not np.any(window):
        return out

    rows, cols = np.nonzero(window)
    coefficient = db_to_linear(curve.evaluate(incidence))
    extinction = snow.extinction * np.exp(
        -snow.wave_speed * snow.extinction * (delay_offset[rows, cols] + travel)
    )
    out[rows, cols] = (coefficient[rows] * extinction
                       * shifted_envelope[rows, cols])
    return out


def ice_surface_coefficient(
    signatures: ScatteringSignatures,
    incidence: np.ndarray,
    surface_type: np.ndarray,
    snow: SnowParameters,
) -> np.ndarray:
    """Snow-attenuated sea-ice surface coefficient per facet, shape ``(M,)``.

    ``sigma0_ice tau^2 exp(-kappa_e h_s / 2)`` on sea-ice facets, zero
    elsewhere.
    """
    out = np.zeros(incidence.shape)
    ice = surface_type == SurfaceType.SEA_ICE
    if np.any(ice):
        theta = incidence[ice]
        transmission = signatures.snow_transmission.evaluate(theta)
        out[ice] = (db_to_linear(signatures.ice_surface.evaluate(theta))
                    * transmission ** 2
                    * np.exp(-snow.extinction * snow.depth / 2.0))
    return out


def water_coefficient(
    signatures: ScatteringSignatures,
    incidence: np.ndarray,
    surface_type: np.ndarray,
) -> np.ndarray:
    """Lead and melt-pond surface coefficient per facet, shape ``(M,)``.

    Undefined (NaN) coefficients become zero: smooth water returns
    nothing outside its tabulated incidence range.
    """
    out = np.zeros(incidence.shape)
    for surface in (SurfaceType.LEAD, SurfaceType.MELT_POND):
        mask = surface_type == surface
        if np.any(mask):
            curve = signatures.water_curve(surface)
            out[mask] = db_to_linear(curve.evaluate(incidence[mask]))
    return np.nan_to_num(out, nan=0.0)


def mix_backscatter(
    signatures: ScatteringSignatures,
    snow: SnowParameters,
    envelope: np.ndarray,
    delay_offset: np.ndarray,
    time: np.ndarray,
    snow_incidence: np.ndarray,
    ice_incidence: np.ndarray,
    surface_type: np.ndarray,
    interpolator: Optional[Interpolator] = None,
    snow_degenerate: Optional[np.ndarray] = None,
) -> ScatteringComponents:
    """Backscatter power density of every facet and time sample.

    Parameters
    ----------
    signatures : ScatteringSignatures
        Response curves.
    snow : SnowParameters
        Snowpack parameters.
    envelope : np.ndarray
        Transmitted-pulse envelope per facet, shape ``(M, T)``.
    delay_offset : np.ndarray
        Per-facet delay offset ``T`` (s), shape ``(M, T)``.
    time : np.ndarray
        Time grid (s), shape ``(T,)``.
    snow_incidence : np.ndarray
        Snow-mesh incidence angles, shape ``(M,)``.
    ice_incidence : np.ndarray
        Sea-ice mesh incidence angles, shape ``(M,)``.
    surface_type : np.ndarray
        Sea-ice facet ``SurfaceType`` labels, shape ``(M,)``.
    interpolator : Interpolator, optional
        Resampler used for the snowpack delay.
    snow_degenerate : np.ndarray, optional
        Mask of degenerate snow facets, shape ``(M,)``; they return no
        snow-surface echo.

    Returns
    -------
    ScatteringComponents
        Four ``(M, T)`` arrays.
    """
    shifted = delayed_envelope(envelope, time, snow.two_way_delay, interpolator)

    snow_surface = snow_surface_term(
        signatures.snow_surface, snow_incidence, shifted, snow,
        degenerate=snow_degenerate)
    snow_volume = snow_volume_term(
        signatures.snow_volume, ice_incidence, delay_offset, shifted, snow)

    ice = ice_surface_coefficient(signatures, ice_incidence, surface_type, snow)
    water = water_coefficient(signatures, ice_incidence, surface_type)

    return ScatteringComponents(
        snow_surface=snow_surface,
        snow_volume=snow_volume,
        ice_surface=ice[:, np.newaxis] * envelope,
        water=water[:, np.newaxis] * envelope,
    )
