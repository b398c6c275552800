# -*- coding: utf-8 -*-
"""
Antenna Footprint - Derived antenna, footprint, and beam-steering constants.

Converts the radar/orbit parameters into the constants consumed by the
per-beam loop: carrier frequency and wavenumber, along-track spacing of
coherent pulses, the Doppler-beam-limited, pulse-limited and
beam-limited footprint sizes, the angular separation of synthetic beams,
and the symmetric set of look indices.

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
from dataclasses import dataclass, field

# Third-party
import numpy as np

# Facet echo internal
from facetecho.config import RadarParameters
from facetecho.constants import EARTH_RADIUS, SPEED_OF_LIGHT


@dataclass(frozen=True)
class AntennaGeometry:
    """Antenna and footprint constants derived from ``RadarParameters``.

    Attributes
    ----------
    frequency : float
        Carrier frequency (Hz).
    wavenumber : float
        Free-space wavenumber ``2 pi / lambda`` (rad/m).
    pulse_spacing : float
        Along-track distance between coherent pulses ``v / prf`` (m).
    doppler_footprint : float
        Along-track Doppler-beam-limited footprint (m).
    pulse_limited_footprint : float
        Across-track pulse-limited footprint, corrected for Earth
        curvature (m).
    beam_limited_footprint : float
        Across-track beam-limited footprint ``2 h tan(gamma2 / 2)`` (m).
    pulse_limited_area : float
        Area of the pulse-limited footprint (m^2).
    beam_separation : float
        Angular separation between adjacent synthetic beams (rad).
    look_indices : np.ndarray
        Beam look indices ``-(N_b - 1)/2 ... (N_b - 1)/2``, shape ``(N_b,)``.
    """

    frequency: float
    wavenumber: float
    pulse_spacing: float
    doppler_footprint: float
    pulse_limited_footprint: float
    beam_limited_footprint: float
    pulse_limited_area: float
    beam_separation: float
    look_indices: np.ndarray = field(repr=False)

    @property
    def n_beams(self) -> int:
        """Number of synthetic-aperture beams."""
        return int(self.look_indices.size)

    @property
    def beam_offsets(self) -> np.ndarray:
        """Beam pointing offsets ``m * epsilon_b`` (rad), shape ``(N_b,)``."""
        return self.look_indices * self.beam_separation


def derive_antenna_geometry(radar: RadarParameters) -> AntennaGeometry:
    """Derive antenna and footprint constants.

    Parameters
    ----------
    radar : RadarParameters
        Radar, antenna and orbit parameters.

    Returns
    -------
    AntennaGeometry
    """
    c = SPEED_OF_LIGHT
    h = radar.altitude
    n_b = radar.n_beams

    frequency = c / radar.wavelength
    wavenumber = 2.0 * np.pi / radar.wavelength
    pulse_spacing = radar.velocity / radar.prf

    doppler_footprint = (h * radar.prf * c) / (2.0 * n_b * radar.velocity * frequency)
    # Effective altitude h / ((Re + h) / Re) accounts for Earth curvature
    effective_altitude = h / ((EARTH_RADIUS + h) / EARTH_RADIUS)
    pulse_limited_footprint = 2.0 * np.sqrt(c * effective_altitude / radar.bandwidth)
    beam_limited_footprint = 2.0 * h * np.tan(radar.gamma2 / 2.0)
    pulse_limited_area = np.pi * (pulse_limited_footprint / 2.0) ** 2

    beam_separation = radar.wavelength / (2.0 * n_b * radar.velocity / radar.prf)
    look_indices = np.arange(n_b, dtype=np.float64) - (n_b - 1) / 2.0

    return AntennaGeometry(
        frequency=float(frequency),
        wavenumber=float(wavenumber),
        pulse_spacing=float(pulse_spacing),
        doppler_footprint=float(doppler_footprint),
        pulse_limited_footprint=float(pulse_limited_footprint),
        beam_limited_footprint=float(beam_limited_footprint),
        pulse_limited_area=float(pulse_limited_area),
        beam_separation=float(beam_separation),
        look_indices=look_indices,
    )
