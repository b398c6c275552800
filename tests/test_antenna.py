# -*- coding: utf-8 -*-
"""
Tests for antenna constants, gain patterns and beam weighting.

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

import numpy as np
import pytest

from facetecho.antenna import (
    antenna_pattern_gain,
    beam_weights,
    derive_antenna_geometry,
    synthetic_beam_gain,
)
from facetecho.config import RadarParameters
from facetecho.constants import EARTH_RADIUS, SPEED_OF_LIGHT
from facetecho.vocabulary import BeamWeighting, OperatingMode


class TestDeriveAntennaGeometry:

    def test_frequency_and_wavenumber(self):
        geom = derive_antenna_geometry(RadarParameters())
        assert geom.frequency == pytest.approx(SPEED_OF_LIGHT / 0.0221)
        assert geom.wavenumber == pytest.approx(2 * np.pi / 0.0221)

    def test_pulse_spacing(self):
        geom = derive_antenna_geometry(RadarParameters(velocity=7000.0, prf=14000.0))
        assert geom.pulse_spacing == pytest.approx(0.5)

    def test_footprints(self):
        radar = RadarParameters()
        geom = derive_antenna_geometry(radar)
        h, c = radar.altitude, SPEED_OF_LIGHT
        expected_pl = 2 * np.sqrt(c * h / (1 + h / EARTH_RADIUS) / radar.bandwidth)
        assert geom.pulse_limited_footprint == pytest.approx(expected_pl)
        assert geom.pulse_limited_area == pytest.approx(np.pi * expected_pl ** 2 / 4)
        assert geom.beam_limited_footprint == pytest.approx(
            2 * h * np.tan(radar.gamma2 / 2))
        assert geom.doppler_footprint == pytest.approx(
            h * radar.prf * c / (2 * radar.n_beams * radar.velocity * geom.frequency))

    def test_beam_separation(self):
        radar = RadarParameters(n_beams=8)
        geom = derive_antenna_geometry(radar)
        expected = radar.wavelength / (2 * 8 * radar.velocity / radar.prf)
        assert geom.beam_separation == pytest.approx(expected)

    def test_look_indices_symmetric(self):
        geom = derive_antenna_geometry(RadarParameters(n_beams=4))
        np.testing.assert_array_equal(geom.look_indices, [-1.5, -0.5, 0.5, 1.5])
        assert geom.n_beams == 4
        np.testing.assert_allclose(geom.beam_offsets,
                                   geom.look_indices * geom.beam_separation)

    def test_pulse_limited_single_look(self):
        radar = RadarParameters(n_beams=1, mode=OperatingMode.PULSE_LIMITED)
        np.testing.assert_array_equal(
            derive_antenna_geometry(radar).look_indices, [0.0])


class TestAntennaPatternGain:

    def test_boresight_peak(self):
        assert antenna_pattern_gain(0.0, 0.3, 100.0, 0.01, 0.02) == pytest.approx(100.0)

    def test_along_track_width(self):
        g = antenna_pattern_gain(0.01, 0.0, 1.0, 0.01, 0.02)
        assert g == pytest.approx(np.exp(-1.0))

    def test_across_track_width(self):
        g = antenna_pattern_gain(0.02, np.pi / 2, 1.0, 0.01, 0.02)
        assert g == pytest.approx(np.exp(-1.0))

    def test_shape(self):
        theta = np.zeros((3, 2))
        assert antenna_pattern_gain(theta, theta, 1.0, 0.01, 0.01).shape == (3, 2)


class TestSyntheticBeamGain:

    _K0 = 2 * np.pi / 0.0221
    _DX = 0.4125

    def test_central_lobe_limit(self):
        eps = 1e-4
        look = np.array([-2 * eps, 0.0])
        g = synthetic_beam_gain(look, 2.0, 8, self._K0, self._DX, eps,
                                peak_gain=3.0)
        assert np.all(np.isfinite(g))
        assert g[0] == 3.0

    def test_single_beam_is_flat(self):
        look = np.linspace(-0.01, 0.01, 11)
        g = synthetic_beam_gain(look, 0.0, 1, self._K0, self._DX, 1e-3)
        np.testing.assert_allclose(g, 1.0)

    def test_below_peak_off_axis(self):
        look = np.linspace(1e-5, 1e-3, 20)
        g = synthetic_beam_gain(look, 0.0, 16, self._K0, self._DX, 1e-4)
        assert np.all(g <= 1.0 + 1e-12)

    def test_array_factor_value(self):
        n, look = 4, 1e-4
        u = self._K0 * self._DX * np.sin(look)
        expected = np.sin(n * u) ** 2 / (n * np.sin(u)) ** 2
        g = synthetic_beam_gain(np.array([look]), 0.0, n, self._K0, self._DX, 1e-3)
        assert g[0] == pytest.approx(expected)


class TestBeamWeights:

    def test_rectangular(self):
        np.testing.assert_array_equal(
            beam_weights(5, BeamWeighting.RECTANGULAR), np.ones(5))

    def test_hamming(self):
        np.testing.assert_allclose(beam_weights(64, BeamWeighting.HAMMING),
                                   np.hamming(64))

    def test_hanning(self):
        np.testing.assert_allclose(beam_weights(9, BeamWeighting.HANNING),
                                   np.hanning(9))

    def test_taylor_symmetric(self):
        w = beam_weights(32, BeamWeighting.TAYLOR)
        assert w.shape == (32,)
        np.testing.assert_allclose(w, w[::-1])

    def test_pulse_limited_forces_rectangular(self):
        w = beam_weights(1, BeamWeighting.HAMMING, OperatingMode.PULSE_LIMITED)
        np.testing.assert_array_equal(w, [1.0])

    def test_single_beam_unit_weight(self):
        np.testing.assert_array_equal(beam_weights(1, BeamWeighting.HANNING), [1.0])
