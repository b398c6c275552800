# -*- coding: utf-8 -*-
"""
Tests for the backscatter mixing model and the component record.

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

from facetecho.config import SnowParameters
from facetecho.scattering import (
    ConstantCurve,
    FunctionCurve,
    ScatteringComponents,
    ScatteringSignatures,
    TabulatedCurve,
    db_to_linear,
    mix_backscatter,
)
from facetecho.scattering.mixing import (
    delayed_envelope,
    ice_surface_coefficient,
    snow_surface_term,
    snow_volume_term,
    water_coefficient,
)
from facetecho.simulation.pulse import pulse_envelope
from facetecho.vocabulary import ScatteringComponent, SurfaceType


# ===================================================================
# Helpers
# ===================================================================

def _make_signatures(**overrides) -> ScatteringSignatures:
    curves = dict(
        snow_surface=ConstantCurve(-10.0),
        snow_volume=ConstantCurve(-15.0),
        ice_surface=ConstantCurve(0.0),
        lead_surface=ConstantCurve(20.0),
        pond_surface=ConstantCurve(10.0),
        snow_transmission=ConstantCurve(0.9),
    )
    curves.update(overrides)
    return ScatteringSignatures(**curves)


def _make_inputs(n_facets: int = 3, n_samples: int = 41):
    time = np.linspace(-10e-9, 10e-9, n_samples)
    offset = np.tile(time, (n_facets, 1))
    envelope = pulse_envelope(offset, 320e6)
    incidence = np.zeros(n_facets)
    return time, offset, envelope, incidence


# ===================================================================
# Component record
# ===================================================================

class TestScatteringComponents:

    def test_field_order_matches_vocabulary(self):
        assert ScatteringComponents._fields == tuple(
            c.value for c in ScatteringComponent)

    def test_get(self):
        rec = ScatteringComponents(1, 2, 3, 4)
        assert rec.get(ScatteringComponent.ICE_SURFACE) == 3
        assert rec.get('water') == 4

    def test_total_ignores_nan(self):
        rec = ScatteringComponents(np.array([1.0, np.nan]), np.array([2.0, 1.0]),
                                   np.zeros(2), np.array([np.nan, 1.0]))
        np.testing.assert_array_equal(rec.total(), [3.0, 2.0])

    def test_stack_last_axis(self):
        rec = ScatteringComponents(*(np.full((2, 3), float(i)) for i in range(4)))
        stacked = rec.stack()
        assert stacked.shape == (2, 3, 4)
        np.testing.assert_array_equal(stacked[0, 0], [0.0, 1.0, 2.0, 3.0])

    def test_map(self):
        rec = ScatteringComponents(1.0, 2.0, 3.0, 4.0).map(lambda v: v * 2)
        assert tuple(rec) == (2.0, 4.0, 6.0, 8.0)


# ===================================================================
# Individual terms
# ===================================================================

class TestSnowTerms:

    def test_db_to_linear(self):
        np.testing.assert_allclose(db_to_linear([0.0, 10.0, -3.0]),
                                   [1.0, 10.0, 10 ** -0.3])

    def test_delayed_envelope_advances_peak(self):
        time, offset, envelope, _ = _make_inputs(n_samples=201)
        delay = 2e-9
        shifted = delayed_envelope(envelope, time, delay)
        assert time[np.argmax(envelope[0])] == pytest.approx(0.0, abs=1e-12)
        # out(t) = envelope(t + delay)
        assert time[np.argmax(shifted[0])] == pytest.approx(-delay, abs=1e-12)

    def test_delayed_envelope_zero_delay_is_identity(self):
        time, _, envelope, _ = _make_inputs()
        assert delayed_envelope(envelope, time, 0.0) is envelope

    def test_delayed_envelope_fills_zero(self):
        time, _, envelope, _ = _make_inputs()
        shifted = delayed_envelope(envelope, time, 5e-9)
        assert np.all(shifted[:, time > 5e-9] == 0.0)

    def test_snow_surface_zero_without_snow(self):
        _, _, envelope, incidence = _make_inputs()
        snow = SnowParameters(depth=0.0)
        out = snow_surface_term(FunctionCurve(lambda a: np.full_like(a, np.nan)),
                                incidence, envelope, snow)
        assert np.all(out == 0.0)

    def test_snow_surface_scales_envelope(self):
        _, _, envelope, incidence = _make_inputs()
        snow = SnowParameters(depth=0.2)
        out = snow_surface_term(ConstantCurve(-10.0), incidence, envelope, snow)
        np.testing.assert_allclose(out, 0.1 * envelope)

    def test_snow_surface_skips_degenerate_facets(self):
        _, _, envelope, incidence = _make_inputs()
        degenerate = np.zeros(incidence.shape, dtype=bool)
        degenerate[0] = True
        out = snow_surface_term(ConstantCurve(-10.0), incidence, envelope,
                                SnowParameters(depth=0.2),
                                degenerate=degenerate)
        assert np.all(out[0] == 0.0)
        np.testing.assert_allclose(out[1:], 0.1 * envelope[1:])

    def test_snow_volume_window(self):
        time, offset, envelope, incidence = _make_inputs(n_samples=401)
        snow = SnowParameters(depth=0.3, wave_speed=2.4e8, extinction=0.5)
        out = snow_volume_term(ConstantCurve(0.0), incidence, offset,
                               envelope, snow)
        window = (offset >= -snow.two_way_delay) & (offset < 0.0)
        assert np.all(out[~window] == 0.0)
        assert np.all(out[window] > 0.0)

    def test_snow_volume_extinction_profile(self):
        time, offset, envelope, incidence = _make_inputs(n_samples=401)
        snow = SnowParameters(depth=0.3, wave_speed=2.4e8, extinction=0.5)
        flat = np.ones_like(envelope)
        out = snow_volume_term(ConstantCurve(0.0), incidence, offset, flat, snow)
        window = (offset >= -snow.two_way_delay) & (offset < 0.0)
        expected = snow.extinction * np.exp(
            -snow.wave_speed * snow.extinction
            * (offset[window] + snow.two_way_delay))
        np.testing.assert_allclose(out[window], expected)

    def test_snow_volume_zero_without_snow(self):
        _, offset, envelope, incidence = _make_inputs()
        out = snow_volume_term(ConstantCurve(0.0), incidence, offset, envelope,
                               SnowParameters(depth=0.0))
        assert np.all(out == 0.0)


class TestSurfaceCoefficients:

    def test_ice_only_on_sea_ice(self):
        sig = _make_signatures(ice_surface=ConstantCurve(10.0))
        snow = SnowParameters(depth=0.2, extinction=1.0)
        labels = np.array([SurfaceType.LEAD, SurfaceType.SEA_ICE,
                           SurfaceType.MELT_POND])
        out = ice_surface_coefficient(sig, np.zeros(3), labels, snow)
        expected = 10.0 * 0.9 ** 2 * np.exp(-1.0 * 0.2 / 2.0)
        np.testing.assert_allclose(out, [0.0, expected, 0.0])

    def test_ice_transmission_applies_without_snow(self):
        sig = _make_signatures()
        out = ice_surface_coefficient(sig, np.zeros(1),
                                      np.array([SurfaceType.SEA_ICE]),
                                      SnowParameters(depth=0.0))
        np.testing.assert_allclose(out, [0.81])

    def test_water_uses_lead_and_pond_curves(self):
        sig = _make_signatures()
        labels = np.array([SurfaceType.LEAD, SurfaceType.SEA_ICE,
                           SurfaceType.MELT_POND])
        out = water_coefficient(sig, np.zeros(3), labels)
        np.testing.assert_allclose(out, [100.0, 0.0, 10.0])

    def test_water_nan_replaced_by_zero(self):
        lead = TabulatedCurve([0.5, 1.0], [20.0, 10.0])
        sig = _make_signatures(lead_surface=lead)
        labels = np.array([SurfaceType.LEAD, SurfaceType.LEAD])
        out = water_coefficient(sig, np.array([0.0, 0.75]), labels)
        assert out[0] == 0.0
        assert out[1] == pytest.approx(10 ** 1.5)

    def test_clamped_incidence_reaches_curve(self):
        seen = []

        def _record(angle):
            seen.append(np.array(angle))
            return np.zeros_like(angle)

        sig = _make_signatures(ice_surface=FunctionCurve(_record))
        out = ice_surface_coefficient(
            sig, np.array([np.pi / 2]), np.array([SurfaceType.SEA_ICE]),
            SnowParameters())
        assert seen[0][0] == np.pi / 2
        assert np.isfinite(out[0])


# ===================================================================
# Full mixing
# ===================================================================

class TestMixBackscatter:

    def test_shapes(self):
        time, offset, envelope, incidence = _make_inputs()
        labels = np.array([0, 1, 2])
        comps = mix_backscatter(_make_signatures(), SnowParameters(depth=0.2),
                                envelope, offset, time, incidence, incidence,
                                labels)
        assert isinstance(comps, ScatteringComponents)
        for value in comps:
            assert value.shape == envelope.shape

    def test_no_snow_gives_zero_snow_components(self):
        time, offset, envelope, incidence = _make_inputs()
        comps = mix_backscatter(_make_signatures(), SnowParameters(depth=0.0),
                                envelope, offset, time, incidence, incidence,
                                np.array([1, 1, 1]))
        assert np.all(comps.snow_surface == 0.0)
        assert np.all(comps.snow_volume == 0.0)

    def test_surface_types_partition_components(self):
        time, offset, envelope, incidence = _make_inputs()
        comps = mix_backscatter(_make_signatures(), SnowParameters(depth=0.2),
                                envelope, offset, time, incidence, incidence,
                                np.array([0, 1, 2]))
        assert np.all(comps.ice_surface[[0, 2]] == 0.0)
        assert np.all(comps.water[1] == 0.0)
        assert np.any(comps.water[0] > 0.0)
        assert np.any(comps.ice_surface[1] > 0.0)
