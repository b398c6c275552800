# -*- coding: utf-8 -*-
"""
Tests for parameter declarations, validation and YAML configuration.

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

from typing import Annotated

import numpy as np
import pytest

from facetecho.config import (
    RadarParameters,
    SnowParameters,
    available_presets,
    load_parameters,
    load_preset,
    parameters_from_dict,
)
from facetecho.exceptions import ValidationError
from facetecho.params import Desc, ParameterSet, ParamSpec, Range
from facetecho.vocabulary import BeamWeighting, OperatingMode


class TestParameterSet:

    def test_specs_collected_in_order(self):
        names = list(RadarParameters.param_specs())
        assert names[:3] == ['wavelength', 'bandwidth', 'transmit_power']
        assert names[-2:] == ['mode', 'beam_weighting']

    def test_spec_metadata(self):
        spec = SnowParameters.param_specs()['depth']
        assert isinstance(spec, ParamSpec)
        assert spec.min_value == 0.0
        assert 'Snow depth' in spec.description
        assert not spec.required

    def test_immutable(self):
        radar = RadarParameters()
        with pytest.raises(AttributeError, match="immutable"):
            radar.altitude = 1.0

    def test_replace(self):
        radar = RadarParameters()
        changed = radar.replace(n_beams=16)
        assert changed.n_beams == 16
        assert radar.n_beams == 64
        assert changed.wavelength == radar.wavelength

    def test_equality_and_hash(self):
        assert RadarParameters() == RadarParameters()
        assert hash(SnowParameters(depth=0.1)) == hash(SnowParameters(depth=0.1))
        assert SnowParameters(depth=0.1) != SnowParameters(depth=0.2)

    def test_unexpected_keyword(self):
        with pytest.raises(TypeError, match="unexpected"):
            SnowParameters(colour='white')

    def test_bool_rejected_for_numbers(self):
        with pytest.raises(TypeError, match="bool"):
            SnowParameters(depth=True)

    def test_numpy_scalars_accepted(self):
        radar = RadarParameters(n_beams=np.int64(4), altitude=np.float32(7e5))
        assert radar.n_beams == 4 and type(radar.n_beams) is int
        assert type(radar.altitude) is float
        assert SnowParameters(depth=np.int64(0)).depth == 0.0

    def test_float_rejected_for_int(self):
        with pytest.raises(TypeError, match="n_beams"):
            RadarParameters(n_beams=4.0)

    def test_enum_field_needs_only_desc(self):
        spec = RadarParameters.param_specs()['mode']
        assert spec.is_enum
        assert spec.min_value is None and spec.max_value is None

    def test_required_parameter(self):
        class _Req(ParameterSet):
            x: Annotated[float, Range(min=0.0), Desc('x')]

        with pytest.raises(TypeError, match="missing required"):
            _Req()
        assert _Req(x=2).x == 2


class TestRadarParameters:

    def test_defaults(self):
        radar = RadarParameters()
        assert radar.wavelength == 0.0221
        assert radar.mode is OperatingMode.SAR
        assert radar.beam_weighting is BeamWeighting.HAMMING

    def test_range_violation(self):
        with pytest.raises(ValidationError, match="below minimum"):
            RadarParameters(altitude=-5.0)

    def test_pulse_limited_needs_single_beam(self):
        with pytest.raises(ValidationError, match="n_beams=1"):
            RadarParameters(mode=OperatingMode.PULSE_LIMITED, n_beams=4)

    def test_int_accepted_for_float(self):
        assert RadarParameters(altitude=700000).altitude == 700000

    def test_wrong_enum_type(self):
        with pytest.raises(TypeError):
            RadarParameters(mode='sar')

    def test_to_dict_uses_enum_values(self):
        d = RadarParameters().to_dict()
        assert d['mode'] == 'sar'
        assert d['beam_weighting'] == 'hamming'


class TestSnowParameters:

    def test_two_way_delay(self):
        snow = SnowParameters(depth=0.243, wave_speed=2.43e8)
        assert snow.two_way_delay == pytest.approx(2e-9)

    def test_depth_upper_bound(self):
        with pytest.raises(ValidationError, match="above maximum"):
            SnowParameters(depth=50.0)


class TestFromDict:

    def test_enum_by_value_and_name(self):
        radar = RadarParameters.from_dict(
            {'mode': 'pulse_limited', 'n_beams': 1,
             'beam_weighting': 'TAYLOR'})
        assert radar.mode is OperatingMode.PULSE_LIMITED
        assert radar.beam_weighting is BeamWeighting.TAYLOR

    def test_unknown_enum(self):
        with pytest.raises(ValidationError, match="not one of"):
            RadarParameters.from_dict({'beam_weighting': 'kaiser'})

    def test_unknown_key(self):
        with pytest.raises(ValidationError, match="Unknown SnowParameters keys"):
            SnowParameters.from_dict({'density': 300.0})

    def test_round_trip(self):
        radar = RadarParameters(n_beams=8, pitch=0.002)
        assert RadarParameters.from_dict(radar.to_dict()) == radar

    def test_wrong_type_is_validation_error(self):
        with pytest.raises(ValidationError):
            SnowParameters.from_dict({'depth': 'deep'})

    def test_document_sections(self):
        radar, snow = parameters_from_dict({'snow': {'depth': 0.3}})
        assert radar == RadarParameters()
        assert snow.depth == 0.3

    def test_unknown_section(self):
        with pytest.raises(ValidationError, match="sections"):
            parameters_from_dict({'orbit': {}})

    def test_non_mapping(self):
        with pytest.raises(ValidationError, match="mapping"):
            parameters_from_dict([1, 2])


class TestYamlLoading:

    def test_load_parameters(self, tmp_path):
        path = tmp_path / "scene.yaml"
        path.write_text(
            "radar:\n"
            "  n_beams: 16\n"
            "  beam_weighting: hanning\n"
            "  altitude: 7.3e+5\n"
            "snow:\n"
            "  depth: 0.35\n"
        )
        radar, snow = load_parameters(path)
        assert radar.n_beams == 16
        assert radar.beam_weighting is BeamWeighting.HANNING
        assert radar.altitude == 730000.0
        assert snow.depth == 0.35

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        radar, snow = load_parameters(path)
        assert radar == RadarParameters()
        assert snow == SnowParameters()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_parameters(tmp_path / "nope.yaml")

    def test_presets(self):
        assert {'cryosat2', 'cryosat2_lrm'} <= set(available_presets())
        radar, snow = load_preset('cryosat2')
        assert radar.n_beams == 64
        assert snow.depth == 0.2
        radar, _ = load_preset('cryosat2_lrm')
        assert radar.mode is OperatingMode.PULSE_LIMITED

    def test_unknown_preset(self):
        with pytest.raises(ValidationError, match="Unknown preset"):
            load_preset('sentinel9')
