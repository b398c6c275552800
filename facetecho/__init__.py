# -*- coding: utf-8 -*-
"""
Facet Echo - Facet-based radar altimeter echo model for sea ice.

Simulates the backscattered echo of a pulse-limited or synthetic-aperture
radar altimeter over a triangulated, snow-covered sea-ice surface, and
decomposes the multi-looked waveform into snow-surface, snow-volume,
ice-surface and water contributions. Model equations follow Landy et al.
(TGARS, 2019), building on Wingham et al. (2006), Giles et al. (2007),
Makynen et al. (2009) and Ulaby et al. (2014).

Dependencies
------------
numpy
scipy
pyyaml

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

__version__ = "0.1.0"

from facetecho.exceptions import (
    FacetEchoError,
    ValidationError,
    SimulationError,
)
from facetecho.vocabulary import (
    OperatingMode,
    BeamWeighting,
    SurfaceType,
    ScatteringComponent,
)
from facetecho.config import (
    RadarParameters,
    SnowParameters,
    load_parameters,
    load_preset,
)
from facetecho.scattering import (
    ConstantCurve,
    FunctionCurve,
    GaussianFacetCurve,
    ResponseCurve,
    ScatteringSignatures,
    TabulatedCurve,
)
from facetecho.simulation import (
    EchoResult,
    FacetEchoSimulator,
    simulate_echo,
)

__all__ = [
    'FacetEchoError',
    'ValidationError',
    'SimulationError',
    'OperatingMode',
    'BeamWeighting',
    'SurfaceType',
    'ScatteringComponent',
    'RadarParameters',
    'SnowParameters',
    'load_parameters',
    'load_preset',
    'ConstantCurve',
    'FunctionCurve',
    'GaussianFacetCurve',
    'ResponseCurve',
    'ScatteringSignatures',
    'TabulatedCurve',
    'EchoResult',
    'FacetEchoSimulator',
    'simulate_echo',
]
