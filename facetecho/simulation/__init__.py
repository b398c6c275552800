# -*- coding: utf-8 -*-
"""
Simulation - Pulse timing, radar equation, stacking and orchestration.

- ``pulse`` -- per-facet delay offsets and the ``sinc^2`` envelope.
- ``radar_equation`` -- facet weights and single-look integration.
- ``stacking`` -- multi-look and component reductions over beams.
- ``partition`` -- beam work blocks.
- ``simulator`` -- ``FacetEchoSimulator`` and ``simulate_echo``.

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

from facetecho.simulation.partition import BeamBlock, BeamPartitioner
from facetecho.simulation.pulse import (
    delay_offsets,
    pulse_envelope,
    slant_range_time_correction,
)
from facetecho.simulation.radar_equation import (
    SingleLookEcho,
    component_waveforms,
    facet_weights,
    radar_constant,
    single_look,
)
from facetecho.simulation.result import EchoResult
from facetecho.simulation.stacking import stack_components, stack_waveforms
from facetecho.simulation.simulator import (
    EchoScene,
    FacetEchoSimulator,
    simulate_beam,
    simulate_echo,
)

__all__ = [
    'BeamBlock',
    'BeamPartitioner',
    'delay_offsets',
    'pulse_envelope',
    'slant_range_time_correction',
    'SingleLookEcho',
    'component_waveforms',
    'facet_weights',
    'radar_constant',
    'single_look',
    'EchoResult',
    'stack_components',
    'stack_waveforms',
    'EchoScene',
    'FacetEchoSimulator',
    'simulate_beam',
    'simulate_echo',
]
