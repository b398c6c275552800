# -*- coding: utf-8 -*-
"""
Echo Result - Simulated single-look, multi-looked and component waveforms.

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
from facetecho.antenna.footprint import AntennaGeometry
from facetecho.vocabulary import ScatteringComponent

_COMPONENT_AXIS = {c: i for i, c in enumerate(ScatteringComponent)}


@dataclass(frozen=True)
class EchoResult:
    """Output of one facet echo simulation.

    Component arrays carry the ``ScatteringComponent`` order on their
    last axis.

    Attributes
    ----------
    time : np.ndarray
        Time grid (s), shape ``(T,)``.
    look_indices : np.ndarray
        Beam look indices, shape ``(N_b,)``.
    beam_weights : np.ndarray
        Taper weight of each beam, shape ``(N_b,)``.
    antenna : AntennaGeometry
        Derived antenna and footprint constants.
    single_look : np.ndarray
        Weighted single-look power (W), shape ``(N_b, T)``.
    multilook : np.ndarray
        Multi-looked power (W), shape ``(T,)``.
    component_fractions : np.ndarray
        Share of each component in the single-look power, shape
        ``(N_b, T, 4)``.
    single_look_components : np.ndarray
        Single-look power per component (W), shape ``(N_b, T, 4)``.
    multilook_components : np.ndarray
        Multi-looked power per component (W), shape ``(T, 4)``.
    """

    time: np.ndarray = field(repr=False)
    look_indices: np.ndarray = field(repr=False)
    beam_weights: np.ndarray = field(repr=False)
    antenna: AntennaGeometry
    single_look: np.ndarray = field(repr=False)
    multilook: np.ndarray = field(repr=False)
    component_fractions: np.ndarray = field(repr=False)
    single_look_components: np.ndarray = field(repr=False)
    multilook_components: np.ndarray = field(repr=False)

    @property
    def n_beams(self) -> int:
        """Number of beams."""
        return int(self.single_look.shape[0])

    @property
    def n_samples(self) -> int:
        """Number of time samples."""
        return int(self.time.size)

    def component(self, component: ScatteringComponent) -> np.ndarray:
        """Multi-looked waveform of one component, shape ``(T,)``."""
        return self.multilook_components[:, _COMPONENT_AXIS[ScatteringComponent(component)]]

    def single_look_component(self, component: ScatteringComponent) -> np.ndarray:
        """Single-look waveforms of one component, shape ``(N_b, T)``."""
        return self.single_look_components[..., _COMPONENT_AXIS[ScatteringComponent(component)]]

    def __repr__(self) -> str:
        return (f"EchoResult(n_beams={self.n_beams}, "
                f"n_samples={self.n_samples}, "
                f"peak_power={float(np.max(self.multilook, initial=0.0)):.3e})")
