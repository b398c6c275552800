# -*- coding: utf-8 -*-
"""
Antenna - Footprint constants, gain patterns, and beam weighting.

- ``derive_antenna_geometry`` / ``AntennaGeometry`` -- frequency,
  wavenumber, pulse spacing, footprint sizes, beam separation and look
  indices derived from ``RadarParameters``.
- ``antenna_pattern_gain`` -- elliptical Gaussian real-aperture pattern.
- ``synthetic_beam_gain`` -- uniform ``N_b``-element array factor.
- ``beam_weights`` -- taper applied across beams before stacking.

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

from facetecho.antenna.footprint import AntennaGeometry, derive_antenna_geometry
from facetecho.antenna.gain import antenna_pattern_gain, synthetic_beam_gain
from facetecho.antenna.weighting import beam_weights

__all__ = [
    'AntennaGeometry',
    'derive_antenna_geometry',
    'antenna_pattern_gain',
    'synthetic_beam_gain',
    'beam_weights',
]
