# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for the facet echo model.

Defines the controlled vocabularies shared by configuration, mesh
preparation, the backscatter mixing model, and the result objects:
operating modes, beam weighting tapers, surface-type labels, and
scattering components.

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

from enum import Enum, IntEnum


class OperatingMode(Enum):
    """Altimeter operating mode.

    ``PULSE_LIMITED`` collapses the synthetic aperture to a single look;
    ``SAR`` forms ``n_beams`` Doppler beams.
    """

    PULSE_LIMITED = "pulse_limited"
    SAR = "sar"


class BeamWeighting(Enum):
    """Taper applied across the synthetic-aperture beams before stacking."""

    RECTANGULAR = "rectangular"
    HAMMING = "hamming"
    HANNING = "hanning"
    TAYLOR = "taylor"


class SurfaceType(IntEnum):
    """Surface-type labels attached to sea-ice mesh vertices.

    The integer values are the labels expected in the input label array.
    """

    LEAD = 0
    SEA_ICE = 1
    MELT_POND = 2


class ScatteringComponent(Enum):
    """Backscatter components tracked through the radar equation.

    Declaration order fixes the position of each component along the
    last axis of component arrays.
    """

    SNOW_SURFACE = "snow_surface"
    SNOW_VOLUME = "snow_volume"
    ICE_SURFACE = "ice_surface"
    WATER = "water"
