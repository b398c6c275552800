# -*- coding: utf-8 -*-
"""
Scattering Signatures - The six response curves of the mixing model.

Bundles the five backscattering-coefficient curves (snow surface, snow
volume, sea-ice surface, lead surface, melt-pond surface; all in dB)
and the air-snow transmission coefficient curve (linear) into one
immutable object handed to the simulator.

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
from dataclasses import dataclass, fields

# Facet echo internal
from facetecho.scattering.curves import ResponseCurve, as_curve
from facetecho.vocabulary import SurfaceType


@dataclass(frozen=True)
class ScatteringSignatures:
    """Angle-dependent response curves of every surface.

    Any field may be given as a ``ResponseCurve``, a plain callable of
    incidence angle, or a constant; it is normalised to a
    ``ResponseCurve`` on construction.

    Attributes
    ----------
    snow_surface : ResponseCurve
        Snow-surface backscattering coefficient (dB).
    snow_volume : ResponseCurve
        Snow-volume backscattering coefficient (dB).
    ice_surface : ResponseCurve
        Sea-ice surface backscattering coefficient (dB).
    lead_surface : ResponseCurve
        Lead/open-ocean surface backscattering coefficient (dB).
    pond_surface : ResponseCurve
        Melt-pond surface backscattering coefficient (dB).
    snow_transmission : ResponseCurve
        One-way air-snow transmission coefficient (linear).
    """

    snow_surface: ResponseCurve
    snow_volume: ResponseCurve
    ice_surface: ResponseCurve
    lead_surface: ResponseCurve
    pond_surface: ResponseCurve
    snow_transmission: ResponseCurve

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, as_curve(getattr(self, f.name)))

    def water_curve(self, surface: SurfaceType) -> ResponseCurve:
        """Backscatter curve of a water surface type.

        Raises
        ------
        KeyError
            If *surface* is not a water surface (lead or melt pond).
        """
        return {
            SurfaceType.LEAD: self.lead_surface,
            SurfaceType.MELT_POND: self.pond_surface,
        }[SurfaceType(surface)]
