# -*- coding: utf-8 -*-
"""
Scattering - Response curves and the backscatter mixing model.

- ``ResponseCurve`` and its constructions (``TabulatedCurve``,
  ``ConstantCurve``, ``FunctionCurve``, ``GaussianFacetCurve``).
- ``ScatteringSignatures`` -- the six curves of one scene.
- ``mix_backscatter`` / ``ScatteringComponents`` -- per-facet snow
  surface, snow volume, ice surface and water terms.

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

from facetecho.scattering.curves import (
    ConstantCurve,
    FunctionCurve,
    GaussianFacetCurve,
    ResponseCurve,
    TabulatedCurve,
    as_curve,
)
from facetecho.scattering.signatures import ScatteringSignatures
from facetecho.scattering.mixing import (
    ScatteringComponents,
    db_to_linear,
    mix_backscatter,
)

__all__ = [
    'ConstantCurve',
    'FunctionCurve',
    'GaussianFacetCurve',
    'ResponseCurve',
    'TabulatedCurve',
    'as_curve',
    'ScatteringSignatures',
    'ScatteringComponents',
    'db_to_linear',
    'mix_backscatter',
]
