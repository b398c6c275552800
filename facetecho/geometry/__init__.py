# -*- coding: utf-8 -*-
"""
Geometry - Facet meshes and per-beam look geometry.

- ``FacetMesh`` / ``prepare_meshes`` -- triangulation, normals,
  centroids, areas and surface-type labels of the snow and sea-ice
  surfaces.
- ``compute_beam_geometry`` / ``BeamGeometry`` -- slant ranges, look
  angles and incidence angles of both meshes for one synthetic beam.

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

from facetecho.geometry.mesh import (
    FacetMesh,
    facet_areas,
    facet_normals,
    prepare_meshes,
    triangulate,
)
from facetecho.geometry.look import (
    BeamGeometry,
    FacetLook,
    antenna_position,
    compute_beam_geometry,
    incidence_angle,
)

__all__ = [
    'FacetMesh',
    'facet_areas',
    'facet_normals',
    'prepare_meshes',
    'triangulate',
    'BeamGeometry',
    'FacetLook',
    'antenna_position',
    'compute_beam_geometry',
    'incidence_angle',
]
