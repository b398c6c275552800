# -*- coding: utf-8 -*-
"""
Facet Mesh - Triangulated surface geometry for the snow and sea-ice layers.

Converts raw surface point clouds into facet geometry: a planar Delaunay
triangulation of the ``(x, y)`` projection, and per-facet unit normals,
centroids and areas from the standard cross-product construction. Each
facet of the sea-ice mesh inherits its surface-type label from the first
listed vertex of its triangle.

Exactly degenerate (zero-area) triangles are kept in place so that facet
ordering lines up across every per-facet array; they carry a zero normal
and zero area and contribute nothing downstream.

Dependencies
------------
scipy

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
import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

# Third-party
import numpy as np
from scipy.spatial import Delaunay, QhullError

# Facet echo internal
from facetecho.exceptions import ValidationError
from facetecho.vocabulary import SurfaceType

logger = logging.getLogger(__name__)

# Cross-product magnitudes below this fraction of the squared mesh extent
# are treated as exactly degenerate
_DEGENERATE_TOL = 1e-14


def _validate_points(points: np.ndarray, name: str) -> np.ndarray:
    """Check *points* is a finite ``(N, 3)`` array with ``N >= 3``."""
    points = np.asarray(points, dtype=np.float64)
    if points.ndim != 2 or points.shape[1] != 3:
        raise ValidationError(
            f"{name} must have shape (N, 3), got {points.shape}"
        )
    if points.shape[0] < 3:
        raise ValidationError(
            f"{name} needs at least 3 points to triangulate, "
            f"got {points.shape[0]}"
        )
    if not np.all(np.isfinite(points)):
        raise ValidationError(f"{name} contains non-finite coordinates")
    return points


def triangulate(points: np.ndarray) -> np.ndarray:
    """Delaunay-triangulate the planar ``(x, y)`` projection of *points*.

    Parameters
    ----------
    points : np.ndarray
        Vertex positions, shape ``(N, 3)``.

    Returns
    -------
    np.ndarray
        Triangle vertex indices, shape ``(M, 3)``, dtype ``int64``.

    Raises
    ------
    ValidationError
        If *points* is malformed or its projection cannot be triangulated
        (e.g. all points collinear).
    """
    points = _validate_points(points, 'points')
    try:
        tri = Delaunay(points[:, :2])
    except QhullError as exc:
        raise ValidationError(
            f"point cloud cannot be triangulated: {exc}"
        ) from exc
    return np.asarray(tri.simplices, dtype=np.int64)


def _cross_products(points: np.ndarray, triangles: np.ndarray) -> np.ndarray:
    p0 = points[triangles[:, 0]]
    p1 = points[triangles[:, 1]]
    p2 = points[triangles[:, 2]]
    return np.cross(p1 - p0, p2 - p0)


def _degenerate_mask(points: np.ndarray, magnitude: np.ndarray) -> np.ndarray:
    extent = np.ptp(points, axis=0).max()
    return magnitude <= _DEGENERATE_TOL * max(extent, 1.0) ** 2


def facet_normals(
    points: np.ndarray,
    triangles: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray]:
    """Compute upward unit normals and centroids of every facet.

    Parameters
    ----------
    points : np.ndarray
        Vertex positions, shape ``(N, 3)``.
    triangles : np.ndarray
        Triangle vertex indices, shape ``(M, 3)``.

    Returns
    -------
    normals : np.ndarray
        Unit normals oriented toward ``+z``, shape ``(M, 3)``. Degenerate
        facets get a zero vector.
    centroids : np.ndarray
        Facet centroids, shape ``(M, 3)``.
    """
    points = np.asarray(points, dtype=np.float64)
    triangles = np.asarray(triangles, dtype=np.int64)

    cross = _cross_products(points, triangles)
    magnitude = np.linalg.norm(cross, axis=1)
    degenerate = _degenerate_mask(points, magnitude)

    safe = np.where(degenerate, 1.0, magnitude)
    normals = cross / safe[:, np.newaxis]
    normals[degenerate] = 0.0
    # Triangulation winding is arbitrary; orient every normal upward
    normals[normals[:, 2] < 0] *= -1.0

    centroids = points[triangles].mean(axis=1)
    return normals, centroids


def facet_areas(points: np.ndarray, triangles: np.ndarray) -> np.ndarray:
    """Compute the area of every facet.

    Parameters
    ----------
    points : np.ndarray
        Vertex positions, shape ``(N, 3)``.
    triangles : np.ndarray
        Triangle vertex indices, shape ``(M, 3)``.

    Returns
    -------
    np.ndarray
        Facet areas (m^2), shape ``(M,)``. Degenerate facets are 0.
    """
    points = np.asarray(points, dtype=np.float64)
    triangles = np.asarray(triangles, dtype=np.int64)
    magnitude = np.linalg.norm(_cross_products(points, triangles), axis=1)
    areas = magnitude / 2.0
    areas[_degenerate_mask(points, magnitude)] = 0.0
    return areas


@dataclass(frozen=True)
class FacetMesh:
    """Triangulated surface with derived per-facet geometry.

    All per-facet arrays share the facet ordering of ``triangles``.

    Attributes
    ----------
    vertices : np.ndarray
        Vertex positions, shape ``(N, 3)``.
    triangles : np.ndarray
        Triangle vertex indices, shape ``(M, 3)``.
    normals : np.ndarray
        Upward unit normals, shape ``(M, 3)``.
    centroids : np.ndarray
        Facet centroids, shape ``(M, 3)``.
    areas : np.ndarray
        Facet areas (m^2), shape ``(M,)``.
    surface_type : np.ndarray or None
        Per-facet ``SurfaceType`` labels, shape ``(M,)``. Only set on the
        sea-ice mesh.
    """

    vertices: np.ndarray = field(repr=False)
    triangles: np.ndarray = field(repr=False)
    normals: np.ndarray = field(repr=False)
    centroids: np.ndarray = field(repr=False)
    areas: np.ndarray = field(repr=False)
    surface_type: Optional[np.ndarray] = field(default=None, repr=False)

    @classmethod
    def from_points(
        cls,
        points: np.ndarray,
        vertex_labels: Optional[np.ndarray] = None,
    ) -> 'FacetMesh':
        """Triangulate *points* and derive the facet geometry.

        Parameters
        ----------
        points : np.ndarray
            Vertex positions, shape ``(N, 3)``.
        vertex_labels : np.ndarray, optional
            Per-vertex ``SurfaceType`` labels, shape ``(N,)``. Each facet
            takes the label of its triangle's first vertex.

        Returns
        -------
        FacetMesh

        Raises
        ------
        ValidationError
            If *points* or *vertex_labels* is malformed.
        """
        points = _validate_points(points, 'points')
        labels = None
        if vertex_labels is not None:
            labels = validate_surface_labels(vertex_labels, points.shape[0])

        triangles = triangulate(points)
        normals, centroids = facet_normals(points, triangles)
        areas = facet_areas(points, triangles)
        surface_type = labels[triangles[:, 0]] if labels is not None else None
        return cls(
            vertices=points,
            triangles=triangles,
            normals=normals,
            centroids=centroids,
            areas=areas,
            surface_type=surface_type,
        )

    @property
    def n_facets(self) -> int:
        """Number of facets."""
        return int(self.triangles.shape[0])

    @property
    def degenerate(self) -> np.ndarray:
        """Boolean mask of exactly degenerate facets."""
        return ~np.any(self.normals != 0.0, axis=1)

    def subset(self, index: Union[slice, np.ndarray]) -> 'FacetMesh':
        """Return the facets selected by *index*, sharing ``vertices``."""
        return FacetMesh(
            vertices=self.vertices,
            triangles=self.triangles[index],
            normals=self.normals[index],
            centroids=self.centroids[index],
            areas=self.areas[index],
            surface_type=(None if self.surface_type is None
                          else self.surface_type[index]),
        )


def validate_surface_labels(labels: np.ndarray, n_points: int) -> np.ndarray:
    """Check per-vertex surface-type labels against the point count.

    Raises
    ------
    ValidationError
        If the length differs from *n_points* or a label is not a
        ``SurfaceType`` value.
    """
    labels = np.asarray(labels)
    if labels.ndim != 1 or labels.shape[0] != n_points:
        raise ValidationError(
            f"surface_type must have shape ({n_points},) to match the "
            f"ice point cloud, got {labels.shape}"
        )
    valid = [t.value for t in SurfaceType]
    unknown = np.setdiff1d(np.unique(labels), valid)
    if unknown.size:
        raise ValidationError(
            f"unknown surface_type labels {unknown.tolist()}; "
            f"expected values in {valid}"
        )
    return labels.astype(np.int64)


def prepare_meshes(
    snow_points: np.ndarray,
    ice_points: np.ndarray,
    surface_type: np.ndarray,
) -> Tuple[FacetMesh, FacetMesh]:
    """Build the snow-surface and sea-ice-surface facet meshes.

    Parameters
    ----------
    snow_points : np.ndarray
        Snow-surface vertex positions, shape ``(Ns, 3)``.
    ice_points : np.ndarray
        Sea-ice-surface vertex positions, shape ``(Ni, 3)``.
    surface_type : np.ndarray
        Per-ice-vertex ``SurfaceType`` labels, shape ``(Ni,)``.

    Returns
    -------
    snow_mesh, ice_mesh : FacetMesh

    Raises
    ------
    ValidationError
        If either point cloud or the labels are malformed, or the two
        meshes do not have the same number of facets.
    """
    snow_mesh = FacetMesh.from_points(snow_points)
    ice_mesh = FacetMesh.from_points(ice_points, vertex_labels=surface_type)

    if snow_mesh.n_facets != ice_mesh.n_facets:
        raise ValidationError(
            f"snow mesh has {snow_mesh.n_facets} facets but ice mesh has "
            f"{ice_mesh.n_facets}; both layers must share one triangulation"
        )

    n_degenerate = int(ice_mesh.degenerate.sum() + snow_mesh.degenerate.sum())
    if n_degenerate:
        logger.warning(
            "%d degenerate facets will contribute no power", n_degenerate
        )
    counts = np.bincount(ice_mesh.surface_type, minlength=len(SurfaceType))
    logger.debug(
        "Prepared meshes: %d facets (%s)",
        ice_mesh.n_facets,
        ', '.join(f"{t.name.lower()}={counts[t.value]}" for t in SurfaceType),
    )
    return snow_mesh, ice_mesh
