# -*- coding: utf-8 -*-
"""
Beam Look Geometry - Antenna-to-facet angles for one synthetic beam.

For each synthetic beam the antenna phase centre is displaced along track
by ``h m epsilon_b`` and both antenna coordinates by the pitch/roll
mis-pointing. Per facet this module then computes:

- the slant range (the sea-ice mesh applies an Earth-curvature correction
  to the horizontal separation; the snow mesh uses the plain Euclidean
  range),
- the elevation and azimuth of the facet seen from the antenna,
- the ground-referenced, mis-pointing-corrected off-boresight angles used
  by the real-aperture pattern (sea-ice mesh),
- the along-track look angle used by the synthetic beam (sea-ice mesh),
- the local incidence angle, from the dot product between the facet
  normal and a radar-view normal built from elevation and azimuth,
  clipped to ``pi / 2``.

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
from typing import NamedTuple, Tuple

# Third-party
import numpy as np

# Facet echo internal
from facetecho.constants import EARTH_RADIUS
from facetecho.geometry.mesh import FacetMesh


class FacetLook(NamedTuple):
    """Per-facet look angles of one mesh, seen from one beam position.

    Attributes
    ----------
    slant_range : np.ndarray
        Antenna-to-facet range (m).
    elevation : np.ndarray
        Facet elevation angle ``theta`` relative to nadir (rad).
    azimuth : np.ndarray
        Facet azimuth ``phi`` around nadir (rad).
    incidence : np.ndarray
        Local incidence angle in ``[0, pi/2]`` (rad).
    """

    slant_range: np.ndarray
    elevation: np.ndarray
    azimuth: np.ndarray
    incidence: np.ndarray


@dataclass(frozen=True)
class BeamGeometry:
    """Look geometry of both meshes for one synthetic beam.

    Attributes
    ----------
    look_index : float
        Beam look index ``m``.
    antenna_position : Tuple[float, float]
        Along- and across-track antenna position ``(x_0, y_0)`` (m).
    snow : FacetLook
        Snow-surface mesh geometry.
    ice : FacetLook
        Sea-ice mesh geometry.
    ground_off_boresight : np.ndarray
        Sea-ice facet angle off the mis-pointed boresight (rad).
    ground_azimuth : np.ndarray
        Sea-ice facet azimuth around the mis-pointed boresight (rad).
    look_angle : np.ndarray
        Along-track look angle of each sea-ice facet (rad).
    """

    look_index: float
    antenna_position: Tuple[float, float]
    snow: FacetLook = field(repr=False)
    ice: FacetLook = field(repr=False)
    ground_off_boresight: np.ndarray = field(repr=False)
    ground_azimuth: np.ndarray = field(repr=False)
    look_angle: np.ndarray = field(repr=False)


def antenna_position(
    look_index: float,
    altitude: float,
    beam_separation: float,
    pitch: float,
    roll: float,
) -> Tuple[float, float]:
    """Along- and across-track antenna position for beam *look_index*.

    Returns
    -------
    Tuple[float, float]
        ``(x_0, y_0)`` in metres.
    """
    x_0 = altitude * look_index * beam_separation + altitude * np.tan(pitch)
    y_0 = altitude * np.tan(roll)
    return float(x_0), float(y_0)


def incidence_angle(
    normals: np.ndarray,
    elevation: np.ndarray,
    azimuth: np.ndarray,
) -> np.ndarray:
    """Local incidence angle between facet normals and the radar view.

    The radar-view normal is
    ``(cos(phi) sin(theta), sin(phi) sin(theta), -cos(theta))`` and the
    incidence angle is ``pi - arccos(n . a / (|n| |a|))``, clipped to at
    most ``pi / 2``. Facets with a zero normal are given ``pi / 2``.

    Parameters
    ----------
    normals : np.ndarray
        Facet normals, shape ``(M, 3)``.
    elevation : np.ndarray
        Facet elevation angles ``theta``, shape ``(M,)``.
    azimuth : np.ndarray
        Facet azimuth angles ``phi``, shape ``(M,)``.

    Returns
    -------
    np.ndarray
        Incidence angles in ``[0, pi/2]``, shape ``(M,)``.
    """
    normals = np.asarray(normals, dtype=np.float64)
    view = np.stack((
        np.cos(azimuth) * np.cos(np.pi / 2 - elevation),
        np.sin(azimuth) * np.cos(np.pi / 2 - elevation),
        -np.sin(np.pi / 2 - elevation),
    ), axis=1)

    norm = np.linalg.norm(normals, axis=1) * np.linalg.norm(view, axis=1)
    flat = norm == 0.0
    cos_angle = np.einsum('ij,ij->i', normals, view) / np.where(flat, 1.0, norm)
    angle = np.pi - np.arccos(np.clip(cos_angle, -1.0, 1.0))
    angle[flat] = np.pi / 2
    return np.minimum(angle, np.pi / 2)


def _look_angles(
    centroids: np.ndarray,
    x_0: float,
    y_0: float,
    altitude: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """Elevation and azimuth of facet centroids seen from ``(x_0, y_0, h)``."""
    dx = centroids[:, 0] - x_0
    dy = centroids[:, 1] - y_0
    dz = centroids[:, 2] - altitude
    elevation = np.pi / 2 + np.arctan2(dz, np.sqrt(dx ** 2 + dy ** 2))
    azimuth = np.arctan2(dy, dx)
    return elevation, azimuth


def snow_look(
    mesh: FacetMesh,
    x_0: float,
    y_0: float,
    altitude: float,
) -> FacetLook:
    """Look geometry of the snow-surface mesh (no curvature correction)."""
    c = mesh.centroids
    elevation, azimuth = _look_angles(c, x_0, y_0, altitude)
    slant_range = np.sqrt(
        (c[:, 2] - altitude) ** 2 + (c[:, 0] - x_0) ** 2 + (c[:, 1] - y_0) ** 2
    )
    incidence = incidence_angle(mesh.normals, elevation, azimuth)
    return FacetLook(slant_range, elevation, azimuth, incidence)


def ice_look(
    mesh: FacetMesh,
    x_0: float,
    y_0: float,
    altitude: float,
) -> FacetLook:
    """Look geometry of the sea-ice mesh, with Earth-curvature slant range."""
    c = mesh.centroids
    elevation, azimuth = _look_angles(c, x_0, y_0, altitude)
    horizontal_sq = (c[:, 0] - x_0) ** 2 + (c[:, 1] - y_0) ** 2
    slant_range = np.sqrt(
        (c[:, 2] - altitude) ** 2 + horizontal_sq * (1.0 + altitude / EARTH_RADIUS)
    )
    incidence = incidence_angle(mesh.normals, elevation, azimuth)
    return FacetLook(slant_range, elevation, azimuth, incidence)


def compute_beam_geometry(
    snow_mesh: FacetMesh,
    ice_mesh: FacetMesh,
    look_index: float,
    altitude: float,
    beam_separation: float,
    pitch: float = 0.0,
    roll: float = 0.0,
) -> BeamGeometry:
    """Compute the look geometry of both meshes for one beam.

    Parameters
    ----------
    snow_mesh : FacetMesh
        Snow-surface mesh.
    ice_mesh : FacetMesh
        Sea-ice-surface mesh.
    look_index : float
        Beam look index ``m``.
    altitude : float
        Satellite altitude ``h`` (m).
    beam_separation : float
        Angular separation of synthetic beams ``epsilon_b`` (rad).
    pitch : float
        Antenna bench pitch (rad).
    roll : float
        Antenna bench roll (rad).

    Returns
    -------
    BeamGeometry
    """
    x_0, y_0 = antenna_position(look_index, altitude, beam_separation, pitch, roll)

    snow = snow_look(snow_mesh, x_0, y_0, altitude)
    ice = ice_look(ice_mesh, x_0, y_0, altitude)

    # Offsets from the mis-pointed boresight footprint
    c = ice_mesh.centroids
    dx_g = c[:, 0] - x_0 + altitude * np.tan(pitch)
    dy_g = c[:, 1] - y_0 + altitude * np.tan(roll)
    ground_off_boresight = np.pi / 2 + np.arctan2(
        c[:, 2] - ice.slant_range, np.sqrt(dx_g ** 2 + dy_g ** 2)
    )
    ground_azimuth = np.arctan2(dy_g, dx_g)

    # Beam steering follows the mis-pointing, so only pitch re-enters here
    look_angle = np.arctan(-dx_g / (c[:, 2] - altitude))

    return BeamGeometry(
        look_index=float(look_index),
        antenna_position=(x_0, y_0),
        snow=snow,
        ice=ice,
        ground_off_boresight=ground_off_boresight,
        ground_azimuth=ground_azimuth,
        look_angle=look_angle,
    )
