# -*- coding: utf-8 -*-
"""
Facet Echo Simulator - Orchestrates the per-beam loop and the stacking.

Pipeline
--------
1. Derive the antenna and footprint constants from ``RadarParameters``.
2. Triangulate the snow and sea-ice point clouds (or accept prepared
   meshes) and validate every input.
3. Partition the beams into blocks and simulate each block on a thread
   pool. A beam computes its look geometry, antenna and synthetic beam
   gains, pulse timing, backscatter components and radar equation,
   optionally over chunks of facets to bound its working set.
4. Write each block's rows into the output arrays and reduce over beams
   in beam order.

Beams share only read-only inputs; each block returns fresh arrays, so
the output is identical for any worker count or block size.

Example
-------
>>> radar, snow = load_preset('cryosat2')
>>> sim = FacetEchoSimulator(radar, snow, signatures, max_workers=4)
>>> result = sim.simulate(time, snow_points, ice_points, surface_type)
>>> result.multilook.shape
(256,)

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
import numbers
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Tuple

# Third-party
import numpy as np

# Facet echo internal
from facetecho.antenna import (
    AntennaGeometry,
    antenna_pattern_gain,
    beam_weights,
    derive_antenna_geometry,
    synthetic_beam_gain,
)
from facetecho.config import RadarParameters, SnowParameters
from facetecho.exceptions import SimulationError, ValidationError
from facetecho.geometry import FacetMesh, compute_beam_geometry, prepare_meshes
from facetecho.interpolation import Interpolator, LinearInterpolator
from facetecho.scattering import ScatteringSignatures, mix_backscatter
from facetecho.simulation.partition import BeamBlock, BeamPartitioner
from facetecho.simulation.pulse import delay_offsets, pulse_envelope
from facetecho.simulation.radar_equation import (
    SingleLookEcho,
    component_waveforms,
    facet_weights,
    radar_constant,
    single_look,
)
from facetecho.simulation.result import EchoResult
from facetecho.simulation.stacking import stack_components, stack_waveforms
from facetecho.vocabulary import ScatteringComponent

logger = logging.getLogger(__name__)

N_COMPONENTS = len(ScatteringComponent)


def validate_time_grid(time: np.ndarray) -> np.ndarray:
    """Check *time* is a finite, strictly increasing 1D grid of >= 2 samples.

    Raises
    ------
    ValidationError
        If the grid is malformed.
    """
    time = np.asarray(time, dtype=np.float64)
    if time.ndim != 1 or time.size < 2:
        raise ValidationError(
            f"time must be 1D with at least 2 samples, got shape {time.shape}"
        )
    if not np.all(np.isfinite(time)):
        raise ValidationError("time contains non-finite samples")
    if np.any(np.diff(time) <= 0):
        raise ValidationError("time must be strictly increasing")
    return time


def _optional_count(name: str, value: Optional[int]) -> Optional[int]:
    """Return *value* as a positive ``int``, or None when not given."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise ValidationError(f"{name} must be positive, got {value}")
    return int(value)


@dataclass(frozen=True)
class EchoScene:
    """Read-only inputs shared by every beam of one simulation.

    Attributes
    ----------
    radar : RadarParameters
    snow : SnowParameters
    signatures : ScatteringSignatures
    antenna : AntennaGeometry
    snow_mesh : FacetMesh
    ice_mesh : FacetMesh
    time : np.ndarray
        Time grid (s), shape ``(T,)``.
    interpolator : Interpolator
        Resampler for the snowpack delay.
    facet_chunk_size : int or None
        Facets processed together per beam; None processes all at once.
    """

    radar: RadarParameters
    snow: SnowParameters
    signatures: ScatteringSignatures
    antenna: AntennaGeometry
    snow_mesh: FacetMesh = field(repr=False)
    ice_mesh: FacetMesh = field(repr=False)
    time: np.ndarray = field(repr=False)
    interpolator: Interpolator = field(repr=False)
    facet_chunk_size: Optional[int] = None

    def __post_init__(self) -> None:
        if self.snow_mesh.n_facets == 0 or self.ice_mesh.n_facets == 0:
            raise ValidationError("meshes must contain at least one facet")
        if self.snow_mesh.n_facets != self.ice_mesh.n_facets:
            raise ValidationError(
                f"snow mesh has {self.snow_mesh.n_facets} facets but ice "
                f"mesh has {self.ice_mesh.n_facets}"
            )
        if self.ice_mesh.surface_type is None:
            raise ValidationError("ice mesh carries no surface-type labels")
        if self.antenna.n_beams != self.radar.n_beams:
            raise ValidationError(
                f"antenna geometry has {self.antenna.n_beams} beams, radar "
                f"parameters {self.radar.n_beams}"
            )
        object.__setattr__(self, 'facet_chunk_size', _optional_count(
            'facet_chunk_size', self.facet_chunk_size))
        object.__setattr__(self, 'time', validate_time_grid(self.time))

    @property
    def n_facets(self) -> int:
        """Number of facets per mesh."""
        return self.ice_mesh.n_facets

    def facet_chunks(self) -> Iterator[slice]:
        """Slices over the facet axis, one per chunk."""
        size = self.facet_chunk_size or self.n_facets
        for start in range(0, self.n_facets, size):
            yield slice(start, min(start + size, self.n_facets))


def simulate_beam(
    scene: EchoScene,
    look_index: float,
    beam_weight: float = 1.0,
) -> SingleLookEcho:
    """Simulate the weighted single-look echo of one beam.

    Parameters
    ----------
    scene : EchoScene
        Shared simulation inputs.
    look_index : float
        Beam look index ``m``.
    beam_weight : float
        Taper weight of the beam.

    Returns
    -------
    SingleLookEcho
    """
    radar = scene.radar
    antenna = scene.antenna

    geometry = compute_beam_geometry(
        scene.snow_mesh, scene.ice_mesh, look_index,
        altitude=radar.altitude,
        beam_separation=antenna.beam_separation,
        pitch=radar.pitch,
        roll=radar.roll,
    )
    gain = antenna_pattern_gain(
        geometry.ground_off_boresight, geometry.ground_azimuth,
        radar.peak_gain, radar.gamma1, radar.gamma2,
    )
    beam_gain = synthetic_beam_gain(
        geometry.look_angle, look_index, radar.n_beams,
        antenna.wavenumber, antenna.pulse_spacing, antenna.beam_separation,
        peak_gain=radar.synthetic_gain,
    )
    weights = facet_weights(
        gain, beam_gain, scene.ice_mesh.areas, geometry.ice.slant_range)
    constant = radar_constant(radar.wavelength, radar.transmit_power,
                              radar.altitude)
    x_0 = geometry.antenna_position[0]
    snow_degenerate = scene.snow_mesh.degenerate

    waveforms = np.zeros((scene.time.size, N_COMPONENTS))
    for chunk in scene.facet_chunks():
        offset = delay_offsets(scene.time, geometry.ice.slant_range[chunk],
                               radar.altitude, x_0)
        components = mix_backscatter(
            scene.signatures, scene.snow,
            envelope=pulse_envelope(offset, radar.bandwidth),
            delay_offset=offset,
            time=scene.time,
            snow_incidence=geometry.snow.incidence[chunk],
            ice_incidence=geometry.ice.incidence[chunk],
            surface_type=scene.ice_mesh.surface_type[chunk],
            interpolator=scene.interpolator,
            snow_degenerate=snow_degenerate[chunk],
        )
        waveforms += component_waveforms(components, weights[chunk], constant)
        del components, offset

    return single_look(waveforms, beam_weight)


def _simulate_block(
    scene: EchoScene,
    block: BeamBlock,
    look_indices: np.ndarray,
    weights: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray]:
    """Simulate the beams of *block*; returns power and fraction rows."""
    power = np.zeros((block.size, scene.time.size))
    fractions = np.zeros((block.size, scene.time.size, N_COMPONENTS))
    for row, beam in enumerate(range(block.start, block.end)):
        echo = simulate_beam(scene, look_indices[beam], weights[beam])
        power[row] = echo.power
        fractions[row] = echo.fractions
        logger.debug("Beam %d (m=%+.1f) done", beam, look_indices[beam])
    return power, fractions


class FacetEchoSimulator:
    """Facet-based radar altimeter echo simulator for snow-covered sea ice.

    Parameters
    ----------
    radar : RadarParameters
        Radar, antenna and orbit parameters.
    snow : SnowParameters
        Snowpack parameters.
    signatures : ScatteringSignatures
        Backscatter and transmission response curves.
    max_workers : int, optional
        Worker threads for the beam loop. ``1`` runs sequentially;
        ``None`` uses the ``ThreadPoolExecutor`` default.
    block_size : int, optional
        Beams per work block. Default splits the beams evenly across
        the workers.
    facet_chunk_size : int, optional
        Facets processed together inside one beam. Default processes
        every facet at once.
    interpolator : Interpolator, optional
        Resampler for the snowpack delay. Default
        ``LinearInterpolator(fill_value=0.0)``.

    Raises
    ------
    ValidationError
        If a parameter object has the wrong type or a worker setting is
        not positive.
    """

    def __init__(
        self,
        radar: RadarParameters,
        snow: SnowParameters,
        signatures: ScatteringSignatures,
        max_workers: Optional[int] = None,
        block_size: Optional[int] = None,
        facet_chunk_size: Optional[int] = None,
        interpolator: Optional[Interpolator] = None,
    ) -> None:
        if not isinstance(radar, RadarParameters):
            raise ValidationError(
                f"radar must be RadarParameters, got {type(radar).__name__}"
            )
        if not isinstance(snow, SnowParameters):
            raise ValidationError(
                f"snow must be SnowParameters, got {type(snow).__name__}"
            )
        if not isinstance(signatures, ScatteringSignatures):
            raise ValidationError(
                f"signatures must be ScatteringSignatures, got "
                f"{type(signatures).__name__}"
            )
        self.radar = radar
        self.snow = snow
        self.signatures = signatures
        self.max_workers = _optional_count('max_workers', max_workers)
        self.block_size = _optional_count('block_size', block_size)
        self.facet_chunk_size = _optional_count('facet_chunk_size',
                                                facet_chunk_size)
        self.interpolator = interpolator or LinearInterpolator(fill_value=0.0)
        self.antenna = derive_antenna_geometry(radar)

    @property
    def n_workers(self) -> int:
        """Number of worker threads the beam loop uses."""
        if self.max_workers is not None:
            return self.max_workers
        return min(32, (os.cpu_count() or 1) + 4)

    def simulate(
        self,
        time: np.ndarray,
        snow_points: np.ndarray,
        ice_points: np.ndarray,
        surface_type: np.ndarray,
        progress_callback: Optional[Callable[[float], None]] = None,
    ) -> EchoResult:
        """Triangulate the point clouds and simulate the echo.

        Parameters
        ----------
        time : np.ndarray
            Time grid (s), shape ``(T,)``.
        snow_points : np.ndarray
            Snow-surface vertices, shape ``(Ns, 3)``.
        ice_points : np.ndarray
            Sea-ice-surface vertices, shape ``(Ni, 3)``.
        surface_type : np.ndarray
            Per-ice-vertex ``SurfaceType`` labels, shape ``(Ni,)``.
        progress_callback : callable, optional
            Called with the completed fraction after each beam block.

        Returns
        -------
        EchoResult

        Raises
        ------
        ValidationError
            If any input is malformed.
        SimulationError
            If a beam worker fails.
        """
        snow_mesh, ice_mesh = prepare_meshes(snow_points, ice_points,
                                             surface_type)
        return self.run(time, snow_mesh, ice_mesh,
                        progress_callback=progress_callback)

    def run(
        self,
        time: np.ndarray,
        snow_mesh: FacetMesh,
        ice_mesh: FacetMesh,
        progress_callback: Optional[Callable[[float], None]] = None,
    ) -> EchoResult:
        """Simulate the echo over prepared facet meshes.

        See :meth:`simulate` for parameters.
        """
        scene = EchoScene(
            radar=self.radar,
            snow=self.snow,
            signatures=self.signatures,
            antenna=self.antenna,
            snow_mesh=snow_mesh,
            ice_mesh=ice_mesh,
            time=time,
            interpolator=self.interpolator,
            facet_chunk_size=self.facet_chunk_size,
        )
        look_indices = self.antenna.look_indices
        weights = beam_weights(self.radar.n_beams, self.radar.beam_weighting,
                               self.radar.mode)

        workers = min(self.n_workers, self.radar.n_beams)
        if self.block_size is not None:
            partitioner = BeamPartitioner(self.radar.n_beams,
                                          block_size=self.block_size)
        else:
            partitioner = BeamPartitioner(self.radar.n_beams, n_blocks=workers)
        blocks = partitioner.blocks()

        logger.info(
            "Simulating %d beams x %d facets x %d samples on %d worker(s)",
            self.radar.n_beams, scene.n_facets, scene.time.size, workers,
        )

        n_samples = scene.time.size
        power = np.zeros((self.radar.n_beams, n_samples))
        fractions = np.zeros((self.radar.n_beams, n_samples, N_COMPONENTS))

        def _store(block: BeamBlock, rows: Tuple[np.ndarray, np.ndarray],
                   done: int) -> None:
            power[block.slice], fractions[block.slice] = rows
            if progress_callback is not None:
                progress_callback(done / len(blocks))

        if workers == 1:
            for done, block in enumerate(blocks, start=1):
                try:
                    rows = _simulate_block(scene, block, look_indices, weights)
                except Exception as exc:
                    raise SimulationError(
                        f"beams {block.start}-{block.end - 1} failed: {exc}"
                    ) from exc
                _store(block, rows, done)
        else:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                futures = {
                    pool.submit(_simulate_block, scene, block, look_indices,
                                weights): block
                    for block in blocks
                }
                for done, future in enumerate(as_completed(futures), start=1):
                    block = futures[future]
                    try:
                        rows = future.result()
                    except Exception as exc:
                        for pending in futures:
                            pending.cancel()
                        raise SimulationError(
                            f"beams {block.start}-{block.end - 1} failed: {exc}"
                        ) from exc
                    _store(block, rows, done)

        multilook = stack_waveforms(power)
        per_beam_components, multilook_components = stack_components(
            power, fractions)

        logger.info("Simulation complete: peak multi-look power %.3e W",
                    float(np.max(multilook, initial=0.0)))

        return EchoResult(
            time=scene.time,
            look_indices=look_indices,
            beam_weights=weights,
            antenna=self.antenna,
            single_look=power,
            multilook=multilook,
            component_fractions=fractions,
            single_look_components=per_beam_components,
            multilook_components=multilook_components,
        )


def simulate_echo(
    radar: RadarParameters,
    snow: SnowParameters,
    signatures: ScatteringSignatures,
    time: np.ndarray,
    snow_points: np.ndarray,
    ice_points: np.ndarray,
    surface_type: np.ndarray,
    max_workers: Optional[int] = None,
    progress_callback: Optional[Callable[[float], None]] = None,
) -> EchoResult:
    """Run one facet echo simulation with default scheduling.

    Convenience wrapper around :class:`FacetEchoSimulator`.
    """
    simulator = FacetEchoSimulator(radar, snow, signatures,
                                   max_workers=max_workers)
    return simulator.simulate(time, snow_points, ice_points, surface_type,
                              progress_callback=progress_callback)
