# -*- coding: utf-8 -*-
"""
Model Configuration - Radar/orbit and snowpack parameter sets.

Declares the scalar inputs of the facet echo model as ``ParameterSet``
subclasses with ``Annotated`` range constraints, and loads them from YAML
documents of the form::

    radar:
      wavelength: 0.0221
      bandwidth: 3.2e+8
      ...
    snow:
      depth: 0.2
      ...

Bundled presets live in the package ``presets/`` directory and are
loaded by name with :func:`load_preset`.

Dependencies
------------
pyyaml

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
from pathlib import Path
from typing import Annotated, Any, List, Mapping, Tuple, Union

# Third-party
import yaml

# Facet echo internal
from facetecho.exceptions import ValidationError
from facetecho.params import Desc, ParameterSet, Range
from facetecho.vocabulary import BeamWeighting, OperatingMode

logger = logging.getLogger(__name__)

PRESET_DIR = Path(__file__).parent / "presets"


class RadarParameters(ParameterSet):
    """Radar, antenna and orbit parameters.

    Defaults describe CryoSat-2 SIRAL in SAR mode. ``peak_gain`` and
    ``synthetic_gain`` are linear factors, not decibels.

    Raises
    ------
    ValidationError
        If any value is out of range, or if ``mode`` is pulse-limited
        while ``n_beams`` is not 1.
    """

    wavelength: Annotated[float, Range(min=1e-4, max=1.0),
                          Desc('Radar wavelength (m)')] = 0.0221
    bandwidth: Annotated[float, Range(min=1.0),
                         Desc('Pulse bandwidth (Hz)')] = 320.0e6
    transmit_power: Annotated[float, Range(min=0.0),
                              Desc('Transmitted peak power (W)')] = 2.188e-5
    altitude: Annotated[float, Range(min=1.0),
                        Desc('Satellite altitude (m)')] = 720.0e3
    velocity: Annotated[float, Range(min=1.0),
                        Desc('Satellite ground velocity (m/s)')] = 7500.0
    pitch: Annotated[float, Range(min=-0.1, max=0.1),
                     Desc('Antenna bench pitch, counterclockwise (rad)')] = 0.0
    roll: Annotated[float, Range(min=-0.1, max=0.1),
                    Desc('Antenna bench roll, counterclockwise (rad)')] = 0.0
    prf: Annotated[float, Range(min=1.0),
                   Desc('Pulse repetition frequency (Hz)')] = 18181.8
    peak_gain: Annotated[float, Range(min=0.0),
                         Desc('Peak antenna gain G_0 (linear)')] = 18197.0
    synthetic_gain: Annotated[float, Range(min=0.0),
                              Desc('Peak synthetic beam gain D_0 (linear)')] = 1.0
    gamma1: Annotated[float, Range(min=1e-6),
                      Desc('Along-track antenna pattern width (rad)')] = 0.0116
    gamma2: Annotated[float, Range(min=1e-6),
                      Desc('Across-track antenna pattern width (rad)')] = 0.0129
    n_beams: Annotated[int, Range(min=1, max=4096),
                       Desc('Beams in the synthetic aperture')] = 64
    mode: Annotated[OperatingMode, Desc('Operating mode')] = OperatingMode.SAR
    beam_weighting: Annotated[BeamWeighting,
                              Desc('Beam weighting taper')] = BeamWeighting.HAMMING

    def __post_init__(self) -> None:
        if self.mode is OperatingMode.PULSE_LIMITED and self.n_beams != 1:
            raise ValidationError(
                f"pulse-limited mode requires n_beams=1, got {self.n_beams}"
            )


class SnowParameters(ParameterSet):
    """Snowpack parameters.

    A ``depth`` of zero removes the snow-surface and snow-volume
    components and the extinction of the ice-surface return; the
    air-snow transmission term still applies.
    """

    depth: Annotated[float, Range(min=0.0, max=10.0),
                     Desc('Snow depth (m)')] = 0.0
    wave_speed: Annotated[float, Range(min=1.0e7, max=299792458.0),
                          Desc('Speed of light in the snowpack (m/s)')] = 2.43e8
    extinction: Annotated[float, Range(min=0.0),
                          Desc('Snow volume extinction coefficient (Np/m)')] = 0.1

    @property
    def two_way_delay(self) -> float:
        """Two-way travel time through the snowpack (s)."""
        return 2.0 * self.depth / self.wave_speed


# ===================================================================
# Loading
# ===================================================================

def parameters_from_dict(
    document: Mapping[str, Any],
) -> Tuple[RadarParameters, SnowParameters]:
    """Build radar and snow parameters from a parsed configuration.

    Parameters
    ----------
    document : Mapping[str, Any]
        Mapping with optional ``radar`` and ``snow`` sub-mappings.

    Returns
    -------
    Tuple[RadarParameters, SnowParameters]

    Raises
    ------
    ValidationError
        If the document has unknown sections, or a section holds unknown
        keys or invalid values.
    """
    if not isinstance(document, Mapping):
        raise ValidationError(
            f"configuration must be a mapping, got {type(document).__name__}"
        )
    unknown = set(document) - {'radar', 'snow'}
    if unknown:
        raise ValidationError(
            f"Unknown configuration sections: {', '.join(sorted(unknown))}"
        )
    radar = RadarParameters.from_dict(document.get('radar') or {})
    snow = SnowParameters.from_dict(document.get('snow') or {})
    return radar, snow


def load_parameters(
    path: Union[str, Path],
) -> Tuple[RadarParameters, SnowParameters]:
    """Load radar and snow parameters from a YAML file.

    Parameters
    ----------
    path : str or Path
        YAML document with ``radar`` and ``snow`` mappings.

    Returns
    -------
    Tuple[RadarParameters, SnowParameters]

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ValidationError
        If the document content is invalid.
    """
    path = Path(path)
    with open(path) as f:
        document = yaml.safe_load(f) or {}
    logger.debug("Loaded model configuration from %s", path)
    return parameters_from_dict(document)


def available_presets() -> List[str]:
    """Names of the bundled configuration presets."""
    return sorted(p.stem for p in PRESET_DIR.glob('*.yaml'))


def load_preset(name: str) -> Tuple[RadarParameters, SnowParameters]:
    """Load a bundled configuration preset by name.

    Parameters
    ----------
    name : str
        Preset name, e.g. ``'cryosat2'``. See :func:`available_presets`.

    Returns
    -------
    Tuple[RadarParameters, SnowParameters]

    Raises
    ------
    ValidationError
        If no preset called *name* exists.
    """
    path = PRESET_DIR / f"{name}.yaml"
    if not path.is_file():
        raise ValidationError(
            f"Unknown preset {name!r}; available: {available_presets()}"
        )
    return load_parameters(path)
