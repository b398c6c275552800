# -*- coding: utf-8 -*-
"""
Response Curves - Angle-dependent backscatter and transmission lookups.

Every angle-dependent quantity of the mixing model (backscattering
coefficients in dB, the air-snow transmission coefficient) is supplied
as a ``ResponseCurve``: an opaque object exposing a single
``evaluate(angle)`` operation. How a curve is fitted is the caller's
concern; this module ships the common constructions.

- ``TabulatedCurve`` -- PCHIP, cubic or Akima spline through tabulated
  samples (scipy.interpolate).
- ``ConstantCurve`` -- the same value at every angle.
- ``FunctionCurve`` -- wraps any vectorised callable.
- ``GaussianFacetCurve`` -- Giles et al. (2007) simplified surface
  scattering function ``exp(-(theta / phi)^2)`` expressed in dB.

Curves return NaN outside their domain unless built with
``clamp=True``, in which case angles are clipped to the domain first.

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
from abc import ABC, abstractmethod
from typing import Callable, Tuple

# Third-party
import numpy as np
from scipy.interpolate import Akima1DInterpolator, CubicSpline, PchipInterpolator

# Facet echo internal
from facetecho.exceptions import ValidationError

#: Incidence-angle domain of every curve (rad)
ANGLE_DOMAIN = (0.0, np.pi / 2)

_SPLINES = {
    'pchip': PchipInterpolator,
    'cubic': CubicSpline,
    'akima': Akima1DInterpolator,
}


class ResponseCurve(ABC):
    """Abstract angle -> value curve.

    Subclasses implement :meth:`_evaluate` on angles already inside
    ``domain``. The public :meth:`evaluate` handles clamping and NaN
    filling outside the domain.

    Parameters
    ----------
    domain : Tuple[float, float]
        Inclusive angle range over which the curve is defined (rad).
    clamp : bool
        If True, clip angles to ``domain`` instead of returning NaN.
    """

    def __init__(
        self,
        domain: Tuple[float, float] = ANGLE_DOMAIN,
        clamp: bool = False,
    ) -> None:
        lo, hi = float(domain[0]), float(domain[1])
        if not lo < hi:
            raise ValidationError(
                f"curve domain must be increasing, got ({lo}, {hi})"
            )
        self.domain = (lo, hi)
        self.clamp = clamp

    @abstractmethod
    def _evaluate(self, angle: np.ndarray) -> np.ndarray:
        """Evaluate the curve at in-domain *angle* values."""
        ...

    def evaluate(self, angle: np.ndarray) -> np.ndarray:
        """Evaluate the curve.

        Parameters
        ----------
        angle : np.ndarray
            Incidence angles (rad), any shape.

        Returns
        -------
        np.ndarray
            Curve values, same shape as *angle*. NaN outside ``domain``
            unless the curve clamps.
        """
        angle = np.asarray(angle, dtype=np.float64)
        lo, hi = self.domain
        if self.clamp:
            return np.asarray(self._evaluate(np.clip(angle, lo, hi)),
                              dtype=np.float64)

        inside = (angle >= lo) & (angle <= hi)
        out = np.full(angle.shape, np.nan)
        if np.any(inside):
            out[inside] = self._evaluate(angle[inside])
        return out

    def __call__(self, angle: np.ndarray) -> np.ndarray:
        return self.evaluate(angle)


class TabulatedCurve(ResponseCurve):
    """Spline through tabulated ``(angle, value)`` samples.

    The domain is the span of the tabulated angles.

    Parameters
    ----------
    angles : np.ndarray
        Sample angles (rad), strictly increasing, at least 2 samples.
    values : np.ndarray
        Sample values, same length as *angles*. May contain NaN only if
        the caller wants NaN returned there.
    kind : str
        ``'pchip'`` (default), ``'cubic'`` or ``'akima'``.
    clamp : bool
        Clip angles to the tabulated span instead of returning NaN.

    Raises
    ------
    ValidationError
        If the samples are malformed or *kind* is unknown.
    """

    def __init__(
        self,
        angles: np.ndarray,
        values: np.ndarray,
        kind: str = 'pchip',
        clamp: bool = False,
    ) -> None:
        angles = np.asarray(angles, dtype=np.float64)
        values = np.asarray(values, dtype=np.float64)
        if angles.ndim != 1 or angles.shape != values.shape:
            raise ValidationError(
                f"angles and values must be 1D of equal length, got "
                f"{angles.shape} and {values.shape}"
            )
        if angles.size < 2:
            raise ValidationError("a tabulated curve needs at least 2 samples")
        if np.any(np.diff(angles) <= 0):
            raise ValidationError("tabulated angles must be strictly increasing")
        if kind not in _SPLINES:
            raise ValidationError(
                f"unknown spline kind {kind!r}; expected one of {sorted(_SPLINES)}"
            )
        if kind == 'akima' and angles.size < 3:
            kind = 'pchip'

        super().__init__(domain=(angles[0], angles[-1]), clamp=clamp)
        self.kind = kind
        self.angles = angles
        self.values = values
        self._spline = _SPLINES[kind](angles, values, extrapolate=False)

    def _evaluate(self, angle: np.ndarray) -> np.ndarray:
        return self._spline(angle)

    def __repr__(self) -> str:
        return (f"TabulatedCurve(kind={self.kind!r}, n={self.angles.size}, "
                f"domain={self.domain}, clamp={self.clamp})")


class ConstantCurve(ResponseCurve):
    """Curve with the same value at every angle in the domain."""

    def __init__(self, value: float, clamp: bool = True) -> None:
        super().__init__(clamp=clamp)
        self.value = float(value)

    def _evaluate(self, angle: np.ndarray) -> np.ndarray:
        return np.full(np.shape(angle), self.value)

    def __repr__(self) -> str:
        return f"ConstantCurve({self.value!r})"


class FunctionCurve(ResponseCurve):
    """Wrap a vectorised callable ``f(angle) -> value``.

    Parameters
    ----------
    func : Callable[[np.ndarray], np.ndarray]
        Function evaluated on in-domain angles.
    domain : Tuple[float, float]
        Domain of *func* (rad). Default ``[0, pi/2]``.
    clamp : bool
        Clip angles to *domain* instead of returning NaN.
    """

    def __init__(
        self,
        func: Callable[[np.ndarray], np.ndarray],
        domain: Tuple[float, float] = ANGLE_DOMAIN,
        clamp: bool = False,
    ) -> None:
        if not callable(func):
            raise ValidationError(
                f"func must be callable, got {type(func).__name__}"
            )
        super().__init__(domain=domain, clamp=clamp)
        self.func = func

    def _evaluate(self, angle: np.ndarray) -> np.ndarray:
        return np.broadcast_to(self.func(angle), np.shape(angle))


class GaussianFacetCurve(ResponseCurve):
    """Simplified facet scattering function in dB.

    ``sigma0(theta) = exp(-(theta / phi)^2)``, returned as
    ``10 log10(sigma0)`` so that it can stand in for a tabulated dB
    curve.

    Parameters
    ----------
    polar_response : float
        Polar response angle ``phi`` (rad). Default 1 degree.
    """

    def __init__(self, polar_response: float = np.deg2rad(1.0)) -> None:
        if polar_response <= 0:
            raise ValidationError(
                f"polar_response must be positive, got {polar_response}"
            )
        super().__init__(clamp=True)
        self.polar_response = float(polar_response)

    def _evaluate(self, angle: np.ndarray) -> np.ndarray:
        return -10.0 / np.log(10.0) * (angle / self.polar_response) ** 2

    def __repr__(self) -> str:
        return f"GaussianFacetCurve(polar_response={self.polar_response!r})"


def as_curve(curve) -> ResponseCurve:
    """Return *curve* as a ``ResponseCurve``.

    Plain callables (for example a fitted ``scipy.interpolate.PPoly``)
    are wrapped in a ``FunctionCurve``; scalars become a
    ``ConstantCurve``.

    Raises
    ------
    ValidationError
        If *curve* is neither a curve, a callable, nor a real scalar.
    """
    if isinstance(curve, ResponseCurve):
        return curve
    if callable(curve):
        return FunctionCurve(curve)
    if isinstance(curve, (int, float)) and not isinstance(curve, bool):
        return ConstantCurve(curve)
    raise ValidationError(
        f"expected a ResponseCurve, callable or number, got "
        f"{type(curve).__name__}"
    )
