# -*- coding: utf-8 -*-
"""
Parameter Annotations - Declarative parameter constraints via typing.Annotated.

Provides the ``Range`` and ``Desc`` markers for use inside
``typing.Annotated`` annotations, the ``ParamSpec`` record resolved from
them, and the ``ParameterSet`` base class whose subclasses declare their
fields once and get a validating keyword-only ``__init__`` for free.

Usage
-----
Declare parameters as class-body annotations::

    from typing import Annotated
    from facetecho.params import ParameterSet, Range, Desc

    class PulseParameters(ParameterSet):
        bandwidth: Annotated[float, Range(min=1.0), Desc('Bandwidth (Hz)')] = 320e6

Enum-typed fields need no marker beyond ``Desc``; the enum itself is the
set of allowed values. Numeric fields accept any ``numbers.Real`` (or
``numbers.Integral`` for ``int`` fields), numpy scalars included, and
store them as plain ``float`` / ``int``. Instances are immutable once
constructed.

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
import inspect
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import (
    Annotated,
    Any,
    Dict,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    get_origin,
    get_type_hints,
)

# Facet echo internal
from facetecho.exceptions import ValidationError

P = TypeVar('P', bound='ParameterSet')

_NO_DEFAULT = object()


# =====================================================================
# Markers (used inside Annotated[...])
# =====================================================================

@dataclass(frozen=True)
class Range:
    """Inclusive numeric bounds; ``None`` leaves a side open."""

    min: Optional[float] = None
    max: Optional[float] = None


@dataclass(frozen=True)
class Desc:
    """Parameter description, including the physical unit."""

    text: str


# =====================================================================
# ParamSpec
# =====================================================================

@dataclass(frozen=True)
class ParamSpec:
    """Resolved declaration of one parameter.

    Attributes
    ----------
    name : str
        Keyword-argument name.
    param_type : type
        ``float``, ``int`` or an ``Enum`` subclass.
    default : Any
        Default value, or ``_NO_DEFAULT`` when the parameter is required.
    description : str
        Text of the ``Desc`` marker.
    min_value, max_value : float or None
        Inclusive bounds from the ``Range`` marker.
    """

    name: str
    param_type: type
    default: Any = _NO_DEFAULT
    description: str = ''
    min_value: Optional[float] = None
    max_value: Optional[float] = None

    @property
    def required(self) -> bool:
        """Whether the parameter has no default."""
        return self.default is _NO_DEFAULT

    @property
    def is_enum(self) -> bool:
        return issubclass(self.param_type, Enum)

    def coerce(self, value: Any) -> Any:
        """Convert a configuration value to the declared enum type.

        Enum parameters accept a member, a member value, or a member name
        (case-insensitive). Other values are returned unchanged.

        Raises
        ------
        ValidationError
            If an enum parameter receives an unknown value or name.
        """
        if not self.is_enum or isinstance(value, self.param_type):
            return value
        try:
            return self.param_type(value)
        except ValueError:
            pass
        try:
            return self.param_type[str(value).upper()]
        except KeyError:
            allowed = [m.value for m in self.param_type]
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} is not one of "
                f"{allowed!r}"
            ) from None

    def validate(self, value: Any) -> Any:
        """Check *value* against the declared type and bounds.

        Returns
        -------
        Any
            *value*, with numeric scalars normalised to ``float`` or
            ``int``.

        Raises
        ------
        TypeError
            If *value* has the wrong type. ``bool`` is never numeric.
        ValidationError
            If *value* is outside the ``Range``.
        """
        numeric = {float: numbers.Real, int: numbers.Integral}.get(
            self.param_type)
        if numeric is not None:
            if isinstance(value, bool) or not isinstance(value, numeric):
                raise TypeError(
                    f"Parameter '{self.name}' must be "
                    f"{self.param_type.__name__}, got {type(value).__name__}"
                )
            value = self.param_type(value)
        elif not isinstance(value, self.param_type):
            raise TypeError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got {type(value).__name__}"
            )

        if self.min_value is not None and value < self.min_value:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is below minimum {self.min_value!r}"
            )
        if self.max_value is not None and value > self.max_value:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )
        return value


def _resolve_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Read the ``Annotated`` fields of *cls*, base classes first."""
    hints = get_type_hints(cls, include_extras=True)
    names = dict.fromkeys(
        name
        for klass in reversed(cls.__mro__)
        for name in getattr(klass, '__annotations__', {})
        if name in hints and get_origin(hints[name]) is Annotated
    )

    specs = []
    for name in names:
        hint = hints[name]
        markers = hint.__metadata__
        desc = next((m for m in markers if isinstance(m, Desc)), None)
        bounds = next((m for m in markers if isinstance(m, Range)), None)
        if desc is None and bounds is None:
            continue
        specs.append(ParamSpec(
            name=name,
            param_type=hint.__args__[0],
            default=getattr(cls, name, _NO_DEFAULT),
            description=desc.text if desc else '',
            min_value=bounds.min if bounds else None,
            max_value=bounds.max if bounds else None,
        ))
    return tuple(specs)


def _build_init(specs: Tuple[ParamSpec, ...]):
    """Create a keyword-only, validating ``__init__`` for *specs*."""

    def __init__(self, **kwargs):
        unexpected = set(kwargs) - {s.name for s in specs}
        if unexpected:
            raise TypeError(
                f"{type(self).__name__}() got unexpected "
                f"keyword arguments: {', '.join(sorted(unexpected))}"
            )
        for spec in specs:
            value = kwargs.get(spec.name, spec.default)
            if value is _NO_DEFAULT:
                raise TypeError(
                    f"{type(self).__name__}() missing required "
                    f"keyword argument: '{spec.name}'"
                )
            object.__setattr__(self, spec.name, spec.validate(value))
        if hasattr(self, '__post_init__'):
            self.__post_init__()

    __init__.__signature__ = inspect.Signature(
        [inspect.Parameter('self', inspect.Parameter.POSITIONAL_OR_KEYWORD)]
        + [inspect.Parameter(
            s.name, inspect.Parameter.KEYWORD_ONLY,
            default=inspect.Parameter.empty if s.required else s.default)
           for s in specs]
    )
    return __init__


# =====================================================================
# ParameterSet
# =====================================================================

class ParameterSet:
    """Immutable, validated collection of declared parameters.

    Subclasses declare fields as ``Annotated`` class-body annotations.
    ``__init_subclass__`` resolves them into ``__param_specs__`` and
    generates a keyword-only ``__init__``. Attribute assignment after
    construction raises ``AttributeError``.
    """

    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = _resolve_specs(cls)
        if cls.__param_specs__ and '__init__' not in cls.__dict__:
            cls.__init__ = _build_init(cls.__param_specs__)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(
            f"{type(self).__name__} is immutable; use replace() to "
            f"derive a modified copy"
        )

    @classmethod
    def param_specs(cls) -> Dict[str, ParamSpec]:
        """Declared parameter specs keyed by name."""
        return {spec.name: spec for spec in cls.__param_specs__}

    @classmethod
    def from_dict(cls: type, mapping: Mapping[str, Any]) -> 'P':
        """Build a parameter set from a plain mapping.

        Parameters
        ----------
        mapping : Mapping[str, Any]
            Parameter values keyed by name, typically parsed from a
            configuration file. Missing keys take their defaults.

        Returns
        -------
        ParameterSet
            Validated instance of *cls*.

        Raises
        ------
        ValidationError
            If *mapping* contains unknown keys or invalid values.
        """
        specs = cls.param_specs()
        unknown = set(mapping) - set(specs)
        if unknown:
            raise ValidationError(
                f"Unknown {cls.__name__} keys: {', '.join(sorted(unknown))}"
            )
        values = {
            name: specs[name].coerce(value) for name, value in mapping.items()
        }
        try:
            return cls(**values)
        except TypeError as exc:
            raise ValidationError(str(exc)) from exc

    def to_dict(self) -> Dict[str, Any]:
        """Return parameter values keyed by name (enums as their values)."""
        out = {}
        for spec in self.__param_specs__:
            value = getattr(self, spec.name)
            out[spec.name] = value.value if isinstance(value, Enum) else value
        return out

    def replace(self: P, **changes: Any) -> P:
        """Return a copy with *changes* applied and re-validated."""
        values = self.to_dict()
        values.update(changes)
        return type(self).from_dict(values)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.to_dict().items())))

    def __repr__(self) -> str:
        body = ', '.join(
            f"{spec.name}={getattr(self, spec.name)!r}"
            for spec in self.__param_specs__
        )
        return f"{type(self).__name__}({body})"
