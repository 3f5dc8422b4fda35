"""Parameter schema types for serviceforge.

Defines the descriptor for a single declared service input:
- Parameter: immutable schema entry (name, acceptance, default)
- Param: class-body marker collected into a Parameter at class creation
"""

import types
from dataclasses import dataclass, field
from typing import Any, Callable, Union, get_args, get_origin

from serviceforge.errors import ParameterDeclarationError


class _Missing:
    """Sentinel for "no default declared" (None is a valid default)."""

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

# Acceptance: a type, a collection of types, or a predicate over the value
Acceptance = Union[type, tuple, list, set, frozenset, Callable[[Any], Any]]

VALID_OPTIONS = ("default",)


def check_options(options: dict[str, Any]) -> None:
    """Reject any declaration option other than ``default``."""
    invalid = sorted(set(options) - set(VALID_OPTIONS))
    if invalid:
        raise ParameterDeclarationError(
            f"Invalid keys: {invalid!r}. Valid keys are: "
            + ", ".join(VALID_OPTIONS)
        )


def _normalize_acceptance(acceptance: Acceptance) -> Acceptance:
    if isinstance(acceptance, types.UnionType) or get_origin(acceptance) is Union:
        acceptance = get_args(acceptance)
    if isinstance(acceptance, (tuple, list, set, frozenset)):
        members = tuple(type(None) if t is None else t for t in acceptance)
        for member in members:
            if not isinstance(member, type):
                raise ParameterDeclarationError(
                    f"Acceptance collections may only contain types, got {member!r}"
                )
        return members
    if acceptance is None:
        return type(None)
    if not isinstance(acceptance, type) and not callable(acceptance):
        raise ParameterDeclarationError(
            f"Acceptance must be a type, a collection of types or a callable, "
            f"got {acceptance!r}"
        )
    return acceptance


def is_producer(default: Any) -> bool:
    """A default is a producer if it is callable and not itself a class."""
    return callable(default) and not isinstance(default, type)


@dataclass(frozen=True, eq=False)
class Parameter:
    """Schema entry for one named service input.

    Attributes:
        name: Parameter name, unique within a service class
        acceptance: A type, a tuple of types, or a predicate callable
        default: Literal default, a producer called with the service
            instance, or MISSING when the parameter is required

    Entries compare and hash by name only, so a redeclaration with the same
    name replaces the inherited entry in a registry.
    """

    name: str
    acceptance: Acceptance = object
    default: Any = field(default=MISSING)

    def __post_init__(self) -> None:
        if not self.name.isidentifier():
            raise ParameterDeclarationError(
                f"Parameter name {self.name!r} is not a valid identifier"
            )
        object.__setattr__(self, "acceptance", _normalize_acceptance(self.acceptance))

    @classmethod
    def declare(
        cls, name: str, acceptance: Acceptance = object, **options: Any
    ) -> "Parameter":
        """Build a Parameter from declaration-style keyword options."""
        check_options(options)
        return cls(name=name, acceptance=acceptance, default=options.get("default", MISSING))

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    @property
    def required(self) -> bool:
        return not self.has_default

    @property
    def nullable(self) -> bool:
        """True when the declared default is None."""
        return self.has_default and self.default is None

    def is_acceptable(self, value: Any) -> bool:
        """Check a value against the acceptance rule.

        A None default makes the parameter accept None whatever its
        acceptance says.
        """
        if value is None and self.nullable:
            return True
        acceptance = self.acceptance
        if isinstance(acceptance, tuple):
            return any(isinstance(value, t) for t in acceptance)
        if isinstance(acceptance, type):
            return isinstance(value, acceptance)
        return bool(acceptance(value))

    def resolve_default(self, instance: Any) -> Any:
        """Return the default, calling a producer with the service instance."""
        if is_producer(self.default):
            return self.default(instance)
        return self.default

    def describe_acceptance(self) -> str:
        acceptance = self.acceptance
        if isinstance(acceptance, tuple):
            return " or ".join(t.__name__ for t in acceptance)
        if isinstance(acceptance, type):
            return acceptance.__name__
        return getattr(acceptance, "__name__", repr(acceptance))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parameter):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


@dataclass(frozen=True, init=False)
class Param:
    """Class-body declaration of a parameter.

    Usage:
        class ComplexCalculation(Service):
            start_number = Param(int)
            end_number = Param(int, default=2)
            tags = Param(list, default=lambda svc: [])

    The attribute name becomes the parameter name. Markers are removed from
    the class namespace and declared on the class's ParameterRegistry in
    definition order.

    A literal default is the same object for every instance. Mutable
    defaults (lists, dicts, sets) must be given as a producer, as ``tags``
    is above, or instances will share them.
    """

    acceptance: Acceptance
    default: Any

    def __init__(self, acceptance: Acceptance = object, **options: Any):
        check_options(options)
        object.__setattr__(self, "acceptance", acceptance)
        object.__setattr__(self, "default", options.get("default", MISSING))

    def to_parameter(self, name: str) -> Parameter:
        return Parameter(name=name, acceptance=self.acceptance, default=self.default)
