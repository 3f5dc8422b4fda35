"""Parameter registry for serviceforge.

Each Service subclass owns one ParameterRegistry. A registry holds the
parameters declared on its own class and links to the registry of the
parent service class; the effective parameter set is the parent's effective
set with this class's declarations applied on top.
"""

import logging
from typing import Any, Iterator

from serviceforge.errors import RegistrySealedError
from serviceforge.parameters.types import Acceptance, Parameter

logger = logging.getLogger(__name__)

MUTABLE_DEFAULT_TYPES = (list, dict, set, bytearray)


class ParameterRegistry:
    """Ordered, name-keyed collection of Parameter entries for one class.

    Redeclaring a name replaces the existing entry and moves it to the end
    of the order. Once sealed (at first instantiation of the owning class)
    the registry rejects further declarations.

    Example:
        registry = ParameterRegistry("ComplexCalculation")
        registry.declare("start_number", int)
        registry.declare("end_number", int, default=2)
        registry.names()  # ["start_number", "end_number"]
    """

    def __init__(self, owner: str, parent: "ParameterRegistry | None" = None):
        self.owner = owner
        self.parent = parent
        self._own: dict[str, Parameter] = {}
        self._sealed = False
        self._cache: dict[str, Parameter] | None = None

    def declare(
        self, name: str, acceptance: Acceptance = object, **options: Any
    ) -> Parameter:
        """Declare a parameter on this registry.

        Args:
            name: Parameter name
            acceptance: A type, a collection of types, or a predicate
            **options: Only ``default`` is recognized

        Returns:
            The new Parameter entry

        Raises:
            ParameterDeclarationError: On unknown options
            RegistrySealedError: If the registry has been sealed
        """
        return self.add(Parameter.declare(name, acceptance, **options))

    def add(self, parameter: Parameter) -> Parameter:
        """Add a prebuilt Parameter, replacing any entry with the same name."""
        if self._sealed:
            raise RegistrySealedError(
                f"Cannot declare parameter '{parameter.name}' on {self.owner}: "
                "parameters are sealed once the service has been instantiated"
            )
        if parameter.name in self._own:
            logger.debug("Redeclaring parameter '%s' on %s", parameter.name, self.owner)
            del self._own[parameter.name]
        elif self.parent is not None and parameter.name in self.parent:
            logger.debug(
                "Parameter '%s' on %s overrides inherited declaration",
                parameter.name,
                self.owner,
            )
        if isinstance(parameter.default, MUTABLE_DEFAULT_TYPES):
            logger.warning(
                "Parameter '%s' on %s has a mutable %s default shared by every "
                "instance; use a producer such as `default=lambda svc: ...` instead",
                parameter.name,
                self.owner,
                type(parameter.default).__name__,
            )
        self._own[parameter.name] = parameter
        return parameter

    def _effective(self) -> dict[str, Parameter]:
        if self._cache is not None:
            return self._cache
        merged: dict[str, Parameter] = {}
        if self.parent is not None:
            merged.update(self.parent._effective())
        for name, parameter in self._own.items():
            merged.pop(name, None)
            merged[name] = parameter
        if self._sealed:
            self._cache = merged
        return merged

    def entries(self) -> list[Parameter]:
        """Effective parameters: inherited first, redeclarations moved last."""
        return list(self._effective().values())

    def own_entries(self) -> list[Parameter]:
        """Parameters declared directly on the owning class."""
        return list(self._own.values())

    def names(self) -> list[str]:
        return list(self._effective().keys())

    def get(self, name: str) -> Parameter | None:
        return self._effective().get(name)

    def required(self) -> list[Parameter]:
        """Parameters declared without a default."""
        return [p for p in self.entries() if p.required]

    def seal(self) -> None:
        """Seal this registry and all ancestors against new declarations.

        Idempotent.
        """
        if self._sealed:
            return
        if self.parent is not None:
            self.parent.seal()
        self._sealed = True
        logger.debug("Sealed parameter registry for %s", self.owner)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def __contains__(self, name: object) -> bool:
        return name in self._effective()

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._effective())

    def __repr__(self) -> str:
        return f"ParameterRegistry({self.owner!r}, {self.names()!r})"
