"""Service base class: declarative parameters, before hooks and invocation.

Usage:
    class ComplexCalculation(Service):
        start_number = Param(int)
        end_number = Param(int, default=2)

        def perform(self):
            self._magic_number = 42
            return self.start_number + self.end_number + self._magic_number

    ComplexCalculation.call(start_number=1, end_number=3)  # 46
    ComplexCalculation.call(start_number=1)  # 45
    ComplexCalculation.call(end_number=3)  # raises ParameterRequired

    calculation = ComplexCalculation(end_number=3)
    calculation.start_number = 1
    calculation.run()  # 46
"""

import logging
from typing import Any, ClassVar

from serviceforge.core.types import LifecycleState
from serviceforge.errors import (
    BodyNotImplemented,
    InvalidParameterValue,
    ParameterDeclarationError,
    ParameterRequired,
    UnknownParameter,
)
from serviceforge.hooks import HookAction, HookChain, HookRef, HookService, is_before_hook
from serviceforge.parameters import Acceptance, Param, Parameter, ParameterRegistry

logger = logging.getLogger(__name__)

# Per-instance attributes set in Service.__init__
INSTANCE_SLOTS = frozenset({"_values", "_state"})


def _nearest(cls: type, attribute: str) -> Any:
    """Find the closest base class that owns ``attribute`` directly."""
    for base in cls.__mro__[1:]:
        if attribute in base.__dict__:
            return base.__dict__[attribute]
    return None


class Service:
    """Base class for a single unit of work with validated inputs.

    Subclasses declare parameters with Param markers (or the ``parameter``
    classmethod), declare before hooks with @before_hook (or the ``before``
    classmethod), and implement ``perform``.

    Parameter values live in a per-instance dict. Reading a declared name
    returns its value or None; assigning to it goes through validation.
    """

    _parameters: ClassVar[ParameterRegistry] = ParameterRegistry("Service")
    _hooks: ClassVar[HookChain] = HookChain("Service")
    _hook_service: ClassVar[HookService] = HookService()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._parameters = ParameterRegistry(
            cls.__qualname__, parent=_nearest(cls, "_parameters")
        )
        cls._hooks = HookChain(cls.__qualname__, parent=_nearest(cls, "_hooks"))

        for name, value in list(cls.__dict__.items()):
            if isinstance(value, Param):
                delattr(cls, name)
                cls._add_parameter(value.to_parameter(name))
            elif is_before_hook(value):
                cls._hooks.register(name)

    # ── Declaration ─────────────────────────────────────────────────────────

    @classmethod
    def _add_parameter(cls, parameter: Parameter) -> Parameter:
        if parameter.name in INSTANCE_SLOTS or hasattr(cls, parameter.name):
            raise ParameterDeclarationError(
                f"Parameter '{parameter.name}' on {cls.__qualname__} "
                "clashes with an existing attribute"
            )
        return cls._parameters.add(parameter)

    @classmethod
    def parameter(
        cls, name: str, acceptance: Acceptance = object, **options: Any
    ) -> Parameter:
        """Declare a parameter on this class.

        Parameters are inherited by subclasses and can be redeclared there;
        a redeclaration replaces the inherited entry.

        Args:
            name: Parameter name
            acceptance: A type, a collection of types, or a predicate.
                Defaults to accepting anything.
            **options: ``default`` - a literal, or a callable that receives
                the instance under construction and returns the value

        Raises:
            ParameterDeclarationError: On unknown options or a name clash
            RegistrySealedError: After the class has been instantiated
        """
        return cls._add_parameter(Parameter.declare(name, acceptance, **options))

    @classmethod
    def before(cls, *hooks: Any, action: HookAction | None = None) -> None:
        """Append before hooks to this class.

        May be called multiple times; each call appends to the chain.

        Args:
            *hooks: Method names to call on the instance, or callables
                taking the instance
            action: Optional inline callable run after ``hooks``
        """
        cls._hooks.register(*hooks, action=action)

    @classmethod
    def parameters(cls) -> list[Parameter]:
        """Effective parameters for this class, inherited first."""
        return cls._parameters.entries()

    @classmethod
    def before_hooks(cls) -> list[HookRef]:
        """Effective before hooks for this class, in execution order."""
        return cls._hooks.effective()

    # ── Invocation ──────────────────────────────────────────────────────────

    @classmethod
    def call(cls, /, **arguments: Any) -> Any:
        """Build the service from keyword arguments and run it.

        Returns:
            Whatever ``perform`` returns
        """
        return cls(**arguments).run()

    def __init__(self, /, **arguments: Any):
        cls = type(self)
        object.__setattr__(self, "_values", {})
        object.__setattr__(self, "_state", LifecycleState.CONSTRUCTING)
        cls._parameters.seal()

        for name, value in arguments.items():
            if name not in cls._parameters:
                raise UnknownParameter(name)
            self.set(name, value)

        # Defaults go through the same validation as supplied values
        for parameter in cls._parameters:
            if parameter.name not in arguments and parameter.has_default:
                self.set(parameter.name, parameter.resolve_default(self))

        self._transition(LifecycleState.CONSTRUCTED)

    def run(self) -> Any:
        """Check required arguments, run before hooks, then ``perform``.

        Raises:
            ParameterRequired: If any required parameter is unset
            BodyNotImplemented: If ``perform`` was not overridden
        """
        try:
            self._assert_required_arguments()
            self._transition(LifecycleState.VALIDATED)
            self._hook_service.run_hooks(type(self)._hooks.effective(), self)
            self._transition(LifecycleState.HOOKS_RUN)
            result = self.perform()
        except Exception:
            self._transition(LifecycleState.FAILED)
            raise
        self._transition(LifecycleState.INVOKED)
        return result

    def perform(self) -> Any:
        """Service body. Override in subclasses."""
        raise BodyNotImplemented(type(self).__qualname__)

    def _assert_required_arguments(self) -> None:
        missing = [
            p.name
            for p in type(self)._parameters
            if not p.has_default and not self.has_value(p.name)
        ]
        if missing:
            raise ParameterRequired(missing)

    def _transition(self, state: LifecycleState) -> None:
        object.__setattr__(self, "_state", state)
        logger.debug("%s -> %s", type(self).__qualname__, state.value)

    @property
    def state(self) -> LifecycleState:
        return self._state

    # ── Parameter access ────────────────────────────────────────────────────

    def _lookup(self, name: str) -> Parameter:
        parameter = type(self)._parameters.get(name)
        if parameter is None:
            raise UnknownParameter(name)
        return parameter

    def get(self, name: str) -> Any:
        """Current value of a declared parameter, or None when unset."""
        self._lookup(name)
        return self._values.get(name)

    def set(self, name: str, value: Any) -> None:
        """Validate and assign a declared parameter.

        Raises:
            UnknownParameter: If ``name`` is not declared
            InvalidParameterValue: If the value fails the acceptance check
        """
        parameter = self._lookup(name)
        if not parameter.is_acceptable(value):
            raise InvalidParameterValue(name, parameter.describe_acceptance(), value)
        self._values[name] = value

    def has_value(self, name: str) -> bool:
        """True if the parameter currently holds a non-None value."""
        return self.get(name) is not None

    def arguments(self) -> dict[str, Any]:
        """Values of every parameter that is currently set, in declared order."""
        return {
            p.name: self._values[p.name]
            for p in type(self)._parameters
            if p.name in self._values
        }

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        values = self.__dict__.get("_values")
        if values is not None and name in type(self)._parameters:
            return values.get(name)
        raise AttributeError(
            f"'{type(self).__name__}' object has no attribute '{name}'"
        )

    def __setattr__(self, name: str, value: Any) -> None:
        if name in type(self)._parameters:
            self.set(name, value)
        else:
            object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.arguments().items())
        return f"{type(self).__name__}({args})"
