"""Hook system types for serviceforge.

Defines the data structures for before hooks:
- HookKind: whether a hook names a method or wraps an inline callable
- HookRef: one entry in a class's hook chain
- before_hook: decorator marking a method as a named before hook
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from serviceforge.errors import HookDeclarationError

# Inline hook signature: (service instance) -> ignored
HookAction = Callable[[Any], Any]

# Attribute set on functions decorated with @before_hook
BEFORE_HOOK_MARKER = "__serviceforge_before_hook__"


class HookKind(Enum):
    """How a hook is resolved at run time."""

    METHOD = "method"
    ACTION = "action"


@dataclass(frozen=True)
class HookRef:
    """Reference to one before hook.

    Attributes:
        kind: METHOD hooks are looked up by name on the instance,
            ACTION hooks are called with the instance as their argument
        target: Method name for METHOD, the callable for ACTION
    """

    kind: HookKind
    target: str | HookAction

    @classmethod
    def method(cls, name: str) -> "HookRef":
        if not isinstance(name, str) or not name.isidentifier():
            raise HookDeclarationError(f"Invalid hook method name: {name!r}")
        return cls(kind=HookKind.METHOD, target=name)

    @classmethod
    def action(cls, fn: HookAction) -> "HookRef":
        if not callable(fn):
            raise HookDeclarationError(f"Inline hook must be callable, got {fn!r}")
        return cls(kind=HookKind.ACTION, target=fn)

    @classmethod
    def from_value(cls, value: Any) -> "HookRef":
        """Build a HookRef from a method name or a callable."""
        if isinstance(value, HookRef):
            return value
        if isinstance(value, str):
            return cls.method(value)
        if callable(value):
            return cls.action(value)
        raise HookDeclarationError(
            f"Hooks must be method names or callables, got {type(value).__name__}"
        )

    @property
    def label(self) -> str:
        """Display name used in logs and introspection."""
        if self.kind is HookKind.METHOD:
            return str(self.target)
        return getattr(self.target, "__qualname__", repr(self.target))


def before_hook(fn: Callable) -> Callable:
    """Decorator marking a service method as a before hook.

    Usage:
        class Report(Service):
            @before_hook
            def _set_start_time(self):
                self._start_time = time.monotonic()

    Marked methods are registered by name, in definition order, when the
    class is created. Because they are resolved by name at run time, a
    subclass overriding the method changes what the hook does.
    """
    setattr(fn, BEFORE_HOOK_MARKER, True)
    return fn


def is_before_hook(value: Any) -> bool:
    return callable(value) and getattr(value, BEFORE_HOOK_MARKER, False) is True
