"""Hook execution service for serviceforge.

Runs a hook chain against a service instance. Hooks execute sequentially
in chain order, with no arguments beyond the instance for inline actions.
Errors are never caught here; a failing hook aborts the invocation.
"""

import logging
from typing import Any, Iterable

from serviceforge.hooks.types import HookKind, HookRef

logger = logging.getLogger(__name__)


class HookService:
    """Executes before hooks for a service invocation."""

    def run_hooks(self, hooks: Iterable[HookRef], instance: Any) -> int:
        """Execute hooks against an instance in order.

        Args:
            hooks: Hook references, inherited hooks first
            instance: The service instance being invoked

        Returns:
            Number of hooks executed
        """
        count = 0
        for ref in hooks:
            self.run_hook(ref, instance)
            count += 1
        return count

    def run_hook(self, ref: HookRef, instance: Any) -> None:
        """Run one hook.

        METHOD hooks are resolved with getattr, so underscore-prefixed
        methods work the same as public ones. ACTION hooks receive the
        instance as their only argument.
        """
        logger.debug(
            "Running before hook '%s' for %s", ref.label, type(instance).__name__
        )
        if ref.kind is HookKind.METHOD:
            getattr(instance, ref.target)()
        else:
            ref.target(instance)
