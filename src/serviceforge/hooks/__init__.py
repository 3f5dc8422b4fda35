"""serviceforge before-hook system.

Before hooks run after required-argument validation and before the
service body:

    from serviceforge import Service, Param, before_hook

    class Report(Service):
        title = Param(str)

        @before_hook
        def _stamp(self):
            self._started_at = time.monotonic()

    Report.before(action=lambda svc: print("starting", svc.title))
"""

from serviceforge.hooks.registry import HookChain
from serviceforge.hooks.service import HookService
from serviceforge.hooks.types import (
    HookAction,
    HookKind,
    HookRef,
    before_hook,
    is_before_hook,
)

__all__ = [
    "HookAction",
    "HookChain",
    "HookKind",
    "HookRef",
    "HookService",
    "before_hook",
    "is_before_hook",
]
