"""Lifecycle states for service invocations."""

from enum import Enum


class LifecycleState(Enum):
    """Where a service instance is in its construct/validate/invoke sequence.

    CONSTRUCTING: arguments and defaults are being applied
    CONSTRUCTED: ready to run (required arguments not yet checked)
    VALIDATED: required arguments are present
    HOOKS_RUN: every before hook completed
    INVOKED: the body returned
    FAILED: validation, a hook, or the body raised
    """

    UNCONSTRUCTED = "unconstructed"
    CONSTRUCTING = "constructing"
    CONSTRUCTED = "constructed"
    VALIDATED = "validated"
    HOOKS_RUN = "hooks_run"
    INVOKED = "invoked"
    FAILED = "failed"
