"""serviceforge: declarative service objects.

A service is a class with typed, optionally defaulted parameters, an
ordered chain of before hooks, and a ``perform`` body:

    from serviceforge import Param, Service, before_hook

    class CustomService(Service):
        required_param = Param(str)
        optional_param = Param(str, default="something")

        @before_hook
        def _first_pre_hook(self):
            self._started = True

        def perform(self):
            return self.required_param.upper()

    CustomService.call(required_param="foo")  # "FOO"
"""

from serviceforge.core import LifecycleState, Service
from serviceforge.errors import (
    BodyNotImplemented,
    ErrorKind,
    HookDeclarationError,
    InvalidParameterValue,
    ParameterDeclarationError,
    ParameterError,
    ParameterRequired,
    RegistrySealedError,
    UnknownParameter,
)
from serviceforge.hooks import HookChain, HookKind, HookRef, HookService, before_hook
from serviceforge.parameters import MISSING, Param, Parameter, ParameterRegistry

__all__ = [
    "BodyNotImplemented",
    "ErrorKind",
    "HookChain",
    "HookDeclarationError",
    "HookKind",
    "HookRef",
    "HookService",
    "InvalidParameterValue",
    "LifecycleState",
    "MISSING",
    "Param",
    "Parameter",
    "ParameterDeclarationError",
    "ParameterError",
    "ParameterRegistry",
    "ParameterRequired",
    "RegistrySealedError",
    "Service",
    "UnknownParameter",
    "before_hook",
]
