"""Error taxonomy for serviceforge.

Every error raised by the framework derives from ParameterError, which is
itself a ValueError so callers can handle it with general argument-error
handling. Each error class also carries an ErrorKind so code can branch on
the failure category without an isinstance ladder.
"""

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Failure category of a ParameterError."""

    UNKNOWN_PARAMETER = "unknown_parameter"
    INVALID_VALUE = "invalid_value"
    REQUIRED = "required"
    NOT_IMPLEMENTED = "not_implemented"
    DECLARATION = "declaration"


class ParameterError(ValueError):
    """Base class for all parameter and contract errors."""

    kind: ErrorKind = ErrorKind.DECLARATION


class UnknownParameter(ParameterError):
    """An argument was supplied that has no matching declared parameter."""

    kind = ErrorKind.UNKNOWN_PARAMETER

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Parameter {name} unknown")


class InvalidParameterValue(ParameterError, TypeError):
    """A supplied or defaulted value failed its parameter's acceptance check."""

    kind = ErrorKind.INVALID_VALUE

    def __init__(self, name: str, expected: str, value: Any):
        self.name = name
        self.expected = expected
        self.value = value
        super().__init__(
            f"Expected a {expected} for {name}, {type(value).__name__} received"
        )


class ParameterRequired(ParameterError):
    """One or more required parameters were never set."""

    kind = ErrorKind.REQUIRED

    def __init__(self, names: list[str]):
        self.names = list(names)
        super().__init__(f"Missing required arguments: {', '.join(self.names)}")


class BodyNotImplemented(ParameterError, NotImplementedError):
    """The service class does not override perform()."""

    kind = ErrorKind.NOT_IMPLEMENTED

    def __init__(self, service_name: str):
        self.service_name = service_name
        super().__init__(
            f"Implementation missing for {service_name}. "
            "Define `def perform(self): ...` to provide the service body"
        )


class ParameterDeclarationError(ParameterError):
    """A parameter was declared with invalid options."""

    kind = ErrorKind.DECLARATION


class RegistrySealedError(ParameterDeclarationError):
    """A parameter was declared after the registry was sealed."""
    pass


class HookDeclarationError(ParameterError):
    """A hook was registered with an unsupported reference."""

    kind = ErrorKind.DECLARATION
