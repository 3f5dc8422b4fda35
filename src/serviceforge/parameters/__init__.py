"""serviceforge parameter schema.

Usage:
    from serviceforge.parameters import Param, Parameter, ParameterRegistry

    registry = ParameterRegistry("Greeting")
    registry.declare("name", str)
    registry.declare("punctuation", str, default="!")
"""

from serviceforge.parameters.registry import ParameterRegistry
from serviceforge.parameters.types import (
    MISSING,
    VALID_OPTIONS,
    Acceptance,
    Param,
    Parameter,
    check_options,
    is_producer,
)

__all__ = [
    "Acceptance",
    "MISSING",
    "Param",
    "Parameter",
    "ParameterRegistry",
    "VALID_OPTIONS",
    "check_options",
    "is_producer",
]
