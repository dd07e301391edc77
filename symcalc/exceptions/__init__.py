"""Custom exceptions for symcalc.

All exceptions carry a code, a message and details, so consumers can decide
how to recover without inspecting message text.
"""

from symcalc.exceptions.base import (
    SymcalcError,
    ValidationError,
    InvalidExpressionError,
    RegistryError,
    RuleConstructionError,
    ConfigurationError,
)

__all__ = [
    "SymcalcError",
    "ValidationError",
    "InvalidExpressionError",
    "RegistryError",
    "RuleConstructionError",
    "ConfigurationError",
]
