"""Exception classes for symcalc.

Calculus itself never raises: a missing rule is an unevaluated result. These
exceptions cover the places where a genuine error can happen - building
expressions from bad input, populating the function registry with a malformed
rule, and reading invalid configuration.
"""

from typing import Any, Dict, Optional


class SymcalcError(Exception):
    """Base for all symcalc errors.

    Carries a machine-readable code, a message and optional details so callers
    can react to the failure without parsing strings.
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} ({self.details})"
        return f"{self.code}: {self.message}"


class ValidationError(SymcalcError):
    """Raised when arguments passed to a public operation are invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="VALIDATION_ERROR", message=message, details=details)


class InvalidExpressionError(ValidationError):
    """Raised when an expression node is constructed from invalid parts."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, details=details)
        self.code = "INVALID_EXPRESSION"


class RegistryError(SymcalcError):
    """Raised when the function registry is populated incorrectly."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="REGISTRY_ERROR", message=message, details=details)


class RuleConstructionError(RegistryError):
    """Raised when a derivative or antiderivative rule is malformed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, details=details)
        self.code = "INVALID_RULE"


class ConfigurationError(SymcalcError):
    """Raised when settings read from the environment are invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONFIGURATION_ERROR", message=message, details=details)
