"""Argument checks and registry resolution shared by the calculus entry points."""

from typing import Optional

from symcalc.core.expression import Expression, Symbol
from symcalc.exceptions import ValidationError
from symcalc.functions.registry import FunctionRegistry, get_registry


def check_arguments(expr: object, var: object) -> None:
    """Raise ValidationError unless expr is an Expression and var a Symbol."""
    if not isinstance(expr, Expression):
        raise ValidationError(
            "Expected an Expression", details={"got": type(expr).__name__}
        )
    if not isinstance(var, Symbol):
        raise ValidationError(
            "Variable must be a Symbol", details={"got": type(var).__name__}
        )


def resolve_registry(registry: Optional[FunctionRegistry]) -> FunctionRegistry:
    return get_registry() if registry is None else registry
