"""Repeated differentiation."""

from typing import Iterable, Optional, Sequence, Tuple

from symcalc.calculus.common import check_arguments, resolve_registry
from symcalc.calculus.derivative import differentiate
from symcalc.core.expression import Expression, Symbol
from symcalc.exceptions import ValidationError
from symcalc.functions.registry import FunctionRegistry


def _check_order(order: object) -> int:
    if isinstance(order, bool) or not isinstance(order, int) or order < 0:
        raise ValidationError(
            "Derivative order must be a non-negative integer", details={"order": repr(order)}
        )
    return order


def nth_derivative(
    expr: Expression,
    var: Symbol,
    order: int,
    registry: Optional[FunctionRegistry] = None,
) -> Expression:
    """Differentiate expr order times with respect to var; order 0 returns expr.

    Raises:
        ValidationError: If order is negative or not an integer
    """
    check_arguments(expr, var)
    order = _check_order(order)
    registry = resolve_registry(registry)
    result = expr
    for _ in range(order):
        result = differentiate(result, var, registry)
    return result


def mixed_partial(
    expr: Expression,
    orders: Iterable[Tuple[Symbol, int]],
    registry: Optional[FunctionRegistry] = None,
) -> Expression:
    """Apply each (variable, order) pair in turn.

    mixed_partial(f, [(x, 1), (y, 2)]) is d³f/dy²dx.
    """
    registry = resolve_registry(registry)
    result = expr
    for var, order in orders:
        result = nth_derivative(result, var, order, registry)
    return result


def _symbols(expr: Expression, variables: Sequence[Symbol]) -> Tuple[Symbol, ...]:
    variables = tuple(variables)
    for var in variables:
        check_arguments(expr, var)
    return variables


def gradient(
    expr: Expression,
    variables: Sequence[Symbol],
    registry: Optional[FunctionRegistry] = None,
) -> Tuple[Expression, ...]:
    """First partial derivatives of expr, one per variable, in the given order."""
    variables = _symbols(expr, variables)
    registry = resolve_registry(registry)
    return tuple(differentiate(expr, var, registry) for var in variables)


def jacobian(
    exprs: Sequence[Expression],
    variables: Sequence[Symbol],
    registry: Optional[FunctionRegistry] = None,
) -> Tuple[Tuple[Expression, ...], ...]:
    """Matrix of first partials: row i is the gradient of exprs[i].

    Raises:
        ValidationError: If an entry of exprs is not an Expression or a
            variable is not a Symbol
    """
    variables = tuple(variables)
    registry = resolve_registry(registry)
    return tuple(gradient(expr, variables, registry) for expr in exprs)


def hessian(
    expr: Expression,
    variables: Sequence[Symbol],
    registry: Optional[FunctionRegistry] = None,
) -> Tuple[Tuple[Expression, ...], ...]:
    """Matrix of second partials.

    Entry (i, j) is the derivative in variables[j] of d(expr)/d(variables[i]).

    Entries are raw derivative trees; for smooth input the matrix is
    symmetric once both sides are simplified or evaluated.
    """
    variables = _symbols(expr, variables)
    registry = resolve_registry(registry)
    first = gradient(expr, variables, registry)
    return tuple(gradient(partial, variables, registry) for partial in first)
