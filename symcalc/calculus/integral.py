"""Integral engine.

integrate() is total. Patterns are tried in a fixed order and the first match
wins; when nothing matches the result is the unevaluated Integral(expr, var).
There is no search: no by-parts, no general substitution, no guessing.
Unevaluated Integral and Derivative leaves in the input are wrapped again,
never rewritten.

    1. expr does not depend on var        -> expr * var
    2. f(var), f registered               -> rule applied to var
    3. f(a*var), a a non-zero Number      -> (1/a) * F(a*var)
    4. var, var^n                         -> power rule
    5. product with one var-dependent factor -> that factor integrated in place
    6. sum                                -> integrated term by term

Results are raw trees; the constant of integration is left to the caller.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Optional

from symcalc.calculus.common import check_arguments, resolve_registry
from symcalc.core.expression import (
    Add,
    Expression,
    Function,
    Integral,
    Mul,
    Number,
    Pow,
    Symbol,
)
from symcalc.core.number import reciprocal
from symcalc.core.traversal import DependencyCache, substitute
from symcalc.functions.registry import FunctionRegistry
from symcalc.logger import session_logger as logger

_HALF = Number(Fraction(1, 2))


def integrate(
    expr: Expression, var: Symbol, registry: Optional[FunctionRegistry] = None
) -> Expression:
    """Antiderivative of expr with respect to var.

    Args:
        expr: Integrand
        var: Integration variable
        registry: Function registry to consult; defaults to the process-wide one

    Returns:
        An antiderivative without constant of integration, or
        Integral(expr, var) when no rule applies

    Raises:
        ValidationError: If expr is not an Expression or var is not a Symbol
    """
    check_arguments(expr, var)
    return _integrate(expr, DependencyCache(var), resolve_registry(registry))


def _unevaluated(expr: Expression, var: Symbol) -> Integral:
    return Integral(expr, var)


def _integrate(
    expr: Expression, depends: DependencyCache, registry: FunctionRegistry
) -> Expression:
    var = depends.var
    if not depends(expr):
        return Mul((expr, var))

    if isinstance(expr, Function):
        return _integrate_function(expr, var, registry)

    if expr == var or (isinstance(expr, Pow) and expr.base == var):
        result = _power_rule(expr, var)
        if result is not None:
            return result
        return _unevaluated(expr, var)

    if isinstance(expr, Mul):
        return _integrate_product(expr, depends, registry)

    if isinstance(expr, Add):
        return Add(tuple(_integrate(term, depends, registry) for term in expr.terms))

    return _unevaluated(expr, var)


def _integrate_function(expr: Function, var: Symbol, registry: FunctionRegistry) -> Expression:
    if len(expr.args) != 1:
        return _unevaluated(expr, var)

    arg = expr.args[0]
    rule = registry.antiderivative_rule(expr.name)
    if rule is None:
        logger.debug(
            "No antiderivative rule, leaving unevaluated",
            function=expr.name,
            variable=var.name,
        )
        return _unevaluated(expr, var)

    if arg == var:
        return rule.apply(var)

    # Linear composite f(a*var): (1/a) * F(a*var)
    if (
        isinstance(arg, Mul)
        and len(arg.factors) == 2
        and isinstance(arg.factors[0], Number)
        and arg.factors[1] == var
    ):
        inverse = reciprocal(arg.factors[0].value)
        if inverse is None:
            return _unevaluated(expr, var)
        return Mul((Number(inverse), substitute(rule.apply(var), {var: arg})))

    return _unevaluated(expr, var)


def _power_rule(expr: Expression, var: Symbol) -> Optional[Expression]:
    """Integral of var or var^n for a numeric n; None for any other power."""
    if expr == var:
        return Mul((_HALF, Pow(var, Number(2))))
    if not isinstance(expr, Pow) or not isinstance(expr.exponent, Number):
        return None
    n = expr.exponent.value
    if n == -1:
        return Function("ln", (Function("abs", (var,)),))
    raised = n + 1
    inverse = reciprocal(raised)
    if inverse is None:
        return None
    return Mul((Number(inverse), Pow(var, Number(raised))))


def _integrate_product(
    expr: Mul, depends: DependencyCache, registry: FunctionRegistry
) -> Expression:
    """Pull constant factors out of the integral, in place.

    Only products with exactly one var-dependent factor are handled; the
    factor is replaced by its integral and every other factor keeps its
    position.
    """
    dependent = [i for i, factor in enumerate(expr.factors) if depends(factor)]
    if len(dependent) != 1:
        return _unevaluated(expr, depends.var)

    index = dependent[0]
    inner = _integrate(expr.factors[index], depends, registry)
    if isinstance(inner, Integral):
        return _unevaluated(expr, depends.var)
    return Mul(expr.factors[:index] + (inner,) + expr.factors[index + 1:])
