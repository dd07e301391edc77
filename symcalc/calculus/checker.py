"""Differentiability check."""

from typing import Optional

from symcalc.calculus.common import check_arguments, resolve_registry
from symcalc.core.expression import (
    Add,
    Constant,
    Expression,
    Function,
    Mul,
    Number,
    Pow,
    Symbol,
)
from symcalc.core.traversal import DependencyCache
from symcalc.functions.registry import FunctionRegistry


def is_differentiable(
    expr: Expression, var: Symbol, registry: Optional[FunctionRegistry] = None
) -> bool:
    """True if differentiate(expr, var) contains no unevaluated Derivative leaf.

    A structural check that follows the same branches as the derivative
    engine: it answers whether every sub-expression has an applicable rule,
    not whether the function is differentiable everywhere.
    """
    check_arguments(expr, var)
    return _resolvable(expr, DependencyCache(var), resolve_registry(registry))


def _resolvable(expr: Expression, depends: DependencyCache, registry: FunctionRegistry) -> bool:
    if isinstance(expr, (Number, Constant, Symbol)):
        return True
    if isinstance(expr, Add):
        return all(_resolvable(term, depends, registry) for term in expr.terms)
    if not depends(expr):
        return True
    if isinstance(expr, Mul):
        return all(
            _resolvable(factor, depends, registry) for factor in expr.factors if depends(factor)
        )
    if isinstance(expr, Pow):
        return _resolvable_pow(expr, depends, registry)
    if isinstance(expr, Function):
        return _resolvable_function(expr, depends, registry)
    # Derivative and Integral leaves stay unevaluated (or gain order)
    return False


def _resolvable_pow(expr: Pow, depends: DependencyCache, registry: FunctionRegistry) -> bool:
    base, exponent = expr.base, expr.exponent
    if exponent.is_zero():
        return True
    exponent_varies = depends(exponent)

    if not base.is_commutative():
        whole = (
            not exponent_varies
            and isinstance(exponent, Number)
            and isinstance(exponent.value, int)
            and exponent.value > 0
        )
        return whole and _resolvable(base, depends, registry)

    if not exponent_varies:
        return _resolvable(base, depends, registry)
    if not depends(base):
        if isinstance(base, Number) and base.value <= 0:
            return False
        return _resolvable(exponent, depends, registry)
    return _resolvable(base, depends, registry) and _resolvable(exponent, depends, registry)


def _resolvable_function(
    expr: Function, depends: DependencyCache, registry: FunctionRegistry
) -> bool:
    if len(expr.args) != 1:
        return False
    rule = registry.derivative_rule(expr.name)
    if rule is None:
        return False
    arg = expr.args[0]
    if rule.apply(arg) is not None:
        return _resolvable(arg, depends, registry)
    parts = rule.parts(arg)
    if parts is None:
        return False
    return all(_resolvable(part, depends, registry) for part in parts)
