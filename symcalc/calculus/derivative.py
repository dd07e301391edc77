"""Derivative engine.

differentiate() is total: a sub-expression it has no rule for comes back as
an unevaluated Derivative leaf, never as an exception or a guess. Results
are raw trees; run symcalc.core.simplify on them if a tidy form is needed.

The order of factors in a product is never changed, so derivatives of
matrix and operator expressions stay valid.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from symcalc.calculus.common import check_arguments, resolve_registry
from symcalc.core.expression import (
    Add,
    Constant,
    Derivative,
    Expression,
    Function,
    Mul,
    Number,
    Pow,
    Symbol,
    NEG_ONE,
    ONE,
    ZERO,
)
from symcalc.core.traversal import DependencyCache
from symcalc.functions.registry import FunctionRegistry
from symcalc.logger import session_logger as logger

_E = Constant("e")


def differentiate(
    expr: Expression, var: Symbol, registry: Optional[FunctionRegistry] = None
) -> Expression:
    """d(expr)/d(var), treating every other symbol as a constant.

    Args:
        expr: Expression to differentiate
        var: Symbol to differentiate with respect to
        registry: Function registry to consult; defaults to the process-wide one

    Returns:
        The derivative, possibly containing unevaluated Derivative leaves

    Raises:
        ValidationError: If expr is not an Expression or var is not a Symbol
    """
    check_arguments(expr, var)
    return _diff(expr, DependencyCache(var), resolve_registry(registry))


def _unevaluated(expr: Expression, var: Symbol) -> Derivative:
    return Derivative(expr, var, 1)


def _chain(outer: Expression, inner: Expression) -> Expression:
    """outer * inner, skipping a literal 1 and collapsing a literal 0."""
    if inner.is_zero():
        return ZERO
    if inner.is_one():
        return outer
    return Mul((outer, inner))


def _power(base: Expression, exponent: Expression) -> Expression:
    if exponent.is_zero():
        return ONE
    if exponent.is_one():
        return base
    return Pow(base, exponent)


def _minus_one(exponent: Expression) -> Expression:
    if isinstance(exponent, Number):
        return Number(exponent.value - 1)
    return Add((exponent, NEG_ONE))


def _diff(expr: Expression, depends: DependencyCache, registry: FunctionRegistry) -> Expression:
    var = depends.var
    if isinstance(expr, (Number, Constant)):
        return ZERO
    if isinstance(expr, Symbol):
        return ONE if expr == var else ZERO
    if isinstance(expr, Add):
        return Add(tuple(_diff(term, depends, registry) for term in expr.terms))
    if not depends(expr):
        return ZERO
    if isinstance(expr, Mul):
        return _diff_product(expr.factors, depends, registry)
    if isinstance(expr, Pow):
        return _diff_pow(expr, depends, registry)
    if isinstance(expr, Function):
        return _diff_function(expr, depends, registry)
    if isinstance(expr, Derivative) and expr.variable == var:
        return Derivative(expr.expression, var, expr.order + 1)
    # Integral leaves, and Derivative leaves in another variable, are terminal
    return _unevaluated(expr, var)


def _diff_product(
    factors: Tuple[Expression, ...], depends: DependencyCache, registry: FunctionRegistry
) -> Expression:
    """Generalised product rule: sum over i of the product with factor i differentiated.

    Term i keeps every factor in its original position. Factors that do not
    depend on var contribute a zero term and are left out.
    """
    terms: List[Expression] = []
    for i, factor in enumerate(factors):
        if not depends(factor):
            continue
        d_factor = _diff(factor, depends, registry)
        if d_factor.is_zero():
            continue
        middle: Tuple[Expression, ...] = () if d_factor.is_one() else (d_factor,)
        replaced = factors[:i] + middle + factors[i + 1:]
        if not replaced:
            terms.append(ONE)
        elif len(replaced) == 1:
            terms.append(replaced[0])
        else:
            terms.append(Mul(replaced))
    if not terms:
        return ZERO
    if len(terms) == 1:
        return terms[0]
    return Add(tuple(terms))


def _diff_pow(expr: Pow, depends: DependencyCache, registry: FunctionRegistry) -> Expression:
    var = depends.var
    base, exponent = expr.base, expr.exponent
    if exponent.is_zero():
        return ZERO

    base_varies = depends(base)
    exponent_varies = depends(exponent)

    if not base.is_commutative():
        # A noncommutative base need not commute with its own derivative, so
        # only whole positive powers are handled, as explicit products
        if (
            not exponent_varies
            and isinstance(exponent, Number)
            and isinstance(exponent.value, int)
            and exponent.value > 0
        ):
            return _diff_product((base,) * exponent.value, depends, registry)
        return _unevaluated(expr, var)

    if not exponent_varies:
        # n * b^(n-1) * b'
        outer = Mul((exponent, _power(base, _minus_one(exponent))))
        return _chain(outer, _diff(base, depends, registry))

    if not base_varies:
        # a^g * ln(a) * g'
        if isinstance(base, Number) and base.value <= 0:
            return _unevaluated(expr, var)
        d_exponent = _diff(exponent, depends, registry)
        if base == _E:
            return _chain(expr, d_exponent)
        return _chain(Mul((expr, Function("ln", (base,)))), d_exponent)

    # f^g * (g' * ln(f) + g * f'/f)
    d_base = _diff(base, depends, registry)
    d_exponent = _diff(exponent, depends, registry)
    log_term = Mul((d_exponent, Function("ln", (base,))))
    ratio_term = Mul((exponent, d_base, Pow(base, NEG_ONE)))
    return Mul((expr, Add((log_term, ratio_term))))


def _diff_function(
    expr: Function, depends: DependencyCache, registry: FunctionRegistry
) -> Expression:
    var = depends.var
    properties = registry.lookup(expr.name)
    if properties is None or len(expr.args) != 1:
        logger.debug(
            "No derivative rule, leaving unevaluated",
            function=expr.name,
            arguments=len(expr.args),
            variable=var.name,
        )
        return _unevaluated(expr, var)

    rule = properties.derivative_rule()
    if rule is None:
        logger.debug(
            "Function has no derivative rule",
            function=expr.name,
            family=properties.family.value,
            variable=var.name,
        )
        return _unevaluated(expr, var)

    arg = expr.args[0]
    outer = rule.apply(arg)
    if outer is not None:
        return _chain(outer, _diff(arg, depends, registry))

    parts = rule.parts(arg)
    if parts is None:
        return _unevaluated(expr, var)

    # The parts are built from arg, so differentiating them applies the chain rule
    first, second = parts
    if not rule.is_quotient:
        return _diff_product((first, second), depends, registry)
    d_first = _diff(first, depends, registry)
    d_second = _diff(second, depends, registry)
    numerator = Add((Mul((d_first, second)), Mul((NEG_ONE, first, d_second))))
    return Mul((numerator, Pow(second, Number(-2))))
