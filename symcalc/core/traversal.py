"""Structural queries and rewrites over expression trees."""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterator, Mapping, Tuple

from symcalc.core.expression import (
    Add,
    Derivative,
    Expression,
    Function,
    Integral,
    Mul,
    Pow,
    Symbol,
)


def walk(expr: Expression) -> Iterator[Expression]:
    """Yield expr and every node below it, parents first."""
    stack = [expr]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children()))


def free_symbols(expr: Expression) -> FrozenSet[Symbol]:
    """Symbols expr depends on structurally.

    An unevaluated Integral is an antiderivative, a function of its
    variable, so its variable counts as free.
    """
    if isinstance(expr, Symbol):
        return frozenset({expr})
    result: FrozenSet[Symbol] = frozenset()
    for child in expr.children():
        result |= free_symbols(child)
    return result


def contains_symbol(expr: Expression, var: Symbol) -> bool:
    """True if var appears anywhere in expr."""
    return any(node == var for node in walk(expr))


def depends_on(expr: Expression, var: Symbol) -> bool:
    """True if expr can vary with var.

    Structural, except that a product with a literal zero factor is zero and
    depends on nothing. Unevaluated Integral and Derivative leaves depend on
    their own variable.
    """
    return DependencyCache(var)(expr)


class DependencyCache:
    """depends_on for one variable, remembering every node it has answered.

    Nodes are keyed by identity and held by the cache, so a recursive engine
    can ask about a subtree at every level while each node is examined once.
    """

    def __init__(self, var: Symbol):
        self.var = var
        self._seen: Dict[int, Tuple[Expression, bool]] = {}

    def __call__(self, expr: Expression) -> bool:
        hit = self._seen.get(id(expr))
        if hit is not None:
            return hit[1]
        result = self._compute(expr)
        self._seen[id(expr)] = (expr, result)
        return result

    def _compute(self, expr: Expression) -> bool:
        if isinstance(expr, Symbol):
            return expr == self.var
        if isinstance(expr, Mul):
            if any(f.is_zero() for f in expr.factors):
                return False
            return any(self(f) for f in expr.factors)
        if isinstance(expr, (Integral, Derivative)):
            return expr.variable == self.var or self(expr.children()[0])
        return any(self(child) for child in expr.children())


def _unchanged(new: tuple, old: tuple) -> bool:
    return all(a is b for a, b in zip(new, old))


def substitute(expr: Expression, mapping: Mapping[Symbol, Expression]) -> Expression:
    """Replace symbols according to mapping.

    The variable of an Integral or Derivative is left alone. Nodes without a
    replaced descendant are returned as-is, so unchanged subtrees stay shared.
    """
    if not mapping:
        return expr
    if isinstance(expr, Symbol):
        return mapping.get(expr, expr)
    if isinstance(expr, Add):
        terms = tuple(substitute(t, mapping) for t in expr.terms)
        return expr if _unchanged(terms, expr.terms) else Add(terms)
    if isinstance(expr, Mul):
        factors = tuple(substitute(f, mapping) for f in expr.factors)
        return expr if _unchanged(factors, expr.factors) else Mul(factors)
    if isinstance(expr, Pow):
        base = substitute(expr.base, mapping)
        exponent = substitute(expr.exponent, mapping)
        if base is expr.base and exponent is expr.exponent:
            return expr
        return Pow(base, exponent)
    if isinstance(expr, Function):
        args = tuple(substitute(a, mapping) for a in expr.args)
        return expr if _unchanged(args, expr.args) else Function(expr.name, args)
    if isinstance(expr, Integral):
        inner = {k: v for k, v in mapping.items() if k != expr.variable}
        integrand = substitute(expr.integrand, inner)
        return expr if integrand is expr.integrand else Integral(integrand, expr.variable)
    if isinstance(expr, Derivative):
        inner = {k: v for k, v in mapping.items() if k != expr.variable}
        body = substitute(expr.expression, inner)
        if body is expr.expression:
            return expr
        return Derivative(body, expr.variable, expr.order)
    return expr


def function_names(expr: Expression) -> FrozenSet[str]:
    """Names of every function applied anywhere in expr."""
    return frozenset(node.name for node in walk(expr) if isinstance(node, Function))
