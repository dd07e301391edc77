"""Light, order-respecting normalisation.

This is not a general simplifier. It folds numbers exactly, removes additive
zeros and multiplicative ones, flattens nested sums and products, collects
like terms and merges repeated bases into powers. It never moves a
non-numeric factor of a product past another unless the whole product is
commutative, so results stay valid for matrices and operators.

Numeric factors are scalars and commute with everything; they are folded into
a single leading coefficient.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from symcalc.core.expression import (
    Add,
    Derivative,
    Expression,
    Function,
    Integral,
    Mul,
    Number,
    Pow,
    ONE,
    ZERO,
)
from symcalc.core.number import NumericValue, add_values, mul_values, pow_values


def simplify(expr: Expression) -> Expression:
    """Return a normalised expression equal to expr."""
    if isinstance(expr, Add):
        return _simplify_add(expr)
    if isinstance(expr, Mul):
        return _simplify_mul(expr)
    if isinstance(expr, Pow):
        return _simplify_pow(simplify(expr.base), simplify(expr.exponent))
    if isinstance(expr, Function):
        return Function(expr.name, tuple(simplify(a) for a in expr.args))
    if isinstance(expr, Integral):
        return Integral(simplify(expr.integrand), expr.variable)
    if isinstance(expr, Derivative):
        return Derivative(simplify(expr.expression), expr.variable, expr.order)
    return expr


def _split_coefficient(term: Expression) -> Tuple[NumericValue, Expression]:
    """Split term into numeric coefficient and the rest."""
    if isinstance(term, Mul) and term.factors and isinstance(term.factors[0], Number):
        rest = term.factors[1:]
        if len(rest) == 1:
            return term.factors[0].value, rest[0]
        return term.factors[0].value, Mul(rest)
    return 1, term


def _with_coefficient(coefficient: NumericValue, rest: Expression) -> Expression:
    if coefficient == 1:
        return rest
    if isinstance(rest, Mul):
        return Mul((Number(coefficient),) + rest.factors)
    return Mul((Number(coefficient), rest))


def _simplify_add(expr: Add) -> Expression:
    flat: List[Expression] = []
    pending = [simplify(t) for t in expr.terms]
    for term in pending:
        if isinstance(term, Add):
            flat.extend(term.terms)
        else:
            flat.append(term)

    # None keys the numeric constant; dict keeps first-appearance order
    groups: Dict[Optional[Expression], NumericValue] = {}
    for term in flat:
        if isinstance(term, Number):
            groups[None] = add_values(groups.get(None, 0), term.value)
            continue
        coefficient, rest = _split_coefficient(term)
        groups[rest] = add_values(groups.get(rest, 0), coefficient)

    terms: List[Expression] = []
    for rest, coefficient in groups.items():
        if coefficient == 0:
            continue
        if rest is None:
            terms.append(Number(coefficient))
        else:
            terms.append(_with_coefficient(coefficient, rest))

    if not terms:
        return ZERO
    if len(terms) == 1:
        return terms[0]
    return Add(tuple(terms))


def _base_and_exponent(factor: Expression) -> Tuple[Expression, Expression]:
    if isinstance(factor, Pow):
        return factor.base, factor.exponent
    return factor, ONE


def _simplify_mul(expr: Mul) -> Expression:
    flat: List[Expression] = []
    for factor in (simplify(f) for f in expr.factors):
        if isinstance(factor, Mul):
            flat.extend(factor.factors)
        else:
            flat.append(factor)

    coefficient: NumericValue = 1
    others: List[Expression] = []
    for factor in flat:
        if isinstance(factor, Number):
            coefficient = mul_values(coefficient, factor.value)
        else:
            others.append(factor)

    if coefficient == 0:
        return ZERO

    merged = _merge_powers(others)

    factors: List[Expression] = []
    for factor in merged:
        if isinstance(factor, Number):
            coefficient = mul_values(coefficient, factor.value)
        else:
            factors.append(factor)

    if coefficient == 0:
        return ZERO
    if coefficient != 1 or not factors:
        factors.insert(0, Number(coefficient))
    if len(factors) == 1:
        return factors[0]
    return Mul(tuple(factors))


def _merge_powers(factors: List[Expression]) -> List[Expression]:
    """Combine equal bases into single powers.

    Any equal bases are combined when every factor commutes; otherwise only
    neighbours are, which keeps the written order intact.
    """
    commutative = all(f.is_commutative() for f in factors)

    bases: List[Expression] = []
    exponents: List[List[Expression]] = []
    for factor in factors:
        base, exponent = _base_and_exponent(factor)
        if commutative:
            if base in bases:
                exponents[bases.index(base)].append(exponent)
                continue
        elif bases and bases[-1] == base:
            exponents[-1].append(exponent)
            continue
        bases.append(base)
        exponents.append([exponent])

    result: List[Expression] = []
    for base, exps in zip(bases, exponents):
        if len(exps) == 1:
            if exps[0] is ONE:
                result.append(base)
            else:
                result.append(_simplify_pow(base, exps[0]))
            continue
        result.append(_simplify_pow(base, simplify(Add(tuple(exps)))))
    return result


def _simplify_pow(base: Expression, exponent: Expression) -> Expression:
    if exponent.is_zero():
        return ONE
    if exponent.is_one():
        return base
    if base.is_one():
        return ONE
    if isinstance(base, Number) and isinstance(exponent, Number):
        if base.is_zero() and exponent.value > 0:
            return ZERO
        folded = pow_values(base.value, exponent.value)
        if folded is not None:
            return Number(folded)
    if (
        isinstance(base, Pow)
        and isinstance(exponent, Number)
        and isinstance(exponent.value, int)
    ):
        inner = simplify(Mul((base.exponent, exponent)))
        return _simplify_pow(base.base, inner)
    return Pow(base, exponent)
