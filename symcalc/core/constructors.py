"""Convenience constructors for building expressions by hand."""

from __future__ import annotations

from fractions import Fraction
from typing import Iterable, Tuple

from symcalc.core.expression import (
    Add,
    Constant,
    Derivative,
    ExpressionLike,
    Function,
    Integral,
    Mul,
    Number,
    Pow,
    Symbol,
    as_expression,
)
from symcalc.core.symbol import SymbolType
from symcalc.exceptions import InvalidExpressionError


def integer(value: int) -> Number:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidExpressionError("integer() expects an int", details={"value": repr(value)})
    return Number(value)


def rational(numerator: int, denominator: int) -> Number:
    if denominator == 0:
        raise InvalidExpressionError("Rational with zero denominator")
    return Number(Fraction(numerator, denominator))


def number(value: ExpressionLike) -> Number:
    result = as_expression(value)
    if not isinstance(result, Number):
        raise InvalidExpressionError("number() expects a numeric value")
    return result


def symbol(name: str, symbol_type: SymbolType = SymbolType.SCALAR) -> Symbol:
    return Symbol(name, symbol_type)


def symbols(names: str, symbol_type: SymbolType = SymbolType.SCALAR) -> Tuple[Symbol, ...]:
    """Create several symbols from a space or comma separated string."""
    return tuple(Symbol(n, symbol_type) for n in names.replace(",", " ").split())


def matrix_symbol(name: str) -> Symbol:
    return Symbol(name, SymbolType.MATRIX)


def operator_symbol(name: str) -> Symbol:
    return Symbol(name, SymbolType.OPERATOR)


def quaternion_symbol(name: str) -> Symbol:
    return Symbol(name, SymbolType.QUATERNION)


def add(*terms: ExpressionLike) -> Add:
    return Add(tuple(as_expression(t) for t in terms))


def mul(*factors: ExpressionLike) -> Mul:
    return Mul(tuple(as_expression(f) for f in factors))


def pow_(base: ExpressionLike, exponent: ExpressionLike) -> Pow:
    return Pow(as_expression(base), as_expression(exponent))


def function(name: str, *args: ExpressionLike) -> Function:
    return Function(name, tuple(as_expression(a) for a in args))


def apply(name: str, args: Iterable[ExpressionLike]) -> Function:
    return Function(name, tuple(as_expression(a) for a in args))


def sqrt(arg: ExpressionLike) -> Pow:
    return Pow(as_expression(arg), Number(Fraction(1, 2)))


def integral(integrand: ExpressionLike, variable: Symbol) -> Integral:
    return Integral(as_expression(integrand), variable)


def derivative(expression: ExpressionLike, variable: Symbol, order: int = 1) -> Derivative:
    return Derivative(as_expression(expression), variable, order)


def pi() -> Constant:
    return Constant("pi")


def e() -> Constant:
    return Constant("e")
