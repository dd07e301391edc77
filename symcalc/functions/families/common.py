"""Small expression builders shared by the family modules."""

from fractions import Fraction
from typing import Union

from symcalc.core.expression import Add, Expression, Function, Mul, Number, Pow

HALF = Number(Fraction(1, 2))
NEG_HALF = Number(Fraction(-1, 2))


def call(name: str, arg: Expression) -> Function:
    return Function(name, (arg,))


def neg(expr: Expression) -> Mul:
    return Mul((Number(-1), expr))


def recip(expr: Expression) -> Pow:
    return Pow(expr, Number(-1))


def square(expr: Expression) -> Pow:
    return Pow(expr, Number(2))


def scaled(coefficient: Union[int, Fraction], expr: Expression) -> Mul:
    return Mul((Number(coefficient), expr))


def one_minus_square(expr: Expression) -> Add:
    """1 - expr^2"""
    return Add((Number(1), neg(square(expr))))


def one_plus_square(expr: Expression) -> Add:
    """1 + expr^2"""
    return Add((Number(1), square(expr)))


def square_minus_one(expr: Expression) -> Add:
    """expr^2 - 1"""
    return Add((square(expr), Number(-1)))


def ln_abs(expr: Expression) -> Function:
    """ln|expr|"""
    return call("ln", call("abs", expr))


def sign_of(expr: Expression) -> Mul:
    """expr/|expr|, the sign of a nonzero expr."""
    return Mul((expr, recip(call("abs", expr))))


def by_parts(var: Expression, name: str, correction: Expression) -> Add:
    """x*f(x) + correction, the shape every by-parts closed form here takes."""
    return Add((Mul((var, call(name, var))), correction))
