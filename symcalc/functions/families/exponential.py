"""Exponential, logarithmic and power-like functions: exp, ln, log, log2, sqrt, abs."""

from fractions import Fraction
from typing import List

from symcalc.core.expression import Add, Expression, Mul, Number, Pow, Symbol
from symcalc.functions.families.common import HALF, call, neg, recip, sign_of
from symcalc.functions.properties import (
    Domain,
    ElementaryProperties,
    FunctionProperties,
    SpecialValue,
)
from symcalc.functions.rules import (
    custom_antiderivative,
    custom_derivative,
    simple_antiderivative,
    simple_derivative,
)

ZERO = Number(0)
ONE = Number(1)


def _x_ln_x_minus_x(x: Symbol) -> Add:
    # Integration by parts of ln(x) with u = ln(x), dv = dx
    return Add((Mul((x, call("ln", x))), neg(x)))


def _log_base(base: int, name: str) -> ElementaryProperties:
    """log_b(x) = ln(x)/ln(b), so both rules carry a 1/ln(b) factor."""
    ln_base = call("ln", Number(base))

    def derivative(u: Expression) -> Expression:
        return recip(Mul((u, ln_base)))

    def antiderivative(x: Symbol) -> Expression:
        return Mul((recip(ln_base), _x_ln_x_minus_x(x)))

    return ElementaryProperties(
        name=name,
        domain=Domain.POSITIVE,
        derivative=custom_derivative(derivative, f"1/(x·ln({base}))"),
        antiderivative=custom_antiderivative(
            antiderivative, f"∫{name}(x)dx = (x·ln(x) - x)/ln({base}) + C"
        ),
        special_values=(SpecialValue(ONE, ZERO, rf"\log_{{{base}}}(1) = 0"),),
    )


def exponential_functions() -> List[FunctionProperties]:
    """exp, ln, log (base 10), log2, sqrt and abs."""
    return [
        ElementaryProperties(
            name="exp",
            derivative=simple_derivative("exp"),
            antiderivative=simple_antiderivative("exp", 1, "∫exp(x)dx = exp(x) + C"),
            special_values=(SpecialValue(ZERO, ONE, r"e^0 = 1"),),
        ),
        ElementaryProperties(
            name="ln",
            domain=Domain.POSITIVE,
            derivative=custom_derivative(recip, "1/x"),
            antiderivative=custom_antiderivative(
                _x_ln_x_minus_x, "∫ln(x)dx = x·ln(x) - x + C"
            ),
            special_values=(SpecialValue(ONE, ZERO, r"\ln(1) = 0"),),
        ),
        _log_base(10, "log"),
        _log_base(2, "log2"),
        ElementaryProperties(
            name="sqrt",
            domain=Domain.POSITIVE,
            derivative=custom_derivative(
                lambda u: Mul((HALF, recip(call("sqrt", u)))), "1/(2√x)"
            ),
            antiderivative=custom_antiderivative(
                lambda x: Mul((Number(Fraction(2, 3)), Pow(x, Number(Fraction(3, 2))))),
                "∫√x dx = ⅔x^(3/2) + C",
            ),
            special_values=(
                SpecialValue(ZERO, ZERO, r"\sqrt{0} = 0"),
                SpecialValue(ONE, ONE, r"\sqrt{1} = 1"),
            ),
        ),
        ElementaryProperties(
            name="abs",
            domain=Domain.NONZERO,
            derivative=custom_derivative(sign_of, "x/|x|"),
            antiderivative=custom_antiderivative(
                lambda x: Mul((HALF, x, call("abs", x))),
                "∫|x|dx = x·|x|/2 + C",
            ),
            special_values=(SpecialValue(ZERO, ZERO, r"|0| = 0"),),
        ),
    ]
