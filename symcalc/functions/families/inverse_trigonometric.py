"""Inverse circular functions: arcsin, arccos, arctan, arccot, arcsec, arccsc.

Every antiderivative here comes from one integration by parts,
x·f(x) - ∫x·f'(x)dx, with the remaining integral done in closed form.
"""

from typing import List

from symcalc.core.expression import Add, Expression, Mul, Number, Pow, Symbol
from symcalc.functions.families.common import (
    HALF,
    NEG_HALF,
    by_parts,
    call,
    ln_abs,
    neg,
    one_minus_square,
    one_plus_square,
    recip,
    sign_of,
    square_minus_one,
)
from symcalc.functions.properties import (
    Domain,
    ElementaryProperties,
    FunctionProperties,
    SpecialValue,
)
from symcalc.functions.rules import custom_antiderivative, custom_derivative

ZERO = Number(0)
ONE = Number(1)


def _arcsec_derivative(u: Expression) -> Expression:
    # 1/(|u|·√(u²-1))
    return recip(Mul((call("abs", u), Pow(square_minus_one(u), HALF))))


def _arcsec_correction(x: Symbol) -> Expression:
    # sign(x)·ln|x + √(x²-1)|, valid on both branches |x| > 1
    return Mul((sign_of(x), ln_abs(Add((x, Pow(square_minus_one(x), HALF))))))


def inverse_trigonometric_functions() -> List[FunctionProperties]:
    """Properties of the inverse circular functions."""
    return [
        ElementaryProperties(
            name="arcsin",
            domain=Domain.CLOSED_UNIT_INTERVAL,
            derivative=custom_derivative(
                lambda u: Pow(one_minus_square(u), NEG_HALF), "1/√(1-x²)"
            ),
            antiderivative=custom_antiderivative(
                lambda x: by_parts(x, "arcsin", Pow(one_minus_square(x), HALF)),
                "∫arcsin(x)dx = x·arcsin(x) + √(1-x²) + C",
            ),
            special_values=(SpecialValue(ZERO, ZERO, r"\arcsin(0) = 0"),),
        ),
        ElementaryProperties(
            name="arccos",
            domain=Domain.CLOSED_UNIT_INTERVAL,
            derivative=custom_derivative(
                lambda u: neg(Pow(one_minus_square(u), NEG_HALF)), "-1/√(1-x²)"
            ),
            antiderivative=custom_antiderivative(
                lambda x: by_parts(x, "arccos", neg(Pow(one_minus_square(x), HALF))),
                "∫arccos(x)dx = x·arccos(x) - √(1-x²) + C",
            ),
            special_values=(SpecialValue(ONE, ZERO, r"\arccos(1) = 0"),),
        ),
        ElementaryProperties(
            name="arctan",
            derivative=custom_derivative(lambda u: recip(one_plus_square(u)), "1/(1+x²)"),
            antiderivative=custom_antiderivative(
                lambda x: by_parts(
                    x, "arctan", neg(Mul((HALF, call("ln", one_plus_square(x)))))
                ),
                "∫arctan(x)dx = x·arctan(x) - ½ln(1+x²) + C",
            ),
            special_values=(SpecialValue(ZERO, ZERO, r"\arctan(0) = 0"),),
        ),
        ElementaryProperties(
            name="arccot",
            derivative=custom_derivative(
                lambda u: neg(recip(one_plus_square(u))), "-1/(1+x²)"
            ),
            antiderivative=custom_antiderivative(
                lambda x: by_parts(x, "arccot", Mul((HALF, call("ln", one_plus_square(x))))),
                "∫arccot(x)dx = x·arccot(x) + ½ln(1+x²) + C",
            ),
        ),
        ElementaryProperties(
            name="arcsec",
            domain=Domain.OUTSIDE_UNIT_INTERVAL,
            derivative=custom_derivative(_arcsec_derivative, "1/(|x|·√(x²-1))"),
            antiderivative=custom_antiderivative(
                lambda x: by_parts(x, "arcsec", neg(_arcsec_correction(x))),
                "∫arcsec(x)dx = x·arcsec(x) - sgn(x)·ln|x + √(x²-1)| + C",
            ),
            special_values=(SpecialValue(ONE, ZERO, r"\operatorname{arcsec}(1) = 0"),),
        ),
        ElementaryProperties(
            name="arccsc",
            domain=Domain.OUTSIDE_UNIT_INTERVAL,
            derivative=custom_derivative(
                lambda u: neg(_arcsec_derivative(u)), "-1/(|x|·√(x²-1))"
            ),
            antiderivative=custom_antiderivative(
                lambda x: by_parts(x, "arccsc", _arcsec_correction(x)),
                "∫arccsc(x)dx = x·arccsc(x) + sgn(x)·ln|x + √(x²-1)| + C",
            ),
        ),
    ]
