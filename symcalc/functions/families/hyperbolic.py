"""Hyperbolic functions and their inverses."""

from typing import List

from symcalc.core.expression import Mul, Number, Pow
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
    square,
    square_minus_one,
)
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


def hyperbolic_functions() -> List[FunctionProperties]:
    """sinh, cosh, tanh, coth, sech, csch."""
    return [
        ElementaryProperties(
            name="sinh",
            derivative=simple_derivative("cosh"),
            antiderivative=simple_antiderivative("cosh", 1, "∫sinh(x)dx = cosh(x) + C"),
            special_values=(SpecialValue(ZERO, ZERO, r"\sinh(0) = 0"),),
        ),
        ElementaryProperties(
            name="cosh",
            derivative=simple_derivative("sinh"),
            antiderivative=simple_antiderivative("sinh", 1, "∫cosh(x)dx = sinh(x) + C"),
            special_values=(SpecialValue(ZERO, ONE, r"\cosh(0) = 1"),),
        ),
        ElementaryProperties(
            name="tanh",
            derivative=custom_derivative(lambda u: square(call("sech", u)), "sech²(x)"),
            antiderivative=custom_antiderivative(
                lambda x: call("ln", call("cosh", x)),
                "∫tanh(x)dx = ln(cosh(x)) + C",
            ),
            special_values=(SpecialValue(ZERO, ZERO, r"\tanh(0) = 0"),),
        ),
        ElementaryProperties(
            name="coth",
            domain=Domain.NONZERO,
            derivative=custom_derivative(lambda u: neg(square(call("csch", u))), "-csch²(x)"),
            antiderivative=custom_antiderivative(
                lambda x: ln_abs(call("sinh", x)),
                "∫coth(x)dx = ln|sinh(x)| + C",
            ),
        ),
        ElementaryProperties(
            name="sech",
            derivative=custom_derivative(
                lambda u: neg(Mul((call("sech", u), call("tanh", u)))), "-sech(x)·tanh(x)"
            ),
            antiderivative=custom_antiderivative(
                lambda x: call("arctan", call("sinh", x)),
                "∫sech(x)dx = arctan(sinh(x)) + C",
            ),
            special_values=(SpecialValue(ZERO, ONE, r"\operatorname{sech}(0) = 1"),),
        ),
        ElementaryProperties(
            name="csch",
            domain=Domain.NONZERO,
            derivative=custom_derivative(
                lambda u: neg(Mul((call("csch", u), call("coth", u)))), "-csch(x)·coth(x)"
            ),
            antiderivative=custom_antiderivative(
                lambda x: ln_abs(call("tanh", Mul((HALF, x)))),
                "∫csch(x)dx = ln|tanh(x/2)| + C",
            ),
        ),
    ]


def inverse_hyperbolic_functions() -> List[FunctionProperties]:
    """arcsinh, arccosh, arctanh."""
    return [
        ElementaryProperties(
            name="arcsinh",
            derivative=custom_derivative(
                lambda u: Pow(one_plus_square(u), NEG_HALF), "1/√(1+x²)"
            ),
            antiderivative=custom_antiderivative(
                lambda x: by_parts(x, "arcsinh", neg(Pow(one_plus_square(x), HALF))),
                "∫arcsinh(x)dx = x·arcsinh(x) - √(1+x²) + C",
            ),
            special_values=(SpecialValue(ZERO, ZERO, r"\operatorname{arcsinh}(0) = 0"),),
        ),
        ElementaryProperties(
            name="arccosh",
            domain=Domain.AT_LEAST_ONE,
            derivative=custom_derivative(
                lambda u: Pow(square_minus_one(u), NEG_HALF), "1/√(x²-1)"
            ),
            antiderivative=custom_antiderivative(
                lambda x: by_parts(x, "arccosh", neg(Pow(square_minus_one(x), HALF))),
                "∫arccosh(x)dx = x·arccosh(x) - √(x²-1) + C",
            ),
            special_values=(SpecialValue(ONE, ZERO, r"\operatorname{arccosh}(1) = 0"),),
        ),
        ElementaryProperties(
            name="arctanh",
            domain=Domain.OPEN_UNIT_INTERVAL,
            derivative=custom_derivative(lambda u: recip(one_minus_square(u)), "1/(1-x²)"),
            antiderivative=custom_antiderivative(
                lambda x: by_parts(
                    x,
                    "arctanh",
                    Mul((HALF, call("ln", one_minus_square(x)))),
                ),
                "∫arctanh(x)dx = x·arctanh(x) + ½ln(1-x²) + C",
            ),
            special_values=(SpecialValue(ZERO, ZERO, r"\operatorname{arctanh}(0) = 0"),),
        ),
    ]
