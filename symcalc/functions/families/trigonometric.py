"""Circular trigonometric functions: sin, cos, tan, cot, sec, csc, sinc."""

from typing import List

from symcalc.core.expression import Add, Constant, Mul, Number, Symbol
from symcalc.functions.families.common import call, ln_abs, neg, square
from symcalc.functions.properties import (
    Domain,
    ElementaryProperties,
    FunctionProperties,
    SpecialValue,
)
from symcalc.functions.rules import (
    DerivativeRule,
    QuotientRuleDerivative,
    custom_antiderivative,
    custom_derivative,
    simple_antiderivative,
    simple_derivative,
)

ZERO = Number(0)
ONE = Number(1)

_TWO_PI = Mul((Number(2), Constant("pi")))
_PI = Constant("pi")


def _sec_plus_tan(var: Symbol) -> Add:
    return Add((call("sec", var), call("tan", var)))


def _csc_plus_cot(var: Symbol) -> Add:
    return Add((call("csc", var), call("cot", var)))


def trigonometric_functions() -> List[FunctionProperties]:
    """Properties of the circular trigonometric functions."""
    return [
        ElementaryProperties(
            name="sin",
            derivative=simple_derivative("cos"),
            antiderivative=simple_antiderivative("cos", -1, "∫sin(x)dx = -cos(x) + C"),
            periodicity=_TWO_PI,
            special_values=(SpecialValue(ZERO, ZERO, r"\sin(0) = 0"),),
        ),
        ElementaryProperties(
            name="cos",
            derivative=custom_derivative(lambda u: neg(call("sin", u)), "-sin(x)"),
            antiderivative=simple_antiderivative("sin", 1, "∫cos(x)dx = sin(x) + C"),
            periodicity=_TWO_PI,
            special_values=(SpecialValue(ZERO, ONE, r"\cos(0) = 1"),),
        ),
        ElementaryProperties(
            name="tan",
            domain=Domain.REAL_EXCEPT_POLES,
            derivative=custom_derivative(lambda u: square(call("sec", u)), "sec²(x)"),
            antiderivative=custom_antiderivative(
                lambda x: neg(ln_abs(call("cos", x))),
                "∫tan(x)dx = -ln|cos(x)| + C",
            ),
            periodicity=_PI,
            special_values=(SpecialValue(ZERO, ZERO, r"\tan(0) = 0"),),
        ),
        ElementaryProperties(
            name="cot",
            domain=Domain.REAL_EXCEPT_POLES,
            derivative=custom_derivative(lambda u: neg(square(call("csc", u))), "-csc²(x)"),
            antiderivative=custom_antiderivative(
                lambda x: ln_abs(call("sin", x)),
                "∫cot(x)dx = ln|sin(x)| + C",
            ),
            periodicity=_PI,
        ),
        ElementaryProperties(
            name="sec",
            domain=Domain.REAL_EXCEPT_POLES,
            derivative=custom_derivative(
                lambda u: Mul((call("sec", u), call("tan", u))), "sec(x)·tan(x)"
            ),
            antiderivative=custom_antiderivative(
                lambda x: ln_abs(_sec_plus_tan(x)),
                "∫sec(x)dx = ln|sec(x) + tan(x)| + C",
            ),
            periodicity=_TWO_PI,
            special_values=(SpecialValue(ZERO, ONE, r"\sec(0) = 1"),),
        ),
        ElementaryProperties(
            name="csc",
            domain=Domain.REAL_EXCEPT_POLES,
            derivative=custom_derivative(
                lambda u: neg(Mul((call("csc", u), call("cot", u)))), "-csc(x)·cot(x)"
            ),
            antiderivative=custom_antiderivative(
                lambda x: neg(ln_abs(_csc_plus_cot(x))),
                "∫csc(x)dx = -ln|csc(x) + cot(x)| + C",
            ),
            periodicity=_TWO_PI,
        ),
        # sinc(x) = sin(x)/x; its antiderivative Si(x) is not registered
        ElementaryProperties(
            name="sinc",
            derivative=DerivativeRule(
                QuotientRuleDerivative(lambda u: (call("sin", u), u)),
                "(x·cos(x) - sin(x))/x²",
            ),
            description="Unnormalised cardinal sine sin(x)/x",
        ),
    ]
