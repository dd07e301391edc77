"""Special functions: erf, erfc, gamma, digamma, polygamma, beta, zeta."""

from typing import List

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
from symcalc.functions.families.common import NEG_HALF, call, neg, square
from symcalc.functions.properties import (
    Domain,
    FunctionProperties,
    SpecialProperties,
    SpecialValue,
)
from symcalc.functions.rules import custom_antiderivative, custom_derivative

ZERO = Number(0)
ONE = Number(1)

# 1/sqrt(pi)
_INV_SQRT_PI = Pow(Constant("pi"), NEG_HALF)


def _gaussian(u: Expression) -> Function:
    """exp(-u²)"""
    return call("exp", neg(square(u)))


def _erf_derivative(u: Expression) -> Mul:
    return Mul((Number(2), _INV_SQRT_PI, _gaussian(u)))


def _erf_antiderivative(x: Symbol) -> Add:
    # ∫erf = x·erf(x) + exp(-x²)/√π
    return Add((Mul((x, call("erf", x))), Mul((_INV_SQRT_PI, _gaussian(x)))))


def _erfc_antiderivative(x: Symbol) -> Add:
    return Add((Mul((x, call("erfc", x))), neg(Mul((_INV_SQRT_PI, _gaussian(x))))))


def special_functions() -> List[FunctionProperties]:
    """Special functions with the calculus that has a closed form."""
    return [
        SpecialProperties(
            name="erf",
            derivative=custom_derivative(_erf_derivative, "2/√π·exp(-x²)"),
            antiderivative=custom_antiderivative(
                _erf_antiderivative, "∫erf(x)dx = x·erf(x) + exp(-x²)/√π + C"
            ),
            special_values=(SpecialValue(ZERO, ZERO, r"\operatorname{erf}(0) = 0"),),
            description="Error function",
        ),
        SpecialProperties(
            name="erfc",
            derivative=custom_derivative(lambda u: neg(_erf_derivative(u)), "-2/√π·exp(-x²)"),
            antiderivative=custom_antiderivative(
                _erfc_antiderivative, "∫erfc(x)dx = x·erfc(x) - exp(-x²)/√π + C"
            ),
            special_values=(SpecialValue(ZERO, ONE, r"\operatorname{erfc}(0) = 1"),),
            description="Complementary error function 1 - erf(x)",
        ),
        SpecialProperties(
            name="gamma",
            domain=Domain.REAL_EXCEPT_POLES,
            derivative=custom_derivative(
                lambda u: Mul((call("gamma", u), call("digamma", u))), "Γ(x)·ψ(x)"
            ),
            recurrence="Γ(x+1) = x·Γ(x)",
            special_values=(
                SpecialValue(ONE, ONE, r"\Gamma(1) = 1"),
                SpecialValue(Number(2), ONE, r"\Gamma(2) = 1"),
            ),
            description="Euler gamma function",
        ),
        SpecialProperties(
            name="digamma",
            domain=Domain.REAL_EXCEPT_POLES,
            derivative=custom_derivative(
                lambda u: Function("polygamma", (ONE, u)), "ψ₁(x)"
            ),
            recurrence="ψ(x+1) = ψ(x) + 1/x",
            description="Logarithmic derivative of gamma",
        ),
        SpecialProperties(
            name="polygamma",
            arity=2,
            domain=Domain.REAL_EXCEPT_POLES,
            recurrence="ψₙ(x+1) = ψₙ(x) + (-1)ⁿ·n!/x^(n+1)",
            description="polygamma(n, x), the (n+1)-th derivative of ln Γ(x)",
        ),
        SpecialProperties(
            name="beta",
            arity=2,
            recurrence="B(a, b) = Γ(a)·Γ(b)/Γ(a+b)",
            description="Euler beta function",
        ),
        SpecialProperties(
            name="zeta",
            domain=Domain.REAL_EXCEPT_POLES,
            special_values=(SpecialValue(ZERO, NEG_HALF, r"\zeta(0) = -1/2"),),
            description="Riemann zeta function",
        ),
    ]
