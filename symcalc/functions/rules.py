"""Derivative and antiderivative rules.

A rule is a small tagged value: one of a handful of strategy dataclasses plus
a documentation template. Both calculus engines consume rules generically, so
giving a new function calculus means registering rules, never editing an
engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Tuple, Union

from symcalc.core.expression import Expression, Function, Mul, Number, Symbol

DerivativeBuilder = Callable[[Expression], Expression]
AntiderivativeBuilder = Callable[[Symbol], Expression]
PartsBuilder = Callable[[Expression], Tuple[Expression, Expression]]


class ConstantOfIntegration(str, Enum):
    """How callers should treat the constant of integration."""

    ADD_CONSTANT = "add_constant"
    DEFINITE_INTEGRAL = "definite_integral"
    USER_HANDLED = "user_handled"


# ---------------------------------------------------------------------------
# Derivative strategies
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimpleDerivative:
    """d/du f(u) = g(u) where g is another registered function."""

    target: str


@dataclass(frozen=True)
class ChainRuleDerivative:
    """Same as SimpleDerivative; kept for rules written in the older form."""

    target: str


@dataclass(frozen=True)
class CustomDerivative:
    """d/du f(u) = builder(u), for derivatives that are not a single function."""

    builder: DerivativeBuilder = field(repr=False, compare=False)


@dataclass(frozen=True)
class ProductRuleDerivative:
    """f(u) is defined as a product u1(u)*u2(u).

    definition returns the two factors for a given argument; without one the
    rule is only a marker and the derivative stays unevaluated.
    """

    definition: Optional[PartsBuilder] = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class QuotientRuleDerivative:
    """f(u) is defined as a quotient n(u)/d(u); see ProductRuleDerivative."""

    definition: Optional[PartsBuilder] = field(default=None, repr=False, compare=False)


DerivativeStrategy = Union[
    SimpleDerivative,
    ChainRuleDerivative,
    CustomDerivative,
    ProductRuleDerivative,
    QuotientRuleDerivative,
]


@dataclass(frozen=True)
class DerivativeRule:
    """Derivative of a function with respect to its (single) argument."""

    strategy: DerivativeStrategy
    result_template: str = ""

    def apply(self, arg: Expression) -> Optional[Expression]:
        """f'(arg), without the chain factor d(arg)/dx.

        Returns None for structural markers, which the derivative engine
        resolves from their definition.
        """
        strategy = self.strategy
        if isinstance(strategy, (SimpleDerivative, ChainRuleDerivative)):
            return Function(strategy.target, (arg,))
        if isinstance(strategy, CustomDerivative):
            return strategy.builder(arg)
        return None

    def parts(self, arg: Expression) -> Optional[Tuple[Expression, Expression]]:
        """The two operands of a product/quotient definition, if any."""
        strategy = self.strategy
        if isinstance(strategy, (ProductRuleDerivative, QuotientRuleDerivative)):
            if strategy.definition is not None:
                return strategy.definition(arg)
        return None

    @property
    def is_quotient(self) -> bool:
        return isinstance(self.strategy, QuotientRuleDerivative)


# ---------------------------------------------------------------------------
# Antiderivative strategies
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimpleAntiderivative:
    """Integral of f(x) dx = coefficient * G(x), G registered."""

    antiderivative_fn: str
    coefficient: Number = Number(1)


@dataclass(frozen=True)
class CustomAntiderivative:
    """Integral of f(x) dx = builder(x), a precomputed closed form."""

    builder: AntiderivativeBuilder = field(repr=False, compare=False)


AntiderivativeStrategy = Union[SimpleAntiderivative, CustomAntiderivative]


@dataclass(frozen=True)
class AntiderivativeRule:
    """Antiderivative of a function of the bare integration variable."""

    strategy: AntiderivativeStrategy
    result_template: str = ""
    constant_handling: ConstantOfIntegration = ConstantOfIntegration.ADD_CONSTANT

    def apply(self, var: Symbol) -> Expression:
        """Build the antiderivative of f(var) with respect to var."""
        strategy = self.strategy
        if isinstance(strategy, SimpleAntiderivative):
            result: Expression = Function(strategy.antiderivative_fn, (var,))
            if strategy.coefficient.is_one():
                return result
            return Mul((strategy.coefficient, result))
        return strategy.builder(var)


# ---------------------------------------------------------------------------
# Shorthands used by the family modules
# ---------------------------------------------------------------------------


def simple_derivative(target: str, template: str = "") -> DerivativeRule:
    return DerivativeRule(SimpleDerivative(target), template or f"{target}(x)")


def custom_derivative(builder: DerivativeBuilder, template: str) -> DerivativeRule:
    return DerivativeRule(CustomDerivative(builder), template)


def simple_antiderivative(
    target: str, coefficient: Union[int, Number] = 1, template: str = ""
) -> AntiderivativeRule:
    if not isinstance(coefficient, Number):
        coefficient = Number(coefficient)
    return AntiderivativeRule(SimpleAntiderivative(target, coefficient), template)


def custom_antiderivative(builder: AntiderivativeBuilder, template: str) -> AntiderivativeRule:
    return AntiderivativeRule(CustomAntiderivative(builder), template)
