"""Function properties stored in the registry.

Four kinds of function are known. Only elementary and special functions carry
calculus rules here; polynomial families and user-defined functions are
registered so that their names are recognised, but every calculus query on
them answers "no rule".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from symcalc.core.expression import Expression, Symbol
from symcalc.functions.rules import AntiderivativeRule, DerivativeRule


class FunctionFamily(str, Enum):
    ELEMENTARY = "elementary"
    SPECIAL = "special"
    POLYNOMIAL = "polynomial"
    USER_DEFINED = "user_defined"


class Domain(str, Enum):
    """Real domain of a one-argument function."""

    REAL = "real"
    POSITIVE = "positive"
    NONZERO = "nonzero"
    CLOSED_UNIT_INTERVAL = "closed_unit_interval"
    OPEN_UNIT_INTERVAL = "open_unit_interval"
    AT_LEAST_ONE = "at_least_one"
    OUTSIDE_UNIT_INTERVAL = "outside_unit_interval"
    # Real line minus isolated poles (tan, sec, gamma, ...)
    REAL_EXCEPT_POLES = "real_except_poles"

    def contains(self, value: float) -> bool:
        """Membership test for a real value; poles are not modelled."""
        if self in (Domain.REAL, Domain.REAL_EXCEPT_POLES):
            return True
        if self is Domain.POSITIVE:
            return value > 0
        if self is Domain.NONZERO:
            return value != 0
        if self is Domain.CLOSED_UNIT_INTERVAL:
            return -1 <= value <= 1
        if self is Domain.OPEN_UNIT_INTERVAL:
            return -1 < value < 1
        if self is Domain.AT_LEAST_ONE:
            return value >= 1
        return abs(value) >= 1


@dataclass(frozen=True)
class SpecialValue:
    """f(input) = output exactly."""

    input: Expression
    output: Expression
    latex: str = ""


@dataclass(frozen=True)
class _PropertiesBase:
    """Fields and queries shared by every kind of function."""

    name: str
    arity: int = 1
    domain: Domain = Domain.REAL
    special_values: Tuple[SpecialValue, ...] = ()
    description: str = ""

    @property
    def family(self) -> FunctionFamily:
        raise NotImplementedError

    def derivative_rule(self) -> Optional[DerivativeRule]:
        return None

    def antiderivative_rule(self) -> Optional[AntiderivativeRule]:
        return None

    def has_derivative(self) -> bool:
        return self.derivative_rule() is not None

    def has_antiderivative(self) -> bool:
        return self.antiderivative_rule() is not None

    def derivative_expression(self, arg: Expression) -> Optional[Expression]:
        """f'(arg) without the chain factor, or None when there is no direct form."""
        rule = self.derivative_rule()
        if rule is None:
            return None
        return rule.apply(arg)

    def antiderivative_expression(self, var: Symbol) -> Optional[Expression]:
        rule = self.antiderivative_rule()
        if rule is None:
            return None
        return rule.apply(var)

    def special_value(self, arg: Expression) -> Optional[Expression]:
        for value in self.special_values:
            if value.input == arg:
                return value.output
        return None


@dataclass(frozen=True)
class ElementaryProperties(_PropertiesBase):
    """sin, exp, ln, arcsin, ..."""

    derivative: Optional[DerivativeRule] = None
    antiderivative: Optional[AntiderivativeRule] = None
    periodicity: Optional[Expression] = None

    @property
    def family(self) -> FunctionFamily:
        return FunctionFamily.ELEMENTARY

    def derivative_rule(self) -> Optional[DerivativeRule]:
        return self.derivative

    def antiderivative_rule(self) -> Optional[AntiderivativeRule]:
        return self.antiderivative


@dataclass(frozen=True)
class SpecialProperties(_PropertiesBase):
    """gamma, erf, digamma, ..."""

    derivative: Optional[DerivativeRule] = None
    antiderivative: Optional[AntiderivativeRule] = None
    recurrence: str = ""

    @property
    def family(self) -> FunctionFamily:
        return FunctionFamily.SPECIAL

    def derivative_rule(self) -> Optional[DerivativeRule]:
        return self.derivative

    def antiderivative_rule(self) -> Optional[AntiderivativeRule]:
        return self.antiderivative


@dataclass(frozen=True)
class PolynomialProperties(_PropertiesBase):
    """Orthogonal polynomial families P(n, x). No calculus rules here."""

    recurrence: str = ""

    @property
    def family(self) -> FunctionFamily:
        return FunctionFamily.POLYNOMIAL


@dataclass(frozen=True)
class UserDefinedProperties(_PropertiesBase):
    """A name the caller declared, with no known calculus."""

    @property
    def family(self) -> FunctionFamily:
        return FunctionFamily.USER_DEFINED


FunctionProperties = Union[
    ElementaryProperties,
    SpecialProperties,
    PolynomialProperties,
    UserDefinedProperties,
]
