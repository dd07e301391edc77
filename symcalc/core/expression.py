"""Expression tree nodes.

Every node is an immutable, hashable dataclass. Compound nodes hold their
children in tuples, so copying a subtree is a reference copy and siblings can
be shared between trees without duplication.

Arithmetic operators build raw nodes and never reorder or simplify:
`x * 2 + 1` is `Add((Mul((x, Number(2))), Number(1)))`.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Tuple, Union

from symcalc.core.number import NumericValue, normalize
from symcalc.core.symbol import SymbolType
from symcalc.exceptions import InvalidExpressionError

# Names accepted by Constant
KNOWN_CONSTANTS = frozenset({"pi", "e"})

ExpressionLike = Union["Expression", int, Fraction, float]


class Expression:
    """Base class for all expression nodes."""

    __slots__ = ()

    def children(self) -> Tuple[Expression, ...]:
        return ()

    def is_commutative(self) -> bool:
        """True if this node commutes under multiplication.

        Derived on every call from the symbols it contains.
        """
        return all(child.is_commutative() for child in self.children())

    def is_number(self) -> bool:
        return False

    def is_zero(self) -> bool:
        return False

    def is_one(self) -> bool:
        return False

    def __str__(self) -> str:
        from symcalc.core.printing import to_string

        return to_string(self)

    # Arithmetic builds raw nodes; see symcalc.core.simplify for folding

    def __add__(self, other: ExpressionLike) -> Expression:
        return Add((self, as_expression(other)))

    def __radd__(self, other: ExpressionLike) -> Expression:
        return Add((as_expression(other), self))

    def __sub__(self, other: ExpressionLike) -> Expression:
        return Add((self, Mul((Number(-1), as_expression(other)))))

    def __rsub__(self, other: ExpressionLike) -> Expression:
        return Add((as_expression(other), Mul((Number(-1), self))))

    def __mul__(self, other: ExpressionLike) -> Expression:
        return Mul((self, as_expression(other)))

    def __rmul__(self, other: ExpressionLike) -> Expression:
        return Mul((as_expression(other), self))

    def __truediv__(self, other: ExpressionLike) -> Expression:
        return Mul((self, Pow(as_expression(other), Number(-1))))

    def __rtruediv__(self, other: ExpressionLike) -> Expression:
        return Mul((as_expression(other), Pow(self, Number(-1))))

    def __pow__(self, other: ExpressionLike) -> Expression:
        return Pow(self, as_expression(other))

    def __rpow__(self, other: ExpressionLike) -> Expression:
        return Pow(as_expression(other), self)

    def __neg__(self) -> Expression:
        return Mul((Number(-1), self))


def as_expression(value: object) -> Expression:
    """Lift a Python number to a Number node; pass expressions through.

    Raises:
        InvalidExpressionError: If value is neither an Expression nor a number
    """
    if isinstance(value, Expression):
        return value
    return Number(value)  # type: ignore[arg-type]


def _check_children(owner: str, children: object) -> Tuple[Expression, ...]:
    if isinstance(children, Expression) or not isinstance(children, (tuple, list)):
        raise InvalidExpressionError(
            f"{owner} expects a sequence of expressions",
            details={"got": type(children).__name__},
        )
    items = tuple(children)
    for item in items:
        if not isinstance(item, Expression):
            raise InvalidExpressionError(
                f"{owner} children must be expressions",
                details={"got": type(item).__name__},
            )
    return items


@dataclass(frozen=True, slots=True)
class Number(Expression):
    """An exact integer or rational, or a float."""

    value: NumericValue

    def __post_init__(self) -> None:
        try:
            normalized = normalize(self.value)
        except (TypeError, ValueError) as e:
            raise InvalidExpressionError(
                "Invalid number", details={"value": repr(self.value), "reason": str(e)}
            ) from e
        object.__setattr__(self, "value", normalized)

    def is_commutative(self) -> bool:
        return True

    def is_number(self) -> bool:
        return True

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1


@dataclass(frozen=True, slots=True)
class Symbol(Expression):
    """A named variable. Its type decides whether it commutes."""

    name: str
    symbol_type: SymbolType = SymbolType.SCALAR

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidExpressionError(
                "Symbol name must be a non-empty string", details={"name": repr(self.name)}
            )
        if not isinstance(self.symbol_type, SymbolType):
            raise InvalidExpressionError(
                "Unknown symbol type", details={"symbol_type": repr(self.symbol_type)}
            )

    def is_commutative(self) -> bool:
        return self.symbol_type.is_commutative


@dataclass(frozen=True, slots=True)
class Constant(Expression):
    """A named mathematical constant (pi or e)."""

    name: str

    def __post_init__(self) -> None:
        if self.name not in KNOWN_CONSTANTS:
            raise InvalidExpressionError(
                "Unknown constant",
                details={"name": self.name, "known": sorted(KNOWN_CONSTANTS)},
            )

    def is_commutative(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Add(Expression):
    """A sum. Terms keep the order they were given in."""

    terms: Tuple[Expression, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", _check_children("Add", self.terms))

    def children(self) -> Tuple[Expression, ...]:
        return self.terms


@dataclass(frozen=True, slots=True)
class Mul(Expression):
    """A product. Factors keep the order they were given in.

    A product may only be reordered when every factor is commutative.
    """

    factors: Tuple[Expression, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "factors", _check_children("Mul", self.factors))

    def children(self) -> Tuple[Expression, ...]:
        return self.factors


@dataclass(frozen=True, slots=True)
class Pow(Expression):
    """base raised to exponent."""

    base: Expression
    exponent: Expression

    def __post_init__(self) -> None:
        _check_children("Pow", (self.base, self.exponent))

    def children(self) -> Tuple[Expression, ...]:
        return (self.base, self.exponent)


@dataclass(frozen=True, slots=True)
class Function(Expression):
    """A named function applied to arguments."""

    name: str
    args: Tuple[Expression, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidExpressionError(
                "Function name must be a non-empty string", details={"name": repr(self.name)}
            )
        object.__setattr__(self, "args", _check_children(f"Function {self.name}", self.args))

    def children(self) -> Tuple[Expression, ...]:
        return self.args


@dataclass(frozen=True, slots=True)
class Integral(Expression):
    """An unevaluated antiderivative: no rule applied to integrand."""

    integrand: Expression
    variable: Symbol

    def __post_init__(self) -> None:
        _check_children("Integral", (self.integrand,))
        if not isinstance(self.variable, Symbol):
            raise InvalidExpressionError(
                "Integral variable must be a Symbol",
                details={"got": type(self.variable).__name__},
            )

    def children(self) -> Tuple[Expression, ...]:
        return (self.integrand, self.variable)


@dataclass(frozen=True, slots=True)
class Derivative(Expression):
    """An unevaluated derivative of the given order."""

    expression: Expression
    variable: Symbol
    order: int = 1

    def __post_init__(self) -> None:
        _check_children("Derivative", (self.expression,))
        if not isinstance(self.variable, Symbol):
            raise InvalidExpressionError(
                "Derivative variable must be a Symbol",
                details={"got": type(self.variable).__name__},
            )
        if isinstance(self.order, bool) or not isinstance(self.order, int) or self.order < 1:
            raise InvalidExpressionError(
                "Derivative order must be a positive integer", details={"order": self.order}
            )

    def children(self) -> Tuple[Expression, ...]:
        return (self.expression, self.variable)


# Shared leaves; nodes are immutable so reuse is safe
ZERO = Number(0)
ONE = Number(1)
NEG_ONE = Number(-1)
