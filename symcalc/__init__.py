"""symcalc - exact symbolic differentiation and integration.

Expressions are immutable trees (symcalc.core). Calculus rules for named
functions live in a read-only registry (symcalc.functions), consulted by the
derivative and integral engines (symcalc.calculus).
"""

from symcalc.core import (
    SymbolType,
    Expression,
    Number,
    Symbol,
    Constant,
    Add,
    Mul,
    Pow,
    Function,
    Integral,
    Derivative,
    integer,
    rational,
    number,
    symbol,
    symbols,
    matrix_symbol,
    operator_symbol,
    quaternion_symbol,
    function,
    apply,
    sqrt,
    integral,
    derivative,
    pi,
    e,
    simplify,
    substitute,
)
from symcalc.functions import FunctionRegistry, get_registry, build_default_registry
from symcalc.calculus import (
    differentiate,
    integrate,
    nth_derivative,
    mixed_partial,
    gradient,
    jacobian,
    hessian,
    is_differentiable,
)

__version__ = "0.1.0"

__all__ = [
    "SymbolType",
    "Expression",
    "Number",
    "Symbol",
    "Constant",
    "Add",
    "Mul",
    "Pow",
    "Function",
    "Integral",
    "Derivative",
    "integer",
    "rational",
    "number",
    "symbol",
    "symbols",
    "matrix_symbol",
    "operator_symbol",
    "quaternion_symbol",
    "function",
    "apply",
    "sqrt",
    "integral",
    "derivative",
    "pi",
    "e",
    "simplify",
    "substitute",
    "FunctionRegistry",
    "get_registry",
    "build_default_registry",
    "differentiate",
    "integrate",
    "nth_derivative",
    "mixed_partial",
    "gradient",
    "jacobian",
    "hessian",
    "is_differentiable",
]
