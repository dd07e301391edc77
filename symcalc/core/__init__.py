"""Expression model.

Immutable expression trees, symbol kinds, structural traversal and a light
simplifier.
"""

from symcalc.core.symbol import SymbolType
from symcalc.core.expression import (
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
    ZERO,
    ONE,
    NEG_ONE,
    as_expression,
)
from symcalc.core.constructors import (
    integer,
    rational,
    number,
    symbol,
    symbols,
    matrix_symbol,
    operator_symbol,
    quaternion_symbol,
    add,
    mul,
    pow_,
    function,
    apply,
    sqrt,
    integral,
    derivative,
    pi,
    e,
)
from symcalc.core.traversal import (
    walk,
    free_symbols,
    contains_symbol,
    depends_on,
    DependencyCache,
    substitute,
    function_names,
)
from symcalc.core.simplify import simplify
from symcalc.core.printing import to_string

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
    "ZERO",
    "ONE",
    "NEG_ONE",
    "as_expression",
    "integer",
    "rational",
    "number",
    "symbol",
    "symbols",
    "matrix_symbol",
    "operator_symbol",
    "quaternion_symbol",
    "add",
    "mul",
    "pow_",
    "function",
    "apply",
    "sqrt",
    "integral",
    "derivative",
    "pi",
    "e",
    "walk",
    "free_symbols",
    "contains_symbol",
    "depends_on",
    "DependencyCache",
    "substitute",
    "function_names",
    "simplify",
    "to_string",
]
