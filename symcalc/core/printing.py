"""Plain infix rendering for logs and debugging.

Display-quality formatting (LaTeX, pretty printing) belongs to consumers.
"""

from fractions import Fraction

from symcalc.core.expression import (
    Add,
    Constant,
    Derivative,
    Expression,
    Function,
    Integral,
    Mul,
    Number,
    Pow,
    Symbol,
)

_ADD = 10
_MUL = 20
_POW = 30
_ATOM = 100


def _precedence(expr: Expression) -> int:
    if isinstance(expr, Add):
        return _ADD
    if isinstance(expr, Mul):
        return _MUL
    if isinstance(expr, Pow):
        return _POW
    if isinstance(expr, Number) and (expr.value < 0 or isinstance(expr.value, Fraction)):
        return _MUL
    return _ATOM


def _wrap(expr: Expression, parent: int) -> str:
    text = to_string(expr)
    if _precedence(expr) <= parent:
        return f"({text})"
    return text


def to_string(expr: Expression) -> str:
    """Render expr as a one-line infix string."""
    if isinstance(expr, Number):
        return str(expr.value)
    if isinstance(expr, (Symbol, Constant)):
        return expr.name
    if isinstance(expr, Add):
        if not expr.terms:
            return "0"
        parts = [to_string(expr.terms[0])]
        for term in expr.terms[1:]:
            text = _wrap(term, _ADD - 1)
            if text.startswith("-"):
                parts.append(f"- {text[1:]}")
            else:
                parts.append(f"+ {text}")
        return " ".join(parts)
    if isinstance(expr, Mul):
        if not expr.factors:
            return "1"
        factors = list(expr.factors)
        prefix = ""
        if len(factors) > 1 and isinstance(factors[0], Number) and factors[0].value == -1:
            prefix = "-"
            factors = factors[1:]
        return prefix + "*".join(_wrap(f, _MUL) for f in factors)
    if isinstance(expr, Pow):
        return f"{_wrap(expr.base, _POW)}^{_wrap(expr.exponent, _POW)}"
    if isinstance(expr, Function):
        return f"{expr.name}({', '.join(to_string(a) for a in expr.args)})"
    if isinstance(expr, Integral):
        return f"Integral({to_string(expr.integrand)}, {expr.variable.name})"
    if isinstance(expr, Derivative):
        if expr.order == 1:
            return f"Derivative({to_string(expr.expression)}, {expr.variable.name})"
        return (
            f"Derivative({to_string(expr.expression)}, {expr.variable.name}, {expr.order})"
        )
    return repr(expr)
