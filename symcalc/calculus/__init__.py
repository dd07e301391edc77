"""Calculus engines.

differentiate() and integrate() are total: when no rule applies they return
an unevaluated Derivative or Integral leaf rather than raising.
"""

from symcalc.calculus.derivative import differentiate
from symcalc.calculus.integral import integrate
from symcalc.calculus.higher_order import (
    nth_derivative,
    mixed_partial,
    gradient,
    jacobian,
    hessian,
)
from symcalc.calculus.checker import is_differentiable

__all__ = [
    "differentiate",
    "integrate",
    "nth_derivative",
    "mixed_partial",
    "gradient",
    "jacobian",
    "hessian",
    "is_differentiable",
]
