"""Built-in function families.

Each family is a zero-argument callable returning a list of properties. Add
new families here as they are implemented.
"""

from typing import Callable, List, Tuple

from symcalc.functions.families.exponential import exponential_functions
from symcalc.functions.families.hyperbolic import (
    hyperbolic_functions,
    inverse_hyperbolic_functions,
)
from symcalc.functions.families.inverse_trigonometric import inverse_trigonometric_functions
from symcalc.functions.families.polynomial import polynomial_functions
from symcalc.functions.families.special import special_functions
from symcalc.functions.families.trigonometric import trigonometric_functions
from symcalc.functions.properties import FunctionProperties

FamilyFactory = Callable[[], List[FunctionProperties]]

BUILTIN_FAMILIES: Tuple[Tuple[str, FamilyFactory], ...] = (
    ("trigonometric", trigonometric_functions),
    ("hyperbolic", hyperbolic_functions),
    ("exponential", exponential_functions),
    ("inverse_trigonometric", inverse_trigonometric_functions),
    ("inverse_hyperbolic", inverse_hyperbolic_functions),
    ("special", special_functions),
    ("polynomial", polynomial_functions),
)

__all__ = [
    "BUILTIN_FAMILIES",
    "FamilyFactory",
    "exponential_functions",
    "hyperbolic_functions",
    "inverse_hyperbolic_functions",
    "inverse_trigonometric_functions",
    "polynomial_functions",
    "special_functions",
    "trigonometric_functions",
]
