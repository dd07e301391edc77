"""Classical orthogonal polynomial families.

Registered by name so they are recognised; P(n, x) takes the degree as its
first argument and carries no calculus rules.
"""

from typing import List

from symcalc.functions.properties import FunctionProperties, PolynomialProperties

_RECURRENCES = {
    "legendre": "(n+1)P_{n+1}(x) = (2n+1)xP_n(x) - nP_{n-1}(x)",
    "hermite": "H_{n+1}(x) = 2xH_n(x) - 2nH_{n-1}(x)",
    "chebyshev_t": "T_{n+1}(x) = 2xT_n(x) - T_{n-1}(x)",
    "chebyshev_u": "U_{n+1}(x) = 2xU_n(x) - U_{n-1}(x)",
    "laguerre": "(n+1)L_{n+1}(x) = (2n+1-x)L_n(x) - nL_{n-1}(x)",
}


def polynomial_functions() -> List[FunctionProperties]:
    return [
        PolynomialProperties(name=name, arity=2, recurrence=recurrence)
        for name, recurrence in _RECURRENCES.items()
    ]
