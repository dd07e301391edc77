"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a default function registry, common
symbols, and a numeric evaluator used to check calculus results at sample
points.
"""

import math
import sys
from pathlib import Path
from typing import Callable, Dict, List

import numpy as np
import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from symcalc.config import reset_settings  # noqa: E402 - after sys.path setup
from symcalc.core import (  # noqa: E402 - after sys.path setup
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
    matrix_symbol,
)
from symcalc.functions import FunctionRegistry, build_default_registry  # noqa: E402

# Points chosen to avoid the poles of tan, cot, sec, csc and friends
SAMPLE_POINTS: List[float] = [-2.5, -1.7, -0.6, -0.3, 0.4, 0.7, 1.3, 2.2, 3.1]


# ============================================================================
# NUMERIC EVALUATION
# ============================================================================

_NUMERIC_FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
    "cot": lambda v: 1.0 / np.tan(v),
    "sec": lambda v: 1.0 / np.cos(v),
    "csc": lambda v: 1.0 / np.sin(v),
    "sinc": lambda v: np.sin(v) / v,
    "sinh": np.sinh,
    "cosh": np.cosh,
    "tanh": np.tanh,
    "coth": lambda v: 1.0 / np.tanh(v),
    "sech": lambda v: 1.0 / np.cosh(v),
    "csch": lambda v: 1.0 / np.sinh(v),
    "exp": np.exp,
    "ln": np.log,
    "log": np.log10,
    "log2": np.log2,
    "sqrt": np.sqrt,
    "abs": np.abs,
    "arcsin": np.arcsin,
    "arccos": np.arccos,
    "arctan": np.arctan,
    "arccot": lambda v: np.pi / 2 - np.arctan(v),
    "arcsec": lambda v: np.arccos(1.0 / v),
    "arccsc": lambda v: np.arcsin(1.0 / v),
    "arcsinh": np.arcsinh,
    "arccosh": np.arccosh,
    "arctanh": np.arctanh,
    "erf": lambda v: math.erf(float(v)),
    "erfc": lambda v: math.erfc(float(v)),
    "gamma": lambda v: math.gamma(float(v)),
}

_CONSTANTS = {"pi": np.pi, "e": np.e}


class NumericEvaluator:
    """Evaluate an expression tree at a point with numpy.

    Unevaluated Integral and Derivative leaves cannot be evaluated and raise
    ValueError, so a test never compares against a number it did not compute.
    """

    def supports(self, name: str) -> bool:
        return name in _NUMERIC_FUNCTIONS

    def __call__(self, expr: Expression, env: Dict[Symbol, float]) -> float:
        if isinstance(expr, Number):
            return float(expr.value)
        if isinstance(expr, Constant):
            return _CONSTANTS[expr.name]
        if isinstance(expr, Symbol):
            return float(env[expr])
        if isinstance(expr, Add):
            return float(sum(self(t, env) for t in expr.terms))
        if isinstance(expr, Mul):
            result = 1.0
            for factor in expr.factors:
                result *= self(factor, env)
            return float(result)
        if isinstance(expr, Pow):
            return float(np.power(np.float64(self(expr.base, env)), self(expr.exponent, env)))
        if isinstance(expr, Function):
            if len(expr.args) != 1 or expr.name not in _NUMERIC_FUNCTIONS:
                raise ValueError(f"cannot evaluate function {expr.name}")
            return float(_NUMERIC_FUNCTIONS[expr.name](np.float64(self(expr.args[0], env))))
        if isinstance(expr, (Integral, Derivative)):
            raise ValueError(f"cannot evaluate unevaluated {type(expr).__name__}")
        raise ValueError(f"unknown node {type(expr).__name__}")


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture(scope="session")
def evaluate():
    """Numeric evaluator: evaluate(expr, {x: 0.5}) -> float."""
    return NumericEvaluator()


@pytest.fixture(scope="session")
def sample_points():
    return list(SAMPLE_POINTS)


@pytest.fixture(scope="session")
def registry() -> FunctionRegistry:
    """A default registry built once for the session, with validation on."""
    return build_default_registry(validate=True)


@pytest.fixture
def x():
    return Symbol("x")


@pytest.fixture
def y():
    return Symbol("y")


@pytest.fixture
def matrices():
    """Three noncommuting matrix symbols A, B, C."""
    return matrix_symbol("A"), matrix_symbol("B"), matrix_symbol("C")


@pytest.fixture(autouse=True)
def clean_settings():
    """Make every test read settings fresh from its own environment."""
    reset_settings()
    yield
    reset_settings()
