from hypothesis import given, settings, strategies as st

from symcalc.calculus import differentiate, integrate, is_differentiable
from symcalc.core import (
    Add,
    Derivative,
    Expression,
    Function,
    Integral,
    Mul,
    Number,
    Pow,
    Symbol,
    simplify,
    walk,
)

X = Symbol("x")
Y = Symbol("y")

# Strategies
leaves = st.one_of(
    st.sampled_from([X, Y]),
    st.integers(min_value=-5, max_value=5).map(Number),
)
function_names = st.sampled_from(["sin", "cos", "exp", "ln", "tan", "arctan", "erf", "mystery"])


def _extend(children):
    return st.one_of(
        st.lists(children, min_size=2, max_size=3).map(lambda c: Add(tuple(c))),
        st.lists(children, min_size=2, max_size=3).map(lambda c: Mul(tuple(c))),
        st.tuples(children, st.integers(min_value=-2, max_value=3)).map(
            lambda t: Pow(t[0], Number(t[1]))
        ),
        st.tuples(function_names, children).map(lambda t: Function(t[0], (t[1],))),
    )


expressions = st.recursive(leaves, _extend, max_leaves=8)
y_only = st.recursive(
    st.one_of(st.just(Y), st.integers(min_value=-5, max_value=5).map(Number)),
    _extend,
    max_leaves=6,
)


@settings(max_examples=200)
@given(expr=expressions)
def test_fuzz_differentiate_is_total(expr):
    """differentiate never raises and always returns an expression."""
    assert isinstance(differentiate(expr, X), Expression)


@settings(max_examples=200)
@given(expr=expressions)
def test_fuzz_integrate_is_total(expr):
    """integrate never raises; it returns a result or Integral(expr, x)."""
    result = integrate(expr, X)
    assert isinstance(result, Expression)
    if isinstance(result, Integral):
        assert result.variable == X


@settings(max_examples=200)
@given(a=expressions, b=expressions)
def test_fuzz_linearity(a, b):
    result = differentiate(Add((a, b)), X)
    assert result == Add((differentiate(a, X), differentiate(b, X)))


@settings(max_examples=100)
@given(expr=y_only)
def test_fuzz_constant_rule(expr):
    assert simplify(differentiate(expr, X)) == Number(0)
    if not isinstance(expr, Add):
        assert differentiate(expr, X) == Number(0)
    assert integrate(expr, X) == Mul((expr, X))


@settings(max_examples=100)
@given(coefficient=st.integers(min_value=-6, max_value=6).filter(lambda n: n != 0))
def test_fuzz_linear_substitution_round_trip(coefficient):
    f = Function("sin", (Mul((Number(coefficient), X)),))
    assert simplify(differentiate(integrate(f, X), X)) == simplify(f)


@settings(max_examples=200)
@given(expr=expressions)
def test_fuzz_differentiability_check_matches_engine(expr):
    result = differentiate(expr, X)
    unevaluated = any(isinstance(node, Derivative) for node in walk(result))
    assert is_differentiable(expr, X) is not unevaluated
