"""Tests for the built-in function families.

Every derivative rule is checked numerically against a central difference;
a few closed forms are also checked structurally.
"""

import math
from fractions import Fraction

import pytest

from symcalc.core import Add, Constant, Function, Mul, Number, Pow, Symbol, function_names
from symcalc.functions import (
    CustomAntiderivative,
    Domain,
    QuotientRuleDerivative,
    SimpleAntiderivative,
    SimpleDerivative,
    build_default_registry,
)

X = Symbol("x")
_STEP = 1e-6

_REGISTRY = build_default_registry(validate=True)
_WITH_DERIVATIVE = [
    name
    for name in _REGISTRY.names()
    if _REGISTRY.lookup(name).has_derivative() and _REGISTRY.lookup(name).arity == 1
]


class TestDerivativeRulesNumerically:
    """f'(x) from the rule matches a central difference of f."""

    @pytest.mark.parametrize("name", _WITH_DERIVATIVE)
    def test_rule_matches_central_difference(self, name, evaluate, sample_points):
        properties = _REGISTRY.lookup(name)
        derivative = properties.derivative_expression(X)
        if derivative is None:
            pytest.skip(f"{name} is defined structurally")
        if not all(evaluate.supports(n) for n in function_names(derivative)):
            pytest.skip(f"{name}' uses functions without a numeric form")

        checked = 0
        for point in sample_points:
            if not properties.domain.contains(point):
                continue
            f = Function(name, (X,))
            slope = (
                evaluate(f, {X: point + _STEP}) - evaluate(f, {X: point - _STEP})
            ) / (2 * _STEP)
            assert evaluate(derivative, {X: point}) == pytest.approx(slope, rel=1e-5, abs=1e-6)
            checked += 1
        assert checked >= 2


class TestClosedForms:
    """Structural spot checks of individual rules."""

    def test_sin_cos_pair(self, registry):
        assert registry.lookup("cos").derivative_expression(X) == Mul(
            (Number(-1), Function("sin", (X,)))
        )
        assert registry.lookup("cos").antiderivative_expression(X) == Function("sin", (X,))

    def test_tan_antiderivative(self, registry):
        assert registry.lookup("tan").antiderivative_expression(X) == Mul(
            (Number(-1), Function("ln", (Function("abs", (Function("cos", (X,)),)),)))
        )

    def test_ln_by_parts_form(self, registry):
        rule = registry.antiderivative_rule("ln")
        assert isinstance(rule.strategy, CustomAntiderivative)
        assert rule.apply(X) == Add(
            (Mul((X, Function("ln", (X,)))), Mul((Number(-1), X)))
        )

    def test_exp_is_its_own_derivative(self, registry):
        rule = registry.derivative_rule("exp")
        assert isinstance(rule.strategy, SimpleDerivative)
        assert rule.apply(X) == Function("exp", (X,))
        anti = registry.antiderivative_rule("exp")
        assert isinstance(anti.strategy, SimpleAntiderivative)
        assert anti.apply(X) == Function("exp", (X,))

    def test_erf_derivative(self, registry):
        gaussian = Function("exp", (Mul((Number(-1), Pow(X, Number(2)))),))
        assert registry.lookup("erf").derivative_expression(X) == Mul(
            (Number(2), Pow(Constant("pi"), Number(Fraction(-1, 2))), gaussian)
        )

    def test_gamma_derivative(self, registry):
        assert registry.lookup("gamma").derivative_expression(X) == Mul(
            (Function("gamma", (X,)), Function("digamma", (X,)))
        )
        assert not registry.lookup("gamma").has_antiderivative()

    def test_digamma_derivative_is_polygamma(self, registry):
        assert registry.lookup("digamma").derivative_expression(X) == Function(
            "polygamma", (Number(1), X)
        )

    def test_sqrt_antiderivative(self, registry):
        assert registry.lookup("sqrt").antiderivative_expression(X) == Mul(
            (Number(Fraction(2, 3)), Pow(X, Number(Fraction(3, 2))))
        )

    def test_sinc_is_a_quotient(self, registry):
        rule = registry.derivative_rule("sinc")
        assert isinstance(rule.strategy, QuotientRuleDerivative)
        assert rule.apply(X) is None
        assert rule.parts(X) == (Function("sin", (X,)), X)

    def test_templates_are_documented(self, registry):
        for name in registry.names():
            rule = registry.antiderivative_rule(name)
            if rule is not None:
                assert rule.result_template.startswith("∫"), name


class TestDomains:
    @pytest.mark.parametrize(
        "domain, inside, outside",
        [
            (Domain.POSITIVE, 0.5, -0.5),
            (Domain.NONZERO, -2.0, 0.0),
            (Domain.CLOSED_UNIT_INTERVAL, 1.0, 1.5),
            (Domain.OPEN_UNIT_INTERVAL, 0.99, 1.0),
            (Domain.AT_LEAST_ONE, 1.0, 0.9),
            (Domain.OUTSIDE_UNIT_INTERVAL, -1.2, 0.3),
        ],
    )
    def test_contains(self, domain, inside, outside):
        assert domain.contains(inside)
        assert not domain.contains(outside)

    def test_periodicity_of_sin(self, registry):
        assert registry.lookup("sin").periodicity == Mul((Number(2), Constant("pi")))
        assert math.isclose(float(registry.lookup("sin").periodicity.factors[0].value), 2.0)
