"""Rule validation run when a registry is built.

Every rule is checked and all failures are collected before raising, so one
build reports every broken entry at once.
"""

from typing import List, Mapping

from symcalc.core.expression import Expression, Symbol
from symcalc.core.traversal import function_names
from symcalc.exceptions import RuleConstructionError
from symcalc.functions.properties import FunctionProperties
from symcalc.functions.rules import (
    AntiderivativeRule,
    ChainRuleDerivative,
    CustomAntiderivative,
    CustomDerivative,
    DerivativeRule,
    SimpleAntiderivative,
    SimpleDerivative,
)
from symcalc.logger import Logger

# Probe passed to builders; any symbol would do
_PROBE = Symbol("x")


def _check_result(
    name: str, kind: str, result: object, known: Mapping[str, FunctionProperties]
) -> List[str]:
    if not isinstance(result, Expression):
        return [f"{name}: {kind} builder returned {type(result).__name__}, not an Expression"]
    unknown = sorted(n for n in function_names(result) if n not in known)
    if unknown:
        return [f"{name}: {kind} refers to unregistered functions {unknown}"]
    return []


def _check_derivative(
    name: str, rule: DerivativeRule, known: Mapping[str, FunctionProperties]
) -> List[str]:
    strategy = rule.strategy
    if isinstance(strategy, (SimpleDerivative, ChainRuleDerivative)):
        if strategy.target not in known:
            return [f"{name}: derivative target '{strategy.target}' is not registered"]
        return []
    if isinstance(strategy, CustomDerivative):
        try:
            result = strategy.builder(_PROBE)
        except Exception as e:
            return [f"{name}: derivative builder raised {type(e).__name__}: {e}"]
        return _check_result(name, "derivative", result, known)

    # Product/quotient markers; a definition is optional
    try:
        parts = rule.parts(_PROBE)
    except Exception as e:
        return [f"{name}: definition raised {type(e).__name__}: {e}"]
    if parts is None:
        return []
    if len(parts) != 2:
        return [f"{name}: definition must return two operands"]
    failures: List[str] = []
    for part in parts:
        failures.extend(_check_result(name, "definition", part, known))
    return failures


def _check_antiderivative(
    name: str, rule: AntiderivativeRule, known: Mapping[str, FunctionProperties]
) -> List[str]:
    strategy = rule.strategy
    if isinstance(strategy, SimpleAntiderivative):
        failures = []
        if strategy.antiderivative_fn not in known:
            failures.append(
                f"{name}: antiderivative target '{strategy.antiderivative_fn}' is not registered"
            )
        if strategy.coefficient.is_zero():
            failures.append(f"{name}: antiderivative coefficient must be non-zero")
        return failures
    if isinstance(strategy, CustomAntiderivative):
        try:
            result = strategy.builder(_PROBE)
        except Exception as e:
            return [f"{name}: antiderivative builder raised {type(e).__name__}: {e}"]
        return _check_result(name, "antiderivative", result, known)
    return [f"{name}: unknown antiderivative strategy {type(strategy).__name__}"]


def validate_rules(entries: Mapping[str, FunctionProperties], logger: Logger) -> None:
    """Check every rule in entries against the rest of the table.

    Args:
        entries: Function name to properties, as about to be frozen
        logger: Logger instance for reporting failures

    Raises:
        RuleConstructionError: If any rule is malformed
    """
    failures: List[str] = []
    for name, properties in entries.items():
        found: List[str] = []
        rule = properties.derivative_rule()
        if rule is not None:
            found.extend(_check_derivative(name, rule, entries))
        anti = properties.antiderivative_rule()
        if anti is not None:
            if properties.arity != 1:
                found.append(f"{name}: antiderivative rules need a one-argument function")
            else:
                found.extend(_check_antiderivative(name, anti, entries))
        for failure in found:
            logger.warning("Invalid rule", function=name, reason=failure)
        failures.extend(found)

    if failures:
        raise RuleConstructionError(
            f"{len(failures)} invalid rule(s) in function registry",
            details={"failures": failures},
        )

    logger.debug("Registry rules validated", functions=len(entries))
