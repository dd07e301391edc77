"""Function Intelligence Registry.

Maps function names to their calculus: derivative rules, antiderivative rules
and descriptive properties. Both calculus engines consult it generically.
"""

from symcalc.functions.rules import (
    ConstantOfIntegration,
    SimpleDerivative,
    ChainRuleDerivative,
    CustomDerivative,
    ProductRuleDerivative,
    QuotientRuleDerivative,
    DerivativeRule,
    SimpleAntiderivative,
    CustomAntiderivative,
    AntiderivativeRule,
    simple_derivative,
    custom_derivative,
    simple_antiderivative,
    custom_antiderivative,
)
from symcalc.functions.properties import (
    FunctionFamily,
    Domain,
    SpecialValue,
    ElementaryProperties,
    SpecialProperties,
    PolynomialProperties,
    UserDefinedProperties,
    FunctionProperties,
)
from symcalc.functions.registry import (
    FunctionRegistry,
    RegistryBuilder,
    build_default_registry,
    get_registry,
    reset_registry,
)

__all__ = [
    "ConstantOfIntegration",
    "SimpleDerivative",
    "ChainRuleDerivative",
    "CustomDerivative",
    "ProductRuleDerivative",
    "QuotientRuleDerivative",
    "DerivativeRule",
    "SimpleAntiderivative",
    "CustomAntiderivative",
    "AntiderivativeRule",
    "simple_derivative",
    "custom_derivative",
    "simple_antiderivative",
    "custom_antiderivative",
    "FunctionFamily",
    "Domain",
    "SpecialValue",
    "ElementaryProperties",
    "SpecialProperties",
    "PolynomialProperties",
    "UserDefinedProperties",
    "FunctionProperties",
    "FunctionRegistry",
    "RegistryBuilder",
    "build_default_registry",
    "get_registry",
    "reset_registry",
]
