"""Function Intelligence Registry.

A read-only table from function name to FunctionProperties. Tables are
assembled with RegistryBuilder and frozen on build(); after that there is no
mutation API, so lookups from any number of threads need no locking.

The process-wide table is built lazily on first use by get_registry().
"""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from symcalc.config import get_settings
from symcalc.exceptions import RegistryError
from symcalc.functions.families import BUILTIN_FAMILIES
from symcalc.functions.properties import (
    FunctionFamily,
    FunctionProperties,
    UserDefinedProperties,
    _PropertiesBase,
)
from symcalc.functions.rules import AntiderivativeRule, DerivativeRule
from symcalc.functions.validation import validate_rules
from symcalc.logger import session_logger as logger
from symcalc.logger.decorators import log_execution_time


class FunctionRegistry:
    """Frozen name -> properties table."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, FunctionProperties]):
        self._entries: Mapping[str, FunctionProperties] = MappingProxyType(dict(entries))

    def lookup(self, name: str) -> Optional[FunctionProperties]:
        return self._entries.get(name)

    def derivative_rule(self, name: str) -> Optional[DerivativeRule]:
        properties = self._entries.get(name)
        return properties.derivative_rule() if properties is not None else None

    def antiderivative_rule(self, name: str) -> Optional[AntiderivativeRule]:
        properties = self._entries.get(name)
        return properties.antiderivative_rule() if properties is not None else None

    def names(self) -> Tuple[str, ...]:
        """Registered names in registration order."""
        return tuple(self._entries)

    def families(self) -> Dict[FunctionFamily, List[str]]:
        """Registered names grouped by family."""
        grouped: Dict[FunctionFamily, List[str]] = {}
        for name, properties in self._entries.items():
            grouped.setdefault(properties.family, []).append(name)
        return grouped

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"FunctionRegistry({len(self._entries)} functions)"


class RegistryBuilder:
    """Collects function properties and freezes them into a FunctionRegistry.

    Registration is additive only: registering a name twice is an error,
    never an override.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, FunctionProperties] = {}

    def register(self, properties: FunctionProperties) -> "RegistryBuilder":
        """Add one function.

        Raises:
            RegistryError: If the name is already registered or properties is
                not a FunctionProperties value
        """
        if not isinstance(properties, _PropertiesBase):
            raise RegistryError(
                "Expected FunctionProperties",
                details={"got": type(properties).__name__},
            )
        if properties.name in self._entries:
            raise RegistryError(
                f"Function '{properties.name}' already registered",
                details={
                    "name": properties.name,
                    "existing_family": self._entries[properties.name].family.value,
                },
            )
        self._entries[properties.name] = properties
        return self

    def register_family(
        self, family: str, functions: Iterable[FunctionProperties]
    ) -> "RegistryBuilder":
        names = []
        for properties in functions:
            self.register(properties)
            names.append(properties.name)
        logger.debug("Family registered", family=family, functions=names)
        return self

    def declare(self, name: str, arity: int = 1) -> "RegistryBuilder":
        """Register a user-defined name with no calculus rules."""
        return self.register(UserDefinedProperties(name=name, arity=arity))

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def build(self, validate: Optional[bool] = None) -> FunctionRegistry:
        """Freeze the collected entries.

        Args:
            validate: Check every rule first; defaults to the
                SYMCALC_VALIDATE_REGISTRY setting

        Raises:
            RuleConstructionError: If validation finds a malformed rule
        """
        if validate is None:
            validate = get_settings().registry.validate_rules
        if validate:
            validate_rules(self._entries, logger)
        return FunctionRegistry(self._entries)


@log_execution_time
def build_default_registry(
    extra: Iterable[FunctionProperties] = (), validate: Optional[bool] = None
) -> FunctionRegistry:
    """Build a registry holding every built-in family plus extra entries.

    Args:
        extra: Additional functions to register after the built-ins
        validate: See RegistryBuilder.build

    Returns:
        The frozen FunctionRegistry
    """
    builder = RegistryBuilder()
    for family, factory in BUILTIN_FAMILIES:
        builder.register_family(family, factory())
    extra = list(extra)
    if extra:
        builder.register_family("extra", extra)
    registry = builder.build(validate=validate)

    logger.info(
        "Function registry built",
        functions=len(registry),
        families={family.value: len(names) for family, names in registry.families().items()},
    )
    return registry


# Global registry instance
_registry: Optional[FunctionRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> FunctionRegistry:
    """Get the process-wide registry, building it on first use."""
    global _registry
    registry = _registry
    if registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = build_default_registry()
            registry = _registry
    return registry


def reset_registry() -> None:
    """Drop the process-wide registry. Tests only."""
    global _registry
    with _registry_lock:
        _registry = None
