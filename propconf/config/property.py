"""
Resolved Property

A typed configuration value resolved, on every call, from:
1. An explicit override string
2. A process-level property (SystemProperties)
3. An environment variable
4. A default fixed at construction
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from propconf.core.exceptions import (
    ErrorContext,
    PropertyConfigurationError,
    PropertyParseError,
)
from propconf.core.interfaces.source import PropertySource
from propconf.core.sources import DEFAULT_SOURCE

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Tier(str, Enum):
    """Resolution sources, in priority order."""
    OVERRIDE = "override"
    PROPERTY = "property"
    ENVIRONMENT = "environment"
    DEFAULT = "default"


@dataclass(frozen=True)
class Resolution(Generic[T]):
    """
    Outcome of resolving a property.

    Attributes:
        value: The effective value
        tier: Tier that supplied the value
        rejected: Tiers holding a present value that failed to parse
        errors: Parse failures of the rejected tiers, in the same order
    """
    value: T
    tier: Tier
    rejected: tuple[Tier, ...] = ()
    errors: tuple[PropertyParseError, ...] = field(default=(), compare=False)

    @property
    def fell_back(self) -> bool:
        """True when an invalid value was skipped on the way to this one."""
        return bool(self.rejected)


class Property(Generic[T]):
    """
    A configuration property with tiered resolution.

    The parse capability is a plain callable bound at construction. It must
    raise ``ValueError`` (``PropertyParseError`` is one) for invalid input;
    such failures are logged as warnings and resolution moves to the next
    tier. The default is returned as-is and never parsed.

    Example:
        ```python
        port = Property("dapr.http.port", "DAPR_HTTP_PORT", 3500, int)

        port.get()        # 3500 unless the property or variable is set
        port.get("6000")  # 6000
        ```
    """

    def __init__(
        self,
        name: str,
        env_name: str,
        default: T,
        parser: Callable[[str], T],
        source: Optional[PropertySource] = None,
    ):
        """
        Instantiate a configuration property.

        Args:
            name: Process property name
            env_name: Environment variable name
            default: Value used when no tier yields a valid one
            parser: Converts a raw string to T, raising ValueError on failure
            source: Where to look up values (defaults to live process state)

        Raises:
            PropertyConfigurationError: If a name is empty or parser is not callable
        """
        if not isinstance(name, str) or not name.strip():
            raise PropertyConfigurationError(
                "Property name cannot be empty",
                field="name",
                context=ErrorContext(env_name=env_name, operation="declare"),
            )
        if not isinstance(env_name, str) or not env_name.strip():
            raise PropertyConfigurationError(
                f"Environment variable name for {name} cannot be empty",
                field="env_name",
                context=ErrorContext(property_name=name, operation="declare"),
            )
        if not callable(parser):
            raise PropertyConfigurationError(
                f"Parser for {name} must be callable",
                field="parser",
                context=ErrorContext(
                    property_name=name,
                    env_name=env_name,
                    operation="declare",
                ),
            )

        self._name = name
        self._env_name = env_name
        self._default = default
        self._parser = parser
        self._source = source

    @property
    def name(self) -> str:
        """Process property name."""
        return self._name

    @property
    def env_name(self) -> str:
        """Environment variable name."""
        return self._env_name

    @property
    def default(self) -> T:
        return self._default

    @property
    def source(self) -> Optional[PropertySource]:
        return self._source

    def parse(self, value: str) -> T:
        """Parse a raw string into the property's type."""
        return self._parser(value)

    def get(
        self,
        override: Optional[str] = None,
        source: Optional[PropertySource] = None,
    ) -> T:
        """
        Get the effective value.

        Args:
            override: Takes precedence over every other tier when valid
            source: Lookup source for this call only

        Returns:
            Value from override (1st), property (2nd), environment (3rd)
            or default (last)
        """
        return self.resolve(override, source).value

    def resolve(
        self,
        override: Optional[str] = None,
        source: Optional[PropertySource] = None,
    ) -> Resolution[T]:
        """
        Resolve the effective value and report where it came from.

        Args:
            override: Takes precedence over every other tier when valid
            source: Lookup source for this call only

        Returns:
            Resolution with the value, its tier and any rejected tiers
        """
        if source is None:
            source = self._source if self._source is not None else DEFAULT_SOURCE
        rejected: list[Tier] = []
        errors: list[PropertyParseError] = []

        if override:
            try:
                return Resolution(self.parse(override), Tier.OVERRIDE)
            except ValueError as e:
                rejected.append(Tier.OVERRIDE)
                error = self._rejection(Tier.OVERRIDE, override, e)
                logger.warning(
                    f"Invalid override value in property: {self._name}",
                    extra={"parse_error": error.to_dict()},
                )
                errors.append(error)

        prop_value = source.get_property(self._name)
        if prop_value is not None and prop_value.strip():
            try:
                return Resolution(
                    self.parse(prop_value), Tier.PROPERTY, tuple(rejected), tuple(errors)
                )
            except ValueError as e:
                rejected.append(Tier.PROPERTY)
                error = self._rejection(Tier.PROPERTY, prop_value, e)
                logger.warning(
                    f"Invalid value in property: {self._name}",
                    extra={"parse_error": error.to_dict()},
                )
                errors.append(error)

        env_value = source.get_env(self._env_name)
        if env_value is not None and env_value.strip():
            try:
                return Resolution(
                    self.parse(env_value), Tier.ENVIRONMENT, tuple(rejected), tuple(errors)
                )
            except ValueError as e:
                rejected.append(Tier.ENVIRONMENT)
                error = self._rejection(Tier.ENVIRONMENT, env_value, e)
                logger.warning(
                    f"Invalid value in environment variable: {self._env_name}",
                    extra={"parse_error": error.to_dict()},
                )
                errors.append(error)

        return Resolution(self._default, Tier.DEFAULT, tuple(rejected), tuple(errors))

    def _rejection(self, tier: Tier, raw: str, error: ValueError) -> PropertyParseError:
        """Attach this property's identity to a parse failure."""
        context = ErrorContext(
            property_name=self._name,
            env_name=self._env_name,
            operation="resolve",
            metadata={"tier": tier.value},
        )
        if isinstance(error, PropertyParseError):
            error.context = context
            return error
        return PropertyParseError(raw, "value", context=context, cause=error)

    def __repr__(self) -> str:
        return (
            f"Property(name={self._name!r}, env_name={self._env_name!r}, "
            f"default={self._default!r})"
        )


__all__ = [
    "Property",
    "Resolution",
    "Tier",
]
