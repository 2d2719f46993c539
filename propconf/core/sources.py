"""
Property Stores and Sources

Provides the process-level property store and the concrete PropertySource
implementations that properties resolve against.
"""

import logging
import os
import threading
from collections.abc import Mapping
from typing import Optional

from propconf.core.interfaces.source import PropertySource

logger = logging.getLogger(__name__)


# ============================================================================
# Process Property Store
# ============================================================================

class SystemProperties:
    """
    Process-wide store of named string properties.

    Plays the role of a runtime's system properties: values are set once at
    startup (or by tests) and read by every property on each resolution.

    All operations take an internal lock, so concurrent readers never see a
    half-applied ``update``.

    Example:
        ```python
        SystemProperties.set("dapr.http.port", "4000")
        SystemProperties.get("dapr.http.port")  # "4000"
        SystemProperties.remove("dapr.http.port")
        ```
    """

    _values: dict[str, str] = {}
    _lock = threading.RLock()

    @classmethod
    def get(cls, name: str) -> Optional[str]:
        """Get a property value, or None if not set."""
        with cls._lock:
            return cls._values.get(name)

    @classmethod
    def set(cls, name: str, value: str) -> Optional[str]:
        """
        Set a property value.

        Args:
            name: Property key
            value: Raw string value

        Returns:
            The previous value, or None

        Raises:
            TypeError: If name or value is not a string
        """
        cls._check(name, value)
        with cls._lock:
            previous = cls._values.get(name)
            cls._values[name] = value
        logger.debug(f"System property set: {name}")
        return previous

    @classmethod
    def update(cls, values: Mapping[str, str]) -> None:
        """Set several properties atomically."""
        for name, value in values.items():
            cls._check(name, value)
        with cls._lock:
            cls._values.update(values)

    @classmethod
    def remove(cls, name: str) -> Optional[str]:
        """Remove a property, returning its previous value."""
        with cls._lock:
            return cls._values.pop(name, None)

    @classmethod
    def clear(cls) -> None:
        """Remove every property."""
        with cls._lock:
            cls._values.clear()

    @classmethod
    def snapshot(cls) -> dict[str, str]:
        """Get a copy of all properties."""
        with cls._lock:
            return dict(cls._values)

    @staticmethod
    def _check(name: str, value: str) -> None:
        if not isinstance(name, str):
            raise TypeError(f"Property name must be a string, got {type(name).__name__}")
        if not isinstance(value, str):
            raise TypeError(
                f"Value of property {name} must be a string, got {type(value).__name__}"
            )


# ============================================================================
# Sources
# ============================================================================

class SystemPropertySource(PropertySource):
    """
    Reads live process state: SystemProperties and ``os.environ``.

    Nothing is cached, so changes are visible on the next lookup.
    """

    def get_property(self, name: str) -> Optional[str]:
        return SystemProperties.get(name)

    def get_env(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def __repr__(self) -> str:
        return "SystemPropertySource()"


class MappingPropertySource(PropertySource):
    """
    Source backed by fixed mappings.

    Useful for tests and for embedding callers that keep their own
    configuration instead of mutating process state.

    Example:
        ```python
        source = MappingPropertySource(
            properties={"dapr.http.port": "4000"},
            environ={"DAPR_HTTP_PORT": "5000"},
        )
        ```
    """

    def __init__(
        self,
        properties: Optional[Mapping[str, str]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self._properties = dict(properties or {})
        self._environ = dict(environ or {})

    def get_property(self, name: str) -> Optional[str]:
        return self._properties.get(name)

    def get_env(self, name: str) -> Optional[str]:
        return self._environ.get(name)

    def __repr__(self) -> str:
        return (
            f"MappingPropertySource(properties={sorted(self._properties)}, "
            f"environ={sorted(self._environ)})"
        )


# Shared default source
DEFAULT_SOURCE = SystemPropertySource()


__all__ = [
    "SystemProperties",
    "SystemPropertySource",
    "MappingPropertySource",
    "DEFAULT_SOURCE",
]
