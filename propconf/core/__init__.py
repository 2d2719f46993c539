"""
propconf Core Package

This package contains the lookup interface, the process property store and
the exception hierarchy shared by all properties.
"""

from propconf.core.interfaces.source import PropertySource

from propconf.core.exceptions import (
    PropconfError,
    ErrorContext,
    PropertyParseError,
    PropertyConfigurationError,
)

from propconf.core.sources import (
    SystemProperties,
    SystemPropertySource,
    MappingPropertySource,
    DEFAULT_SOURCE,
)

__all__ = [
    # Interfaces
    "PropertySource",
    # Exceptions
    "PropconfError",
    "ErrorContext",
    "PropertyParseError",
    "PropertyConfigurationError",
    # Sources
    "SystemProperties",
    "SystemPropertySource",
    "MappingPropertySource",
    "DEFAULT_SOURCE",
]
