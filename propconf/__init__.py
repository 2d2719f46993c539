"""
propconf

Typed configuration properties resolved from an override, a process-level
property, an environment variable or a default.
"""

from propconf.config import (
    Property,
    Resolution,
    Tier,
    Properties,
    string_property,
    integer_property,
    float_property,
    boolean_property,
    milliseconds_property,
    seconds_property,
    charset_property,
    enum_property,
    generic_property,
    typed_property,
)
from propconf.core import (
    PropertySource,
    SystemProperties,
    SystemPropertySource,
    MappingPropertySource,
    PropconfError,
    PropertyParseError,
    PropertyConfigurationError,
)

__version__ = "0.1.0"

__all__ = [
    "Property",
    "Resolution",
    "Tier",
    "Properties",
    "string_property",
    "integer_property",
    "float_property",
    "boolean_property",
    "milliseconds_property",
    "seconds_property",
    "charset_property",
    "enum_property",
    "generic_property",
    "typed_property",
    "PropertySource",
    "SystemProperties",
    "SystemPropertySource",
    "MappingPropertySource",
    "PropconfError",
    "PropertyParseError",
    "PropertyConfigurationError",
]
