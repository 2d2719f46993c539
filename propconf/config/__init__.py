"""
Configuration Properties

Typed properties resolved from an override, a process property, an
environment variable or a default, in that order.
"""

from propconf.config.property import Property, Resolution, Tier
from propconf.config.properties import (
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
from propconf.config.catalog import ApiProtocol, Properties, ALL_PROPERTIES
from propconf.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Property",
    "Resolution",
    "Tier",
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
    "ApiProtocol",
    "Properties",
    "ALL_PROPERTIES",
    "Settings",
    "get_settings",
    "reset_settings",
]
