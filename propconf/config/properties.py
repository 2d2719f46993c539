"""
Property Factories

Each factory returns a Property with the matching parser bound in.

Example:
    ```python
    port = integer_property("dapr.http.port", "DAPR_HTTP_PORT", 3500)
    timeout = milliseconds_property(
        "dapr.api.timeoutMilliseconds",
        "DAPR_API_TIMEOUT_MILLISECONDS",
        timedelta(0),
    )
    ```
"""

from datetime import timedelta
from enum import Enum
from typing import Any, Callable, Optional, TypeVar

from propconf.config.parsers import (
    enum_parser,
    parse_boolean,
    parse_charset,
    parse_float,
    parse_integer,
    parse_milliseconds,
    parse_seconds,
    parse_string,
    type_parser,
)
from propconf.config.property import Property
from propconf.core.interfaces.source import PropertySource

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def string_property(
    name: str,
    env_name: str,
    default: Optional[str] = None,
    source: Optional[PropertySource] = None,
) -> Property[Optional[str]]:
    return Property(name, env_name, default, parse_string, source)


def integer_property(
    name: str,
    env_name: str,
    default: int,
    source: Optional[PropertySource] = None,
) -> Property[int]:
    return Property(name, env_name, default, parse_integer, source)


def float_property(
    name: str,
    env_name: str,
    default: float,
    source: Optional[PropertySource] = None,
) -> Property[float]:
    return Property(name, env_name, default, parse_float, source)


def boolean_property(
    name: str,
    env_name: str,
    default: bool,
    source: Optional[PropertySource] = None,
) -> Property[bool]:
    return Property(name, env_name, default, parse_boolean, source)


def milliseconds_property(
    name: str,
    env_name: str,
    default: timedelta,
    source: Optional[PropertySource] = None,
) -> Property[timedelta]:
    """Duration configured as a whole number of milliseconds."""
    return Property(name, env_name, default, parse_milliseconds, source)


def seconds_property(
    name: str,
    env_name: str,
    default: timedelta,
    source: Optional[PropertySource] = None,
) -> Property[timedelta]:
    """Duration configured as a whole number of seconds."""
    return Property(name, env_name, default, parse_seconds, source)


def charset_property(
    name: str,
    env_name: str,
    default: str = "utf-8",
    source: Optional[PropertySource] = None,
) -> Property[str]:
    return Property(name, env_name, default, parse_charset, source)


def enum_property(
    name: str,
    env_name: str,
    default: E,
    enum_cls: Optional[type[E]] = None,
    source: Optional[PropertySource] = None,
) -> Property[E]:
    """
    Property holding an Enum member.

    Args:
        name: Process property name
        env_name: Environment variable name
        default: Default member
        enum_cls: Enum class, inferred from the default when omitted
        source: Optional lookup source
    """
    return Property(name, env_name, default, enum_parser(enum_cls or type(default)), source)


def generic_property(
    name: str,
    env_name: str,
    default: T,
    parser: Callable[[str], T],
    source: Optional[PropertySource] = None,
) -> Property[T]:
    """Property with a caller-supplied parser."""
    return Property(name, env_name, default, parser, source)


def typed_property(
    name: str,
    env_name: str,
    default: Any,
    type_: Any,
    source: Optional[PropertySource] = None,
) -> Property[Any]:
    """
    Property validated by pydantic against ``type_``.

    Example:
        ```python
        hosts = typed_property("app.hosts", "APP_HOSTS", [], list[str])
        ```
    """
    return Property(name, env_name, default, type_parser(type_), source)


__all__ = [
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
]
