"""
Sidecar Client Properties

Well-known properties of a sidecar client and the Properties holder that
resolves them with per-instance overrides.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import timedelta
from enum import Enum
from typing import Any, Optional, TypeVar, Union

from propconf.config.properties import (
    charset_property,
    enum_property,
    integer_property,
    milliseconds_property,
    seconds_property,
    string_property,
)
from propconf.config.property import Property, Resolution
from propconf.core.interfaces.source import PropertySource

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ApiProtocol(str, Enum):
    """Transport used to reach the sidecar."""
    GRPC = "grpc"
    HTTP = "http"


# ============================================================================
# Well-known properties
# ============================================================================

SIDECAR_IP = string_property("dapr.sidecar.ip", "DAPR_SIDECAR_IP", "127.0.0.1")

HTTP_PORT = integer_property("dapr.http.port", "DAPR_HTTP_PORT", 3500)

GRPC_PORT = integer_property("dapr.grpc.port", "DAPR_GRPC_PORT", 50001)

# Full endpoints take precedence over ip/port when set
HTTP_ENDPOINT = string_property("dapr.http.endpoint", "DAPR_HTTP_ENDPOINT", None)

GRPC_ENDPOINT = string_property("dapr.grpc.endpoint", "DAPR_GRPC_ENDPOINT", None)

API_TOKEN = string_property("dapr.api.token", "DAPR_API_TOKEN", None)

STRING_CHARSET = charset_property("dapr.string.charset", "DAPR_STRING_CHARSET", "utf-8")

MAX_RETRIES = integer_property("dapr.api.maxRetries", "DAPR_API_MAX_RETRIES", 0)

TIMEOUT = milliseconds_property(
    "dapr.api.timeoutMilliseconds",
    "DAPR_API_TIMEOUT_MILLISECONDS",
    timedelta(milliseconds=0),
)

HTTP_CLIENT_READ_TIMEOUT = seconds_property(
    "dapr.http.client.readTimeoutSeconds",
    "DAPR_HTTP_CLIENT_READ_TIMEOUT_SECONDS",
    timedelta(seconds=60),
)

HTTP_CLIENT_MAX_REQUESTS = integer_property(
    "dapr.http.client.maxRequests",
    "DAPR_HTTP_CLIENT_MAX_REQUESTS",
    1024,
)

HTTP_CLIENT_MAX_IDLE_CONNECTIONS = integer_property(
    "dapr.http.client.maxIdleConnections",
    "DAPR_HTTP_CLIENT_MAX_IDLE_CONNECTIONS",
    128,
)

API_PROTOCOL = enum_property("dapr.api.protocol", "DAPR_API_PROTOCOL", ApiProtocol.GRPC)

ALL_PROPERTIES: tuple[Property[Any], ...] = (
    SIDECAR_IP,
    HTTP_PORT,
    GRPC_PORT,
    HTTP_ENDPOINT,
    GRPC_ENDPOINT,
    API_TOKEN,
    STRING_CHARSET,
    MAX_RETRIES,
    TIMEOUT,
    HTTP_CLIENT_READ_TIMEOUT,
    HTTP_CLIENT_MAX_REQUESTS,
    HTTP_CLIENT_MAX_IDLE_CONNECTIONS,
    API_PROTOCOL,
)


# ============================================================================
# Holder
# ============================================================================

class Properties:
    """
    Resolves properties with a fixed set of overrides.

    Overrides are keyed by property name or by the Property itself and are
    passed as the override tier on every lookup. Unset keys fall through to
    process properties, environment and defaults as usual.

    Example:
        ```python
        props = Properties({HTTP_PORT: "4000", "dapr.api.maxRetries": "3"})
        props.value(HTTP_PORT)    # 4000
        props.value(MAX_RETRIES)  # 3
        props.value(GRPC_PORT)    # 50001 unless set elsewhere
        ```
    """

    def __init__(
        self,
        overrides: Optional[Mapping[Union[str, Property[Any]], Optional[str]]] = None,
        source: Optional[PropertySource] = None,
    ):
        """
        Initialize the holder.

        Args:
            overrides: Raw override strings; None values are ignored
            source: Lookup source applied to every property (defaults to
                each property's own source)
        """
        self._overrides: dict[str, str] = {}
        self._source = source

        for key, value in (overrides or {}).items():
            if value is None:
                continue
            name = key.name if isinstance(key, Property) else key
            if not isinstance(value, str):
                raise TypeError(
                    f"Override for {name} must be a string, got {type(value).__name__}"
                )
            self._overrides[name] = value

        if self._overrides:
            logger.debug(f"Properties created with overrides for: {sorted(self._overrides)}")

    @property
    def overrides(self) -> dict[str, str]:
        """Copy of the override map."""
        return dict(self._overrides)

    def value(self, prop: Property[T]) -> T:
        """Get the effective value of a property."""
        return prop.get(self._overrides.get(prop.name), self._source)

    def resolve(self, prop: Property[T]) -> Resolution[T]:
        """Resolve a property, reporting the tier it came from."""
        return prop.resolve(self._overrides.get(prop.name), self._source)

    def values(self, props: Iterable[Property[Any]] = ALL_PROPERTIES) -> dict[str, Any]:
        """
        Get effective values for several properties.

        Returns:
            Mapping of property name to value
        """
        return {prop.name: self.value(prop) for prop in props}


__all__ = [
    "ApiProtocol",
    "Properties",
    "ALL_PROPERTIES",
    "SIDECAR_IP",
    "HTTP_PORT",
    "GRPC_PORT",
    "HTTP_ENDPOINT",
    "GRPC_ENDPOINT",
    "API_TOKEN",
    "STRING_CHARSET",
    "MAX_RETRIES",
    "TIMEOUT",
    "HTTP_CLIENT_READ_TIMEOUT",
    "HTTP_CLIENT_MAX_REQUESTS",
    "HTTP_CLIENT_MAX_IDLE_CONNECTIONS",
    "API_PROTOCOL",
]
