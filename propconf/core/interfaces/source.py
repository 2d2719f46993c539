"""
Property Source Interface

Defines the contract for the stores a property is resolved against: the
process-level property store and the environment variable table.
Resolution only ever reads from a source.
"""

from abc import ABC, abstractmethod
from typing import Optional


class PropertySource(ABC):
    """
    Abstract base class for property lookups.

    Implementations return the raw string stored under a key, or None when
    the key is absent. They never parse or trim values.

    Example:
        ```python
        class StaticSource(PropertySource):
            def get_property(self, name):
                return {"dapr.http.port": "4000"}.get(name)

            def get_env(self, name):
                return None
        ```
    """

    @abstractmethod
    def get_property(self, name: str) -> Optional[str]:
        """
        Look up a process-level property.

        Args:
            name: Property key (e.g. ``dapr.http.port``)

        Returns:
            Raw value or None if not set
        """
        pass

    @abstractmethod
    def get_env(self, name: str) -> Optional[str]:
        """
        Look up an environment variable.

        Args:
            name: Variable name (e.g. ``DAPR_HTTP_PORT``)

        Returns:
            Raw value or None if not set
        """
        pass
