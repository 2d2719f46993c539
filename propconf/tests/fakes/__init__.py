"""
Fake Source Implementations for Testing

These sources simulate process properties and environment variables without
touching real process state, enabling fast, isolated, and deterministic tests.

Usage:
    from propconf.tests.fakes import FakePropertySource

    source = FakePropertySource()
    source.set_property("dapr.http.port", "4000")
    source.set_env("DAPR_HTTP_PORT", "5000")
"""

from typing import Dict, List, Optional

from propconf.core.interfaces.source import PropertySource


class FakePropertySource(PropertySource):
    """
    Mutable in-memory source that records every lookup.

    Usage:
        source = FakePropertySource(properties={"a.b": "1"})
        prop.get(source=source)
        assert source.get_lookups() == [("property", "a.b"), ...]
    """

    def __init__(
        self,
        properties: Optional[Dict[str, str]] = None,
        environ: Optional[Dict[str, str]] = None,
    ):
        self._properties: Dict[str, str] = dict(properties or {})
        self._environ: Dict[str, str] = dict(environ or {})
        self._lookups: List[tuple] = []

    # Test helpers
    def set_property(self, name: str, value: str) -> None:
        self._properties[name] = value

    def set_env(self, name: str, value: str) -> None:
        self._environ[name] = value

    def clear(self) -> None:
        self._properties.clear()
        self._environ.clear()
        self._lookups.clear()

    def get_lookups(self) -> List[tuple]:
        """Get (kind, key) pairs in lookup order."""
        return list(self._lookups)

    # PropertySource interface implementation
    def get_property(self, name: str) -> Optional[str]:
        self._lookups.append(("property", name))
        return self._properties.get(name)

    def get_env(self, name: str) -> Optional[str]:
        self._lookups.append(("env", name))
        return self._environ.get(name)


__all__ = ["FakePropertySource"]
