"""Core interfaces package."""

from propconf.core.interfaces.source import PropertySource

__all__ = [
    "PropertySource",
]
