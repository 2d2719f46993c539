"""
propconf Exception Hierarchy

Provides typed exceptions for property resolution.
All propconf-specific exceptions inherit from PropconfError.

Exception Hierarchy:
    PropconfError (base)
    ├── PropertyParseError (raw string is not a valid value, also a ValueError)
    └── PropertyConfigurationError (property declared incorrectly)

Usage:
    from propconf.core.exceptions import PropertyParseError

    def parse_port(value: str) -> int:
        try:
            return int(value)
        except ValueError as e:
            raise PropertyParseError(value, "port", cause=e)
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional


# ============================================================================
# Base Exception
# ============================================================================

@dataclass
class ErrorContext:
    """
    Additional context for debugging errors.

    Attributes:
        property_name: Process property name involved
        env_name: Environment variable name involved
        operation: What operation was being performed
        timestamp: When the error occurred
        metadata: Additional debugging information
    """
    property_name: Optional[str] = None
    env_name: Optional[str] = None
    operation: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "property_name": self.property_name,
            "env_name": self.env_name,
            "operation": self.operation,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


class PropconfError(Exception):
    """
    Base exception for all propconf errors.

    Attributes:
        message: Human-readable error message
        context: Additional debugging context
        cause: Original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()
        self.cause = cause

    def __str__(self) -> str:
        parts = [self.message]
        if self.context.property_name:
            parts.append(f"[property={self.context.property_name}]")
        if self.context.env_name:
            parts.append(f"[env={self.context.env_name}]")
        if self.context.operation:
            parts.append(f"[op={self.context.operation}]")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for structured logs."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
        }


# ============================================================================
# Property Errors
# ============================================================================

class PropertyParseError(PropconfError, ValueError):
    """
    Raised by a parser when a raw string cannot be converted.

    Subclasses ValueError so that parsers built on ``int()``, ``float()`` or
    pydantic validation fail the same way as hand-written ones.

    Example:
        raise PropertyParseError("abc", "integer")
    """

    def __init__(
        self,
        value: Any,
        target_type: str,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            f"Cannot parse {value!r} as {target_type}",
            context,
            cause=cause,
        )
        self.value = value
        self.target_type = target_type


class PropertyConfigurationError(PropconfError):
    """
    Raised when a property is declared with invalid arguments.

    This is a programming error and is raised at construction time.

    Example:
        if not name:
            raise PropertyConfigurationError(
                "Property name cannot be empty",
                field="name",
            )
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, context, cause=cause)
        self.field = field


# ============================================================================
# Exports
# ============================================================================

__all__ = [
    "PropconfError",
    "ErrorContext",
    "PropertyParseError",
    "PropertyConfigurationError",
]
