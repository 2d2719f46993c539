"""
Value Parsers

Parse capabilities bound into properties. Every parser raises
PropertyParseError on invalid input, including values that are well-formed
but out of range for the target type. Apart from parse_string, parsers strip
surrounding whitespace.
"""

import codecs
import math
import re
from datetime import timedelta
from enum import Enum
from typing import Any, Callable, TypeVar

from pydantic import TypeAdapter, ValidationError

from propconf.core.exceptions import PropertyParseError

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
FALSE_VALUES = frozenset({"false", "0", "no", "off"})

# Optional sign followed by ASCII digits only: no "_" separators, no
# non-ASCII digits.
WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")

INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1
INT64_MAX = 2 ** 63 - 1


def parse_string(value: str) -> str:
    """Returns the raw value unchanged."""
    return value


def _parse_whole(value: str, target_type: str, minimum: int, maximum: int) -> int:
    raw = value.strip()
    if not WHOLE_NUMBER.fullmatch(raw):
        raise PropertyParseError(value, target_type)
    # More digits than any 64-bit value
    if len(raw.lstrip("+-").lstrip("0")) > 19:
        raise PropertyParseError(value, target_type)
    amount = int(raw, 10)
    if not minimum <= amount <= maximum:
        raise PropertyParseError(value, target_type)
    return amount


def parse_integer(value: str) -> int:
    """Parse a signed 32-bit base-10 integer."""
    return _parse_whole(value, "integer", INT32_MIN, INT32_MAX)


def parse_float(value: str) -> float:
    try:
        result = float(value.strip())
    except ValueError as e:
        raise PropertyParseError(value, "float", cause=e)
    if math.isnan(result) or math.isinf(result):
        raise PropertyParseError(value, "float")
    return result


def parse_boolean(value: str) -> bool:
    """Accepts true/false, 1/0, yes/no and on/off in any case."""
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise PropertyParseError(value, "boolean")


def _parse_duration(value: str, unit: str) -> timedelta:
    amount = _parse_whole(value, f"non-negative {unit}", 0, INT64_MAX)
    try:
        return timedelta(**{unit: amount})
    except OverflowError as e:
        raise PropertyParseError(value, f"{unit} duration", cause=e)


def parse_milliseconds(value: str) -> timedelta:
    """Parse a whole number of milliseconds into a timedelta."""
    return _parse_duration(value, "milliseconds")


def parse_seconds(value: str) -> timedelta:
    """Parse a whole number of seconds into a timedelta."""
    return _parse_duration(value, "seconds")


def parse_charset(value: str) -> str:
    """Parse a codec name, returning its canonical form (e.g. ``utf-8``)."""
    try:
        return codecs.lookup(value.strip()).name
    except (LookupError, ValueError) as e:
        raise PropertyParseError(value, "charset", cause=e)


def enum_parser(enum_cls: type[E]) -> Callable[[str], E]:
    """
    Build a parser for an Enum.

    Members match by name (case-insensitive) first, then by value.

    Args:
        enum_cls: Enum class to parse into

    Returns:
        Parser function
    """
    def parse(value: str) -> E:
        raw = value.strip()
        for member in enum_cls:
            if member.name.lower() == raw.lower():
                return member
        try:
            return enum_cls(raw)
        except ValueError as e:
            raise PropertyParseError(value, enum_cls.__name__, cause=e)

    return parse


def type_parser(type_: Any) -> Callable[[str], Any]:
    """
    Build a parser for any type pydantic can validate.

    The raw string is validated in lax mode first (so ``"42"`` becomes an
    int), then as JSON for containers such as ``list[int]``.

    Args:
        type_: Target type, e.g. ``int``, ``list[str]``, a BaseModel

    Returns:
        Parser function
    """
    adapter = TypeAdapter(type_)
    type_name = getattr(type_, "__name__", str(type_))

    def parse(value: str) -> Any:
        raw = value.strip()
        try:
            return adapter.validate_python(raw)
        except ValidationError:
            pass
        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            raise PropertyParseError(value, type_name, cause=e)

    return parse


__all__ = [
    "parse_string",
    "parse_integer",
    "parse_float",
    "parse_boolean",
    "parse_milliseconds",
    "parse_seconds",
    "parse_charset",
    "enum_parser",
    "type_parser",
]
