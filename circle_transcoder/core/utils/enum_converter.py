"""
Enum conversion utilities.

Provides standardized methods for converting between enums and strings,
with support for case-insensitive parsing and alias tables.
"""

from typing import Any, Dict, Optional, Type, TypeVar

T = TypeVar("T")


def parse_enum(
    value: Any,
    enum_class: Type[T],
    default: Optional[T] = None,
    normalize: bool = True,
    aliases: Optional[Dict[str, T]] = None,
) -> T:
    """
    Parse value to enum.

    Unlike a lenient lookup, an unknown value is an error: a transport
    encoding that silently falls back to raw bytes would corrupt the output.

    Args:
        value: Value to parse (string, enum, or None)
        enum_class: Enum class to parse to
        default: Value returned for None (None means None is an error too)
        normalize: Whether to strip and lowercase strings before parsing
        aliases: Extra spellings mapped to enum members

    Returns:
        Parsed enum value

    Raises:
        ValueError: If the value matches no member or alias

    Example:
        >>> parse_enum("Data-URL", OutputEncoding, aliases=OUTPUT_ENCODING_ALIASES)
        >>> # Returns OutputEncoding.DATAURL
    """
    # Already an enum instance
    if isinstance(value, enum_class):
        return value

    if value is None:
        if default is not None:
            return default
        raise ValueError(f"Missing value for {enum_class.__name__}")

    str_value = str(value).strip().lower() if normalize else value
    if aliases and str_value in aliases:
        return aliases[str_value]

    try:
        return enum_class(str_value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_class)
        raise ValueError(
            f"Unknown {enum_class.__name__} '{value}' (expected one of: {choices})"
        ) from None

