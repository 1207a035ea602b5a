"""
Utility modules for core functionality.

Modules:
- decorators: Timing helpers (timer)
- enum_converter: Enum parsing and conversion
"""

from .decorators import Timer, timer
from .enum_converter import parse_enum

__all__ = [
    "Timer",
    "timer",
    "parse_enum",
]
