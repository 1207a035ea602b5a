"""
Core modules for the circle transcoder
"""

from .enums import OutputEncoding
from .exceptions import ConfigError, DecodeError, EncodeError, ImageIOError, TranscoderError

__all__ = [
    "OutputEncoding",
    "TranscoderError",
    "ConfigError",
    "DecodeError",
    "EncodeError",
    "ImageIOError",
]
