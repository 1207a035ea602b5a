"""
Exception hierarchy for the transcoder.

Every failure the command line reports derives from TranscoderError so the
entry point can map them to a single non-zero exit code. A missed size budget
is deliberately not an exception: the encoder returns its last artifact and
flags it instead.
"""

from pathlib import Path
from typing import Optional, Union


class TranscoderError(Exception):
    """Base class for all transcoder errors"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(TranscoderError):
    """Invalid option value or unknown transport encoding"""


class DecodeError(TranscoderError):
    """Input bytes are not a decodable image"""


class EncodeError(TranscoderError):
    """JPEG writer rejected the image"""


class ImageIOError(TranscoderError):
    """Input could not be read or output could not be written"""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{message}: {self.path}"
        super().__init__(message)
