"""
File access for input images and transcoded output.
"""

import logging
from pathlib import Path
from typing import Union

from circle_transcoder.core.constants import OutputConstants
from circle_transcoder.core.exceptions import ImageIOError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_file(path: PathLike) -> bytes:
    """
    Read the whole input file.

    Raises:
        ImageIOError: If the file is missing or unreadable
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ImageIOError(f"Cannot read input ({e.strerror or e})", path) from e

    logger.debug(f"Read {len(data)} bytes from {path}")
    return data


def write_file(path: PathLike, data: Union[bytes, str]) -> int:
    """
    Write output bytes, or ASCII text for base64/data-URL transports.

    Args:
        path: Output file path (parent directory must exist)
        data: Bytes or text to write

    Returns:
        Number of bytes written

    Raises:
        ImageIOError: If the path is not writable
    """
    path = Path(path)
    if isinstance(data, str):
        data = data.encode(OutputConstants.TEXT_ENCODING)

    try:
        path.write_bytes(data)
    except OSError as e:
        raise ImageIOError(f"Cannot write output ({e.strerror or e})", path) from e

    logger.debug(f"Wrote {len(data)} bytes to {path}")
    return len(data)
