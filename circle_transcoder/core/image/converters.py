"""
Image format conversion utilities.

Handles conversions between different image representations:
- Raw container bytes (any format Pillow can identify) to PIL Images
- NumPy arrays (OpenCV BGR format) to PIL Images
- Encoded JPEG bytes to base64 text and data URLs
"""

import base64
import io
import logging
from typing import Union

import cv2
import numpy as np
from PIL import Image, UnidentifiedImageError

from circle_transcoder.core.constants import OutputConstants
from circle_transcoder.core.enums import OUTPUT_ENCODING_ALIASES, OutputEncoding
from circle_transcoder.core.exceptions import ConfigError, DecodeError
from circle_transcoder.core.utils.enum_converter import parse_enum

logger = logging.getLogger(__name__)


def decode_image(data: bytes) -> Image.Image:
    """
    Decode container bytes into a fully loaded PIL Image.

    Args:
        data: Raw file contents (PNG, JPEG, GIF, WebP, ...)

    Returns:
        Decoded PIL Image

    Raises:
        DecodeError: If the bytes are not a recognised or complete image
    """
    try:
        image = Image.open(io.BytesIO(data))
        # Force the pixel data in now; Image.open() is lazy
        image.load()
    except UnidentifiedImageError as e:
        raise DecodeError(f"Unsupported or unrecognised image format: {e}") from e
    except (OSError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Failed to decode image: {e}") from e

    logger.debug(f"Decoded {image.format} image {image.width}x{image.height} mode={image.mode}")
    return image


def numpy_to_pil(image: np.ndarray) -> Image.Image:
    """
    Convert NumPy array (OpenCV format) to PIL Image.

    Args:
        image: NumPy array in BGR/BGRA format (OpenCV) or single channel

    Returns:
        PIL Image in RGB/RGBA/L format
    """
    if image.ndim == 3 and image.shape[2] == 3:
        image = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
    elif image.ndim == 3 and image.shape[2] == 4:
        image = cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)

    return Image.fromarray(image)


def to_base64(data: bytes) -> str:
    """Standard base64 of the bytes, without line wrapping."""
    return base64.b64encode(data).decode(OutputConstants.TEXT_ENCODING)


def to_data_url(data: bytes) -> str:
    return OutputConstants.DATA_URL_PREFIX + to_base64(data)


def format_output(
    data: bytes, encoding: Union[OutputEncoding, str]
) -> Union[bytes, str]:
    """
    Wrap encoded JPEG bytes in the requested transport encoding.

    Args:
        data: Encoded JPEG bytes
        encoding: raw/jpeg (identity), base64 or dataurl

    Returns:
        The bytes unchanged for binary transports, text otherwise

    Raises:
        ConfigError: If the encoding is not a known transport
    """
    try:
        encoding = parse_enum(encoding, OutputEncoding, aliases=OUTPUT_ENCODING_ALIASES)
    except ValueError as e:
        raise ConfigError(str(e)) from e

    if encoding.is_binary:
        return data
    if encoding is OutputEncoding.BASE64:
        return to_base64(data)
    return to_data_url(data)
