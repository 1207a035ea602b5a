"""
Image processing operations.

Handles the transform stage of a transcode run:
- Square resizing with Lanczos resampling
- Circular cropping on block boundaries
- Grayscale conversion
"""

import logging
from typing import Union

import numpy as np
from PIL import Image

from circle_transcoder.core.constants import ImageConstants, MaskConstants
from circle_transcoder.core.image.converters import numpy_to_pil
from circle_transcoder.core.image.geometry import circle_block_mask
from circle_transcoder.schemas.encoding import EncodingConfig
from circle_transcoder.schemas.image import ProcessedImage

logger = logging.getLogger(__name__)

RESAMPLE_FILTER = Image.Resampling.LANCZOS


def _as_pil(image: Union[np.ndarray, Image.Image]) -> Image.Image:
    if isinstance(image, np.ndarray):
        return numpy_to_pil(image)
    return image


def _encodable(image: Image.Image) -> Image.Image:
    # Palette, alpha and high bit-depth modes resize poorly and cannot be written as JPEG
    if image.mode in ImageConstants.ENCODABLE_MODES:
        return image
    return image.convert(ImageConstants.COLOR_MODE)


def resize_square(image: Union[np.ndarray, Image.Image], side_length: int) -> ProcessedImage:
    """
    Resize image to an exact square, ignoring the source aspect ratio.

    Args:
        image: Source image (NumPy array in BGR format or PIL Image)
        side_length: Output width and height in pixels

    Returns:
        ProcessedImage of side_length x side_length
    """
    source = _encodable(_as_pil(image))
    resized = source.resize((side_length, side_length), RESAMPLE_FILTER)
    return ProcessedImage(resized)


def crop_to_circle(
    image: Union[np.ndarray, Image.Image],
    side_length: int,
    block_size: int = MaskConstants.BLOCK_SIZE,
) -> ProcessedImage:
    """
    Resize image to a square and keep only the blocks inside its inscribed circle.

    Pixels outside the mask stay black; no alpha channel is added so the
    result can go straight to the JPEG writer.

    Args:
        image: Source image (NumPy array in BGR format or PIL Image)
        side_length: Output width and height in pixels
        block_size: Mask granularity in pixels

    Returns:
        RGB ProcessedImage of side_length x side_length
    """
    source = _as_pil(image).convert(ImageConstants.COLOR_MODE)
    resized = np.asarray(source.resize((side_length, side_length), RESAMPLE_FILTER))

    mask = circle_block_mask(side_length, block_size)
    cropped = np.zeros_like(resized)
    cropped[mask] = resized[mask]

    return ProcessedImage(Image.fromarray(cropped))


def to_grayscale(image: ProcessedImage) -> ProcessedImage:
    """Convert to single-channel luminance (ITU-R 601-2 luma)."""
    if image.mode == ImageConstants.GRAYSCALE_MODE:
        return image
    return ProcessedImage(image.image.convert(ImageConstants.GRAYSCALE_MODE))


def transform(
    image: Union[np.ndarray, Image.Image],
    config: EncodingConfig,
    block_size: int = MaskConstants.BLOCK_SIZE,
) -> ProcessedImage:
    """
    Run the transform stage: resize or circle-crop, then optional grayscale.

    Args:
        image: Decoded source image; it is never modified
        config: Encoding options (size, circle, grayscale are used here)
        block_size: Mask granularity used when config.circle is set

    Returns:
        ProcessedImage of config.size x config.size
    """
    if config.circle:
        processed = crop_to_circle(image, config.size, block_size)
    else:
        processed = resize_square(image, config.size)

    if config.grayscale:
        processed = to_grayscale(processed)

    logger.debug(
        f"Transformed to {processed.side_length}x{processed.side_length} "
        f"mode={processed.mode} (circle={config.circle}, grayscale={config.grayscale})"
    )
    return processed
