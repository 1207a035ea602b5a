"""
JPEG encoding with an optional output size budget.

Three modes, selected by which of quality/max_bytes are given:

- fixed: no budget, encode once (quality defaults to 75)
- search: budget without quality, walk the quality ladder 100, 90, ... 0 and
  stop at the first encoding that fits
- pinned: budget and quality, encode once at that quality and report
  whether it fits

A budget that cannot be met is not an error. The last attempt is returned
with ``within_budget=False`` and the caller decides what to do with it.
"""

import io
import logging
from typing import Callable, Iterator, List, Optional, Union

from PIL import Image

from circle_transcoder.core.constants import EncoderConstants
from circle_transcoder.core.exceptions import EncodeError
from circle_transcoder.schemas.encoding import EncodedArtifact
from circle_transcoder.schemas.image import ProcessedImage

logger = logging.getLogger(__name__)

AttemptCallback = Callable[[int, int], None]


def encode_jpeg(image: Union[ProcessedImage, Image.Image], quality: int) -> bytes:
    """
    Encode image as a baseline JPEG.

    Args:
        image: Image in an encodable mode (RGB or L)
        quality: JPEG quality (0-100)

    Returns:
        Encoded JPEG bytes

    Raises:
        EncodeError: If the writer rejects the image (e.g. zero area)
    """
    if isinstance(image, ProcessedImage):
        image = image.image

    if not EncoderConstants.MIN_QUALITY <= quality <= EncoderConstants.MAX_QUALITY:
        raise EncodeError(f"Quality must be within 0-100, got {quality}")

    buffer = io.BytesIO()
    try:
        image.save(buffer, format=EncoderConstants.FORMAT, quality=quality)
    except (OSError, ValueError, SystemError) as e:
        raise EncodeError(
            f"Failed to encode {image.width}x{image.height} {image.mode} image as JPEG: {e}"
        ) from e

    return buffer.getvalue()


def quality_ladder(
    start: int = EncoderConstants.LADDER_START,
    step: int = EncoderConstants.LADDER_STEP,
    floor: int = EncoderConstants.LADDER_FLOOR,
) -> Iterator[int]:
    """
    Yield strictly decreasing qualities from start down to floor.

    The floor is always the last rung, even when step does not divide
    start - floor.

    Example:
        >>> list(quality_ladder(step=25))
        [100, 75, 50, 25, 0]
        >>> list(quality_ladder(step=30))
        [100, 70, 40, 10, 0]
    """
    if step <= 0:
        raise ValueError(f"Quality step must be positive, got {step}")
    return _descend(start, step, floor)


def _descend(start: int, step: int, floor: int) -> Iterator[int]:
    quality = start
    while quality > floor:
        yield quality
        quality -= step
    yield floor


def _report(on_attempt: Optional[AttemptCallback], quality: int, size: int) -> None:
    logger.info(f"Quality: {quality:3d}, File size: {size:6d}")
    if on_attempt is None:
        return
    try:
        on_attempt(quality, size)
    except Exception:
        logger.exception("Attempt callback failed; continuing encode")


def encode_within_budget(
    image: Union[ProcessedImage, Image.Image],
    quality: Optional[int] = None,
    max_bytes: Optional[int] = None,
    step: int = EncoderConstants.LADDER_STEP,
    on_attempt: Optional[AttemptCallback] = None,
) -> EncodedArtifact:
    """
    Encode image, lowering quality until the output fits max_bytes.

    Args:
        image: Processed image to encode
        quality: Explicit quality; None selects the default or the ladder
        max_bytes: Size budget in bytes; None disables the search
        step: Decrement between ladder rungs
        on_attempt: Called with (quality, size) after every encode

    Returns:
        EncodedArtifact of the accepted (or last) attempt
    """
    if max_bytes is None:
        if quality is None:
            quality = EncoderConstants.DEFAULT_QUALITY
        data = encode_jpeg(image, quality)
        _report(on_attempt, quality, len(data))
        return EncodedArtifact(data=data, quality=quality, attempts=[quality])

    if quality is not None:
        # Same quality always yields the same bytes, so one attempt is final
        ladder: Iterator[int] = iter([quality])
    else:
        ladder = quality_ladder(step=step)

    attempts: List[int] = []
    data = b""
    for attempt in ladder:
        data = encode_jpeg(image, attempt)
        attempts.append(attempt)
        _report(on_attempt, attempt, len(data))
        if len(data) <= max_bytes:
            break

    within_budget = len(data) <= max_bytes
    if not within_budget:
        logger.warning(
            f"Could not reach {max_bytes} bytes; "
            f"keeping quality {attempts[-1]} at {len(data)} bytes"
        )

    return EncodedArtifact(
        data=data, quality=attempts[-1], attempts=attempts, within_budget=within_budget
    )
