"""
Transcode Service - Business logic for a single transcode run.

This service orchestrates the pipeline stages: read, decode, transform,
encode within budget, format and write. It keeps no state between runs,
so one instance can process any number of images.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Tuple, Union

import numpy as np
from PIL import Image
from pydantic import ValidationError

from circle_transcoder.core.constants import EncoderConstants, MaskConstants
from circle_transcoder.core.exceptions import ConfigError
from circle_transcoder.core.image.converters import decode_image, format_output
from circle_transcoder.core.image.encoders import AttemptCallback, encode_within_budget
from circle_transcoder.core.image.processors import transform
from circle_transcoder.core.storage import read_file, write_file
from circle_transcoder.core.utils.decorators import timer
from circle_transcoder.schemas import EncodedArtifact, EncodingConfig

logger = logging.getLogger(__name__)


def build_config(**options: Any) -> EncodingConfig:
    """
    Validate raw options into an EncodingConfig.

    Options that are None are dropped so model defaults apply.

    Raises:
        ConfigError: If any option is unknown or out of range
    """
    values = {key: value for key, value in options.items() if value is not None}
    try:
        return EncodingConfig(**values)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {details}") from e


@dataclass
class TranscodeResult:
    """Outcome of a file-to-file transcode"""

    artifact: EncodedArtifact
    output_path: Path
    bytes_written: int
    processing_time_ms: int


class TranscodeService:
    """
    Service for transcoding images to size-bounded JPEG output.

    Combines the transform pipeline, the size-budget encoder and the
    output formatter with file access.
    """

    def __init__(
        self,
        default_quality: int = EncoderConstants.DEFAULT_QUALITY,
        block_size: int = MaskConstants.BLOCK_SIZE,
        on_attempt: Optional[AttemptCallback] = None,
    ):
        """
        Initialize transcode service.

        Args:
            default_quality: Quality used when neither quality nor budget is set
            block_size: Circle mask granularity in pixels
            on_attempt: Optional observer called with (quality, size) per encode
        """
        self.default_quality = default_quality
        self.block_size = block_size
        self.on_attempt = on_attempt

    def encode(
        self, image: Union[np.ndarray, Image.Image], config: EncodingConfig
    ) -> EncodedArtifact:
        """
        Transform and encode an already decoded image.

        Args:
            image: Source image (PIL Image or BGR NumPy array); not modified
            config: Validated encoding options

        Returns:
            EncodedArtifact (check within_budget when a budget was set)
        """
        processed = transform(image, config, block_size=self.block_size)

        quality = config.quality
        if quality is None and not config.budgeted:
            quality = self.default_quality

        return encode_within_budget(
            processed,
            quality=quality,
            max_bytes=config.max_filesize,
            step=config.quality_step,
            on_attempt=self.on_attempt,
        )

    def transcode_bytes(
        self, data: bytes, config: EncodingConfig
    ) -> Tuple[EncodedArtifact, Union[bytes, str]]:
        """
        Decode, transcode and format image bytes entirely in memory.

        Returns:
            Tuple of (artifact, payload in the configured transport encoding)
        """
        image = decode_image(data)
        artifact = self.encode(image, config)
        return artifact, format_output(artifact.data, config.encoding)

    def transcode_file(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
        config: EncodingConfig,
    ) -> TranscodeResult:
        """
        Transcode input_path into output_path.

        Nothing is written unless every earlier stage succeeded. A missed
        size budget still writes the best effort output.

        Args:
            input_path: Source image file
            output_path: Destination file (raw bytes or ASCII text)
            config: Validated encoding options

        Returns:
            TranscodeResult with the artifact and write statistics
        """
        output_path = Path(output_path)

        with timer() as t:
            data = read_file(input_path)
            artifact, payload = self.transcode_bytes(data, config)
            bytes_written = write_file(output_path, payload)

        logger.info(
            f"Wrote {output_path} ({bytes_written} bytes, {config.encoding.value}) "
            f"at quality {artifact.quality} in {t.elapsed_ms}ms"
        )
        return TranscodeResult(
            artifact=artifact,
            output_path=output_path,
            bytes_written=bytes_written,
            processing_time_ms=t.elapsed_ms,
        )
