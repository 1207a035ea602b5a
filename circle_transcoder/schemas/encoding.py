"""
Encoding configuration and result models.

This module contains:
- EncodingConfig: validated options for a single transcode run
- EncodedArtifact: JPEG bytes together with the quality that produced them
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from circle_transcoder.core.constants import EncoderConstants, ImageConstants
from circle_transcoder.core.enums import OUTPUT_ENCODING_ALIASES, OutputEncoding
from circle_transcoder.core.utils.enum_converter import parse_enum


class EncodingConfig(BaseModel):
    """
    Options for one transcode run.

    ``quality=None`` means automatic: the default quality when no size budget
    is given, or the descending quality ladder when ``max_filesize`` is set.
    An explicit quality together with ``max_filesize`` pins the quality and
    only reports whether the budget was met.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    size: int = Field(
        default=ImageConstants.DEFAULT_SIZE,
        ge=ImageConstants.MIN_SIZE,
        description="Side length of the square output in pixels",
    )
    circle: bool = Field(default=False, description="Mask the output to its inscribed circle")
    grayscale: bool = Field(default=False, description="Convert the output to luminance")
    quality: Optional[int] = Field(
        default=None,
        ge=EncoderConstants.MIN_QUALITY,
        le=EncoderConstants.MAX_QUALITY,
        description="JPEG quality (None for automatic)",
    )
    max_filesize: Optional[int] = Field(
        default=None, gt=0, description="Maximum encoded size in bytes"
    )
    quality_step: int = Field(
        default=EncoderConstants.LADDER_STEP,
        ge=1,
        le=EncoderConstants.MAX_QUALITY,
        description="Quality decrement between budget search attempts",
    )
    encoding: OutputEncoding = Field(
        default=OutputEncoding.RAW, description="Transport wrapping of the output"
    )

    @field_validator("encoding", mode="before")
    @classmethod
    def _parse_encoding(cls, value):
        return parse_enum(
            value, OutputEncoding, default=OutputEncoding.RAW, aliases=OUTPUT_ENCODING_ALIASES
        )

    @property
    def budgeted(self) -> bool:
        return self.max_filesize is not None


class EncodedArtifact(BaseModel):
    """Result of encoding a processed image"""

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(repr=False)
    quality: int = Field(description="Quality of the returned encoding")
    attempts: List[int] = Field(
        default_factory=list, description="Qualities tried, in order"
    )
    within_budget: Optional[bool] = Field(
        default=None, description="Whether the size budget was met (None without a budget)"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def size(self) -> int:
        return len(self.data)
