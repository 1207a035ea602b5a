"""Application settings and configuration."""

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from circle_transcoder.core.constants import (
    EncoderConstants,
    ImageConstants,
    LoggingConstants,
    MaskConstants,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Defaults for the command line.

    Settings can be configured via:

    1. Environment variables (e.g., CIRCLE_TRANSCODER_QUALITY_STEP=5)
    2. .env file in the working directory
    3. Default values defined below

    Command-line options always win over these values.
    """

    default_size: Annotated[
        int,
        Field(
            default=ImageConstants.DEFAULT_SIZE,
            ge=ImageConstants.MIN_SIZE,
            description="Output side length when --size is not given",
        ),
    ]
    default_quality: Annotated[
        int,
        Field(
            default=EncoderConstants.DEFAULT_QUALITY,
            ge=EncoderConstants.MIN_QUALITY,
            le=EncoderConstants.MAX_QUALITY,
            description="JPEG quality used when no quality or budget is given",
        ),
    ]
    quality_step: Annotated[
        int,
        Field(
            default=EncoderConstants.LADDER_STEP,
            ge=1,
            le=EncoderConstants.MAX_QUALITY,
            description="Quality decrement of the size-budget search",
        ),
    ]
    block_size: Annotated[
        int,
        Field(default=MaskConstants.BLOCK_SIZE, gt=0, description="Circle mask granularity"),
    ]
    log_level: Annotated[
        LogLevel, Field(default=LoggingConstants.DEFAULT_LEVEL, description="Logging level")
    ]

    model_config = SettingsConfigDict(
        env_prefix="CIRCLE_TRANSCODER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    :return: The application settings instance.
    """
    return Settings()
