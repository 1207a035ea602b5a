"""
Service layer orchestrating the core image pipeline.
"""

from .transcode_service import TranscodeResult, TranscodeService, build_config

__all__ = ["TranscodeResult", "TranscodeService", "build_config"]
