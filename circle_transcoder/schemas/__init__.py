"""
Schemas Package

Validated configuration and value types shared by the core pipeline,
the transcode service and the command line.
"""

from .encoding import EncodedArtifact, EncodingConfig
from .image import ProcessedImage

__all__ = [
    "EncodedArtifact",
    "EncodingConfig",
    "ProcessedImage",
]
