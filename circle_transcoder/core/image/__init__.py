"""
Image pipeline - modular architecture.

This package provides the transcode stages in data-flow order:
- geometry: Circular block mask
- processors: Resize, circle crop, grayscale (transform pipeline)
- encoders: JPEG encoding and the size-budget quality search
- converters: Decoding, NumPy/PIL interop, transport encodings
"""

from circle_transcoder.core.image.converters import (
    decode_image,
    format_output,
    numpy_to_pil,
    to_base64,
    to_data_url,
)
from circle_transcoder.core.image.encoders import (
    encode_jpeg,
    encode_within_budget,
    quality_ladder,
)
from circle_transcoder.core.image.geometry import block_in_circle, circle_block_mask, in_circle
from circle_transcoder.core.image.processors import (
    crop_to_circle,
    resize_square,
    to_grayscale,
    transform,
)

__all__ = [
    "block_in_circle",
    "circle_block_mask",
    "crop_to_circle",
    "decode_image",
    "encode_jpeg",
    "encode_within_budget",
    "format_output",
    "in_circle",
    "numpy_to_pil",
    "quality_ladder",
    "resize_square",
    "to_base64",
    "to_data_url",
    "to_grayscale",
    "transform",
]
