"""
In-memory image value passed from the transform pipeline to the encoder.
"""

from dataclasses import dataclass

import numpy as np
from PIL import Image


@dataclass(frozen=True)
class ProcessedImage:
    """Square image produced by the transform pipeline"""

    image: Image.Image

    def __post_init__(self):
        width, height = self.image.size
        if width != height:
            raise ValueError(f"Processed image must be square, got {width}x{height}")

    @property
    def side_length(self) -> int:
        return self.image.width

    @property
    def mode(self) -> str:
        return self.image.mode

    def tobytes(self) -> bytes:
        return self.image.tobytes()

    def to_array(self) -> np.ndarray:
        """Read-only NumPy copy of the pixel buffer ([y, x] or [y, x, channel])"""
        array = np.array(self.image)
        array.setflags(write=False)
        return array
