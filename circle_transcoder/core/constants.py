"""
Constants and configuration values for the circle transcoder.
Centralizes all magic numbers and policy constants.
"""


class MaskConstants:
    """Constants for the circular mask."""

    # Matches the JPEG MCU so the mask edge follows compression block edges
    BLOCK_SIZE = 8


class ImageConstants:
    """Constants related to image sizing and pixel formats."""

    DEFAULT_SIZE = 200
    MIN_SIZE = 1

    # Modes the JPEG writer accepts without conversion
    ENCODABLE_MODES = ("RGB", "L")
    COLOR_MODE = "RGB"
    GRAYSCALE_MODE = "L"


class EncoderConstants:
    """Constants for JPEG encoding and the quality ladder."""

    FORMAT = "JPEG"

    DEFAULT_QUALITY = 75
    MIN_QUALITY = 0
    MAX_QUALITY = 100

    # Quality ladder used when searching for a size budget
    LADDER_START = 100
    LADDER_STEP = 10
    LADDER_FLOOR = 0


class OutputConstants:
    """Constants for transport encodings."""

    DATA_URL_PREFIX = "data:image/jpeg;base64,"
    TEXT_ENCODING = "ascii"


class LoggingConstants:
    """Logging defaults for the command-line entry point."""

    DEFAULT_LEVEL = "INFO"
    FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
