"""
Enumerations shared across the transcoder.
"""

from enum import Enum


class OutputEncoding(str, Enum):
    """Transport wrapping applied to the encoded JPEG bytes"""

    RAW = "raw"
    JPEG = "jpeg"
    BASE64 = "base64"
    DATAURL = "dataurl"

    @property
    def is_binary(self) -> bool:
        return self in (OutputEncoding.RAW, OutputEncoding.JPEG)


# Alternate spellings accepted on the command line and in config files
OUTPUT_ENCODING_ALIASES = {
    "data-url": OutputEncoding.DATAURL,
    "data_url": OutputEncoding.DATAURL,
    "b64": OutputEncoding.BASE64,
}
