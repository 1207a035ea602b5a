"""
Circle Transcoder - square, circle-cropped JPEG thumbnails under a size budget.
"""

__version__ = "0.1.0"
