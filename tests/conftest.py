"""
Pytest configuration and fixtures for circle transcoder tests
"""

import cv2
import numpy as np
import pytest

from circle_transcoder.config import get_settings
from circle_transcoder.core.image.converters import numpy_to_pil
from circle_transcoder.services.transcode_service import TranscodeService

# BGR background, RGB (40, 120, 200)
BACKGROUND_BGR = (200, 120, 40)


@pytest.fixture
def test_image():
    """Create a 400x300 BGR test image with a white block over its center"""
    image = np.full((300, 400, 3), BACKGROUND_BGR, dtype=np.uint8)
    cv2.rectangle(image, (100, 50), (300, 250), (255, 255, 255), -1)
    cv2.circle(image, (350, 60), 30, (0, 0, 255), -1)
    return image


@pytest.fixture
def source_image(test_image):
    """Same test image as an RGB PIL Image"""
    return numpy_to_pil(test_image)


@pytest.fixture
def noisy_image():
    """Random RGB noise; compresses badly so size budgets actually bite"""
    rng = np.random.default_rng(seed=1234)
    pixels = rng.integers(0, 256, size=(300, 400, 3), dtype=np.uint8)
    return numpy_to_pil(pixels)


@pytest.fixture
def png_bytes(test_image):
    """Test image encoded as PNG container bytes"""
    ok, buffer = cv2.imencode(".png", test_image)
    assert ok
    return buffer.tobytes()


@pytest.fixture
def input_file(tmp_path, png_bytes):
    """Test image written to a temporary PNG file"""
    path = tmp_path / "input.png"
    path.write_bytes(png_bytes)
    return path


@pytest.fixture
def transcode_service():
    """Create TranscodeService instance for testing"""
    return TranscodeService()


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment overrides apply per test"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
