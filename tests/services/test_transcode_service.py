"""
Tests for TranscodeService
"""

import base64
import io

import pytest
from PIL import Image
from pydantic import ValidationError

from circle_transcoder.core.enums import OutputEncoding
from circle_transcoder.core.exceptions import ConfigError, DecodeError, ImageIOError
from circle_transcoder.core.image.encoders import encode_jpeg, quality_ladder
from circle_transcoder.core.image.processors import transform
from circle_transcoder.services.transcode_service import TranscodeService, build_config


def decode_jpeg(data):
    image = Image.open(io.BytesIO(data))
    assert image.format == "JPEG"
    return image


class TestBuildConfig:
    """Test option validation"""

    def test_defaults(self):
        config = build_config()
        assert config.size == 200
        assert config.quality is None
        assert config.quality_step == 10
        assert config.encoding is OutputEncoding.RAW

    def test_none_values_use_defaults(self):
        config = build_config(size=None, quality=None, encoding=None)
        assert config.size == 200
        assert config.encoding is OutputEncoding.RAW

    def test_encoding_alias(self):
        assert build_config(encoding="data-url").encoding is OutputEncoding.DATAURL

    @pytest.mark.parametrize(
        "options",
        [
            {"encoding": "unknown"},
            {"quality": 101},
            {"quality": -1},
            {"size": 0},
            {"max_filesize": 0},
            {"quality_step": 0},
            {"colour": True},
        ],
    )
    def test_invalid_options(self, options):
        with pytest.raises(ConfigError) as exc_info:
            build_config(**options)
        assert "Invalid configuration" in exc_info.value.message

    def test_config_is_frozen(self):
        config = build_config()
        with pytest.raises(ValidationError):
            config.size = 10


class TestTranscodeService:
    """Test end-to-end transcoding"""

    def test_plain_resize_scenario(self, transcode_service, png_bytes):
        config = build_config(size=100, quality=80)
        artifact, payload = transcode_service.transcode_bytes(png_bytes, config)

        assert payload is artifact.data
        assert artifact.quality == 80
        image = decode_jpeg(payload)
        assert image.size == (100, 100)
        # Unmasked corner keeps the blue-ish background
        assert image.convert("L").getpixel((0, 0)) > 80

    def test_circle_scenario(self, transcode_service, png_bytes):
        config = build_config(size=100, circle=True)
        artifact, _ = transcode_service.transcode_bytes(png_bytes, config)

        luma = decode_jpeg(artifact.data).convert("L")
        for corner in [(0, 0), (99, 0), (0, 99), (99, 99)]:
            assert luma.getpixel(corner) < 40
        assert luma.getpixel((50, 50)) > 200

    def test_grayscale_output(self, transcode_service, png_bytes):
        artifact, _ = transcode_service.transcode_bytes(png_bytes, build_config(size=64, grayscale=True))
        assert decode_jpeg(artifact.data).mode == "L"

    def test_default_quality_from_service(self, png_bytes):
        service = TranscodeService(default_quality=42)
        artifact, _ = service.transcode_bytes(png_bytes, build_config(size=32))
        assert artifact.attempts == [42]

    def test_budget_scenario(self, transcode_service, noisy_image):
        config = build_config(size=100, max_filesize=5000)
        artifact = transcode_service.encode(noisy_image, config)

        processed = transform(noisy_image, config)
        ladder = list(quality_ladder())
        sizes = {quality: len(encode_jpeg(processed, quality)) for quality in ladder}
        expected = next((q for q in ladder if sizes[q] <= 5000), 0)

        assert artifact.attempts[0] == 100
        assert artifact.quality == expected
        assert artifact.attempts == ladder[: ladder.index(expected) + 1]

    def test_uneven_step_budget_miss_reaches_floor(self, transcode_service, noisy_image):
        config = build_config(size=100, max_filesize=1, quality_step=30)
        artifact = transcode_service.encode(noisy_image, config)
        assert artifact.attempts == [100, 70, 40, 10, 0]
        assert artifact.quality == 0
        assert artifact.within_budget is False

    def test_budget_ignores_default_quality(self, noisy_image):
        service = TranscodeService(default_quality=10)
        artifact = service.encode(noisy_image, build_config(size=50, max_filesize=10_000_000))
        assert artifact.attempts == [100]

    def test_attempt_observer(self, noisy_image):
        seen = []
        service = TranscodeService(on_attempt=lambda q, size: seen.append(q))
        artifact = service.encode(noisy_image, build_config(size=50, max_filesize=1, quality_step=25))
        assert seen == [100, 75, 50, 25, 0]
        assert artifact.within_budget is False

    def test_transcode_file_base64(self, transcode_service, input_file, tmp_path):
        output = tmp_path / "out.b64"
        result = transcode_service.transcode_file(
            input_file, output, build_config(size=40, encoding="base64")
        )

        text = output.read_text(encoding="ascii")
        assert base64.b64decode(text) == result.artifact.data
        assert result.bytes_written == len(text)
        assert result.output_path == output
        assert result.processing_time_ms >= 0

    def test_transcode_file_budget_miss_still_writes(self, transcode_service, input_file, tmp_path):
        output = tmp_path / "out.jpg"
        result = transcode_service.transcode_file(
            input_file, output, build_config(size=100, max_filesize=1)
        )
        assert result.artifact.within_budget is False
        assert result.artifact.quality == 0
        assert output.read_bytes() == result.artifact.data

    def test_missing_input(self, transcode_service, tmp_path):
        output = tmp_path / "out.jpg"
        with pytest.raises(ImageIOError) as exc_info:
            transcode_service.transcode_file(tmp_path / "nope.png", output, build_config())
        assert exc_info.value.path == tmp_path / "nope.png"
        assert not output.exists()

    def test_undecodable_input(self, transcode_service, tmp_path):
        source = tmp_path / "broken.png"
        source.write_bytes(b"definitely not an image")
        output = tmp_path / "out.jpg"
        with pytest.raises(DecodeError):
            transcode_service.transcode_file(source, output, build_config())
        assert not output.exists()

    def test_unwritable_output(self, transcode_service, input_file, tmp_path):
        with pytest.raises(ImageIOError):
            transcode_service.transcode_file(
                input_file, tmp_path / "missing" / "out.jpg", build_config(size=20)
            )
