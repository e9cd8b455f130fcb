"""Unit tests for image configuration helpers."""

import pytest

from storyworld.config import IMAGE_CONSTANTS, ImageSize, get_image_api_url, get_image_timeout, parse_image_size


class TestParseImageSize:
    def test_default_is_square(self):
        assert parse_image_size(None) is ImageSize.SQUARE

    @pytest.mark.parametrize("raw, expected", [
        ("1024x1024", ImageSize.SQUARE),
        ("1792x1024", ImageSize.LANDSCAPE),
        (" 1024X1792 ", ImageSize.PORTRAIT),
        (ImageSize.LANDSCAPE, ImageSize.LANDSCAPE),
    ])
    def test_supported(self, raw, expected):
        assert parse_image_size(raw) is expected

    @pytest.mark.parametrize("raw", ["512x512", "huge", ""])
    def test_unsupported(self, raw):
        with pytest.raises(ValueError):
            parse_image_size(raw)


class TestEnvironmentOverrides:
    def test_api_url_default(self, monkeypatch):
        monkeypatch.delenv("IMAGE_API_URL", raising=False)
        assert get_image_api_url() == IMAGE_CONSTANTS["api_url"]

    def test_api_url_override(self, monkeypatch):
        monkeypatch.setenv("IMAGE_API_URL", "http://localhost:9000/images")
        assert get_image_api_url() == "http://localhost:9000/images"

    def test_timeout_override(self, monkeypatch):
        monkeypatch.setenv("IMAGE_REQUEST_TIMEOUT", "12.5")
        assert get_image_timeout() == 12.5

    def test_bad_timeout(self, monkeypatch):
        monkeypatch.setenv("IMAGE_REQUEST_TIMEOUT", "soon")
        with pytest.raises(ValueError):
            get_image_timeout()
