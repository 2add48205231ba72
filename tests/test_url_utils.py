"""Tests for relative URL detection and resolution."""

import pytest

from pixel_puppy import ConfigurationError
from pixel_puppy.config import PixelPuppyConfig, configure
from pixel_puppy.utils.url_utils import (
    get_origin_provider,
    is_relative_url,
    resolve_url,
    set_origin_provider,
)


class TestIsRelativeUrl:

    @pytest.mark.parametrize("url", [
        "/images/hero.webp",
        "/",
        "images/hero.webp",
        "image.jpg",
        "./images/hero.webp",
        "../images/hero.webp",
    ])
    def test_relative(self, url):
        assert is_relative_url(url) is True

    @pytest.mark.parametrize("url", [
        "https://example.com/image.jpg",
        "http://example.com/image.jpg",
        "//cdn.example.com/image.jpg",
        "data:image/png;base64,abc123",
    ])
    def test_absolute(self, url):
        assert is_relative_url(url) is False


class TestResolveAbsolute:

    def test_returns_absolute_url_unchanged(self):
        assert resolve_url("https://example.com/image.jpg") == "https://example.com/image.jpg"

    def test_ignores_base_url_for_absolute_url(self):
        assert resolve_url("https://y.com/a.jpg", "https://x.com") == "https://y.com/a.jpg"

    def test_returns_protocol_relative_url_unchanged(self):
        assert resolve_url("//cdn.example.com/image.jpg") == "//cdn.example.com/image.jpg"

    def test_returns_data_url_unchanged(self):
        data_url = "data:image/png;base64,abc123"
        assert resolve_url(data_url) == data_url


class TestResolveWithBaseUrl:

    def test_prepends_base_url(self):
        assert resolve_url("/a/b.jpg", "https://x.com") == "https://x.com/a/b.jpg"

    def test_normalizes_trailing_slash(self):
        assert resolve_url("/a/b.jpg", "https://x.com/") == "https://x.com/a/b.jpg"

    def test_bare_path_gets_leading_slash(self):
        assert resolve_url("images/hero.webp", "https://example.com") == (
            "https://example.com/images/hero.webp"
        )

    def test_base_url_with_path(self):
        assert resolve_url("/images/hero.webp", "https://example.com/app") == (
            "https://example.com/app/images/hero.webp"
        )

    def test_keeps_query_string(self):
        assert resolve_url("/images/hero.webp?v=123", "https://example.com") == (
            "https://example.com/images/hero.webp?v=123"
        )

    def test_keeps_fragment(self):
        assert resolve_url("/images/hero.webp#section", "https://example.com") == (
            "https://example.com/images/hero.webp#section"
        )


class TestResolvePriority:

    def test_uses_global_config(self):
        configure(base_url="https://global.example.com")

        assert resolve_url("/images/hero.webp") == "https://global.example.com/images/hero.webp"

    def test_argument_beats_global_config(self):
        configure(base_url="https://global.example.com")

        assert resolve_url("/images/hero.webp", "https://override.example.com") == (
            "https://override.example.com/images/hero.webp"
        )

    def test_request_scoped_config_beats_global_config(self):
        configure(base_url="https://global.example.com")
        scoped = PixelPuppyConfig(base_url="https://scoped.example.com")

        assert resolve_url("/a.jpg", config=scoped) == "https://scoped.example.com/a.jpg"

    def test_falls_back_to_origin_provider(self):
        set_origin_provider(lambda: "https://origin.example.com")

        assert resolve_url("/a.jpg") == "https://origin.example.com/a.jpg"

    def test_config_beats_origin_provider(self):
        set_origin_provider(lambda: "https://origin.example.com")
        configure(base_url="https://global.example.com")

        assert resolve_url("/a.jpg") == "https://global.example.com/a.jpg"

    def test_origin_provider_can_be_removed(self):
        provider = lambda: "https://origin.example.com"  # noqa: E731
        set_origin_provider(provider)
        assert get_origin_provider() is provider

        set_origin_provider(None)

        assert get_origin_provider() is None
        with pytest.raises(ConfigurationError):
            resolve_url("/a.jpg")


class TestResolveErrors:

    def test_empty_base_url_falls_through_to_config(self):
        configure(base_url="https://global.example.com")

        assert resolve_url("/a.jpg", "") == "https://global.example.com/a.jpg"

    def test_empty_base_url_without_other_tiers_raises(self):
        with pytest.raises(ConfigurationError):
            resolve_url("/a.jpg", "")

    def test_raises_without_any_base_url(self):
        with pytest.raises(ConfigurationError, match="Cannot resolve relative URL") as exc_info:
            resolve_url("/a.jpg")

        assert exc_info.value.url == "/a.jpg"

    def test_message_explains_how_to_configure(self):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_url("/images/hero.webp")

        message = str(exc_info.value)
        assert "configure" in message
        assert "base_url" in message
        assert "window.location.origin" in message

    def test_origin_provider_returning_none_is_no_fallback(self):
        set_origin_provider(lambda: None)

        with pytest.raises(ConfigurationError):
            resolve_url("/a.jpg")
