"""Global configuration for the Pixel Puppy client.

The store holds a single frozen :class:`PixelPuppyConfig`. Every update
replaces the whole object in one assignment, so readers always observe
either the previous or the new configuration in full.

Host applications that keep their base URL in the environment can call
:func:`configure_from_env` once at startup; the rest of the package never
reads the environment by itself.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pixel_puppy.models.base import OptionsModel

logger = logging.getLogger(__name__)


class PixelPuppyConfig(OptionsModel):
    """Global defaults shared by every URL the client builds."""

    model_config = ConfigDict(frozen=True)

    base_url: Optional[str] = Field(
        default=None,
        description="Base URL prepended to relative image URLs, e.g. https://example.com",
    )


_config = PixelPuppyConfig()


def configure(config: PixelPuppyConfig | Mapping[str, Any] | None = None, **fields: Any) -> None:
    """Replace the global configuration.

    Call this once at application startup. The new value is not merged with
    the old one: ``configure()`` with no ``base_url`` clears it.

    Example::

        configure(base_url="https://example.com")
        build_image_url("my-project", "/images/hero.webp")
    """

    global _config
    _config = PixelPuppyConfig.coerce(config, fields)
    logger.debug("Pixel Puppy configuration replaced (base_url=%s)", _config.base_url)


def get_config() -> PixelPuppyConfig:
    """Return a frozen copy of the current configuration."""

    return _config.model_copy()


def reset_config() -> None:
    """Restore the empty configuration (useful for testing)."""

    global _config
    _config = PixelPuppyConfig()
    logger.debug("Pixel Puppy configuration reset")


# ---------------------------------------------------------------------------
# Environment settings (opt-in)
# ---------------------------------------------------------------------------


class Settings(BaseSettings):
    """Host settings loaded from environment variables or .env file."""

    base_url: Optional[str] = Field(
        default=None,
        description="Read from PIXEL_PUPPY_BASE_URL.",
    )

    model_config = SettingsConfigDict(
        env_prefix="PIXEL_PUPPY_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance so it is only parsed once."""

    # Load environment variables from a .env file if present (local dev only)
    load_dotenv()
    return Settings()


def configure_from_env() -> PixelPuppyConfig:
    """Configure the client from ``PIXEL_PUPPY_*`` settings and return the snapshot."""

    settings = get_settings()
    configure(base_url=settings.base_url)
    return get_config()
