"""Client helpers for the Pixel Puppy image transformation service."""
from .config import (
    PixelPuppyConfig,
    configure,
    configure_from_env,
    get_config,
    reset_config,
)
from .exceptions import ConfigurationError, PixelPuppyError, ValidationError
from .models import ResponsiveImageAttributes, ResponsiveImageOptions, TransformationOptions
from .services.responsive import get_responsive_image_attributes
from .services.urls import build_image_url
from .utils.url_utils import is_relative_url, resolve_url, set_origin_provider

__all__ = [
    "ConfigurationError",
    "PixelPuppyConfig",
    "PixelPuppyError",
    "ResponsiveImageAttributes",
    "ResponsiveImageOptions",
    "TransformationOptions",
    "ValidationError",
    "build_image_url",
    "configure",
    "configure_from_env",
    "get_config",
    "get_responsive_image_attributes",
    "is_relative_url",
    "reset_config",
    "resolve_url",
    "set_origin_provider",
]
