"""Error types raised by the Pixel Puppy client."""
from __future__ import annotations


class PixelPuppyError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(PixelPuppyError, ValueError):
    """Raised when a caller supplies structurally invalid input."""


class ConfigurationError(PixelPuppyError):
    """Raised when a relative URL cannot be resolved to an absolute one."""

    def __init__(self, url: str, message: str | None = None):
        super().__init__(
            message
            or (
                f'Cannot resolve relative URL "{url}". '
                "Please configure a base URL using configure(base_url='...') "
                "or pass base_url in options. "
                "In browser-like hosts, this is auto-detected from the registered "
                "origin provider (e.g. window.location.origin)."
            )
        )
        self.url = url
