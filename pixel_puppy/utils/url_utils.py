"""Relative URL detection and resolution.

Resolution priority for relative URLs:

1. the ``base_url`` passed to :func:`resolve_url`
2. the configured base URL (request-scoped ``config`` or the global store)
3. the registered origin provider, if the host installed one

If none of them yields a value a :class:`ConfigurationError` is raised.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from pixel_puppy.config import PixelPuppyConfig, get_config
from pixel_puppy.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

OriginProvider = Callable[[], Optional[str]]

_ABSOLUTE_PREFIXES = ("http://", "https://", "//", "data:")

_origin_provider: OriginProvider | None = None


def set_origin_provider(provider: OriginProvider | None) -> None:
    """Install the callable that reports the current host origin.

    Browser-like hosts register something equivalent to
    ``lambda: window.location.origin``. Pass ``None`` to remove it.
    """

    global _origin_provider
    _origin_provider = provider


def get_origin_provider() -> OriginProvider | None:
    return _origin_provider


def is_relative_url(url: str) -> bool:
    """Return True when *url* needs a base URL to be resolved.

    >>> is_relative_url("/images/hero.webp")
    True
    >>> is_relative_url("//cdn.example.com/image.jpg")
    False
    """

    return not url.startswith(_ABSOLUTE_PREFIXES)


def _detect_origin() -> Optional[str]:
    if _origin_provider is None:
        return None
    return _origin_provider() or None


def resolve_url(
    url: str,
    base_url: str | None = None,
    *,
    config: PixelPuppyConfig | None = None,
) -> str:
    """Resolve a possibly relative URL to an absolute one.

    Absolute, protocol-relative and ``data:`` URLs are returned unchanged and
    any base URL is ignored for them.

    Parameters
    ----------
    url : str
        The URL to resolve.
    base_url : str | None
        Per-call base URL; takes priority over the configuration.
    config : PixelPuppyConfig | None
        Request-scoped configuration to use instead of the global store.
    """

    if not is_relative_url(url):
        return url

    if config is None:
        config = get_config()

    # An empty string at any tier counts as "not set" and falls through.
    effective_base = base_url or config.base_url
    source = "argument" if base_url else "configuration"
    if not effective_base:
        effective_base = _detect_origin()
        source = "origin provider"
    if not effective_base:
        raise ConfigurationError(url)

    # Normalize: remove one trailing slash from base, ensure path starts with slash
    normalized_base = effective_base[:-1] if effective_base.endswith("/") else effective_base
    normalized_path = url if url.startswith("/") else f"/{url}"

    resolved = f"{normalized_base}{normalized_path}"
    logger.debug("Resolved relative URL %s -> %s (base from %s)", url, resolved, source)
    return resolved
