"""Responsive image attributes generator.

Example::

    attrs = get_responsive_image_attributes(
        "my-project",
        "https://example.com/image.jpg",
        sizes="(min-width: 768px) 50vw, 100vw",
    )
    # attrs.src      -> URL for the smallest kept breakpoint (256px)
    # attrs.src_set  -> "... 256w, ... 384w, ... 480w, ..."
    # attrs.sizes    -> "(min-width: 768px) 50vw, 100vw"
"""
from __future__ import annotations

from typing import Any, Mapping

from pixel_puppy.exceptions import ValidationError
from pixel_puppy.models import ResponsiveImageAttributes, ResponsiveImageOptions
from pixel_puppy.services.urls import build_image_url, check_source

from .base import ResponsiveStrategy
from .registry import STRATEGY_REGISTRY, select_strategy

__all__ = [
    "ResponsiveStrategy",
    "STRATEGY_REGISTRY",
    "get_responsive_image_attributes",
    "select_strategy",
]


def get_responsive_image_attributes(
    project: str,
    src: str,
    options: ResponsiveImageOptions | Mapping[str, Any] | None = None,
    **fields: Any,
) -> ResponsiveImageAttributes:
    """Generate ``src``/``srcset``/``sizes``/``width`` for an ``<img>`` tag.

    Strategies, in priority order:

    * ``responsive=False``: a single URL and an empty srcset
    * ``sizes`` given: w-descriptors filtered by the smallest vw value
    * ``width`` given: w-descriptors including ``width`` and ``2 * width``
    * otherwise: w-descriptors over the device breakpoints, ``sizes="100vw"``

    Errors from the URL builder propagate unchanged; no partial result is
    ever returned.
    """

    data = ResponsiveImageOptions.collect(options, fields)
    try:
        opts = ResponsiveImageOptions.coerce(data)
    except ValidationError:
        check_source(project, src, data.get("base_url"))
        raise

    # Builder order (slug, url, resolution, format, width) before any strategy runs.
    build_image_url(project, src, base_url=opts.base_url, format=opts.format, width=opts.width)
    return select_strategy(opts).compute(project, src, opts)
