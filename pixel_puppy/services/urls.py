"""Pixel Puppy transformation URL builder.

Builds URLs of the form::

    https://pixelpuppy.io/api/image?project=<slug>&url=<source>&format=<fmt>[&width=<px>]

Query keys always appear in that order. The source URL is resolved first
(relative URLs need a base URL) and is query-encoded so that decoding the
result gives back the original URL exactly.
"""
from __future__ import annotations

import math
from typing import Any, Mapping
from urllib.parse import urlencode

from pixel_puppy.exceptions import ValidationError
from pixel_puppy.models.options import (
    INVALID_FORMAT_MESSAGE,
    SUPPORTED_FORMATS,
    WIDTH_NOT_A_NUMBER_MESSAGE,
    WIDTH_NOT_POSITIVE_MESSAGE,
    TransformationOptions,
)
from pixel_puppy.utils.breakpoints import format_width
from pixel_puppy.utils.url_utils import resolve_url

TRANSFORMATION_ENDPOINT = "https://pixelpuppy.io/api/image"
DEFAULT_FORMAT = "webp"


def check_source(project_slug: str, original_image_url: str, base_url: Any = None) -> str:
    """Run the checks that precede option validation and return the resolved URL.

    Order: project slug, image URL, then resolution. A *base_url* that is not
    a string is ignored here; option validation reports it afterwards.
    """

    if not project_slug:
        raise ValidationError("projectSlug is required.")
    if not original_image_url:
        raise ValidationError("originalImageUrl is required.")
    return resolve_url(original_image_url, base_url if isinstance(base_url, str) else None)


def build_image_url(
    project_slug: str,
    original_image_url: str,
    options: TransformationOptions | Mapping[str, Any] | None = None,
    **fields: Any,
) -> str:
    """Build a URL for the Pixel Puppy image transformation API.

    Parameters
    ----------
    project_slug : str
        The project identifier of the Pixel Puppy account.
    original_image_url : str
        URL of the original image. Relative URLs are resolved against
        ``base_url``, the configured base URL or the host origin.
    options : TransformationOptions | Mapping | None
        ``base_url``, ``format`` ("webp" or "png", default "webp") and
        ``width`` in pixels. Keyword arguments override these.

    Raises
    ------
    ValidationError
        Missing slug or image URL, unsupported format, NaN or non-positive
        width.
    ConfigurationError
        *original_image_url* is relative and no base URL is available.

    Example::

        build_image_url("my-project", "https://example.com/photo.jpg", width=800)
        # https://pixelpuppy.io/api/image?project=my-project&url=https%3A%2F%2Fexample.com%2Fphoto.jpg&format=webp&width=800
    """

    data: dict[str, Any] = {}
    if project_slug and original_image_url:
        data = TransformationOptions.collect(options, fields)
    # Option failures are reported only once the source has resolved.
    resolved_url = check_source(project_slug, original_image_url, data.get("base_url"))
    opts = TransformationOptions.coerce(data)

    image_format = opts.format or DEFAULT_FORMAT
    width = opts.width

    if image_format not in SUPPORTED_FORMATS:
        raise ValidationError(INVALID_FORMAT_MESSAGE)

    if isinstance(width, float) and math.isnan(width):
        raise ValidationError(WIDTH_NOT_A_NUMBER_MESSAGE)

    if width and width <= 0:
        raise ValidationError(WIDTH_NOT_POSITIVE_MESSAGE)

    params = [
        ("project", project_slug),
        ("url", resolved_url),
        ("format", image_format.lower()),
    ]
    if width:
        params.append(("width", format_width(width)))

    return f"{TRANSFORMATION_ENDPOINT}?{urlencode(params)}"
