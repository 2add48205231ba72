"""The four breakpoint strategies, in the order they are tried."""
from __future__ import annotations

import logging

from pixel_puppy.models import ResponsiveImageAttributes, ResponsiveImageOptions
from pixel_puppy.utils.breakpoints import MIN_DEVICE_WIDTH, parse_smallest_vw, unique_sorted

from .base import ResponsiveStrategy

logger = logging.getLogger(__name__)

DEFAULT_SIZES = "100vw"
WIDTH_BASED_SIZES = "(min-width: 1024px) 1024px, 100vw"


class NonResponsiveStrategy(ResponsiveStrategy):
    """Single URL, empty srcset."""

    name = "non_responsive"

    def matches(self, options: ResponsiveImageOptions) -> bool:
        return options.responsive is False

    def compute(self, project, src, options):
        return ResponsiveImageAttributes(
            src=self.build_url(project, src, options, options.width),
            src_set="",
        )


class SizesStrategy(ResponsiveStrategy):
    """w-descriptors over every breakpoint, filtered by the smallest vw in ``sizes``.

    With ``sizes="(min-width: 768px) 50vw, 100vw"`` the image is never
    rendered narrower than 50% of the smallest supported device, so every
    candidate below ``480 * 0.5 = 240`` pixels is dropped. A ``sizes`` value
    without vw units keeps all candidates.
    """

    name = "sizes"

    def matches(self, options: ResponsiveImageOptions) -> bool:
        return bool(options.sizes)

    def compute(self, project, src, options):
        extra = [options.width, options.width * 2] if options.has_width else []
        candidates = unique_sorted(options.device_breakpoints, options.image_breakpoints, extra)

        filtered = candidates
        smallest_vw = parse_smallest_vw(options.sizes)
        if smallest_vw is not None:
            min_image_width = MIN_DEVICE_WIDTH * smallest_vw
            filtered = [bp for bp in candidates if bp >= min_image_width]

        logger.debug(
            "sizes=%r kept %d of %d breakpoints", options.sizes, len(filtered), len(candidates)
        )

        if filtered:
            fallback_width = filtered[0]
        else:
            fallback_width = candidates[0] if candidates else None

        return ResponsiveImageAttributes(
            src=self.build_url(project, src, options, fallback_width),
            src_set=self.build_src_set(project, src, options, filtered),
            sizes=options.sizes,
        )


class WidthStrategy(ResponsiveStrategy):
    """w-descriptors over every breakpoint plus the given width and its 2x."""

    name = "width"

    def matches(self, options: ResponsiveImageOptions) -> bool:
        return options.has_width

    def compute(self, project, src, options):
        candidates = unique_sorted(
            options.device_breakpoints,
            options.image_breakpoints,
            [options.width, options.width * 2],
        )
        return ResponsiveImageAttributes(
            src=self.build_url(project, src, options, options.width),
            src_set=self.build_src_set(project, src, options, candidates),
            sizes=WIDTH_BASED_SIZES,
            width=options.width,
        )


class DefaultStrategy(ResponsiveStrategy):
    """Device breakpoints only, ``sizes="100vw"``."""

    name = "default"

    def matches(self, options: ResponsiveImageOptions) -> bool:  # noqa: ARG002
        return True

    def compute(self, project, src, options):
        candidates = unique_sorted(options.device_breakpoints)
        fallback_width = candidates[0] if candidates else None
        return ResponsiveImageAttributes(
            src=self.build_url(project, src, options, fallback_width),
            src_set=self.build_src_set(project, src, options, candidates),
            sizes=DEFAULT_SIZES,
        )
