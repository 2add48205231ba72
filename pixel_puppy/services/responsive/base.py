from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from pixel_puppy.models import ResponsiveImageAttributes, ResponsiveImageOptions
from pixel_puppy.services.urls import build_image_url
from pixel_puppy.utils.breakpoints import Number, format_width


class ResponsiveStrategy(ABC):
    """A rule that turns responsive options into ``<img>`` attributes."""

    name: str = "abstract"

    @abstractmethod
    def matches(self, options: ResponsiveImageOptions) -> bool:
        """Return True when this strategy applies to *options*."""

    @abstractmethod
    def compute(
        self,
        project: str,
        src: str,
        options: ResponsiveImageOptions,
    ) -> ResponsiveImageAttributes:
        """Build the attributes. Must not catch builder errors."""

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def build_url(
        project: str,
        src: str,
        options: ResponsiveImageOptions,
        width: Optional[Number],
    ) -> str:
        return build_image_url(
            project,
            src,
            base_url=options.base_url,
            format=options.format,
            width=width,
        )

    def build_src_set(
        self,
        project: str,
        src: str,
        options: ResponsiveImageOptions,
        widths: Iterable[Number],
    ) -> str:
        """Join one ``"<url> <width>w"`` entry per width with ``", "``."""

        return ", ".join(
            f"{self.build_url(project, src, options, w)} {format_width(w)}w" for w in widths
        )
