from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from pixel_puppy.utils.breakpoints import format_width


class ResponsiveImageAttributes(BaseModel):
    """Attributes for an ``<img>`` tag.

    ``sizes`` and ``width`` are only set by the strategies that emit them.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    src: str
    src_set: str  # dumped as "srcSet" with by_alias=True
    sizes: Optional[str] = None
    width: Optional[Union[int, float]] = None

    def to_html_attributes(self) -> dict[str, str]:
        """Return the attributes keyed by their HTML names, omitting unset ones."""

        attrs = {"src": self.src, "srcset": self.src_set}
        if self.sizes is not None:
            attrs["sizes"] = self.sizes
        if self.width is not None:
            attrs["width"] = format_width(self.width)
        return attrs
