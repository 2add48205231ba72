from __future__ import annotations

from typing import ClassVar, List, Optional, Union

from pydantic import Field, PositiveInt, field_validator

from pixel_puppy.utils.breakpoints import DEFAULT_DEVICE_BREAKPOINTS, DEFAULT_IMAGE_BREAKPOINTS

from .base import OptionsModel

SUPPORTED_FORMATS = ("webp", "png")

INVALID_FORMAT_MESSAGE = "Invalid format. Supported formats are webp and png."
WIDTH_NOT_A_NUMBER_MESSAGE = "Width must be a number."
WIDTH_NOT_POSITIVE_MESSAGE = "Width must be a positive number."


class TransformationOptions(OptionsModel):
    error_messages: ClassVar[dict[str, str]] = {
        "format": INVALID_FORMAT_MESSAGE,
        "width": WIDTH_NOT_A_NUMBER_MESSAGE,
    }

    base_url: Optional[str] = None  # overrides the configured base URL
    format: Optional[str] = None  # "webp" (default) or "png"
    width: Optional[Union[int, float]] = None  # 0 means "not provided"


class ResponsiveImageOptions(TransformationOptions):
    """Options for :func:`get_responsive_image_attributes`."""

    sizes: Optional[str] = None
    responsive: bool = True
    device_breakpoints: List[PositiveInt] = Field(
        default_factory=lambda: list(DEFAULT_DEVICE_BREAKPOINTS)
    )
    image_breakpoints: List[PositiveInt] = Field(
        default_factory=lambda: list(DEFAULT_IMAGE_BREAKPOINTS)
    )

    @field_validator("device_breakpoints", mode="before")
    @classmethod
    def default_device_breakpoints(cls, value):
        return list(DEFAULT_DEVICE_BREAKPOINTS) if value is None else value

    @field_validator("image_breakpoints", mode="before")
    @classmethod
    def default_image_breakpoints(cls, value):
        return list(DEFAULT_IMAGE_BREAKPOINTS) if value is None else value

    @property
    def has_width(self) -> bool:
        # 0 and None both mean "no width"
        return self.width is not None and self.width != 0
