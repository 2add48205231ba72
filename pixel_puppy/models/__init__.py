from .attributes import ResponsiveImageAttributes
from .base import OptionsModel
from .options import ResponsiveImageOptions, TransformationOptions

__all__ = [
    "OptionsModel",
    "ResponsiveImageAttributes",
    "ResponsiveImageOptions",
    "TransformationOptions",
]
