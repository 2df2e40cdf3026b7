"""Renderer package for ImageClock canvas composition."""

from .encoding import SUPPORTED_FORMATS, encode_image, extension_for
from .errors import RenderError
from .fonts import DEFAULT_FONT_NAME, FontResource
from .image_renderer import ImageRenderer
from .models import RGBA, CanvasSize, TextLine

__all__ = [
    "CanvasSize",
    "DEFAULT_FONT_NAME",
    "FontResource",
    "ImageRenderer",
    "RGBA",
    "RenderError",
    "SUPPORTED_FORMATS",
    "TextLine",
    "encode_image",
    "extension_for",
]
