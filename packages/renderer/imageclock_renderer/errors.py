"""Renderer error types."""

from __future__ import annotations


class RenderError(RuntimeError):
    """The canvas or the font resource could not be turned into an image."""
