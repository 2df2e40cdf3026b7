"""Error taxonomy shared by the core services."""

from __future__ import annotations

from imageclock_renderer.errors import RenderError


class ConfigError(ValueError):
    """Invalid format, size tier, color or interval. Never retried."""


class SinkError(RuntimeError):
    """The output directory or an image file could not be written."""


__all__ = ["ConfigError", "RenderError", "SinkError"]
