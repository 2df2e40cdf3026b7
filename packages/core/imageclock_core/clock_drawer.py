"""Clock frame composer: configuration, counter and four-line layout."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from PIL import Image

from imageclock_renderer import RGBA, SUPPORTED_FORMATS, CanvasSize, FontResource, ImageRenderer, extension_for

from .errors import ConfigError

BASE_WIDTH = 2560
BASE_HEIGHT = 1440

SIZE_TIERS = ("small", "big")

MULTIPLIERS: dict[tuple[str, str], int] = {
    ("jpeg", "small"): 1,
    ("jpeg", "big"): 4,
    ("png", "small"): 1,
    ("png", "big"): 4,
}


@dataclass(frozen=True)
class Frame:
    image: Image.Image
    count: int
    lines: tuple[str, ...]


def canvas_size(image_format: str, size_tier: str) -> tuple[int, int]:
    multiple = MULTIPLIERS[(image_format, size_tier)]
    return BASE_WIDTH * multiple, BASE_HEIGHT * multiple


class ClockDrawer:
    """Owns render configuration and produces one composed frame per call.

    Format and size tier are validated before any font work happens, so a
    bad configuration fails fast with :class:`ConfigError`. The font is then
    loaded eagerly and a face for the canvas size is built up front; font
    failures surface here as ``RenderError`` rather than on the first frame.
    """

    def __init__(
        self,
        label: str,
        color: RGBA,
        image_format: str,
        size_tier: str,
        font_path: str | Path | None = None,
    ) -> None:
        if image_format not in SUPPORTED_FORMATS:
            raise ConfigError(f"unsupported format {image_format}. supported formats: jpeg png")
        if size_tier not in SIZE_TIERS:
            raise ConfigError(f"unsupported size {size_tier}. supported sizes: big small")

        self.label = label
        self.color = color
        self.image_format = image_format
        self.size_tier = size_tier
        self.width, self.height = canvas_size(image_format, size_tier)

        font = FontResource.load(font_path)
        self._renderer = ImageRenderer(font)
        font.face(CanvasSize(self.width, self.height).font_size)

        self.start_time = datetime.now().astimezone()
        self._count = 0
        self._count_lock = threading.Lock()

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def font(self) -> FontResource:
        return self._renderer.font

    @property
    def render_count(self) -> int:
        with self._count_lock:
            return self._count

    def extension(self) -> str:
        return extension_for(self.image_format)

    def _next_count(self) -> int:
        # Taken before drawing: a render that raises still consumes its number.
        with self._count_lock:
            self._count += 1
            return self._count

    def metadata_line(self) -> str:
        return (
            f"start_time: {int(self.start_time.timestamp())}, "
            f"size: {self.size_tier}, image_type: {self.image_format}"
        )

    def render_frame(self, current_time_label: str) -> Frame:
        count = self._next_count()
        lines = (
            self.label,
            self.metadata_line(),
            current_time_label,
            f"count: {count}",
        )
        image = self._renderer.render(self.width, self.height, self.color, lines)
        return Frame(image=image, count=count, lines=lines)

    def render(self, current_time_label: str) -> Image.Image:
        return self.render_frame(current_time_label).image
