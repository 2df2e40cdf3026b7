"""Multi-line text canvas renderer."""

from __future__ import annotations

from collections.abc import Sequence

from PIL import Image, ImageDraw

from .errors import RenderError
from .fonts import FontResource
from .models import RGBA, CanvasSize, TextLine

BACKGROUND = (0, 0, 0, 0)


class ImageRenderer:
    """Draws an ordered list of lines centered on equally spaced rows.

    Line ``i`` of ``n`` sits at ``height * (i + 1) / (n + 1)``, horizontally
    centered at ``width // 2``. Text is sized at ``width // 30`` points.
    """

    def __init__(self, font: FontResource) -> None:
        self.font = font

    @staticmethod
    def layout(width: int, height: int, lines: Sequence[str]) -> list[TextLine]:
        canvas = CanvasSize(width, height)
        if not lines:
            raise RenderError("at least one line of text is required")
        rows = len(lines) + 1
        x = canvas.width // 2
        return [
            TextLine(text=str(text), x=x, y=canvas.height * (i + 1) / rows, slot=i)
            for i, text in enumerate(lines)
        ]

    def render(self, width: int, height: int, color: RGBA, lines: Sequence[str]) -> Image.Image:
        placed = self.layout(width, height, lines)
        face = self.font.face(CanvasSize(width, height).font_size)

        image = Image.new("RGBA", (width, height), BACKGROUND)
        draw = ImageDraw.Draw(image)
        fill = color.as_tuple()
        for line in placed:
            draw.text((line.x, line.y), line.text, font=face, fill=fill, anchor="mm")
        return image
