"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import RenderError


@dataclass(frozen=True)
class RGBA:
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= int(channel) <= 255:
                raise ValueError(f"color channel out of range: {channel}")

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class TextLine:
    text: str
    x: int
    y: float
    slot: int


@dataclass(frozen=True)
class CanvasSize:
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise RenderError(f"canvas must be positive, got {self.width}x{self.height}")

    @property
    def font_size(self) -> int:
        return max(1, self.width // 30)
