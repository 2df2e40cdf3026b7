"""Typeface resource shared by every render."""

from __future__ import annotations

import threading
from io import BytesIO
from pathlib import Path

from PIL import ImageFont

from .errors import RenderError

# Pillow >= 10.1 ships Aileron Regular as its scalable default face.
DEFAULT_FONT_NAME = "Aileron-Regular (Pillow default)"

_PROBE_SIZE = 12


class FontResource:
    """Immutable font bytes plus a per-size cache of FreeType faces.

    The resource is loaded once at startup and handed to the renderer by
    reference. Faces are built lazily for each size and reused afterwards.
    """

    def __init__(self, data: bytes | None = None, name: str = DEFAULT_FONT_NAME) -> None:
        self._data = data
        self.name = name
        self._faces: dict[int, ImageFont.FreeTypeFont] = {}
        self._lock = threading.Lock()

    @classmethod
    def load(cls, path: str | Path | None = None) -> "FontResource":
        if path is None:
            resource = cls()
        else:
            font_path = Path(path).expanduser()
            try:
                data = font_path.read_bytes()
            except OSError as exc:
                raise RenderError(f"failed to read font {font_path}: {exc}") from exc
            resource = cls(data=data, name=font_path.name)
        resource.face(_PROBE_SIZE)
        return resource

    @property
    def bundled(self) -> bool:
        return self._data is None

    def face(self, size: int) -> ImageFont.FreeTypeFont:
        if size <= 0:
            raise RenderError(f"font size must be positive, got {size}")
        with self._lock:
            cached = self._faces.get(size)
            if cached is None:
                cached = self._build(size)
                self._faces[size] = cached
            return cached

    def _build(self, size: int) -> ImageFont.FreeTypeFont:
        try:
            if self._data is None:
                face = ImageFont.load_default(size=size)
            else:
                face = ImageFont.truetype(BytesIO(self._data), size)
        except (OSError, ValueError) as exc:
            raise RenderError(f"failed to create font face {self.name}: {exc}") from exc
        if not isinstance(face, ImageFont.FreeTypeFont):
            raise RenderError("Pillow was built without FreeType; a scalable font is required")
        return face
