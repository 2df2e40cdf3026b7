"""Filesystem sink for encoded frames."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from imageclock_renderer import encode_image

from .errors import SinkError


class ImageSink:
    def __init__(self, basepath: str | Path, image_format: str) -> None:
        self.basepath = Path(basepath).expanduser()
        self.image_format = image_format

    def ensure_dir(self) -> Path:
        try:
            self.basepath.mkdir(mode=0o700, parents=True, exist_ok=True)
        except OSError as exc:
            raise SinkError(f"failed to create basepath directory: {exc}") from exc
        return self.basepath

    def write(self, image: Image.Image, stamp: str, extension: str) -> Path:
        path = self.basepath / f"{stamp}{extension}"
        try:
            payload = encode_image(image, self.image_format)
        except (OSError, ValueError) as exc:
            raise SinkError(f"failed to encode image: {exc}") from exc
        try:
            path.write_bytes(payload)
        except OSError as exc:
            raise SinkError(f"failed to create file: {exc}") from exc
        return path
