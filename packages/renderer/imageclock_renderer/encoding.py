"""Frame encoders for the on-disk image formats."""

from __future__ import annotations

from io import BytesIO

from PIL import Image

SUPPORTED_FORMATS = ("jpeg", "png")

JPEG_QUALITY = 100


def extension_for(image_format: str) -> str:
    if image_format == "jpeg":
        return ".jpg"
    return ".png"


def encode_image(image: Image.Image, image_format: str) -> bytes:
    if image_format not in SUPPORTED_FORMATS:
        raise ValueError(f"unsupported format {image_format}. supported formats: jpeg png")

    buf = BytesIO()
    if image_format == "jpeg":
        # JPEG has no alpha channel; transparent pixels become black.
        if image.mode != "RGB":
            image = image.convert("RGB")
        image.save(buf, format="JPEG", quality=JPEG_QUALITY)
    else:
        image.save(buf, format="PNG")
    return buf.getvalue()
