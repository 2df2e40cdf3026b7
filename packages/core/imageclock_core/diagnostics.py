"""Doctor payload for local troubleshooting."""

from __future__ import annotations

import platform
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

import PIL
from PIL import features

from imageclock_renderer import FontResource, RenderError

from .clock_drawer import BASE_HEIGHT, BASE_WIDTH, MULTIPLIERS
from .config import AppConfig, config_path


def _font_report(font_path: str | None) -> dict[str, Any]:
    try:
        font = FontResource.load(font_path)
    except RenderError as exc:
        return {"ok": False, "path": font_path, "error": str(exc)}
    return {"ok": True, "path": font_path, "name": font.name, "bundled": font.bundled}


def build_doctor_payload(cfg: AppConfig) -> dict[str, Any]:
    return {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "pillow": PIL.__version__,
        "freetype": bool(features.check("freetype2")),
        "config_path": str(config_path()),
        "config": asdict(cfg),
        "font": _font_report(cfg.render.font_path),
        "canvas": {
            f"{fmt}/{tier}": [BASE_WIDTH * m, BASE_HEIGHT * m]
            for (fmt, tier), m in sorted(MULTIPLIERS.items())
        },
    }
