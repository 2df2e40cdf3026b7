"""Persistent settings schema, load/save helpers and value parsers."""

from __future__ import annotations

import json
import os
import platform
import re
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from imageclock_renderer import RGBA

from .errors import ConfigError


CONFIG_VERSION = 1

NAMED_COLORS: dict[str, RGBA] = {
    "white": RGBA(255, 255, 255, 255),
    "red": RGBA(255, 0, 0, 255),
    "green": RGBA(0, 255, 0, 255),
    "blue": RGBA(0, 0, 255, 255),
}

_HEX_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$")
_DURATION_PART_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|\u00b5s|\u03bcs|ms|s|m|h)")
_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "\u00b5s": 1e-6,
    "\u03bcs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}


@dataclass
class OutputConfig:
    basepath: str = "images"
    image_format: str = "png"


@dataclass
class RenderConfig:
    label: str = "imageclock"
    color: str = "white"
    size: str = "small"
    font_path: str | None = None


@dataclass
class ScheduleConfig:
    interval_s: float = 1.0
    max_frames: int | None = None


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7
    console_logging: bool = True


@dataclass
class PerformanceConfig:
    cpu_percent_max: float = 50.0
    rss_mb_max: float = 2048.0


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    output: OutputConfig = field(default_factory=OutputConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "ImageClock"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "ImageClock"
    return Path.home() / ".config" / "imageclock"


def config_path() -> Path:
    return config_root() / "config.json"


def parse_color(value: str) -> RGBA:
    """Accept a named color or ``#RRGGBB`` / ``#RRGGBBAA``."""
    name = value.strip().lower()
    if name in NAMED_COLORS:
        return NAMED_COLORS[name]
    match = _HEX_COLOR_RE.match(name)
    if not match:
        supported = " ".join(NAMED_COLORS)
        raise ConfigError(f"unsupported color {value}. supported colors: {supported} or #RRGGBB[AA]")
    rgb, alpha = match.groups()
    return RGBA(
        int(rgb[0:2], 16),
        int(rgb[2:4], 16),
        int(rgb[4:6], 16),
        int(alpha, 16) if alpha else 255,
    )


def parse_duration(value: str) -> float:
    """Parse a Go-style duration such as ``500ms``, ``-2s`` or ``+1m30s`` into seconds.

    The result keeps its sign; callers that need a positive interval check it.
    """
    text = value.strip()
    sign = 1.0
    if text[:1] in ("+", "-"):
        sign = -1.0 if text[0] == "-" else 1.0
        text = text[1:]
    if text == "0":
        return 0.0
    if not text:
        raise ConfigError(f"invalid interval: time: invalid duration {value!r}")

    total = 0.0
    pos = 0
    for match in _DURATION_PART_RE.finditer(text):
        if match.start() != pos:
            break
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        pos = match.end()
    if pos != len(text):
        raise ConfigError(f"invalid interval: time: invalid duration {value!r}")
    return sign * total


def parse_interval(value: str) -> float:
    """Duration for the render loop; must be strictly positive."""
    seconds = parse_duration(value)
    if seconds <= 0:
        raise ConfigError(f"invalid interval: {value} must be greater than zero")
    return seconds


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_schedule(cfg: AppConfig) -> None:
    cfg.schedule.interval_s = max(0.01, min(86400.0, float(cfg.schedule.interval_s)))
    if cfg.schedule.max_frames is not None:
        cfg.schedule.max_frames = max(1, int(cfg.schedule.max_frames))


def _normalize_diagnostics(cfg: AppConfig) -> None:
    cfg.diagnostics.keep_log_files = max(2, int(cfg.diagnostics.keep_log_files))


def _normalize_performance(cfg: AppConfig) -> None:
    cfg.performance.cpu_percent_max = float(max(1.0, cfg.performance.cpu_percent_max))
    cfg.performance.rss_mb_max = float(max(64.0, cfg.performance.rss_mb_max))


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(data, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        output=_merge(OutputConfig, data.get("output", {})),
        render=_merge(RenderConfig, data.get("render", {})),
        schedule=_merge(ScheduleConfig, data.get("schedule", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
        performance=_merge(PerformanceConfig, data.get("performance", {})),
    )

    _normalize_schedule(cfg)
    _normalize_diagnostics(cfg)
    _normalize_performance(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
