"""Core services for clock composition, scheduling, settings and diagnostics."""

from .clock_drawer import BASE_HEIGHT, BASE_WIDTH, MULTIPLIERS, SIZE_TIERS, ClockDrawer, Frame, canvas_size
from .config import AppConfig, load_config, parse_color, parse_duration, parse_interval, save_config
from .diagnostics import build_doctor_payload
from .errors import ConfigError, RenderError, SinkError
from .performance import BudgetStatus, PerformanceController, PerformanceTargets
from .runner import ClockRunner, RunnerStatus
from .sink import ImageSink
from .timefmt import format_rfc3339_nano

__all__ = [
    "AppConfig",
    "BASE_HEIGHT",
    "BASE_WIDTH",
    "BudgetStatus",
    "ClockDrawer",
    "ClockRunner",
    "ConfigError",
    "Frame",
    "ImageSink",
    "MULTIPLIERS",
    "PerformanceController",
    "PerformanceTargets",
    "RenderError",
    "RunnerStatus",
    "SIZE_TIERS",
    "SinkError",
    "build_doctor_payload",
    "canvas_size",
    "format_rfc3339_nano",
    "load_config",
    "parse_color",
    "parse_duration",
    "parse_interval",
    "save_config",
]
