"""Interval driver that renders and persists one clock frame per tick."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .clock_drawer import ClockDrawer
from .logging_setup import get_logger
from .performance import BudgetStatus, PerformanceController
from .sink import ImageSink
from .timefmt import format_rfc3339_nano


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class RunnerStatus:
    running: bool = False
    frames_written: int = 0
    last_path: Path | None = None
    last_frame_s: float = 0.0
    last_error: str | None = None
    last_budget: BudgetStatus | None = None


class ClockRunner:
    """Waits one interval, writes a frame, and repeats until stopped.

    ``stop()`` wakes a pending wait immediately. Render and sink errors end
    the loop and propagate to the caller; nothing is retried here.
    """

    def __init__(
        self,
        drawer: ClockDrawer,
        sink: ImageSink,
        interval_s: float,
        max_frames: int | None = None,
        performance: PerformanceController | None = None,
        clock: Callable[[], datetime] = _local_now,
    ) -> None:
        self.drawer = drawer
        self.sink = sink
        self.interval_s = interval_s
        self.max_frames = max_frames
        self.performance = performance
        self._clock = clock
        self._stop = threading.Event()
        self._status = RunnerStatus()
        self._log = get_logger("runner")

    @property
    def status(self) -> RunnerStatus:
        return self._status

    def stop(self) -> None:
        self._stop.set()

    def tick(self) -> Path:
        start = time.perf_counter()
        stamp = format_rfc3339_nano(self._clock())
        image = self.drawer.render(f"time: {stamp}")
        path = self.sink.write(image, stamp, self.drawer.extension())
        elapsed = time.perf_counter() - start

        self._status.frames_written += 1
        self._status.last_path = path
        self._status.last_frame_s = elapsed
        self._log.debug(
            "frame written %s",
            path,
            extra={"event": "frame_written", "frame": self._status.frames_written, "path": str(path)},
        )

        if self.performance is not None:
            budget = self.performance.sample(elapsed, self.interval_s)
            self._status.last_budget = budget
            if budget.warning:
                self._log.warning(
                    "frame budget %s: frame_s=%.3f interval_s=%.3f cpu=%.1f rss_mb=%.1f",
                    budget.warning,
                    budget.frame_s,
                    budget.interval_s,
                    budget.cpu_percent,
                    budget.rss_mb,
                    extra={"event": "budget_warning", "frame": self._status.frames_written},
                )
        return path

    def _limit_reached(self) -> bool:
        return self.max_frames is not None and self._status.frames_written >= self.max_frames

    def run(self) -> RunnerStatus:
        self.sink.ensure_dir()
        self._status.running = True
        self._log.info(
            "logging %s images to %s every %ss",
            self.drawer.image_format,
            self.sink.basepath,
            self.interval_s,
            extra={"event": "runner_start"},
        )
        try:
            while not self._limit_reached() and not self._stop.wait(self.interval_s):
                self.tick()
        except Exception as exc:
            self._status.last_error = str(exc)
            self._log.error("runner stopped: %s", exc, extra={"event": "runner_error"})
            raise
        finally:
            self._status.running = False
        self._log.info(
            "runner stopped after %d frames",
            self._status.frames_written,
            extra={"event": "runner_stop", "frame": self._status.frames_written},
        )
        return self._status
