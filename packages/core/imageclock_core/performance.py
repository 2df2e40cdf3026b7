"""Per-frame performance budgeting."""

from __future__ import annotations

from dataclasses import dataclass

import psutil


@dataclass(frozen=True)
class PerformanceTargets:
    cpu_percent_max: float = 50.0
    rss_mb_max: float = 2048.0


@dataclass(frozen=True)
class BudgetStatus:
    cpu_percent: float
    rss_mb: float
    frame_s: float
    interval_s: float
    overloaded: bool
    warning: str | None


class PerformanceController:
    def __init__(self, targets: PerformanceTargets | None = None) -> None:
        self.targets = targets or PerformanceTargets()
        self._process = psutil.Process()
        # Prime non-blocking CPU measurement.
        self._process.cpu_percent(interval=None)

    def sample(self, frame_s: float, interval_s: float) -> BudgetStatus:
        cpu = float(self._process.cpu_percent(interval=None))
        rss_mb = float(self._process.memory_info().rss) / (1024 * 1024)
        overloaded = cpu > self.targets.cpu_percent_max or rss_mb > self.targets.rss_mb_max

        warning = None
        if overloaded:
            warning = "resource_overload"
        elif frame_s > interval_s:
            warning = "frame_over_interval"

        return BudgetStatus(
            cpu_percent=cpu,
            rss_mb=rss_mb,
            frame_s=float(frame_s),
            interval_s=float(interval_s),
            overloaded=overloaded,
            warning=warning,
        )
