import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from imageclock_core.performance import PerformanceController, PerformanceTargets


class PerformanceTests(unittest.TestCase):
    def setUp(self):
        self.ctl = PerformanceController(PerformanceTargets(cpu_percent_max=100000.0, rss_mb_max=1_000_000.0))

    def test_budget_within_interval(self):
        status = self.ctl.sample(frame_s=0.05, interval_s=1.0)
        self.assertFalse(status.overloaded)
        self.assertIsNone(status.warning)
        self.assertGreater(status.rss_mb, 0.0)

    def test_slow_frame_flagged(self):
        status = self.ctl.sample(frame_s=2.0, interval_s=1.0)
        self.assertEqual(status.warning, "frame_over_interval")


if __name__ == "__main__":
    unittest.main()
