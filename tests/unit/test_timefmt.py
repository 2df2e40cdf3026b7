import sys
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from imageclock_core.timefmt import format_rfc3339_nano


class Rfc3339NanoTests(unittest.TestCase):
    def test_utc_whole_seconds(self):
        moment = datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.assertEqual(format_rfc3339_nano(moment), "2024-01-01T00:00:00Z")

    def test_trailing_zeros_trimmed(self):
        moment = datetime(2024, 1, 1, 12, 30, 5, 123400, tzinfo=timezone.utc)
        self.assertEqual(format_rfc3339_nano(moment), "2024-01-01T12:30:05.1234Z")

    def test_positive_offset(self):
        moment = datetime(2024, 6, 1, 8, 0, 0, 500000, tzinfo=timezone(timedelta(hours=2)))
        self.assertEqual(format_rfc3339_nano(moment), "2024-06-01T08:00:00.5+02:00")

    def test_negative_half_hour_offset(self):
        moment = datetime(2024, 6, 1, 8, 0, 0, tzinfo=timezone(-timedelta(hours=3, minutes=30)))
        self.assertEqual(format_rfc3339_nano(moment), "2024-06-01T08:00:00-03:30")


if __name__ == "__main__":
    unittest.main()
