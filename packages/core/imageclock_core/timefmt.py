"""RFC 3339 timestamps with trimmed fractional seconds."""

from __future__ import annotations

from datetime import datetime, timedelta


def format_rfc3339_nano(moment: datetime) -> str:
    """Format like ``2024-01-01T10:00:00.1234Z``.

    Fractional seconds keep only significant digits and are dropped when
    zero. A zero UTC offset is written as ``Z``. Naive datetimes are taken to
    be local time.
    """
    if moment.tzinfo is None:
        moment = moment.astimezone()

    out = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if moment.microsecond:
        out += "." + f"{moment.microsecond:06d}".rstrip("0")

    offset = moment.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return out + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{out}{sign}{minutes // 60:02d}:{minutes % 60:02d}"
