# rms_schedule/date_range.py
import re
from datetime import date, datetime, time, timezone
from typing import Any, Iterable, List, Optional, Tuple

from rms_schedule.normalize import Job

UTC = timezone.utc
_DAY = re.compile(r"\d{4}-\d{2}-\d{2}")
DAY_END = time(23, 59, 59, 999999)


def parse_day(value: Any) -> date:
    """Parse a YYYY-MM-DD query value; raises ValueError otherwise."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not _DAY.fullmatch(text):
        raise ValueError(f"expected YYYY-MM-DD, got {text!r}")
    return datetime.strptime(text, "%Y-%m-%d").date()


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Best-effort parse to an aware UTC datetime. Naive values are read as UTC."""
    if value is None:
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time.min)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return None
    try:
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return dt.astimezone(UTC)
    except (ValueError, OverflowError):
        return None


def day_window(start: date, end: date) -> Tuple[datetime, datetime]:
    return (
        datetime.combine(start, time.min, tzinfo=UTC),
        datetime.combine(end, DAY_END, tzinfo=UTC),
    )


def filter_jobs(jobs: Iterable[Job], start: date, end: date) -> List[Job]:
    """Jobs whose start falls inside [start 00:00:00Z, end 23:59:59Z]; unparseable starts are dropped."""
    if end < start:
        return []
    lo, hi = day_window(start, end)
    out: List[Job] = []
    for job in jobs:
        s = parse_timestamp(job.starts_at)
        if s is not None and lo <= s <= hi:
            out.append(job)
    return out
