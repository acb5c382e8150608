# rms_schedule/schedule.py
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel
from rich.markup import escape

from rms_schedule.apis.base import ApiAdapter
from rms_schedule.config import ScheduleMode, Settings
from rms_schedule.date_range import filter_jobs, parse_day
from rms_schedule.mock_schedule import MOCK_STAFF, mock_assignments, mock_jobs
from rms_schedule.normalize import DEFAULT_NORMALIZER, Job, RecordNormalizer, StaffMember
from rms_schedule.paginator import fetch_all_pages, page_items
from rms_schedule.utils import console as log

SOURCE_LIVE = "current-rms"
SOURCE_MOCK = "mock"
SOURCE_MOCK_ERROR = "mock-error"

RecordId = Union[int, str, None]


class ScheduleInputError(ValueError):
    """Bad or missing start/end; reported to the caller as a 400."""


class Schedule(BaseModel):
    jobs: List[Job]
    staff: List[StaffMember]
    assignments: Dict[Any, List[RecordId]]
    source: str
    error: Optional[str] = None


def _require_day(name: str, value: Any) -> date:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ScheduleInputError("start and end query params are required (YYYY-MM-DD).")
    try:
        return parse_day(value)
    except ValueError:
        raise ScheduleInputError(f"{name} must be a date in YYYY-MM-DD format, got {value!r}.")


def mock_schedule(start: date, end: date, source: str = SOURCE_MOCK, error: Optional[str] = None) -> Schedule:
    return Schedule(
        jobs=mock_jobs(start, end),
        staff=list(MOCK_STAFF),
        assignments=mock_assignments(),
        source=source,
        error=error,
    )


class ScheduleAssembler:
    """Pulls opportunities and members, normalizes, filters, and applies the fallback strategy."""

    def __init__(self, api: ApiAdapter, settings: Settings, normalizer: RecordNormalizer = DEFAULT_NORMALIZER):
        self.api = api
        self.settings = settings
        self.normalizer = normalizer

    def fetch_jobs(self, start: date, end: date) -> List[Job]:
        raw = fetch_all_pages(self.api, "/opportunities", "opportunities", self.settings.opportunity_params())
        return filter_jobs((self.normalizer.job(r) for r in raw), start, end)

    def fetch_staff(self) -> List[StaffMember]:
        raw = fetch_all_pages(self.api, "/members", "members", self.settings.member_params())
        return [self.normalizer.member(r) for r in raw]

    def live(self, start: date, end: date) -> Schedule:
        with ThreadPoolExecutor(max_workers=2) as pool:
            jobs_f = pool.submit(self.fetch_jobs, start, end)
            staff_f = pool.submit(self.fetch_staff)
            jobs = jobs_f.result()
            staff = staff_f.result()
        return Schedule(
            jobs=jobs,
            staff=staff,
            assignments={job.id: [] for job in jobs},
            source=SOURCE_LIVE,
        )

    def assemble(self, start: Any, end: Any, mode: Optional[ScheduleMode] = None) -> Schedule:
        """
        Build the schedule for [start, end].

        live               -> remote errors propagate to the caller
        mock               -> fixed mock schedule, no remote call
        fallback-on-error  -> remote errors become the mock schedule (source "mock-error");
                              an empty job list does too when fallback_on_empty is set
        """
        start_day = _require_day("start", start)
        end_day = _require_day("end", end)
        mode = mode or self.settings.mode

        if mode is ScheduleMode.MOCK:
            return mock_schedule(start_day, end_day)

        if mode is ScheduleMode.LIVE:
            return self.live(start_day, end_day)

        try:
            schedule = self.live(start_day, end_day)
        except Exception as e:
            msg = self.api.mask_secrets(str(e))
            log.error(f"Schedule fetch failed, serving mock data: {escape(msg)}")
            return mock_schedule(start_day, end_day, SOURCE_MOCK_ERROR, error=msg)

        if not schedule.jobs and self.settings.fallback_on_empty:
            log.warn("No opportunities in range, serving mock data")
            return mock_schedule(start_day, end_day)
        return schedule


def check_connectivity(api: ApiAdapter) -> Dict[str, Any]:
    """One small /members request; errors propagate."""
    payload = api.get_json("/members", params={"per_page": 10})
    members = [m for m in page_items(payload, "members") if isinstance(m, dict)]
    sample = [DEFAULT_NORMALIZER.member(m).name for m in members[:3]]
    return {"ok": True, "count": len(members), "sample": sample}
