# rms_schedule/normalize.py
from typing import Any, Callable, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

Record = Dict[str, Any]
Accessor = Callable[[Record], Any]
RecordId = Union[int, str, None]


class Job(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: RecordId
    name: str
    starts_at: Optional[str] = None
    ends_at: Optional[str] = None


class StaffMember(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: RecordId
    name: str


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def key(name: str) -> Accessor:
    return lambda record: record.get(name)


def joined(*names: str, sep: str = " ") -> Accessor:
    """Join the non-empty values of several fields, e.g. first and last name."""
    def _get(record: Record) -> Optional[str]:
        parts = [str(record.get(n)).strip() for n in names if not _is_empty(record.get(n))]
        return sep.join(parts) if parts else None
    return _get


class FieldChain:
    """Ordered accessors for one logical attribute; the first non-empty value wins."""

    def __init__(self, *accessors: Accessor):
        self.accessors: Tuple[Accessor, ...] = accessors

    @classmethod
    def of(cls, *names: str) -> "FieldChain":
        return cls(*(key(n) for n in names))

    def first(self, record: Record) -> Any:
        for get in self.accessors:
            value = get(record)
            if not _is_empty(value):
                return value
        return None


JOB_NAME = FieldChain.of("name", "subject")
JOB_STARTS_AT = FieldChain.of("starts_at", "starts_at_date", "start_at", "starts_at_on", "start_date")
JOB_ENDS_AT = FieldChain.of("ends_at", "ends_at_date", "end_at", "ends_at_on", "end_date")
MEMBER_NAME = FieldChain(
    joined("first_name", "last_name"),
    key("name"),
    key("full_name"),
    key("display_name"),
    key("company_name"),
)


def _as_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _or_label(value: Any, label: str) -> str:
    return label if value is None else str(value)


class RecordNormalizer:
    """Maps raw Current RMS records onto Job / StaffMember. Pure and deterministic."""

    def __init__(
        self,
        job_name: FieldChain = JOB_NAME,
        job_starts_at: FieldChain = JOB_STARTS_AT,
        job_ends_at: FieldChain = JOB_ENDS_AT,
        member_name: FieldChain = MEMBER_NAME,
    ):
        self.job_name = job_name
        self.job_starts_at = job_starts_at
        self.job_ends_at = job_ends_at
        self.member_name = member_name

    def job(self, raw: Record) -> Job:
        rid = raw.get("id")
        return Job(
            id=rid,
            name=_or_label(self.job_name.first(raw), f"Opportunity #{rid}"),
            starts_at=_as_text(self.job_starts_at.first(raw)),
            ends_at=_as_text(self.job_ends_at.first(raw)),
        )

    def member(self, raw: Record) -> StaffMember:
        rid = raw.get("id")
        return StaffMember(id=rid, name=_or_label(self.member_name.first(raw), f"Member #{rid}"))


DEFAULT_NORMALIZER = RecordNormalizer()


def normalize_job(raw: Record) -> Job:
    return DEFAULT_NORMALIZER.job(raw)


def normalize_member(raw: Record) -> StaffMember:
    return DEFAULT_NORMALIZER.member(raw)
