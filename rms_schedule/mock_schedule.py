# rms_schedule/mock_schedule.py
from datetime import date
from typing import Dict, List

from rms_schedule.normalize import Job, StaffMember

MOCK_STAFF: List[StaffMember] = [
    StaffMember(id=1, name="Alice Tech"),
    StaffMember(id=2, name="Bob LX"),
    StaffMember(id=3, name="Charlie Audio"),
]

MOCK_ASSIGNMENTS: Dict[int, List[int]] = {
    101: [1, 2],
    102: [2],
    103: [1, 3],
}


def mock_jobs(start: date, end: date) -> List[Job]:
    s, e = start.isoformat(), end.isoformat()
    return [
        Job(id=101, name="Job One", starts_at=f"{s} 09:00", ends_at=f"{s} 18:00"),
        Job(id=102, name="Job Two", starts_at=f"{e} 10:00", ends_at=f"{e} 22:00"),
        Job(id=103, name="Job Three", starts_at=f"{e} 08:00", ends_at=f"{e} 17:00"),
    ]


def mock_assignments() -> Dict[int, List[int]]:
    return {job_id: list(staff_ids) for job_id, staff_ids in MOCK_ASSIGNMENTS.items()}
