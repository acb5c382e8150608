import json
import os
from datetime import datetime, timezone
from typing import Any, Dict, List


def _ensure_runs_dir(path: str) -> None:
    base = os.path.dirname(path)
    if base and not os.path.exists(base):
        os.makedirs(base, exist_ok=True)


def _stamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def save_schedule_json(schedule: Dict[str, Any], query: Dict[str, Any], path: str) -> None:
    _ensure_runs_dir(path)
    payload = {
        "timestamp": _stamp(),
        "query": query,
        "schedule": schedule,
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)


def save_schedule_md(schedule: Dict[str, Any], query: Dict[str, Any], path: str) -> None:
    _ensure_runs_dir(path)
    staff_names = {str(s.get("id")): s.get("name", "") for s in schedule.get("staff", [])}
    assignments = {str(k): v for k, v in (schedule.get("assignments") or {}).items()}

    lines: List[str] = []
    lines.append(f"# Schedule export ({_stamp()})")
    lines.append("")
    if query:
        lines.append("## Query")
        for k, v in query.items():
            lines.append(f"- {k}: {v}")
        lines.append("")
    lines.append(f"Source: `{schedule.get('source', '')}`")
    lines.append("")
    lines.append("## Jobs")
    lines.append("")
    lines.append("| ID | Name | Starts | Ends | Staff |")
    lines.append("|---|---|---|---|---|")
    for job in schedule.get("jobs", []):
        crew = ", ".join(staff_names.get(str(sid), str(sid)) for sid in assignments.get(str(job.get("id")), []))
        lines.append(f"| {job.get('id')} | {job.get('name')} | {job.get('starts_at') or ''} | {job.get('ends_at') or ''} | {crew} |")
    lines.append("")
    lines.append("## Staff")
    lines.append("")
    for sid, name in staff_names.items():
        lines.append(f"- {sid}: {name}")
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
