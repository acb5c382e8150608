# rms_schedule/mock_rms.py
from datetime import date, timedelta
from typing import Any, Dict, List, Optional
import os
import time

from fastapi import FastAPI, Header, HTTPException, Query

app = FastAPI(title="Current RMS Mock API")

# --- Config knobs for demos ---
FORCE_503 = os.getenv("MOCK_FORCE_503", "false").lower() == "true"
ARTIFICIAL_LATENCY_MS = int(os.getenv("MOCK_LATENCY_MS", "0"))
OPPORTUNITY_COUNT = int(os.getenv("MOCK_OPPORTUNITY_COUNT", "30"))
MEMBER_COUNT = int(os.getenv("MOCK_MEMBER_COUNT", "8"))
EPOCH = date.fromisoformat(os.getenv("MOCK_EPOCH", "2024-01-01"))

FIRST_NAMES = ["Alice", "Bob", "Charlie", "Dana", "Eli", "Fran", "Gus", "Hana"]
LAST_NAMES = ["Tech", "LX", "Audio", "Rigger", "Video", "Stage", "Crew", "Driver"]


def opportunity(i: int) -> Dict[str, Any]:
    """Deterministic opportunity; odd ids use the older field names."""
    day = EPOCH + timedelta(days=i % 60)
    rec: Dict[str, Any] = {"id": 1000 + i}
    if i % 2:
        rec["subject"] = f"Event {i}"
        rec["starts_at_date"] = f"{day.isoformat()}T09:00:00Z"
        rec["ends_at_date"] = f"{day.isoformat()}T18:00:00Z"
    else:
        rec["name"] = f"Hire {i}"
        rec["starts_at"] = f"{day.isoformat()}T08:00:00Z"
        rec["ends_at"] = f"{(day + timedelta(days=1)).isoformat()}T17:00:00Z"
    return rec


def member(i: int) -> Dict[str, Any]:
    rec: Dict[str, Any] = {"id": 1 + i}
    if i % 3 == 2:
        rec["name"] = f"{FIRST_NAMES[i % 8]} {LAST_NAMES[i % 8]} Ltd"
    else:
        rec["first_name"] = FIRST_NAMES[i % 8]
        rec["last_name"] = LAST_NAMES[i % 8]
    return rec


def maybe_fail_or_delay():
    if ARTIFICIAL_LATENCY_MS > 0:
        time.sleep(ARTIFICIAL_LATENCY_MS / 1000.0)
    if FORCE_503:
        raise HTTPException(status_code=503, detail="Service Unavailable (mock)")


def require_auth(auth_token: Optional[str], authorization: Optional[str]):
    if auth_token:
        return
    if authorization and authorization.lower().startswith("bearer ") and authorization[7:].strip():
        return
    raise HTTPException(status_code=401, detail="Unauthorized (mock)")


def page_of(records: List[Dict[str, Any]], page: int, per_page: int) -> List[Dict[str, Any]]:
    lo = (page - 1) * per_page
    return records[lo:lo + per_page]


@app.get("/status")
def get_status():
    maybe_fail_or_delay()
    return {"status": "OK", "version": "0.0.1-mock"}


@app.get("/opportunities")
def list_opportunities(
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    x_auth_token: Optional[str] = Header(default=None),
    authorization: Optional[str] = Header(default=None),
):
    maybe_fail_or_delay()
    require_auth(x_auth_token, authorization)
    records = [opportunity(i) for i in range(OPPORTUNITY_COUNT)]
    return {"opportunities": page_of(records, page, per_page), "meta": {"total_row_count": len(records)}}


@app.get("/members")
def list_members(
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    x_auth_token: Optional[str] = Header(default=None),
    authorization: Optional[str] = Header(default=None),
):
    maybe_fail_or_delay()
    require_auth(x_auth_token, authorization)
    records = [member(i) for i in range(MEMBER_COUNT)]
    return {"members": page_of(records, page, per_page), "meta": {"total_row_count": len(records)}}
