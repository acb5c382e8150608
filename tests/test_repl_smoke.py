import glob
import json
from dataclasses import replace

from rich.table import Table

from rms_schedule.cli.repl import SessionState, process_command
from rms_schedule.config import ScheduleMode
from rms_schedule.schedule import ScheduleAssembler


def test_repl_schedule_and_export(make_api, settings, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    api = make_api({"/members": [{"id": 1, "name": "Crew"}]})
    assembler = ScheduleAssembler(api, replace(settings, mode=ScheduleMode.MOCK))
    state = SessionState()

    assert "Nothing to export" in process_command("/export", assembler=assembler, state=state)

    out = process_command("/schedule 2024-01-01 2024-01-07", assembler=assembler, state=state)
    assert isinstance(out, Table)
    assert state.last_schedule["source"] == "mock"

    msg = process_command("/export", assembler=assembler, state=state)
    assert "Exported:" in msg
    md = glob.glob("runs/*.md")
    js = glob.glob("runs/*.json")
    assert md and js
    payload = json.loads(open(js[0], encoding="utf-8").read())
    assert payload["query"] == {"start": "2024-01-01", "end": "2024-01-07"}
    text = open(md[0], encoding="utf-8").read()
    assert "| 101 | Job One |" in text
    assert "Alice Tech, Bob LX" in text


def test_repl_mode_and_status(make_api, settings):
    api = make_api({"/members": [{"id": 1, "name": "Crew"}]})
    assembler = ScheduleAssembler(api, settings)
    state = SessionState()

    assert process_command("/mode", assembler=assembler, state=state) == "Current mode: live"
    assert process_command("/mode mock", assembler=assembler, state=state) == "Mode set to mock"
    assert state.mode is ScheduleMode.MOCK
    assert "Usage" in process_command("/mode never", assembler=assembler, state=state)
    assert process_command("/mode default", assembler=assembler, state=state).startswith("Mode reset")

    status = json.loads(process_command("/status", assembler=assembler, state=state))
    assert status == {"ok": True, "count": 1, "sample": ["Crew"]}


def test_repl_errors(make_api, settings, down):
    assembler = ScheduleAssembler(make_api(fail=down), settings)
    state = SessionState()
    assert "Input error" in process_command("/schedule 2024-01-01 someday", assembler=assembler, state=state)
    assert "Usage" in process_command("/schedule 2024-01-01", assembler=assembler, state=state)
    assert json.loads(process_command("/status", assembler=assembler, state=state))["ok"] is False
    assert "Unknown command" in process_command("/nope", assembler=assembler, state=state)
