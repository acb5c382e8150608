import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from prompt_toolkit import prompt
from rich.console import Console
from rich.table import Table

from rms_schedule.apis import CurrentRmsApi, error_details
from rms_schedule.config import ScheduleMode, Settings
from rms_schedule.schedule import ScheduleAssembler, ScheduleInputError, check_connectivity
from rms_schedule.utils import console as log
from rms_schedule.utils.export import save_schedule_json, save_schedule_md

console = Console()

HELP = (
    "Commands:\n"
    "/status — check Current RMS credentials with a small /members request\n"
    "/schedule <start> <end> — fetch the schedule (YYYY-MM-DD)\n"
    "/mode <live|mock|fallback-on-error|default> — override the schedule mode for this session\n"
    "/export — save the last schedule to runs/ as .md and .json\n"
    "/help — show this help"
)


@dataclass
class SessionState:
    mode: Optional[ScheduleMode] = None
    last_query: Optional[Dict[str, Any]] = None
    last_schedule: Optional[Dict[str, Any]] = None


def _timestamp_slug() -> str:
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def _render_schedule(schedule: Dict[str, Any]) -> Table:
    names = {str(s["id"]): s["name"] for s in schedule.get("staff", [])}
    table = Table(title=f"Schedule ({schedule.get('source')})", show_header=True, header_style="bold magenta")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Starts")
    table.add_column("Ends")
    table.add_column("Staff")
    assignments = {str(k): v for k, v in schedule.get("assignments", {}).items()}
    for job in schedule.get("jobs", []):
        crew = ", ".join(names.get(str(sid), str(sid)) for sid in assignments.get(str(job["id"]), []))
        table.add_row(str(job["id"]), job["name"], job.get("starts_at") or "", job.get("ends_at") or "", crew)
    return table


def process_command(line: str, *, assembler: ScheduleAssembler, state: SessionState) -> Any:
    """Run one slash command; returns text or a rich renderable."""
    parts = line.strip().split()
    cmd = parts[0].lower()
    args = parts[1:]

    if cmd == "/help":
        return HELP

    if cmd == "/status":
        try:
            return json.dumps(check_connectivity(assembler.api), ensure_ascii=False)
        except Exception as e:
            return json.dumps({"ok": False, "details": error_details(e)}, ensure_ascii=False, default=str)

    if cmd == "/mode":
        val = (args[0] if args else "").lower()
        if not val:
            current = state.mode or assembler.settings.mode
            return f"Current mode: {current.value}"
        if val == "default":
            state.mode = None
            return f"Mode reset to {assembler.settings.mode.value}."
        try:
            state.mode = ScheduleMode(val)
        except ValueError:
            return "Usage: /mode <live|mock|fallback-on-error|default>"
        return f"Mode set to {state.mode.value}"

    if cmd == "/schedule":
        if len(args) != 2:
            return "Usage: /schedule <start> <end>"
        try:
            schedule = assembler.assemble(args[0], args[1], mode=state.mode)
        except ScheduleInputError as e:
            return f"Input error: {e}"
        state.last_query = {"start": args[0], "end": args[1]}
        state.last_schedule = schedule.model_dump(mode="json")
        return _render_schedule(state.last_schedule)

    if cmd == "/export":
        if state.last_schedule is None:
            return "Nothing to export yet. Run /schedule first."
        slug = _timestamp_slug()
        md_path = f"runs/{slug}.md"
        json_path = f"runs/{slug}.json"
        save_schedule_md(state.last_schedule, state.last_query or {}, md_path)
        save_schedule_json(state.last_schedule, state.last_query or {}, json_path)
        return f"Exported: {md_path}, {json_path}"

    return f"Unknown command: {cmd}. Try /help"


def run_repl(assembler: ScheduleAssembler):
    console.rule("Current RMS Schedule REPL")
    console.print("Type /help for commands. Ctrl+C to exit.\n")
    state = SessionState()

    while True:
        try:
            line = prompt("rms> ")
        except (EOFError, KeyboardInterrupt):
            console.print("\nGoodbye.")
            break

        if not line.strip():
            continue
        if not line.startswith("/"):
            console.print("Commands start with '/'. Try /help")
            continue
        try:
            out = process_command(line, assembler=assembler, state=state)
        except Exception as e:
            out = f"[command error] {e}"
        if isinstance(out, str):
            console.print(out, markup=False)
        else:
            console.print(out)


def main():
    settings = Settings.from_env()
    log.configure(settings.log_level)
    run_repl(ScheduleAssembler(CurrentRmsApi(settings), settings))


if __name__ == "__main__":
    main()
