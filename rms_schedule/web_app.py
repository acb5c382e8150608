import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from rich.markup import escape

from rms_schedule.apis import CurrentRmsApi, error_details
from rms_schedule.apis.base import ApiAdapter
from rms_schedule.config import Settings
from rms_schedule.schedule import ScheduleAssembler, ScheduleInputError, check_connectivity
from rms_schedule.security import SecurityHeadersMiddleware
from rms_schedule.utils import console as log


def _masked(api: ApiAdapter, details):
    return api.mask_secrets(details) if isinstance(details, str) else details


def create_app(settings: Optional[Settings] = None, api: Optional[ApiAdapter] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    log.configure(settings.log_level)
    api = api or CurrentRmsApi(settings)
    assembler = ScheduleAssembler(api, settings)

    app = FastAPI(title="Current RMS Schedule API")
    app.state.settings = settings
    app.state.assembler = assembler

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "Current RMS schedule API running."

    @app.get("/healthz")
    def healthz():
        return {"ok": True, "mode": settings.mode.value}

    @app.get("/api/test-current")
    def test_current():
        try:
            return check_connectivity(api)
        except Exception as e:
            details = _masked(api, error_details(e))
            log.error(f"TEST CURRENT ERROR: {escape(str(details))}")
            return JSONResponse({"ok": False, "details": details}, status_code=500)

    @app.get("/api/schedule")
    def schedule(request: Request):
        start = request.query_params.get("start")
        end = request.query_params.get("end")
        try:
            result = assembler.assemble(start, end)
        except ScheduleInputError as e:
            return JSONResponse({"error": str(e)}, status_code=400)
        except Exception as e:
            details = _masked(api, error_details(e))
            log.error(f"SCHEDULE ERROR: {escape(str(details))}")
            return JSONResponse(
                {"error": "Failed to fetch schedule from Current RMS", "details": details},
                status_code=500,
            )
        log.info(f"/api/schedule {escape(str(start))}..{escape(str(end))} -> {len(result.jobs)} jobs, source={result.source}")
        body = result.model_dump(mode="json")
        if body.get("error") is None:
            body.pop("error", None)
        return body

    if os.path.isdir(settings.static_dir):
        app.mount("/static", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app


app = create_app()
