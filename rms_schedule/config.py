# rms_schedule/config.py
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.current-rms.com/api/v1"


class ScheduleMode(str, Enum):
    """How the schedule endpoint treats the remote API."""

    LIVE = "live"
    MOCK = "mock"
    FALLBACK_ON_ERROR = "fallback-on-error"


class AuthScheme(str, Enum):
    TOKEN = "token"    # X-AUTH-TOKEN header
    BEARER = "bearer"  # Authorization: Bearer


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _bool_env(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _list_env(name: str) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if not raw:
        return ("*",)
    return tuple(o.strip() for o in raw.split(",") if o.strip()) or ("*",)


@dataclass(frozen=True)
class Settings:
    subdomain: str = ""
    api_key: str = ""
    auth_scheme: AuthScheme = AuthScheme.TOKEN
    base_url: str = DEFAULT_BASE_URL
    timeout: int = 15
    opportunity_view: str = "all"
    member_filtermode: str = ""
    mode: ScheduleMode = ScheduleMode.FALLBACK_ON_ERROR
    fallback_on_empty: bool = False
    port: int = 4000
    static_dir: str = "public"
    allowed_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Settings":
        """Read the process environment (and .env at the repo root) once."""
        if dotenv_path is None:
            dotenv_path = os.path.join(os.path.dirname(__file__), "..", ".env")
        load_dotenv(dotenv_path=dotenv_path)
        return cls(
            subdomain=os.getenv("CURRENT_SUBDOMAIN", "").strip(),
            api_key=os.getenv("CURRENT_API_KEY", "").strip(),
            auth_scheme=AuthScheme(os.getenv("CURRENT_AUTH_SCHEME", "token").strip().lower()),
            base_url=os.getenv("CURRENT_BASE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL,
            timeout=_int_env("CURRENT_TIMEOUT", 15),
            opportunity_view=os.getenv("CURRENT_OPPORTUNITY_VIEW", "all").strip(),
            member_filtermode=os.getenv("CURRENT_MEMBER_FILTERMODE", "").strip(),
            mode=ScheduleMode(os.getenv("SCHEDULE_MODE", "fallback-on-error").strip().lower()),
            fallback_on_empty=_bool_env("FALLBACK_ON_EMPTY"),
            port=_int_env("PORT", 4000),
            static_dir=os.getenv("STATIC_DIR", "public"),
            allowed_origins=_list_env("ALLOWED_ORIGINS"),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )

    def opportunity_params(self) -> dict:
        return {"view": self.opportunity_view} if self.opportunity_view else {}

    def member_params(self) -> dict:
        return {"filtermode": self.member_filtermode} if self.member_filtermode else {}
