from typing import Dict, Optional

import requests

from rms_schedule.config import AuthScheme, Settings
from .base import ApiAdapter


class CurrentRmsApi(ApiAdapter):
    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        super().__init__(
            name="current-rms",
            base_url=settings.base_url,
            timeout=settings.timeout,
            session=session,
        )
        self.subdomain = settings.subdomain
        self.api_key = settings.api_key
        self.auth_scheme = settings.auth_scheme

    def auth_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json", "X-SUBDOMAIN": self.subdomain}
        if self.auth_scheme is AuthScheme.BEARER:
            headers["Authorization"] = f"Bearer {self.api_key}"
        else:
            headers["X-AUTH-TOKEN"] = self.api_key
        return headers

    def mask_secrets(self, msg: str) -> str:
        if self.api_key and msg and self.api_key in msg:
            return msg.replace(self.api_key, "****")
        return msg
