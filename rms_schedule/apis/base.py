from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests


class ApiAdapter(ABC):
    """Minimal interface for an external JSON API reached over a requests session."""

    def __init__(self, name: str, base_url: str, timeout: int = 15, session: Optional[requests.Session] = None):
        self.name = name
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @abstractmethod
    def auth_headers(self) -> Dict[str, str]:
        ...

    def mask_secrets(self, msg: str) -> str:
        return msg

    def with_base(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET {base_url}/{path}; raises requests.RequestException on transport or HTTP errors."""
        resp = self.session.get(
            self.with_base(path),
            params=params or {},
            headers=self.auth_headers(),
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return resp.json()


def error_details(exc: BaseException) -> Any:
    """Best description of a failed remote call: JSON body, else text, else the message."""
    resp = getattr(exc, "response", None)
    if resp is not None:
        try:
            return resp.json()
        except ValueError:
            text = getattr(resp, "text", "")
            if text:
                return text
    return str(exc)
