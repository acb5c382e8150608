from typing import Any, Callable, Dict, List, Optional

import pytest
import requests

from rms_schedule.apis.base import ApiAdapter
from rms_schedule.config import ScheduleMode, Settings


class FakeApi(ApiAdapter):
    """Serves canned collections page by page and records every call."""

    def __init__(self, collections: Optional[Dict[str, List[Dict[str, Any]]]] = None,
                 fail: Optional[Callable[[str, Dict[str, Any]], Optional[Exception]]] = None,
                 key_for: Optional[Dict[str, str]] = None):
        super().__init__(name="fake", base_url="http://fake.invalid")
        self.collections = collections or {}
        self.fail = fail
        self.key_for = key_for or {}
        self.calls: List[tuple] = []

    def auth_headers(self) -> Dict[str, str]:
        return {}

    def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        params = dict(params or {})
        self.calls.append((path, params))
        if self.fail:
            exc = self.fail(path, params)
            if exc is not None:
                raise exc
        records = self.collections.get(path, [])
        page = int(params.get("page", 1))
        per_page = int(params.get("per_page", 20))
        lo = (page - 1) * per_page
        key = self.key_for.get(path, path.strip("/"))
        return {key: records[lo:lo + per_page]}

    def calls_to(self, path: str) -> List[Dict[str, Any]]:
        return [p for (c, p) in self.calls if c == path]


def network_down(path, params):
    return requests.ConnectionError("connection refused")


@pytest.fixture
def settings():
    return Settings(subdomain="acme", api_key="secret-key", mode=ScheduleMode.LIVE, static_dir="does-not-exist")


@pytest.fixture
def make_api():
    return FakeApi


@pytest.fixture
def down():
    return network_down
