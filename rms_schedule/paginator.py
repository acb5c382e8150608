# rms_schedule/paginator.py
from typing import Any, Dict, List, Optional

from rms_schedule.apis.base import ApiAdapter
from rms_schedule.utils import console as log

PAGE_SIZE = 100
MAX_PAGES = 50  # hard ceiling per collection fetch, not a retry budget

_RESERVED = ("page", "per_page")


def page_items(payload: Any, collection_key: str) -> List[Dict[str, Any]]:
    if isinstance(payload, list):
        return payload
    if not isinstance(payload, dict):
        return []
    items = payload.get(collection_key)
    if items is None:
        items = payload.get("data")
    return items if isinstance(items, list) else []


def fetch_all_pages(
    api: ApiAdapter,
    path: str,
    collection_key: str,
    base_params: Optional[Dict[str, Any]] = None,
    *,
    page_size: int = PAGE_SIZE,
    max_pages: int = MAX_PAGES,
) -> List[Dict[str, Any]]:
    """
    Request `path` page by page and concatenate the records found under
    `collection_key`. Stops on the first short page or after `max_pages`
    requests. Errors from any page propagate; nothing partial is returned.
    """
    base_params = dict(base_params or {})
    clash = [k for k in _RESERVED if k in base_params]
    if clash:
        raise ValueError(f"base_params may not set {', '.join(clash)}")

    records: List[Dict[str, Any]] = []
    for page in range(1, max_pages + 1):
        params = {**base_params, "page": page, "per_page": page_size}
        log.debug(f"GET {path} page={page} per_page={page_size}")
        items = page_items(api.get_json(path, params=params), collection_key)
        records.extend(i for i in items if isinstance(i, dict))
        if len(items) < page_size:
            break
    else:
        log.warn(f"{path}: stopped at the {max_pages}-page ceiling")

    log.info(f"[green]{path}[/green] fetched {len(records)} {collection_key}")
    return records
