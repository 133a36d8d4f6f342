# fetchers/naver.py
import threading
from functools import partial
from typing import Any, Dict, List

import requests

from lowprice.config import NAVER_SHOP_URL, SEARCH_TIMEOUT, Credentials
from lowprice.errors import UpstreamError
from lowprice.logger import get_logger
from lowprice.models import SearchStrategy

logger = get_logger(__name__)

# One Session per thread: brand searches may run in a thread pool
_local = threading.local()


def get_session() -> requests.Session:
    session = getattr(_local, "session", None)
    if session is None:
        session = requests.Session()
        _local.session = session
    return session


def fetch_page_raw(
    url: str, params: Dict[str, Any], headers: Dict[str, str], timeout: float
) -> Dict[str, Any]:
    """Issue one shop.json GET and return the decoded body."""
    try:
        resp = get_session().get(url, params=params, headers=headers, timeout=timeout)
    except requests.Timeout as exc:
        raise UpstreamError(f"timed out after {timeout}s") from exc
    except requests.RequestException as exc:
        raise UpstreamError(f"request failed: {exc}") from exc

    if not resp.ok:
        raise UpstreamError(f"bad status code {resp.status_code}")

    try:
        data = resp.json()
    except ValueError as exc:
        raise UpstreamError("response body is not JSON") from exc

    if not isinstance(data, dict):
        raise UpstreamError("unexpected response shape")
    return data


def search_items(
    query: str,
    strategy: SearchStrategy,
    credentials: Credentials,
    timeout: float = SEARCH_TIMEOUT,
) -> List[Dict[str, Any]]:
    """
    Run a single Naver Shopping search and return its raw item dicts.
    Raises UpstreamError on any transport or status failure; one page only.
    """
    params = {"query": query, "display": strategy.display, "sort": strategy.sort}
    data = fetch_page_raw(NAVER_SHOP_URL, params, credentials.headers(), timeout)
    items = data.get("items") or []
    logger.debug("Naver: %d items for %r", len(items), query)
    return [it for it in items if isinstance(it, dict)]


def make_search(credentials: Credentials, timeout: float = SEARCH_TIMEOUT):
    """Bind credentials so the planner can call search(query, strategy)."""
    return partial(search_items, credentials=credentials, timeout=timeout)
