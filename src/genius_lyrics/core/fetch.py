"""
HTTP fetching for the Genius search API and lyrics pages.

This module intentionally contains only network logic:
- requests
- status and content-type checks
- mapping transport errors to typed exceptions

No parsing. No retries. No Genius-specific semantics.
"""

from typing import Any, Dict, Optional

import requests  # type: ignore[import-untyped]

from ..config import DEFAULT_TIMEOUT
from ..exceptions import (
    DeserializationFailure,
    FetchFailure,
    TransportFailure,
    UnsuccessfulStatus,
)
from ..utils.logging import get_logger

logger = get_logger(__name__)

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}

TEXTUAL_SUBTYPE_MARKERS = ("html", "xml", "json")


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def is_textual_content_type(content_type: Optional[str]) -> bool:
    """True for text/* and html/xml/json types. A missing header counts as text."""
    if not content_type:
        return True
    mime = content_type.split(";", 1)[0].strip().lower()
    if mime.startswith("text/"):
        return True
    return any(marker in mime for marker in TEXTUAL_SUBTYPE_MARKERS)


def fetch_json(
    url: str,
    *,
    params: Optional[Dict[str, str]] = None,
    headers: Optional[dict] = None,
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> Any:
    """
    GET a JSON document and return the decoded body.

    Raises TransportFailure when no response arrives, UnsuccessfulStatus on
    a non-2xx answer and DeserializationFailure when the body is not JSON.
    """
    sess = session or requests
    headers = headers or JSON_HEADERS

    logger.debug(f"GET {url}")
    try:
        resp = sess.get(url, params=params, headers=headers, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise TransportFailure(f"could not receive response: {e}") from e

    if not is_success(resp.status_code):
        raise UnsuccessfulStatus(resp.status_code)

    try:
        return resp.json()
    except ValueError as e:
        raise DeserializationFailure(f"could not deserialize json body: {e}") from e


def fetch_html(
    url: str,
    *,
    headers: Optional[dict] = None,
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> str:
    """
    GET a lyrics page and return raw HTML.

    The HTTP status is not checked. Raises FetchFailure on transport errors
    or when the server declares a non-textual content type.
    """
    sess = session or requests
    headers = headers or {"Accept": "*/*"}

    logger.debug(f"GET {url}")
    try:
        resp = sess.get(url, headers=headers, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise FetchFailure(f"could not fetch {url}: {e}") from e

    if not is_success(resp.status_code):
        logger.warning(f"Lyrics page {url} answered with status {resp.status_code}")

    content_type = resp.headers.get("Content-Type")
    if not is_textual_content_type(content_type):
        raise FetchFailure(f"non-text response from {url}: {content_type}")

    return resp.text
