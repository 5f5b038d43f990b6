"""
HTTP GET with retries for the product database.
Transport errors and 5xx answers are retried with exponential backoff.
"""
import logging
import time
from typing import Optional, Tuple

import requests

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 2
DEFAULT_INITIAL_BACKOFF = 0.5


def _is_transient(resp: requests.Response) -> bool:
    return resp.status_code >= 500


def get_with_retries(
    url: str,
    headers: Optional[dict] = None,
    timeout: float = 10,
    max_retries: int = DEFAULT_MAX_RETRIES,
    initial_backoff: float = DEFAULT_INITIAL_BACKOFF,
) -> Tuple[Optional[requests.Response], Optional[str]]:
    """
    Always makes at least one attempt.
    Returns (response, None) once a response arrives (the last 5xx if every attempt got one),
    (None, error_message) when every attempt failed at the transport level.
    """
    attempts = max(1, max_retries)
    resp: Optional[requests.Response] = None
    last_error: Optional[str] = None
    for attempt in range(attempts):
        try:
            resp = requests.get(url, headers=headers, timeout=timeout)
            last_error = None
            if not _is_transient(resp):
                return (resp, None)
            reason = f"HTTP {resp.status_code}"
        except requests.RequestException as e:
            resp = None
            last_error = reason = f"{type(e).__name__}: {e}"
        logger.warning(
            "EXTERNAL_API attempt=%s/%s url=%s failed: %s",
            attempt + 1, attempts, url[:80], reason,
        )
        if attempt < attempts - 1:
            delay = initial_backoff * (2 ** attempt)
            time.sleep(delay)
    if resp is not None:
        return (resp, None)
    return (None, last_error)
