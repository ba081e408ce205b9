"""
HTTP helpers for talking to youtube.com.

Requests are sent with the headers of a desktop browser so that
YouTube serves the same HTML a user would see.  Any non-success
status is raised as :class:`~utils.errors.FetchError`; nothing is
retried.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from utils import config
from utils.errors import FetchError

logger = logging.getLogger(__name__)


def _build_headers(referer: Optional[str]) -> Dict[str, str]:
    headers = dict(config.BROWSER_HEADERS)
    if referer:
        headers["Referer"] = referer
    return headers


def _get(url: str, referer: Optional[str], params: Optional[Dict[str, str]]) -> requests.Response:
    logger.debug("GET %s params=%s", url, params)
    try:
        response = requests.get(
            url,
            params=params,
            headers=_build_headers(referer),
            timeout=config.REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        raise FetchError(f"Request to {url} failed: {e}") from e
    if not response.ok:
        logger.warning("GET %s returned status %s", url, response.status_code)
        raise FetchError.from_status(response.status_code)
    return response


def fetch_text(
    url: str,
    referer: Optional[str] = None,
    params: Optional[Dict[str, str]] = None,
) -> str:
    """Download a page and return its body as text.

    Args:
        url: Absolute URL to request.
        referer: Value for the ``Referer`` header, if any.
        params: Optional query string parameters.

    Returns:
        The decoded response body.

    Raises:
        FetchError: If the request fails or the status is not 2xx.
    """
    return _get(url, referer, params).text


def fetch_json(url: str, referer: Optional[str] = None) -> Any:
    """Download a JSON document.

    Raises:
        FetchError: If the request fails, the status is not 2xx or
            the body is not valid JSON.
    """
    response = _get(url, referer, None)
    try:
        return response.json()
    except ValueError as e:
        raise FetchError(f"Invalid JSON returned by {url}") from e
