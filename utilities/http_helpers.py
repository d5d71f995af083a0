"""HTTP request helpers with error handling."""

import logging
from typing import Any, Dict, Optional

import requests


def safe_post(
    url: str,
    json: Dict[str, Any],
    headers: Dict[str, str] = None,
    timeout: int = 30,
) -> Optional[requests.Response]:
    """
    JSON POST to the planner API for the Streamlit pages.

    Never raises: non-2xx replies and network errors are logged and come
    back as None, which the pages turn into an error banner.
    """
    headers = headers or {}
    headers.setdefault("User-Agent", "yatra-planner/0.1")
    try:
        resp = requests.post(url, json=json, headers=headers, timeout=timeout)
        if resp.status_code in (200, 201):
            return resp
        logging.warning("POST %s failed (%s): %s", url, resp.status_code, resp.text[:200])
    except Exception as e:
        logging.warning("POST %s raised %s", url, e)
    return None
