"""JSON-over-HTTP helpers for local model services."""

import logging
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger("talent_match.http")

USER_AGENT = "talent-match/0.1"


def create_session(max_retries: int = 2, backoff_factor: float = 0.5) -> requests.Session:
    """Session that retries GET and POST service calls on 429 and 5xx."""
    session = requests.Session()

    retry_strategy = Retry(
        total=max_retries,
        connect=max_retries,
        backoff_factor=backoff_factor,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET", "POST"],
        raise_on_status=False,
    )

    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    })

    return session


def post_json(
    url: str,
    payload: dict,
    timeout: float = 30,
    session: Optional[requests.Session] = None,
) -> dict[str, Any]:
    """POST a JSON body and return the decoded JSON object.

    Raises requests.RequestException for transport/HTTP errors and ValueError
    when the body is not a JSON object.
    """
    if session is None:
        session = create_session()

    response = session.post(url, json=payload, timeout=timeout)
    response.raise_for_status()
    data = response.json()
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object from {url}, got {type(data).__name__}")
    logger.debug("POST %s -> %s", url, response.status_code)
    return data
