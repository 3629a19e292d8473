"""Python client for the mood advisor endpoint."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from .config import ADVISOR_PATH, load_settings

logger = logging.getLogger(__name__)

CONNECTION_FAILURE = (
    "Could not get a suggestion from the AI. Please check your network connection or try again."
)


class AdvisorError(Exception):
    """The advisor endpoint answered with an error."""


class AdvisorConnectionError(AdvisorError):
    """No usable answer came back from the advisor endpoint."""


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
        return body["error"]
    return f"Request failed with status {response.status_code}"


def get_ai_mood_suggestion(
    message: str,
    base_url: Optional[str] = None,
    http_client: Optional[httpx.Client] = None,
) -> Dict[str, Any]:
    url = f"{(base_url or load_settings().api_url).rstrip('/')}{ADVISOR_PATH}"
    try:
        if http_client is None:
            with httpx.Client() as client:
                response = client.post(url, json={"message": message})
        else:
            response = http_client.post(url, json={"message": message})
    except httpx.HTTPError as exc:
        logger.error("Error calling mood advisor at %s: %s", url, exc)
        raise AdvisorConnectionError(CONNECTION_FAILURE) from exc

    if not response.is_success:
        error = _error_message(response)
        logger.error("Mood advisor API error: %s", error)
        raise AdvisorError(error)

    try:
        return response.json()
    except ValueError as exc:
        logger.error("Mood advisor returned an unreadable body: %s", exc)
        raise AdvisorConnectionError(CONNECTION_FAILURE) from exc
