"""Health check proxy for the external AI service."""

import os
import logging
from typing import Any

import httpx

from src.utils.errors import UpstreamError

logger = logging.getLogger(__name__)


def get_ai_endpoint() -> str:
    """Base URL of the AI service from AI_ENDPOINT, without a trailing slash."""
    endpoint = os.environ.get("AI_ENDPOINT", "").strip()
    if not endpoint:
        raise UpstreamError("AI_ENDPOINT not set")
    return endpoint.rstrip("/")


async def check_ai_health() -> Any:
    """
    Fetch ``{AI_ENDPOINT}/health`` once and return its JSON body.

    Redirects are followed. Raises UpstreamError for a non-2xx final
    status, transport failure, or a body that is not JSON. No retries;
    the transport's default timeout applies.
    """
    url = f"{get_ai_endpoint()}/health"

    try:
        async with httpx.AsyncClient(follow_redirects=True) as client:
            response = await client.get(url, headers={"Content-Type": "application/json"})
    except httpx.HTTPError as e:
        raise UpstreamError(f"AI health request failed: {e}")

    if not response.is_success:
        logger.warning(f"AI health check returned {response.status_code}", extra={"url": url})
        raise UpstreamError(f"AI health check returned {response.status_code}")

    try:
        return response.json()
    except ValueError as e:
        raise UpstreamError(f"AI health response is not JSON: {e}")
