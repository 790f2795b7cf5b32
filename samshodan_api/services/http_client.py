"""Shared HTTP client utilities — reusable httpx client."""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

# Module-level shared client (created lazily, lives for the process lifetime)
_client: httpx.AsyncClient | None = None


def get_shared_client() -> httpx.AsyncClient:
    """Return a shared httpx.AsyncClient, creating it on first call."""
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(timeout=10.0)
    return _client


async def close_shared_client() -> None:
    """Close the shared client if one was created."""
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
    _client = None


async def fetch_json(
    url: str,
    params: dict[str, str] | None = None,
    *,
    context: str = "",
) -> dict[str, Any] | None:
    """GET *url* and return its JSON object.

    Returns None on any error (network failure, non-200, non-object body) so
    callers can apply their own fallback.
    """
    client = get_shared_client()
    try:
        resp = await client.get(url, params=params)
        if resp.status_code != 200:
            logger.warning(
                "HTTP %d for %s%s",
                resp.status_code,
                url,
                f" ({context})" if context else "",
            )
            return None
        data = resp.json()
    except Exception:
        logger.warning(
            "Request failed for %s%s",
            url,
            f" ({context})" if context else "",
            exc_info=True,
        )
        return None
    if not isinstance(data, dict):
        logger.warning("Unexpected JSON payload from %s", url)
        return None
    return data
