# =============================================================================
# wiki_core/client.py  —  HTTP Fetcher for the MediaWiki Action API
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Issues ONE GET request for an already-built URL and returns the parsed
#   JSON body.  That is the only network call in the whole project; every
#   tool invocation suspends here exactly once.
#
# FAILURE CONTRACT:
#   - redirects             → followed (e.g. renamed language subdomains)
#   - non-2xx final status  → HttpError(status, reason)
#   - body is not JSON      → DecodeError
#   - DNS / connect errors  → whatever httpx raises, unchanged
#   No retries and no timeout of our own: httpx's default applies.
#
# CONFIGURATION:
#   WIKIPEDIA_USER_AGENT overrides the identifying User-Agent header.
#   Wikimedia asks API clients to send a descriptive agent with a contact
#   URL, so the default points at the project page.
# =============================================================================

import logging
import os
from typing import Any, Optional

import httpx

from wiki_core.errors import DecodeError, HttpError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Wikipedia MCP Server/0.0.1 (https://github.com/hatsu38/wikipedia-mcp-server)"
)


def _headers() -> dict[str, str]:
    return {
        "User-Agent": os.environ.get("WIKIPEDIA_USER_AGENT") or DEFAULT_USER_AGENT,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }


async def fetch_json(url: str, client: Optional[httpx.AsyncClient] = None) -> Any:
    """GET ``url`` and return the decoded JSON body.

    Args:
        url: Fully-formed request URL, query string included.
        client: Optional shared client.  When omitted a client is opened
            and closed around this single request.

    Raises:
        HttpError: the API answered with a non-success status.
        DecodeError: the body was not valid JSON.
    """
    logger.debug("GET %s", url)
    if client is None:
        async with httpx.AsyncClient(follow_redirects=True) as own_client:
            response = await own_client.get(url, headers=_headers(), follow_redirects=True)
    else:
        response = await client.get(url, headers=_headers(), follow_redirects=True)

    if not response.is_success:
        raise HttpError(response.status_code, response.reason_phrase)

    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(f"Wikipedia API returned invalid JSON: {e}") from e
