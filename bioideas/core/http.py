"""Outbound HTTP helpers with a per-request deadline."""

import asyncio
import logging
from typing import Any

import httpx

from ..config import REQUEST_TIMEOUT_SECONDS
from ..exceptions import SourceFetchError

logger = logging.getLogger(__name__)


def create_client(headers: dict[str, str] | None = None, timeout: float = REQUEST_TIMEOUT_SECONDS) -> httpx.AsyncClient:
    """Shared client for one aggregation run."""
    return httpx.AsyncClient(
        headers=headers,
        timeout=timeout,
        follow_redirects=True,
    )


async def get(
    client: httpx.AsyncClient,
    url: str,
    *,
    source: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
) -> httpx.Response:
    """
    GET a URL, cancelling the request once `timeout` seconds have passed.

    The deadline covers sending the request and reading the whole body, and
    only ever cancels this one request.

    Raises:
        SourceFetchError: on timeout, transport error or non-200 status.
    """
    logger.debug("GET %s", url)
    try:
        response = await asyncio.wait_for(
            client.get(url, params=params, headers=headers),
            timeout=timeout,
        )
    except asyncio.TimeoutError as exc:
        raise SourceFetchError(source, f"timed out after {timeout:g}s: {url}") from exc
    except httpx.HTTPError as exc:
        raise SourceFetchError(source, f"request failed: {exc}") from exc

    if response.status_code != 200:
        raise SourceFetchError(source, f"HTTP {response.status_code}: {url}", status_code=response.status_code)
    return response


async def get_text(client: httpx.AsyncClient, url: str, **kwargs) -> str:
    response = await get(client, url, **kwargs)
    return response.text


async def get_json(client: httpx.AsyncClient, url: str, **kwargs) -> Any:
    """GET and decode a JSON body; undecodable bodies raise SourceFetchError."""
    response = await get(client, url, **kwargs)
    try:
        return response.json()
    except ValueError as exc:
        raise SourceFetchError(kwargs["source"], f"invalid JSON from {url}") from exc
