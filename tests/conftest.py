"""Shared test helpers: no test ever touches the network."""

import asyncio
import sys
from pathlib import Path

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from bioideas.config import Settings
from bioideas.S1_aggregate import BaseSource


def mock_client(handler) -> httpx.AsyncClient:
    """AsyncClient whose requests are answered by `handler(request)`."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True)


def route(table: dict):
    """
    Handler answering by URL prefix.

    Values are an httpx.Response, an exception instance (raised), or a
    number of seconds to sleep before answering 200 (for timeouts).
    """
    requested: list[httpx.URL] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url)
        url = str(request.url)
        for prefix, answer in table.items():
            if url.startswith(prefix):
                if isinstance(answer, Exception):
                    raise answer
                if isinstance(answer, (int, float)):
                    await asyncio.sleep(answer)
                    return httpx.Response(200, text="")
                return answer
        return httpx.Response(404, text="not found")

    handler.requested = requested
    return handler


class StaticSource(BaseSource):
    """Returns the titles in config["titles"]."""

    async def _fetch(self, client, query):
        return [self.make_headline(t) for t in self.config.get("titles", [])]


class BrokenSource(BaseSource):
    """Always fails inside _fetch."""

    async def _fetch(self, client, query):
        raise RuntimeError("boom")


class SlowSource(BaseSource):
    """Requests a URL that answers after the timeout."""

    async def _fetch(self, client, query):
        await self.get_text(client, "https://slow.test/feed")
        return [self.make_headline("Too late")]


@pytest.fixture
def settings() -> Settings:
    return Settings(request_timeout=0.2)
