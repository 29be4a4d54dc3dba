"""Base class for source adapters."""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Iterable

import httpx

from ..config import Settings
from ..core import http
from ..models import Headline, SourceType
from ..S2_clean import clean_title

logger = logging.getLogger(__name__)


class BaseSource(ABC):
    """
    One external source.

    Subclasses implement `_fetch`; callers use `fetch`, which never raises:
    any failure is logged and turns into an empty list so that one broken
    source cannot take the others down with it.
    """

    # Overridable by subclasses
    source_type: SourceType = SourceType.JOURNAL
    default_label: str = ""

    def __init__(self, config: dict, settings: Settings | None = None):
        self.config = config
        self.settings = settings or Settings()
        self.name = config.get("name") or self.default_label or type(self).__name__

    @property
    def label(self) -> str:
        """Headline `source` label when the adapter uses a single one."""
        return self.config.get("label") or self.default_label or self.name

    async def fetch(self, client: httpx.AsyncClient, query: str | None = None) -> list[Headline]:
        """Fetch headlines; returns [] on any failure."""
        query = (query or "").strip() or None
        try:
            items = await self._fetch(client, query)
        except Exception as e:
            logger.warning("[%s] Fetch failed: %s", self.name, e)
            return []
        logger.info("[%s] %d items (%s)", self.name, len(items), self.source_type.value)
        return items

    @abstractmethod
    async def _fetch(self, client: httpx.AsyncClient, query: str | None) -> list[Headline]:
        """Fetch and map this source's records. May raise."""

    async def gather_isolated(self, jobs: Iterable[tuple[str, Awaitable[list[Headline]]]]) -> list[Headline]:
        """
        Run sub-fetches concurrently and merge them in the given order.

        A failing sub-fetch is logged and skipped; its siblings still count.
        """
        jobs = list(jobs)
        results = await asyncio.gather(*(job for _, job in jobs), return_exceptions=True)

        merged: list[Headline] = []
        for (label, _), result in zip(jobs, results):
            if isinstance(result, Exception):
                logger.warning("[%s] Failed to fetch %s: %s", self.name, label, result)
                continue
            if isinstance(result, BaseException):
                raise result
            merged.extend(result)
        return merged

    def query_or_default(self, query: str | None) -> str:
        return query or self.config.get("default_query", "")

    async def get_text(self, client: httpx.AsyncClient, url: str, **kwargs) -> str:
        return await http.get_text(client, url, **self._request_kwargs(kwargs))

    async def get_json(self, client: httpx.AsyncClient, url: str, **kwargs) -> Any:
        return await http.get_json(client, url, **self._request_kwargs(kwargs))

    def _request_kwargs(self, kwargs: dict) -> dict:
        kwargs.setdefault("source", self.name)
        kwargs.setdefault("timeout", self.settings.request_timeout)
        return kwargs

    def make_headline(self, title: str, source: str | None = None, **fields) -> Headline | None:
        """Build a Headline, or None when the title is unusable."""
        title = clean_title(title)
        if not title:
            return None
        return Headline(title=title, source=source or self.label, **fields)
