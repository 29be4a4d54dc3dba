"""Step 1: Aggregate from multiple sources."""

import asyncio
import logging
from pathlib import Path
from typing import Iterable, Sequence

import httpx
import yaml

from ..config import Settings
from ..core import create_client
from ..models import Headline, SourceType
from .base import BaseSource
from .europepmc import EuropePMCSource
from .hackernews import HackerNewsSource
from .openalex import OpenAlexSource
from .parsers import PARSERS
from .pubmed import PubMedSource
from .reddit import RedditSource
from .rss import Feed, FeedSource

__all__ = [
    "BaseSource",
    "FeedSource",
    "Feed",
    "SOURCE_TYPES",
    "load_sources",
    "build_sources",
    "fetch_all",
]

logger = logging.getLogger(__name__)

# sources.yaml "type" -> adapter class
SOURCE_TYPES: dict[str, type[BaseSource]] = {
    **PARSERS,
    "hackernews": HackerNewsSource,
    "reddit": RedditSource,
    "europepmc": EuropePMCSource,
    "openalex": OpenAlexSource,
    "pubmed": PubMedSource,
}


def load_sources(path: str | Path | None = None) -> list[dict]:
    """Load sources from yaml config."""
    path = Path(path) if path else Settings().sources_file
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or []


def build_sources(
    configs: Iterable[dict] | None = None,
    settings: Settings | None = None,
    enabled: Iterable[str] | None = None,
    types: Iterable[str | SourceType] | None = None,
) -> list[BaseSource]:
    """
    Instantiate one adapter per source config.

    Args:
        configs: Source entries; loaded from the settings' sources file if None
        settings: Shared settings handed to every adapter
        enabled: Only build sources with these names (case-insensitive);
            falls back to settings.enabled_sources, empty means all
        types: Only build adapters of these kinds ("preprint", "journal", ...)

    Raises:
        ValueError: on an unknown source type or adapter kind
    """
    settings = settings or Settings.from_env()
    if configs is None:
        configs = load_sources(settings.sources_file)

    wanted = {name.lower() for name in (enabled or settings.enabled_sources)}
    wanted_types = {t if isinstance(t, SourceType) else SourceType(t.lower()) for t in types or ()}

    sources: list[BaseSource] = []
    for config in configs:
        if wanted and str(config.get("name", "")).lower() not in wanted:
            continue
        source_type = config.get("type", "")
        source_cls = SOURCE_TYPES.get(source_type)
        if source_cls is None:
            raise ValueError(f"Unknown source type: {source_type}")
        if wanted_types and source_cls.source_type not in wanted_types:
            continue
        sources.append(source_cls(config, settings))
    return sources


async def fetch_all(
    query: str | None = None,
    sources: Sequence[BaseSource] | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> list[Headline]:
    """
    Fetch from all sources concurrently and concatenate the results.

    Waits until every source has settled. Sources that fail contribute
    nothing; each source's own ordering is kept.

    Args:
        query: Free-text query; None means every source browses its defaults
        sources: Adapters to run; built from sources.yaml if None
        client: HTTP client to share; a new one is created (and closed) if None
        settings: Used for building sources and the client

    Returns:
        Combined list of Headline
    """
    settings = settings or Settings.from_env()
    if sources is None:
        sources = build_sources(settings=settings)

    if not sources:
        return []

    if client is None:
        async with create_client(headers=settings.headers, timeout=settings.request_timeout) as own_client:
            return await _fetch_sources(sources, query, own_client)
    return await _fetch_sources(sources, query, client)


async def _fetch_sources(
    sources: Sequence[BaseSource],
    query: str | None,
    client: httpx.AsyncClient,
) -> list[Headline]:
    results = await asyncio.gather(
        *(source.fetch(client, query) for source in sources),
        return_exceptions=True,
    )

    all_items: list[Headline] = []
    for source, result in zip(sources, results):
        if isinstance(result, Exception):
            # fetch() is not supposed to raise; keep the others anyway
            logger.error("[%s] Fetch failed: %s", source.name, result)
            continue
        if isinstance(result, BaseException):
            raise result
        all_items.extend(result)

    logger.info("Aggregated %d headlines from %d sources", len(all_items), len(sources))
    return all_items
