"""RSS/Atom feed sources."""

import time
from dataclasses import dataclass
from datetime import datetime

import feedparser
import httpx

from ..core import from_struct_time, now_utc, parse_datetime
from ..exceptions import SourceFetchError
from ..models import Headline
from .base import BaseSource


@dataclass(frozen=True)
class Feed:
    url: str
    source: str     # label given to every headline of this feed


class FeedSource(BaseSource):
    """
    Source made of one or more XML feeds, fetched concurrently.

    Subclasses pick the entry fields that hold the publication date and may
    skip noisy entries. `feeds_for()` decides which feeds a query maps to;
    by default the query is ignored and the configured feeds are browsed.
    """

    # Checked in order; feedparser exposes dc:date as "updated"
    date_fields: tuple[str, ...] = ("published", "updated")
    # Use the fetch time when an entry carries no usable date
    fetch_time_fallback: bool = False

    @property
    def feeds(self) -> list[Feed]:
        return [
            Feed(url=f["url"], source=f.get("source") or self.label)
            for f in self.config.get("feeds", [])
        ]

    @property
    def max_items(self) -> int | None:
        value = self.config.get("max_items")
        return int(value) if value else None

    def feeds_for(self, query: str | None) -> list[Feed]:
        return self.feeds

    async def _fetch(self, client: httpx.AsyncClient, query: str | None) -> list[Headline]:
        feeds = self.feeds_for(query)
        if len(feeds) == 1:
            return await self.fetch_feed(client, feeds[0])
        return await self.gather_isolated(
            (feed.source, self.fetch_feed(client, feed)) for feed in feeds
        )

    async def fetch_feed(self, client: httpx.AsyncClient, feed: Feed) -> list[Headline]:
        """Fetch and parse one feed document."""
        content = await self.get_text(client, feed.url)
        parsed = feedparser.parse(content)
        if parsed.bozo and not parsed.entries:
            raise SourceFetchError(self.name, f"Invalid feed {feed.url}: {parsed.get('bozo_exception')}")
        return self.parse_feed(parsed.entries, feed, fetched_at=now_utc())

    def parse_feed(self, entries: list, feed: Feed, fetched_at: datetime) -> list[Headline]:
        """Parse all entries from feed, keeping feed order."""
        items = []
        for entry in entries:
            if self.max_items and len(items) >= self.max_items:
                break
            if self.should_skip_entry(entry):
                continue
            item = self.parse_entry(entry, feed, fetched_at)
            if item:
                items.append(item)
        return items

    def parse_entry(self, entry: dict, feed: Feed, fetched_at: datetime) -> Headline | None:
        published_at = self._extract_published_at(entry)
        if published_at is None and self.fetch_time_fallback:
            published_at = fetched_at
        return self.make_headline(
            entry.get("title", ""),
            source=feed.source,
            url=self._extract_link(entry),
            published_at=published_at,
        )

    def should_skip_entry(self, entry: dict) -> bool:
        """
        Hook for subclasses to skip noisy entries (e.g. corrections/retractions).

        Returns:
            True to skip entry entirely, False to continue parsing.
        """
        return False

    def _extract_link(self, entry: dict) -> str | None:
        link = entry.get("link") or ""
        return link.strip() or None

    def _extract_published_at(self, entry: dict) -> datetime | None:
        for field in self.date_fields:
            parsed = entry.get(f"{field}_parsed")
            if isinstance(parsed, time.struct_time):
                try:
                    return from_struct_time(parsed)
                except (TypeError, ValueError):
                    pass
            dt = parse_datetime(entry.get(field))
            if dt:
                return dt
        return None


class SkipPrefixMixin:
    """
    Skip entries whose lowercased title starts with one of `skip_prefixes`.

    Prefixes are matched against the raw title, so "correction:" skips
    "Correction: ..." but keeps "Correction of ...". With `ignore_colons`
    colons are removed from the title first.
    """

    skip_prefixes: tuple[str, ...] = ()
    ignore_colons: bool = False

    def should_skip_entry(self, entry: dict) -> bool:
        title = (entry.get("title") or "").strip().lower()
        if not title:
            return False
        if self.ignore_colons:
            title = title.replace(":", "")
        return any(title.startswith(prefix) for prefix in self.skip_prefixes)
