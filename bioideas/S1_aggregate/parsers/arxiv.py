"""arXiv source: Atom search API with a query, subject RSS feeds without."""

from urllib.parse import quote

import httpx

from ...models import Headline, SourceType
from ..rss import Feed, FeedSource

SEARCH_URL = "https://export.arxiv.org/api/query"


class ArxivSource(FeedSource):
    """
    arXiv.

    - query: one search feed, newest submissions first, labelled "arXiv"
    - browse: the configured subject RSS feeds, one label per subject

    The daily RSS listings carry no reliable per-entry date, so the fetch
    time stands in for it.
    """

    source_type = SourceType.PREPRINT
    default_label = "arXiv"
    date_fields = ("published",)
    fetch_time_fallback = True

    def feeds_for(self, query: str | None) -> list[Feed]:
        if not query:
            return self.feeds
        return [Feed(url=self.search_url(query), source=self.label)]

    def search_url(self, query: str) -> str:
        # arXiv wants the `all:` prefix unescaped
        max_results = int(self.config.get("max_results", 30))
        base = self.config.get("search_url", SEARCH_URL)
        return (
            f"{base}?search_query=all:{quote(query, safe='')}"
            f"&start=0&max_results={max_results}"
            "&sortBy=submittedDate&sortOrder=descending"
        )

    def parse_entry(self, entry, feed, fetched_at) -> Headline | None:
        if feed.url.startswith(self.config.get("search_url", SEARCH_URL)):
            # Search results: the Atom <id> is the abstract page
            return self.make_headline(
                entry.get("title", ""),
                source=feed.source,
                url=(entry.get("id") or entry.get("link") or "").strip() or None,
                published_at=self._extract_published_at(entry),
            )
        return super().parse_entry(entry, feed, fetched_at)
