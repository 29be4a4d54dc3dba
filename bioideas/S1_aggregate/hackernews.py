"""Hacker News source via the Algolia search API."""

import httpx

from ..core import parse_datetime
from ..models import Headline, SourceType
from .base import BaseSource

API_BASE = "https://hn.algolia.com/api/v1/search_by_date"
ITEM_URL = "https://news.ycombinator.com/item?id={}"


class HackerNewsSource(BaseSource):
    """Stories matching the query (or the default query), newest first."""

    source_type = SourceType.SOCIAL
    default_label = "Hacker News"

    async def _fetch(self, client: httpx.AsyncClient, query: str | None) -> list[Headline]:
        params = {
            "query": self.query_or_default(query),
            "tags": "story",
            "hitsPerPage": int(self.config.get("hits_per_page", 25)),
        }
        data = await self.get_json(client, self.config.get("url", API_BASE), params=params)

        hits = data.get("hits") if isinstance(data, dict) else None
        items = []
        for hit in hits or []:
            if not isinstance(hit, dict):
                continue
            # Stories without an external link point at the discussion
            url = hit.get("url") or (ITEM_URL.format(hit["objectID"]) if hit.get("objectID") else None)
            item = self.make_headline(
                hit.get("title") or "",
                url=url,
                published_at=parse_datetime(hit.get("created_at")),
            )
            if item:
                items.append(item)
        return items
