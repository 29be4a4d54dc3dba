"""OpenAlex API source.

OpenAlex is a free and open catalog of the world's scholarly works.
API documentation: https://docs.openalex.org/

No API key required; an email in `mailto` puts requests in the polite pool.
"""

from datetime import datetime, timedelta, timezone

import httpx

from ..core import parse_datetime
from ..models import Headline, SourceType
from .base import BaseSource

API_BASE = "https://api.openalex.org/works"


class OpenAlexSource(BaseSource):
    """Recent works matching the query (or the default query)."""

    source_type = SourceType.DATABASE
    default_label = "OpenAlex"

    async def _fetch(self, client: httpx.AsyncClient, query: str | None) -> list[Headline]:
        params = {
            "search": self.query_or_default(query),
            "filter": self._build_filter(),
            "sort": "publication_date:desc",
            "per_page": min(int(self.config.get("per_page", 25)), 200),  # API max is 200
            "select": "id,doi,title,display_name,publication_date",
        }
        if self.settings.openalex_mailto:
            params["mailto"] = self.settings.openalex_mailto

        data = await self.get_json(client, self.config.get("url", API_BASE), params=params)

        results = data.get("results") if isinstance(data, dict) else None
        items = []
        for work in results or []:
            if not isinstance(work, dict):
                continue
            item = self.make_headline(
                work.get("title") or work.get("display_name") or "",
                url=work.get("doi") or work.get("id"),
                published_at=parse_datetime(work.get("publication_date")),
            )
            if item:
                items.append(item)
        return items

    def _build_filter(self) -> str:
        days_back = int(self.config.get("days_back", 30))
        from_date = (datetime.now(timezone.utc) - timedelta(days=days_back)).strftime("%Y-%m-%d")
        return f"from_publication_date:{from_date}"
