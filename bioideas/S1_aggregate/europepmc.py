"""Europe PMC API source.

Europe PMC is a comprehensive database of life science publications.
API documentation: https://europepmc.org/RestfulWebService

It indexes PubMed, PMC and the preprint servers (bioRxiv, medRxiv, Research
Square, ...), and preprints show up there faster than in PubMed.
"""

from datetime import datetime, timezone

import httpx

from ..core import parse_datetime
from ..models import Headline, SourceType
from .base import BaseSource

API_BASE = "https://www.ebi.ac.uk/europepmc/webservices/rest/search"


def _parse_date(result: dict) -> datetime | None:
    """Parse publication date from various fields."""
    for key in ("firstPublicationDate", "pubDate"):
        dt = parse_datetime(result.get(key))
        if dt:
            return dt

    pub_year = result.get("pubYear")
    if pub_year:
        try:
            return datetime(int(pub_year), 1, 1, tzinfo=timezone.utc)
        except (TypeError, ValueError):
            pass

    return None


def _build_link(result: dict) -> str | None:
    doi = result.get("doi")
    if doi:
        return f"https://doi.org/{doi}"

    # Fallback to Europe PMC link
    pmcid = result.get("pmcid")
    pmid = result.get("pmid")
    ppr_id = result.get("id") if result.get("source") == "PPR" else None
    if pmcid:
        return f"https://europepmc.org/article/PMC/{pmcid}"
    if pmid:
        return f"https://europepmc.org/article/MED/{pmid}"
    if ppr_id:
        return f"https://europepmc.org/article/PPR/{ppr_id}"
    return None


class EuropePMCSource(BaseSource):
    """Full-text search, most recent first; preprints get their own label."""

    source_type = SourceType.DATABASE
    default_label = "Europe PMC"

    async def _fetch(self, client: httpx.AsyncClient, query: str | None) -> list[Headline]:
        params = {
            "query": self.query_or_default(query),
            "resultType": "lite",
            "pageSize": min(int(self.config.get("page_size", 25)), 1000),  # API max is 1000
            "format": "json",
            "sort": "P_PDATE_D desc",
        }
        data = await self.get_json(client, self.config.get("url", API_BASE), params=params)

        result_list = data.get("resultList") if isinstance(data, dict) else None
        results = result_list.get("result") if isinstance(result_list, dict) else None

        items = []
        for result in results or []:
            if not isinstance(result, dict):
                continue
            label = f"{self.label} Preprints" if result.get("source") == "PPR" else self.label
            item = self.make_headline(
                result.get("title") or "",
                source=label,
                url=_build_link(result),
                published_at=_parse_date(result),
            )
            if item:
                items.append(item)
        return items
