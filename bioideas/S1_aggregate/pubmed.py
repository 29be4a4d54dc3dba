"""PubMed source via NCBI E-utilities (E-Search + E-Summary)."""

from dataclasses import dataclass
from datetime import datetime

import httpx

from ..core import parse_datetime
from ..models import Headline, SourceType
from .base import BaseSource

EUTILS_BASE = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
ARTICLE_URL = "https://pubmed.ncbi.nlm.nih.gov/{}/"


@dataclass(frozen=True)
class _EutilsConfig:
    email: str | None
    api_key: str | None
    tool: str


class PubMedSource(BaseSource):
    """
    Newest PubMed records for the query (or the default term).

    Two requests, each with its own timeout: ESearch for PMIDs, then
    ESummary for their titles and dates.
    """

    source_type = SourceType.DATABASE
    default_label = "PubMed"

    @property
    def eutils(self) -> _EutilsConfig:
        return _EutilsConfig(
            email=self.config.get("email") or self.settings.ncbi_email,
            api_key=self.config.get("api_key") or self.settings.ncbi_api_key,
            tool=self.config.get("tool") or "bioideas",
        )

    async def _fetch(self, client: httpx.AsyncClient, query: str | None) -> list[Headline]:
        pmids = await self._esearch(client, self.query_or_default(query))
        if not pmids:
            return []
        return await self._esummary(client, pmids)

    async def _esearch(self, client: httpx.AsyncClient, term: str) -> list[str]:
        params = {
            "db": "pubmed",
            "term": term,
            "retmax": str(int(self.config.get("retmax", 20))),
            "sort": "date",
            "retmode": "json",
        }
        params |= _eutils_params(self.eutils)

        data = await self.get_json(client, f"{EUTILS_BASE}/esearch.fcgi", params=params)
        result = data.get("esearchresult") if isinstance(data, dict) else None
        idlist = result.get("idlist") if isinstance(result, dict) else None
        return [str(pmid) for pmid in idlist or []]

    async def _esummary(self, client: httpx.AsyncClient, pmids: list[str]) -> list[Headline]:
        params = {"db": "pubmed", "id": ",".join(pmids), "retmode": "json"}
        params |= _eutils_params(self.eutils)

        data = await self.get_json(client, f"{EUTILS_BASE}/esummary.fcgi", params=params)
        result = data.get("result") if isinstance(data, dict) else None
        if not isinstance(result, dict):
            return []

        items = []
        # "uids" keeps ESearch's newest-first order
        for uid in result.get("uids") or pmids:
            doc = result.get(str(uid))
            if not isinstance(doc, dict):
                continue
            item = self.make_headline(
                doc.get("title") or "",
                url=ARTICLE_URL.format(uid),
                published_at=_parse_sortpubdate(doc.get("sortpubdate")),
            )
            if item:
                items.append(item)
        return items


def _eutils_params(eutils: _EutilsConfig) -> dict[str, str]:
    params: dict[str, str] = {"tool": eutils.tool}
    if eutils.email:
        params["email"] = eutils.email
    if eutils.api_key:
        params["api_key"] = eutils.api_key
    return params


def _parse_sortpubdate(value: str | None) -> datetime | None:
    """ESummary's sortpubdate looks like "2025/01/15 00:00"."""
    if not value or not isinstance(value, str):
        return None
    return parse_datetime(value.replace("/", "-"))
