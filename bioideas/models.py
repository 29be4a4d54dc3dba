"""Data models for BioIdeas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class SourceType(str, Enum):
    """Kind of external source an adapter talks to."""
    PREPRINT = "preprint"    # arXiv, bioRxiv, medRxiv
    JOURNAL = "journal"      # Nature, Cell, Science, PLOS
    NEWS = "news"            # Google News, ScienceDaily, Phys.org
    SOCIAL = "social"        # Hacker News, Reddit
    DATABASE = "database"    # Europe PMC, OpenAlex, PubMed


class Headline(BaseModel):
    """
    One piece of external content.

    Immutable once created: stages downstream of the adapters only filter or
    reorder collections of headlines, never edit them.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    source: str
    url: str | None = None
    # May be the fetch time when the origin has no reliable date
    published_at: datetime | None = None

    @field_validator("title", "source")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("url")
    @classmethod
    def _blank_url_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None
