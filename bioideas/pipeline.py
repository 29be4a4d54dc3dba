"""Headline pipeline: aggregate -> dedup -> shuffle."""

import logging
import random
from dataclasses import dataclass, field
from typing import Sequence

import httpx

from .config import Settings
from .exceptions import AggregationError
from .models import Headline
from .S1_aggregate import BaseSource, fetch_all
from .S3_dedup import deduplicate
from .S4_shuffle import shuffle

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    headlines: list[Headline] = field(default_factory=list)
    total: int = 0       # before dedup
    unique: int = 0
    query: str | None = None


async def run_pipeline(
    query: str | None = None,
    *,
    sources: Sequence[BaseSource] | None = None,
    client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
    rng: random.Random | None = None,
) -> PipelineResult:
    """
    Run one aggregation request.

    Raises:
        AggregationError: if the aggregation itself fails. Individual
            source failures never get here.
    """
    query = (query or "").strip() or None
    try:
        headlines = await fetch_all(query, sources, client=client, settings=settings)
    except Exception as e:
        logger.exception("Aggregation failed (query=%r)", query)
        raise AggregationError(f"Failed to aggregate headlines: {e}") from e

    unique = deduplicate(headlines)
    logger.info("Dedup: %d -> %d headlines", len(headlines), len(unique))

    return PipelineResult(
        headlines=shuffle(unique, rng=rng),
        total=len(headlines),
        unique=len(unique),
        query=query,
    )


async def aggregate_headlines(query: str | None = None, **kwargs) -> list[Headline]:
    """Deduplicated, shuffled headlines from every source."""
    result = await run_pipeline(query, **kwargs)
    return result.headlines
