"""BioIdeas API - headline aggregation over HTTP."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from bioideas.config import Settings
from bioideas.exceptions import AggregationError
from bioideas.pipeline import run_pipeline

# ─────────────────────────────────────────────────────────────
# Logging
# ─────────────────────────────────────────────────────────────

def setup_api_logging(log_dir: Path = Path("logs")) -> Path:
    """Configure logging for API process."""
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "api.log"

    # File handler
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(file_handler)

    return log_file


# Initialize logging
_log_file = setup_api_logging(Settings.from_env().log_dir)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="BioIdeas API",
    description="Deduplicated research headlines from preprint servers, journals, news and forums",
    version="0.1.0",
)

# Browser clients call this directly
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Responses must never be cached: every request reshuffles
NO_STORE_HEADERS = {"Cache-Control": "no-store, no-cache, must-revalidate"}


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


# ─────────────────────────────────────────────────────────────
# Response models
# ─────────────────────────────────────────────────────────────

class HeadlineItem(BaseModel):
    title: str
    source: str
    url: Optional[str]
    published_at: Optional[str]


class HeadlinesMeta(BaseModel):
    totalHeadlines: int
    uniqueHeadlines: int
    query: Optional[str]


class HeadlinesResponse(BaseModel):
    success: bool
    headlines: list[HeadlineItem]
    meta: HeadlinesMeta


# ─────────────────────────────────────────────────────────────
# Routes
# ─────────────────────────────────────────────────────────────

@app.get("/api/health")
async def health_check():
    """Health check."""
    return {
        "service": "BioIdeas API",
        "version": app.version,
        "status": "ok",
    }


@app.get("/api/headlines", response_model=HeadlinesResponse)
async def get_headlines(
    q: Optional[str] = Query(None, max_length=200, description="Free-text query; omit to browse"),
    limit: Optional[int] = Query(None, ge=1, le=1000, description="Return at most N headlines"),
    settings: Settings = Depends(get_settings),
):
    """
    Aggregate, deduplicate and shuffle headlines from every source.

    Unreachable sources are left out; only a failure of the aggregation
    itself turns into a 500.
    """
    try:
        result = await run_pipeline(q, settings=settings)
    except AggregationError as e:
        logger.error("API error: %s", e)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Failed to aggregate headlines"},
            headers=NO_STORE_HEADERS,
        )

    headlines = result.headlines[:limit] if limit else result.headlines
    response = HeadlinesResponse(
        success=True,
        headlines=[
            HeadlineItem(
                title=h.title,
                source=h.source,
                url=h.url,
                published_at=h.published_at.isoformat() if h.published_at else None,
            )
            for h in headlines
        ],
        meta=HeadlinesMeta(
            totalHeadlines=result.total,
            uniqueHeadlines=result.unique,
            query=result.query,
        ),
    )
    return JSONResponse(content=response.model_dump(), headers=NO_STORE_HEADERS)


# ─────────────────────────────────────────────────────────────
# Startup
# ─────────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8080)
