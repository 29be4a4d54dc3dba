#!/usr/bin/env python
"""HTTP API - tests"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

import api
from bioideas.config import Settings
from bioideas.exceptions import AggregationError
from bioideas.models import Headline
from bioideas.pipeline import PipelineResult

RESULT = PipelineResult(
    headlines=[
        Headline(title="Gene X Found", source="arXiv q-bio", url="https://arxiv.org/abs/1",
                 published_at=datetime(2025, 1, 15, 8, 30, tzinfo=timezone.utc)),
        Headline(title="Octopus RNA editing", source="Reddit r/biology"),
        Headline(title="Prime editing review", source="PubMed", url="https://pubmed.ncbi.nlm.nih.gov/1/"),
    ],
    total=5,
    unique=3,
    query="crispr",
)


@pytest.fixture
def client():
    api.app.dependency_overrides[api.get_settings] = lambda: Settings(request_timeout=0.2)
    yield TestClient(api.app)
    api.app.dependency_overrides.clear()


class TestHeadlines:
    """GET /api/headlines"""

    def test_success(self, client):
        """Headlines and meta, never cached"""
        with patch("api.run_pipeline", AsyncMock(return_value=RESULT)) as run:
            response = client.get("/api/headlines", params={"q": "crispr"})

        assert response.status_code == 200
        assert response.headers["cache-control"] == "no-store, no-cache, must-revalidate"
        body = response.json()
        assert body["success"] is True
        assert body["meta"] == {"totalHeadlines": 5, "uniqueHeadlines": 3, "query": "crispr"}
        assert body["headlines"][0] == {
            "title": "Gene X Found",
            "source": "arXiv q-bio",
            "url": "https://arxiv.org/abs/1",
            "published_at": "2025-01-15T08:30:00+00:00",
        }
        assert body["headlines"][1]["url"] is None
        assert run.await_args.args[0] == "crispr"

    def test_browse_without_query(self, client):
        """No q means browse"""
        with patch("api.run_pipeline", AsyncMock(return_value=PipelineResult())) as run:
            response = client.get("/api/headlines")
        assert response.status_code == 200
        assert response.json()["headlines"] == []
        assert run.await_args.args[0] is None

    def test_limit(self, client):
        """limit truncates the list, not the counts"""
        with patch("api.run_pipeline", AsyncMock(return_value=RESULT)):
            body = client.get("/api/headlines", params={"limit": 2}).json()
        assert len(body["headlines"]) == 2
        assert body["meta"]["uniqueHeadlines"] == 3

    def test_invalid_limit(self, client):
        """limit must be positive"""
        assert client.get("/api/headlines", params={"limit": 0}).status_code == 422

    def test_aggregation_failure(self, client):
        """Aggregation failure is a 500 with a fixed message"""
        with patch("api.run_pipeline", AsyncMock(side_effect=AggregationError("boom"))):
            response = client.get("/api/headlines")
        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Failed to aggregate headlines"}
        assert response.headers["cache-control"] == "no-store, no-cache, must-revalidate"


class TestHealth:
    """GET /api/health"""

    def test_health(self, client):
        """Health check"""
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestLogging:
    """API process logging"""

    def test_log_file_configured_on_import(self):
        """Importing the app attaches the api.log handler"""
        assert api._log_file.name == "api.log"
        assert api._log_file.exists()
        handlers = [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]
        assert any(Path(h.baseFilename).name == "api.log" for h in handlers)


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
