#!/usr/bin/env python
"""CLI - tests"""

import json
import logging
from unittest.mock import AsyncMock, patch

import pytest

import main
from bioideas.exceptions import AggregationError
from bioideas.models import Headline
from bioideas.pipeline import PipelineResult

RESULT = PipelineResult(
    headlines=[
        Headline(title="Gene X Found", source="arXiv q-bio", url="https://arxiv.org/abs/1"),
        Headline(title="Octopus RNA editing", source="Reddit r/biology"),
    ],
    total=3,
    unique=2,
    query=None,
)


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path, monkeypatch):
    """Log into tmp_path and leave the root logger as found."""
    monkeypatch.setenv("BIOIDEAS_LOG_DIR", str(tmp_path / "logs"))
    root = logging.getLogger()
    handlers = list(root.handlers)
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()


class TestParseArgs:
    """Argument parsing"""

    def test_defaults(self):
        """Browse everything by default"""
        args = main.parse_args([])
        assert args.query is None
        assert args.sources is None
        assert args.json is False

    def test_options(self):
        """All options"""
        args = main.parse_args(["-q", "crispr", "--sources", "arXiv", "Reddit", "--limit", "5", "--seed", "7", "--json"])
        assert args.query == "crispr"
        assert args.sources == ["arXiv", "Reddit"]
        assert (args.limit, args.seed, args.json) == (5, 7, True)

    def test_types_option(self):
        """--types accepts adapter kinds only"""
        args = main.parse_args(["--types", "preprint", "news"])
        assert args.types == ["preprint", "news"]
        with pytest.raises(SystemExit):
            main.parse_args(["--types", "blog"])


class TestSourceSelection:
    """Source selection and config errors"""

    def test_types_select_sources(self):
        """--types narrows the sources handed to the pipeline"""
        with patch("main.run_pipeline", AsyncMock(return_value=RESULT)) as run:
            main.run(main.parse_args(["--json", "--types", "social"]))
        names = sorted(s.name for s in run.await_args.kwargs["sources"])
        assert names == ["Hacker News", "Reddit"]

    def test_missing_sources_file(self, monkeypatch, tmp_path, capsys):
        """An unreadable sources file exits 1"""
        monkeypatch.setenv("BIOIDEAS_SOURCES_FILE", str(tmp_path / "nope.yaml"))
        with patch("main.run_pipeline", AsyncMock(return_value=RESULT)) as run:
            code = main.run(main.parse_args([]))
        assert code == 1
        assert run.await_count == 0
        assert "Error:" in capsys.readouterr().err

    def test_malformed_sources_file(self, monkeypatch, tmp_path):
        """Broken YAML exits 1"""
        sources_file = tmp_path / "sources.yaml"
        sources_file.write_text("- name: [unclosed\n  type: news\n", encoding="utf-8")
        monkeypatch.setenv("BIOIDEAS_SOURCES_FILE", str(sources_file))
        with patch("main.run_pipeline", AsyncMock(return_value=RESULT)):
            assert main.run(main.parse_args([])) == 1


class TestRun:
    """main.run"""

    def test_table_output(self, capsys, tmp_path):
        """Prints the funnel and the headlines"""
        with patch("main.run_pipeline", AsyncMock(return_value=RESULT)):
            code = main.run(main.parse_args(["--sources", "arXiv"]))

        assert code == 0
        out = capsys.readouterr().out
        assert "Gene X Found" in out
        assert "3 -> 2" in out
        assert list((tmp_path / "logs").glob("*.log"))

    def test_json_output(self, capsys):
        """--json prints the API shape"""
        with patch("main.run_pipeline", AsyncMock(return_value=RESULT)):
            code = main.run(main.parse_args(["--json", "--limit", "1"]))

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data["headlines"]) == 1
        assert data["meta"] == {"totalHeadlines": 3, "uniqueHeadlines": 2, "query": None}

    def test_seed_passed_as_rng(self):
        """--seed hands a seeded rng to the pipeline"""
        with patch("main.run_pipeline", AsyncMock(return_value=RESULT)) as run:
            main.run(main.parse_args(["--json", "--seed", "1"]))
        assert run.await_args.kwargs["rng"] is not None

    def test_aggregation_failure(self, capsys):
        """AggregationError exits 1"""
        with patch("main.run_pipeline", AsyncMock(side_effect=AggregationError("boom"))):
            code = main.run(main.parse_args([]))
        assert code == 1
        assert "boom" in capsys.readouterr().err


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
