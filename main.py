"""BioIdeas - research headline aggregation from the command line."""

import argparse
import asyncio
import json
import logging
import random
import sys
from datetime import datetime
from pathlib import Path

import yaml

from bioideas.config import Settings
from bioideas.exceptions import AggregationError
from bioideas.models import SourceType
from bioideas.pipeline import PipelineResult, run_pipeline
from bioideas.S1_aggregate import build_sources


# ─────────────────────────────────────────────────────────────
# Logging setup
# ─────────────────────────────────────────────────────────────

def setup_logging(log_dir: Path = Path("logs")) -> Path:
    """Configure logging to a dated file."""
    log_dir.mkdir(parents=True, exist_ok=True)

    today = datetime.now().strftime("%Y-%m-%d")
    log_file = log_dir / f"{today}.log"

    # File handler (detailed)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S"
    ))

    # Configure root logger
    logging.basicConfig(
        level=logging.INFO,
        handlers=[file_handler]
    )

    return log_file


# ─────────────────────────────────────────────────────────────
# Output formatting
# ─────────────────────────────────────────────────────────────

def print_header():
    """Print run header."""
    now = datetime.now().strftime("%Y-%m-%d %H:%M")
    print()
    print("=" * 62)
    print("              BioIdeas - Research Headlines                 ")
    print(f"                     {now}                       ")
    print("=" * 62)
    print()


def print_step(step: int, total: int, name: str):
    """Print step header."""
    print(f"[Step {step}/{total}] {name}")


def print_detail(key: str, value, indent: int = 1):
    """Print a detail line."""
    prefix = "|  " * indent
    print(f"{prefix}- {key}: {value}")


def print_step_end(input_count: int, output_count: int):
    """Print step summary with funnel visualization."""
    dropped = input_count - output_count
    pct = (output_count / input_count * 100) if input_count > 0 else 0
    print("|")
    print(f"|  {input_count} -> {output_count} ({pct:.0f}% kept, {dropped} dropped)")
    print("-" * 50)
    print()


def print_table(headers: list[str], rows: list[list], indent: int = 1):
    """Print a simple table."""
    prefix = "|  " * indent
    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    header_line = "  ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
    print(f"{prefix}{header_line}")
    print(f"{prefix}{'-' * len(header_line)}")

    for row in rows:
        row_line = "  ".join(str(cell).ljust(widths[i]) for i, cell in enumerate(row))
        print(f"{prefix}{row_line}")


def _truncate(text: str, width: int = 80) -> str:
    return text if len(text) <= width else text[: width - 3] + "..."


def to_json(result: PipelineResult, limit: int | None = None) -> str:
    """Serialize a pipeline result the same way the HTTP API does."""
    headlines = result.headlines[:limit] if limit else result.headlines
    return json.dumps(
        {
            "headlines": [h.model_dump(mode="json") for h in headlines],
            "meta": {
                "totalHeadlines": result.total,
                "uniqueHeadlines": result.unique,
                "query": result.query,
            },
        },
        ensure_ascii=False,
        indent=2,
    )


# ─────────────────────────────────────────────────────────────
# CLI
# ─────────────────────────────────────────────────────────────

def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="BioIdeas - aggregate and deduplicate research headlines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                           # Browse every source
  python main.py -q "protein folding"      # Search where sources support it
  python main.py --sources arXiv Reddit    # Only these sources
  python main.py --types preprint journal  # Only these kinds of sources
  python main.py --json --limit 50         # JSON on stdout
        """
    )

    parser.add_argument(
        "-q", "--query",
        type=str,
        default=None,
        help="Free-text query (default: each source's browse mode)"
    )

    parser.add_argument(
        "--sources",
        nargs="+",
        default=None,
        metavar="NAME",
        help="Only fetch these sources (names from sources.yaml)"
    )

    parser.add_argument(
        "--types",
        nargs="+",
        default=None,
        choices=[t.value for t in SourceType],
        metavar="KIND",
        help="Only fetch sources of these kinds: " + ", ".join(t.value for t in SourceType)
    )

    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Show at most N headlines"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the shuffle for a reproducible order"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of a table"
    )

    return parser.parse_args(argv)


def run(args=None) -> int:
    """Run the pipeline once; returns the process exit code."""
    if args is None:
        args = parse_args()

    settings = Settings.from_env()
    log_file = setup_logging(settings.log_dir)
    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info("BioIdeas started (query=%r)", args.query)

    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        sources = build_sources(settings=settings, enabled=args.sources, types=args.types)
        if not args.json:
            print_header()
            print_step(1, 3, "Aggregate")
            print_detail("sources", len(sources))
            print_detail("query", args.query or "(browse)")
        result = asyncio.run(run_pipeline(args.query, sources=sources, settings=settings, rng=rng))
    except (AggregationError, ValueError, OSError, yaml.YAMLError) as e:
        logger.error("BioIdeas failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(to_json(result, args.limit))
        return 0

    print_detail("fetched", result.total)
    print("-" * 50)
    print()

    print_step(2, 3, "Dedup")
    print_step_end(result.total, result.unique)

    print_step(3, 3, "Shuffle")
    shown = result.headlines[: args.limit] if args.limit else result.headlines
    rows = [[_truncate(h.source, 28), _truncate(h.title)] for h in shown]
    print_table(["Source", "Title"], rows)
    if len(shown) < len(result.headlines):
        print(f"|  ... and {len(result.headlines) - len(shown)} more")
    print()

    logger.info("BioIdeas completed: %d unique of %d", result.unique, result.total)
    logger.info("=" * 60)
    print(f"[OK] Done! (log: {log_file})")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(1)
