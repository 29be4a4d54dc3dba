"""BioIdeas - research headline aggregation.

Pipeline: aggregate (S1) -> clean titles (S2) -> dedup (S3) -> shuffle (S4).
"""

from .models import Headline, SourceType
from .pipeline import aggregate_headlines, run_pipeline

__all__ = ["Headline", "SourceType", "aggregate_headlines", "run_pipeline"]
