"""Feed sources - one class per publisher family."""

from .arxiv import ArxivSource
from .biorxiv import BiorxivSource, MedrxivSource
from .cell import CellSource
from .nature import NatureSource
from .news import GoogleNewsSource, NewsSource
from .plos import PlosSource
from .science import ScienceSource

# sources.yaml "type" -> feed source class
PARSERS = {
    # ========== Preprints ==========
    "arxiv": ArxivSource,
    "biorxiv": BiorxivSource,
    "medrxiv": MedrxivSource,

    # ========== Journals ==========
    "nature": NatureSource,
    "cell": CellSource,
    "science": ScienceSource,
    "plos": PlosSource,

    # ========== News ==========
    "news": NewsSource,
    "google_news": GoogleNewsSource,
}
