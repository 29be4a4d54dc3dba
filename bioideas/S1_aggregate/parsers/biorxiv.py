"""bioRxiv/medRxiv preprint sources."""

from ...models import SourceType
from ..rss import FeedSource


class BiorxivSource(FeedSource):
    """
    bioRxiv subject feeds (RDF/RSS 1.0).

    Dates come from dc:date (feedparser: "updated"). The subject feeds have
    no search, so a query is ignored.
    """

    source_type = SourceType.PREPRINT
    default_label = "bioRxiv"
    date_fields = ("updated", "published")


class MedrxivSource(BiorxivSource):
    """medRxiv subject feeds (same format as bioRxiv)."""

    default_label = "medRxiv"
