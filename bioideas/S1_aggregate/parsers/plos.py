"""PLOS journals source."""

from ..rss import FeedSource


class PlosSource(FeedSource):
    """PLOS Atom feeds: <published> and <updated> are both present."""

    default_label = "PLOS"
    date_fields = ("published", "updated")
