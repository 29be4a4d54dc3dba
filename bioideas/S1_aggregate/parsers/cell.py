"""Cell Press journals source."""

from ..rss import FeedSource, SkipPrefixMixin


class CellSource(SkipPrefixMixin, FeedSource):
    """Cell Press in-press feeds (RSS 2.0 with dc:date)."""

    default_label = "Cell"
    date_fields = ("updated", "published")

    skip_prefixes = (
        "correction:",
        "publisher correction:",
        "author correction:",
        "retraction notice",
        "erratum",
    )
