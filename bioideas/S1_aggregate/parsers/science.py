"""Science journals source."""

from ..rss import FeedSource, SkipPrefixMixin


class ScienceSource(SkipPrefixMixin, FeedSource):
    """Science family eTOC feeds."""

    default_label = "Science"
    date_fields = ("updated", "prism_coverdate", "published")

    # Matched with colons removed from the title
    ignore_colons = True

    skip_prefixes = (
        # Corrections and retractions
        "correction",
        "retraction",
        "publisher correction",
        "editorial expression of concern",
        "erratum",
        # Digests and tables of contents
        "in other journals",
        "in science journals",
        "this week in science",
        # Editorial content
        "editors' choice",
        "editor's choice",
    )
