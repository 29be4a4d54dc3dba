"""Nature journals source."""

from ..rss import FeedSource, SkipPrefixMixin


class NatureSource(SkipPrefixMixin, FeedSource):
    """Nature journal feeds; publication date is prism:publicationDate."""

    default_label = "Nature"
    date_fields = ("prism_publicationdate", "updated", "published")

    skip_prefixes = (
        "author correction:",
        "publisher correction:",
        "correction to:",
        "retraction note:",
    )
