"""Science news sources (ScienceDaily, Phys.org, EurekAlert!, Google News)."""

from urllib.parse import urlencode

from ...models import SourceType
from ..rss import Feed, FeedSource

GOOGLE_NEWS_URL = "https://news.google.com/rss/search"


class NewsSource(FeedSource):
    """Plain RSS 2.0 news feeds dated by <pubDate>; a query is ignored."""

    source_type = SourceType.NEWS
    date_fields = ("published", "updated")


class GoogleNewsSource(NewsSource):
    """
    Google News RSS search.

    Always a search: the caller's query, else the configured default query.
    Only the first `max_items` (20) results are kept.
    """

    default_label = "Google News"

    @property
    def max_items(self) -> int | None:
        return int(self.config.get("max_items", 20))

    def feeds_for(self, query: str | None) -> list[Feed]:
        params = {
            "q": self.query_or_default(query),
            "hl": self.config.get("hl", "en-US"),
            "gl": self.config.get("gl", "US"),
            "ceid": self.config.get("ceid", "US:en"),
        }
        base = self.config.get("url", GOOGLE_NEWS_URL)
        return [Feed(url=f"{base}?{urlencode(params)}", source=self.label)]
