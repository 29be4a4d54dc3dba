"""Reddit source: site search with a query, subreddit listings without."""

import httpx

from ..core import from_timestamp
from ..models import Headline, SourceType
from .base import BaseSource

REDDIT_BASE = "https://www.reddit.com"
PERMALINK_BASE = "https://reddit.com"


class RedditSource(BaseSource):
    """
    Reddit.

    - query: /search.json, labelled with each post's own subreddit
    - browse: /r/<sub>/new.json for every configured subreddit, fetched
      concurrently; one failing subreddit does not drop the others
    """

    source_type = SourceType.SOCIAL
    default_label = "Reddit"

    async def _fetch(self, client: httpx.AsyncClient, query: str | None) -> list[Headline]:
        if query:
            return await self._search(client, query)
        return await self.gather_isolated(
            (f"r/{sub}", self._browse(client, sub))
            for sub in self.config.get("subreddits", [])
        )

    async def _search(self, client: httpx.AsyncClient, query: str) -> list[Headline]:
        params = {"q": query, "sort": "new", "limit": int(self.config.get("search_limit", 25))}
        data = await self.get_json(client, f"{REDDIT_BASE}/search.json", params=params)
        return self._parse_listing(data)

    async def _browse(self, client: httpx.AsyncClient, subreddit: str) -> list[Headline]:
        params = {"limit": int(self.config.get("limit", 15))}
        data = await self.get_json(client, f"{REDDIT_BASE}/r/{subreddit}/new.json", params=params)
        return self._parse_listing(data, subreddit=subreddit)

    def _parse_listing(self, data, subreddit: str | None = None) -> list[Headline]:
        """Map a Listing; `subreddit` fixes the label, else each post's own is used."""
        listing = data.get("data") if isinstance(data, dict) else None
        children = listing.get("children") if isinstance(listing, dict) else None

        items = []
        for child in children or []:
            post = child.get("data") if isinstance(child, dict) else None
            if not isinstance(post, dict):
                continue
            sub = subreddit or post.get("subreddit")
            permalink = post.get("permalink")
            item = self.make_headline(
                post.get("title") or "",
                source=f"Reddit r/{sub}" if sub else self.label,
                url=f"{PERMALINK_BASE}{permalink}" if permalink else None,
                published_at=from_timestamp(post.get("created_utc")),
            )
            if item:
                items.append(item)
        return items
