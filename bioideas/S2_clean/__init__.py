"""Step 2: Clean title text when headlines are created."""

from .html import clean_html, clean_title, clean_whitespace

__all__ = ["clean_html", "clean_whitespace", "clean_title"]
