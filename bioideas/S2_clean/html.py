"""HTML and text cleaning utilities."""

import html
import re


def clean_html(text: str) -> str:
    """Remove HTML tags and decode entities."""
    if not text:
        return ""
    text = html.unescape(text)
    text = re.sub(r"<[^>]+>", "", text)
    return text


def clean_whitespace(text: str) -> str:
    """Normalize whitespace."""
    if not text:
        return ""
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def clean_title(text: str | None) -> str:
    """
    Clean a raw title as it comes out of a feed or API.

    arXiv wraps long titles over several lines and several APIs return
    HTML-escaped titles with inline markup (<i>, <sub>).
    """
    if not text or not isinstance(text, str):
        return ""
    return clean_whitespace(clean_html(text))
