"""Fingerprint calculation for deduplication."""

import hashlib
import re

from ..models import Headline

# ASCII word characters only: accented and non-Latin letters are dropped too
_PUNCTUATION_RE = re.compile(r"[^A-Za-z0-9_\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_title(title: str) -> str:
    """
    Normalize title for hashing.

    - Lowercase
    - Remove punctuation
    - Collapse whitespace
    - Trim
    """
    if not title:
        return ""

    title = title.lower()
    title = _PUNCTUATION_RE.sub("", title)
    title = _WHITESPACE_RE.sub(" ", title)
    return title.strip()


def hash_title(title: str) -> str:
    """Hash normalized title to SHA-256 (hex)."""
    normalized = normalize_title(title)
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()


def get_fingerprint(item: Headline) -> str:
    """Dedup key of a headline: derived from its title only."""
    return hash_title(item.title)
