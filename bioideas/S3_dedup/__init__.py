"""Step 3: Fingerprint-based deduplication."""

from .fingerprint import get_fingerprint, hash_title, normalize_title
from .filter import deduplicate, filter_duplicates_in_batch

__all__ = [
    "normalize_title",
    "hash_title",
    "get_fingerprint",
    "filter_duplicates_in_batch",
    "deduplicate",
]
