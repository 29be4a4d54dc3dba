"""Deduplication filter using fingerprints."""

from typing import Iterable

from ..models import Headline
from .fingerprint import get_fingerprint


def filter_duplicates_in_batch(items: Iterable[Headline]) -> list[Headline]:
    """
    Remove duplicates within current batch (same fingerprint).

    The first headline seen for a fingerprint wins; later ones are dropped.
    Survivors keep their relative order.
    """
    seen: set[str] = set()
    unique_items: list[Headline] = []

    for item in items:
        fp = get_fingerprint(item)
        if fp in seen:
            continue
        seen.add(fp)
        unique_items.append(item)

    return unique_items


deduplicate = filter_duplicates_in_batch
