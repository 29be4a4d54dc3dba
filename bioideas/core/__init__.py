"""Core utilities for BioIdeas."""

from .dates import from_struct_time, from_timestamp, now_utc, parse_datetime
from .http import create_client, get, get_json, get_text

__all__ = [
    # Dates
    "now_utc",
    "parse_datetime",
    "from_struct_time",
    "from_timestamp",
    # HTTP
    "create_client",
    "get",
    "get_text",
    "get_json",
]
