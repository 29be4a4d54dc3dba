"""Custom exceptions for BioIdeas."""


class BioIdeasError(Exception):
    """Base exception for all BioIdeas errors."""


class SourceFetchError(BioIdeasError):
    """Raised when a source (or one of its sub-feeds) cannot be fetched or parsed."""

    def __init__(self, source: str, message: str, status_code: int | None = None):
        self.source = source
        self.status_code = status_code
        super().__init__(message)


class AggregationError(BioIdeasError):
    """Raised when the headline aggregation as a whole fails."""
