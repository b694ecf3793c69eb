from dora_metrics.core.exceptions.errors import (
    CommitFetchError,
    ConfigurationError,
    DoraError,
    InvalidDateRangeError,
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourceRateLimitError,
)

__all__ = [
    "DoraError",
    "ConfigurationError",
    "InvalidDateRangeError",
    "SourceError",
    "SourceAuthenticationError",
    "SourceRateLimitError",
    "SourceNotFoundError",
    "CommitFetchError",
]
