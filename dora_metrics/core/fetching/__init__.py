from dora_metrics.core.fetching.fan_out import ProgressCallback, RepositoryFanOut
from dora_metrics.core.fetching.outcome import RepositoryOutcome
from dora_metrics.core.fetching.repository_fetcher import RepositoryEventFetcher

__all__ = [
    "ProgressCallback",
    "RepositoryFanOut",
    "RepositoryOutcome",
    "RepositoryEventFetcher",
]
