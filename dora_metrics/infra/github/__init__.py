from dora_metrics.infra.github.client import GitHubClient
from dora_metrics.infra.github.event_source import GitHubEventSource

__all__ = ["GitHubClient", "GitHubEventSource"]
