from dora_metrics.infra.clock import SystemClock
from dora_metrics.infra.github import GitHubClient, GitHubEventSource
from dora_metrics.infra.logging import ConsoleLogger, LogfireLogger, configure_logfire

__all__ = [
    'GitHubClient',
    'GitHubEventSource',
    'ConsoleLogger',
    'LogfireLogger',
    'configure_logfire',
    'SystemClock',
]
