import json
from datetime import timedelta
from typing import Sequence, Tuple

from dora_metrics.config import Settings, load_settings
from dora_metrics.core.exceptions import ConfigurationError, DoraError
from dora_metrics.core.fetching import RepositoryEventFetcher
from dora_metrics.core.ports import Clock, EventSource, Logger
from dora_metrics.core.serialization import to_payload
from dora_metrics.core.service import DoraMetricsService
from dora_metrics.core.sources import (
    DeploymentSourceSelector,
    DeploymentsProvider,
    ReleasesProvider,
)
from dora_metrics.infra import (
    ConsoleLogger,
    GitHubClient,
    GitHubEventSource,
    LogfireLogger,
    SystemClock,
    configure_logfire,
)


def main() -> int:
    settings = load_settings()
    logger: Logger | None = None
    try:
        logger = _build_logger(settings)
        with GitHubClient(
            settings.github.token,
            base_url=settings.github.base_url,
            page_size=settings.github.page_size,
        ) as github_client:
            event_source = GitHubEventSource(
                github_client,
                logger,
                commit_limit=settings.fetch.commit_limit,
            )
            payload = run_report(settings, event_source, logger, SystemClock())
    except DoraError as error:
        if logger is None:
            logger = ConsoleLogger(settings.logging.name, settings.logging.level)
        logger.error('DORA metrics request failed', error=error.message)
        return 1
    print(json.dumps(payload, indent=2))
    return 0


def run_report(
    settings: Settings,
    event_source: EventSource,
    logger: Logger,
    clock: Clock,
) -> dict:
    org = settings.report.org
    if not org:
        raise ConfigurationError('DORA_ORG environment variable is required')

    fetcher = RepositoryEventFetcher(
        event_source,
        logger,
        max_workers=settings.fetch.max_workers,
    )
    selector = DeploymentSourceSelector(
        logger,
        (DeploymentsProvider(fetcher), ReleasesProvider(fetcher)),
    )
    service = DoraMetricsService(fetcher, selector, logger)

    repos = settings.report.repos or _discover_repos(event_source, org, logger)
    from_date, to_date = _report_window(settings, clock)
    metrics = service.collect(org, repos, from_date, to_date)
    return to_payload(metrics)


def _discover_repos(
    event_source: EventSource, org: str, logger: Logger
) -> Sequence[str]:
    repos = [repo.name for repo in event_source.repositories(org)]
    logger.info('Discovered repositories', org=org, count=len(repos))
    return repos


def _report_window(settings: Settings, clock: Clock) -> Tuple[str, str]:
    report = settings.report
    today = clock.today()
    to_date = report.to_date or today.isoformat()
    from_date = report.from_date or (
        today - timedelta(days=report.lookback_days)
    ).isoformat()
    return from_date, to_date


def _build_logger(settings: Settings) -> Logger:
    if settings.logging.backend == 'console':
        return ConsoleLogger(settings.logging.name, settings.logging.level)
    if settings.logging.backend == 'logfire':
        if not settings.logging.logfire_token:
            raise ConfigurationError(
                'Logfire backend selected but DORA_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logging.logfire_token, settings.logging.name)
        return LogfireLogger(settings.logging.name)
    raise ConfigurationError(f'Unknown logging backend {settings.logging.backend}')
