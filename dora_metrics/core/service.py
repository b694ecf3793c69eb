from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

from dora_metrics.core.exceptions import ConfigurationError
from dora_metrics.core.fetching.fan_out import ProgressCallback
from dora_metrics.core.fetching.repository_fetcher import RepositoryEventFetcher
from dora_metrics.core.metrics import calculate_dora_metrics
from dora_metrics.core.ports.logger import Logger
from dora_metrics.core.schema.events import DeploymentEvent, PullRequestEvent
from dora_metrics.core.schema.metrics import (
    DeploymentSource,
    DeploymentSourceResult,
    DoraMetrics,
)
from dora_metrics.core.schema.window import DateWindow
from dora_metrics.core.sources.selector import DeploymentSourceSelector


class DoraMetricsService:
    """Entry point used by routes, schedulers and report generators.

    Dates are ``YYYY-MM-DD`` strings at this boundary. Invalid requests raise
    ``ConfigurationError`` before any upstream call is made.
    """

    def __init__(
        self,
        fetcher: RepositoryEventFetcher,
        selector: DeploymentSourceSelector,
        logger: Logger,
    ) -> None:
        self._fetcher = fetcher
        self._selector = selector
        self._logger = logger

    def fetch_merged_prs(
        self,
        org: str,
        repos: Sequence[str],
        from_date: str,
        to_date: str,
        on_progress: ProgressCallback | None = None,
    ) -> List[PullRequestEvent]:
        window = self._validate(org, repos, from_date, to_date)
        return self._fetcher.merged_pull_requests(org, repos, window, on_progress)

    def fetch_deployment_source(
        self,
        org: str,
        repos: Sequence[str],
        from_date: str,
        to_date: str,
    ) -> DeploymentSourceResult:
        window = self._validate(org, repos, from_date, to_date)
        return self._selector.select(org, repos, window)

    def compute_dora_metrics(
        self,
        deployments: Sequence[DeploymentEvent],
        pull_requests: Sequence[PullRequestEvent],
        from_date: str,
        to_date: str,
        source: DeploymentSource,
    ) -> DoraMetrics:
        window = DateWindow.parse(from_date, to_date)
        return calculate_dora_metrics(deployments, pull_requests, window, source)

    def collect(
        self,
        org: str,
        repos: Sequence[str],
        from_date: str,
        to_date: str,
    ) -> DoraMetrics:
        window = self._validate(org, repos, from_date, to_date)
        self._logger.info(
            "Collecting DORA metrics",
            org=org,
            repos=len(repos),
            from_date=from_date,
            to_date=to_date,
        )
        # Lead time always needs merged PRs, whichever source wins selection.
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="dora-phase") as pool:
            prs_future = pool.submit(
                self._fetcher.merged_pull_requests, org, repos, window
            )
            selection_future = pool.submit(self._selector.select, org, repos, window)
            pull_requests = prs_future.result()
            selection = selection_future.result()

        metrics = calculate_dora_metrics(
            selection.events, pull_requests, window, selection.source
        )
        self._logger.info(
            "DORA metrics computed",
            org=org,
            source=selection.source.value,
            deployments=metrics.deployment_frequency.total_deployments,
            pull_requests=len(pull_requests),
            frequency_level=metrics.deployment_frequency.performance_level.value,
            lead_time_level=metrics.lead_time.performance_level.value,
        )
        return metrics

    def _validate(
        self,
        org: str,
        repos: Sequence[str],
        from_date: str,
        to_date: str,
    ) -> DateWindow:
        if not org:
            raise ConfigurationError("Missing organization")
        if isinstance(repos, str) or not repos:
            raise ConfigurationError("repos must be a non-empty list")
        return DateWindow.parse(from_date, to_date)
