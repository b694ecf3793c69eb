from typing import Callable, List, Optional, Sequence, TypeVar

from dora_metrics.core.fetching.fan_out import ProgressCallback, RepositoryFanOut
from dora_metrics.core.ports.event_source import EventSource
from dora_metrics.core.ports.logger import Logger
from dora_metrics.core.schema.events import DeploymentEvent, PullRequestEvent
from dora_metrics.core.schema.window import DateWindow

T = TypeVar("T")


class RepositoryEventFetcher:
    """Fetch one event kind across many repositories of an account.

    Results of the successful repositories are concatenated in the order
    the repositories were given, then sorted newest first.
    """

    def __init__(
        self,
        event_source: EventSource,
        logger: Logger,
        *,
        max_workers: int,
    ) -> None:
        self._event_source = event_source
        self._logger = logger
        self._fan_out = RepositoryFanOut(logger, max_workers)

    def merged_pull_requests(
        self,
        owner: str,
        repos: Sequence[str],
        window: DateWindow,
        on_progress: Optional[ProgressCallback] = None,
    ) -> List[PullRequestEvent]:
        prs = self._gather(
            "pull_requests",
            repos,
            lambda repo: self._event_source.merged_pull_requests(owner, repo, window),
            on_progress,
        )
        return sorted(prs, key=lambda pr: pr.merged_at, reverse=True)

    def deployments(
        self,
        owner: str,
        repos: Sequence[str],
        window: DateWindow,
        on_progress: Optional[ProgressCallback] = None,
    ) -> List[DeploymentEvent]:
        events = self._gather(
            "deployments",
            repos,
            lambda repo: self._event_source.deployments(owner, repo, window),
            on_progress,
        )
        return _newest_first(events)

    def releases(
        self,
        owner: str,
        repos: Sequence[str],
        window: DateWindow,
        on_progress: Optional[ProgressCallback] = None,
    ) -> List[DeploymentEvent]:
        events = self._gather(
            "releases",
            repos,
            lambda repo: self._event_source.releases(owner, repo, window),
            on_progress,
        )
        return _newest_first(events)

    def _gather(
        self,
        kind: str,
        repos: Sequence[str],
        fetch: Callable[[str], List[T]],
        on_progress: Optional[ProgressCallback],
    ) -> List[T]:
        outcomes = self._fan_out.run(repos, fetch, kind=kind, on_progress=on_progress)
        failed = [outcome.repo for outcome in outcomes if not outcome.succeeded]
        if failed:
            self._logger.warning(
                "Some repositories contributed no events",
                kind=kind,
                failed=failed,
            )
        return [event for outcome in outcomes for event in outcome.events]


def _newest_first(events: List[DeploymentEvent]) -> List[DeploymentEvent]:
    return sorted(events, key=lambda event: event.created_at, reverse=True)
