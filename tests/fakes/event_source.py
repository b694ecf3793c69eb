from typing import Dict, List, Optional

from dora_metrics.core.exceptions import SourceError
from dora_metrics.core.ports.event_source import EventSource
from dora_metrics.core.schema.events import (
    DeploymentEvent,
    PullRequestEvent,
    RepositoryMeta,
)
from dora_metrics.core.schema.window import DateWindow


class FakeEventSource(EventSource):
    def __init__(
        self,
        *,
        pull_requests: Optional[Dict[str, List[PullRequestEvent]]] = None,
        deployments: Optional[Dict[str, List[DeploymentEvent]]] = None,
        releases: Optional[Dict[str, List[DeploymentEvent]]] = None,
        repositories: Optional[List[RepositoryMeta]] = None,
        failures: Optional[Dict[str, SourceError]] = None,
    ) -> None:
        self._pull_requests = pull_requests or {}
        self._deployments = deployments or {}
        self._releases = releases or {}
        self._repositories = repositories or []
        self._failures = failures or {}
        self.calls: List[tuple[str, str]] = []

    def repositories(self, account: str) -> List[RepositoryMeta]:
        self.calls.append(("repositories", account))
        return list(self._repositories)

    def merged_pull_requests(
        self, owner: str, repo: str, window: DateWindow
    ) -> List[PullRequestEvent]:
        return self._fetch("pull_requests", repo, self._pull_requests)

    def deployments(
        self, owner: str, repo: str, window: DateWindow
    ) -> List[DeploymentEvent]:
        return self._fetch("deployments", repo, self._deployments)

    def releases(
        self, owner: str, repo: str, window: DateWindow
    ) -> List[DeploymentEvent]:
        return self._fetch("releases", repo, self._releases)

    def _fetch(self, kind: str, repo: str, items: Dict[str, list]) -> list:
        self.calls.append((kind, repo))
        if repo in self._failures:
            raise self._failures[repo]
        return list(items.get(repo, []))
