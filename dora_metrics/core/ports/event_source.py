from typing import List, Protocol, runtime_checkable

from dora_metrics.core.schema.events import (
    DeploymentEvent,
    PullRequestEvent,
    RepositoryMeta,
)
from dora_metrics.core.schema.window import DateWindow


@runtime_checkable
class EventSource(Protocol):
    """Per-repository access to the remote activity feed.

    Every method raises ``SourceError`` when the upstream call fails; callers
    decide whether that failure is isolated or fatal.
    """

    def repositories(self, account: str) -> List[RepositoryMeta]:
        ...

    def merged_pull_requests(
        self, owner: str, repo: str, window: DateWindow
    ) -> List[PullRequestEvent]:
        ...

    def deployments(
        self, owner: str, repo: str, window: DateWindow
    ) -> List[DeploymentEvent]:
        ...

    def releases(
        self, owner: str, repo: str, window: DateWindow
    ) -> List[DeploymentEvent]:
        ...
