from abc import ABC, abstractmethod
from typing import List, Sequence

from dora_metrics.core.fetching.repository_fetcher import RepositoryEventFetcher
from dora_metrics.core.schema.events import DeploymentEvent
from dora_metrics.core.schema.metrics import DeploymentSource
from dora_metrics.core.schema.window import DateWindow


class BaseDeploymentProvider(ABC):
    """One candidate source of deployment-like events."""

    source: DeploymentSource

    def __init__(self, fetcher: RepositoryEventFetcher) -> None:
        self._fetcher = fetcher

    @abstractmethod
    def fetch(
        self,
        owner: str,
        repos: Sequence[str],
        window: DateWindow,
    ) -> List[DeploymentEvent]:
        ...
