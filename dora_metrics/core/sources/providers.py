from typing import List, Sequence

from dora_metrics.core.schema.events import DeploymentEvent
from dora_metrics.core.schema.metrics import DeploymentSource
from dora_metrics.core.schema.window import DateWindow
from dora_metrics.core.sources.base import BaseDeploymentProvider


class DeploymentsProvider(BaseDeploymentProvider):
    source = DeploymentSource.DEPLOYMENTS

    def fetch(
        self,
        owner: str,
        repos: Sequence[str],
        window: DateWindow,
    ) -> List[DeploymentEvent]:
        return self._fetcher.deployments(owner, repos, window)


class ReleasesProvider(BaseDeploymentProvider):
    """Published, non-draft releases reinterpreted as production deployments."""

    source = DeploymentSource.RELEASES

    def fetch(
        self,
        owner: str,
        repos: Sequence[str],
        window: DateWindow,
    ) -> List[DeploymentEvent]:
        return self._fetcher.releases(owner, repos, window)
