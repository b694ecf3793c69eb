from dora_metrics.core.sources.base import BaseDeploymentProvider
from dora_metrics.core.sources.providers import DeploymentsProvider, ReleasesProvider
from dora_metrics.core.sources.selector import DeploymentSourceSelector

__all__ = [
    "BaseDeploymentProvider",
    "DeploymentsProvider",
    "ReleasesProvider",
    "DeploymentSourceSelector",
]
