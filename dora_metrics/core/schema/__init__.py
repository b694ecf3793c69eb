from dora_metrics.core.schema.events import (
    CommitEvent,
    DeploymentEvent,
    PullRequestEvent,
    RepositoryMeta,
    RepositoryRef,
)
from dora_metrics.core.schema.metrics import (
    DeploymentFrequencyResult,
    DeploymentSource,
    DeploymentSourceResult,
    DoraMetrics,
    LeadTimeItem,
    LeadTimeResult,
    PerformanceLevel,
    WeeklyCount,
)
from dora_metrics.core.schema.window import DateWindow

__all__ = [
    "RepositoryRef",
    "RepositoryMeta",
    "CommitEvent",
    "PullRequestEvent",
    "DeploymentEvent",
    "DateWindow",
    "PerformanceLevel",
    "DeploymentSource",
    "DeploymentSourceResult",
    "WeeklyCount",
    "DeploymentFrequencyResult",
    "LeadTimeItem",
    "LeadTimeResult",
    "DoraMetrics",
]
