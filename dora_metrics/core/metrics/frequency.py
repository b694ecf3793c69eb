from collections import Counter
from datetime import datetime
from typing import Iterable, List, Sequence, Tuple

from dora_metrics.core.metrics.classification import classify_deployment_frequency
from dora_metrics.core.metrics.weeks import weekly_trend
from dora_metrics.core.schema.events import DeploymentEvent, PullRequestEvent
from dora_metrics.core.schema.metrics import (
    DeploymentFrequencyResult,
    DeploymentSource,
)
from dora_metrics.core.schema.window import DateWindow


def calculate_deployment_frequency(
    deployments: Sequence[DeploymentEvent],
    pull_requests: Sequence[PullRequestEvent],
    window: DateWindow,
    source: DeploymentSource,
) -> DeploymentFrequencyResult:
    """Reduce deployment-like events into a frequency result.

    When ``source`` is ``PULL_REQUESTS`` the merge of each pull request
    stands in for a deployment and ``deployments`` is ignored.
    """
    events = _frequency_events(deployments, pull_requests, source)
    period_days = window.period_days
    total = len(events)
    per_day = total / period_days

    by_repo = Counter(repo for repo, _ in events)
    return DeploymentFrequencyResult(
        total_deployments=total,
        deployments_per_day=per_day,
        deployments_per_week=per_day * 7,
        period_days=period_days,
        deployments_by_repo={repo: by_repo[repo] for repo in sorted(by_repo)},
        weekly_trend=weekly_trend((moment for _, moment in events), window),
        performance_level=classify_deployment_frequency(per_day),
        source=source,
    )


def _frequency_events(
    deployments: Iterable[DeploymentEvent],
    pull_requests: Iterable[PullRequestEvent],
    source: DeploymentSource,
) -> List[Tuple[str, datetime]]:
    if source is DeploymentSource.PULL_REQUESTS:
        return [(pr.repo, pr.merged_at) for pr in pull_requests]
    return [(deployment.repo, deployment.created_at) for deployment in deployments]
