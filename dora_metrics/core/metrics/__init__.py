from typing import Sequence

from dora_metrics.core.metrics.classification import (
    classify_deployment_frequency,
    classify_lead_time,
)
from dora_metrics.core.metrics.frequency import calculate_deployment_frequency
from dora_metrics.core.metrics.lead_time import calculate_lead_time
from dora_metrics.core.metrics.weeks import week_start, weekly_trend
from dora_metrics.core.schema.events import DeploymentEvent, PullRequestEvent
from dora_metrics.core.schema.metrics import DeploymentSource, DoraMetrics
from dora_metrics.core.schema.window import DateWindow


def calculate_dora_metrics(
    deployments: Sequence[DeploymentEvent],
    pull_requests: Sequence[PullRequestEvent],
    window: DateWindow,
    source: DeploymentSource,
) -> DoraMetrics:
    return DoraMetrics(
        deployment_frequency=calculate_deployment_frequency(
            deployments, pull_requests, window, source
        ),
        lead_time=calculate_lead_time(pull_requests),
    )


__all__ = [
    "calculate_dora_metrics",
    "calculate_deployment_frequency",
    "calculate_lead_time",
    "classify_deployment_frequency",
    "classify_lead_time",
    "week_start",
    "weekly_trend",
]
