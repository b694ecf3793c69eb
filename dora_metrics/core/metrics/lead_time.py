from datetime import datetime
from typing import Optional, Sequence

from dora_metrics.core.metrics.classification import classify_lead_time
from dora_metrics.core.metrics.stats import mean, median, nearest_rank_percentile
from dora_metrics.core.schema.events import PullRequestEvent
from dora_metrics.core.schema.metrics import LeadTimeItem, LeadTimeResult

SECONDS_PER_HOUR = 3600


def calculate_lead_time(pull_requests: Sequence[PullRequestEvent]) -> LeadTimeResult:
    items = [_lead_time_item(pr) for pr in pull_requests]
    hours = [item.first_commit_to_merge_hours for item in items]
    median_hours = median(hours)
    return LeadTimeResult(
        average_hours=mean(hours),
        median_hours=median_hours,
        p90_hours=nearest_rank_percentile(hours, 90),
        # Slowest first; the ordering is consumed by "top N slowest" views.
        items=tuple(
            sorted(
                items,
                key=lambda item: item.first_commit_to_merge_hours,
                reverse=True,
            )
        ),
        performance_level=classify_lead_time(median_hours),
    )


def hours_between(start: datetime, end: datetime) -> float:
    return max((end - start).total_seconds() / SECONDS_PER_HOUR, 0.0)


def first_commit_at(pr: PullRequestEvent) -> Optional[datetime]:
    timestamps = [commit.timestamp for commit in pr.commits if commit.timestamp]
    return min(timestamps) if timestamps else None


def _lead_time_item(pr: PullRequestEvent) -> LeadTimeItem:
    started_at = first_commit_at(pr) or pr.created_at
    return LeadTimeItem(
        repo=pr.repo,
        pr_number=pr.number,
        title=pr.title,
        author=pr.author,
        first_commit_to_merge_hours=hours_between(started_at, pr.merged_at),
        open_to_merge_hours=hours_between(pr.created_at, pr.merged_at),
        merged_at=pr.merged_at,
    )
