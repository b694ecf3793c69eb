from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Mapping, Tuple

from dora_metrics.core.schema.events import DeploymentEvent


class PerformanceLevel(Enum):
    ELITE = "elite"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DeploymentSource(Enum):
    DEPLOYMENTS = "deployments"
    RELEASES = "releases"
    PULL_REQUESTS = "pull_requests"


@dataclass(frozen=True, slots=True)
class DeploymentSourceResult:
    events: Tuple[DeploymentEvent, ...]
    source: DeploymentSource


@dataclass(frozen=True, slots=True)
class WeeklyCount:
    week: date
    count: int


@dataclass(frozen=True, slots=True)
class DeploymentFrequencyResult:
    total_deployments: int
    deployments_per_day: float
    deployments_per_week: float
    period_days: int
    deployments_by_repo: Mapping[str, int]
    weekly_trend: Tuple[WeeklyCount, ...]
    performance_level: PerformanceLevel
    source: DeploymentSource


@dataclass(frozen=True, slots=True)
class LeadTimeItem:
    repo: str
    pr_number: int
    title: str
    author: str
    first_commit_to_merge_hours: float
    open_to_merge_hours: float
    merged_at: datetime


@dataclass(frozen=True, slots=True)
class LeadTimeResult:
    average_hours: float
    median_hours: float
    p90_hours: float
    items: Tuple[LeadTimeItem, ...]
    performance_level: PerformanceLevel


@dataclass(frozen=True, slots=True)
class DoraMetrics:
    deployment_frequency: DeploymentFrequencyResult
    lead_time: LeadTimeResult
