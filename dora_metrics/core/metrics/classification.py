from dora_metrics.core.schema.metrics import PerformanceLevel

HOURS_PER_DAY = 24
HOURS_PER_WEEK = 7 * HOURS_PER_DAY


def classify_deployment_frequency(deployments_per_day: float) -> PerformanceLevel:
    if deployments_per_day >= 1:
        return PerformanceLevel.ELITE
    if deployments_per_day >= 1 / 7:
        return PerformanceLevel.HIGH
    if deployments_per_day >= 1 / 30:
        return PerformanceLevel.MEDIUM
    return PerformanceLevel.LOW


def classify_lead_time(median_hours: float) -> PerformanceLevel:
    if median_hours < 1:
        return PerformanceLevel.ELITE
    if median_hours < HOURS_PER_DAY:
        return PerformanceLevel.HIGH
    if median_hours < HOURS_PER_WEEK:
        return PerformanceLevel.MEDIUM
    return PerformanceLevel.LOW
