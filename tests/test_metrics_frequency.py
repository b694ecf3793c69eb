from datetime import date

import pytest

from dora_metrics.core.metrics import (
    calculate_deployment_frequency,
    classify_deployment_frequency,
)
from dora_metrics.core.schema.metrics import DeploymentSource, PerformanceLevel
from dora_metrics.core.schema.window import DateWindow
from tests.builders import at, make_deployment, make_pull_request


class TestClassifyDeploymentFrequency:
    @pytest.mark.parametrize(
        ("per_day", "expected"),
        [
            (5.0, PerformanceLevel.ELITE),
            (1.0, PerformanceLevel.ELITE),
            (0.99, PerformanceLevel.HIGH),
            (1 / 7, PerformanceLevel.HIGH),
            (0.14, PerformanceLevel.MEDIUM),
            (1 / 30, PerformanceLevel.MEDIUM),
            (0.033, PerformanceLevel.LOW),
            (0.0, PerformanceLevel.LOW),
        ],
    )
    def test_uses_exact_thresholds(self, per_day: float, expected: PerformanceLevel) -> None:
        assert classify_deployment_frequency(per_day) is expected


class TestCalculateDeploymentFrequency:
    def test_three_deployments_over_two_days_is_elite(self) -> None:
        window = DateWindow.parse("2024-01-01", "2024-01-03")
        deployments = [make_deployment(at(days=day, hours=10)) for day in (2, 1, 0)]

        result = calculate_deployment_frequency(
            deployments, [], window, DeploymentSource.DEPLOYMENTS
        )

        assert result.total_deployments == 3
        assert result.period_days == 2
        assert result.deployments_per_day == pytest.approx(1.5)
        assert result.deployments_per_week == pytest.approx(10.5)
        assert result.performance_level is PerformanceLevel.ELITE
        assert result.source is DeploymentSource.DEPLOYMENTS

    def test_same_day_window_uses_one_day_period(self) -> None:
        window = DateWindow.parse("2024-01-01", "2024-01-01")

        result = calculate_deployment_frequency(
            [make_deployment(at(hours=3))], [], window, DeploymentSource.DEPLOYMENTS
        )

        assert result.period_days == 1
        assert result.deployments_per_day == 1.0

    def test_counts_per_repository(self) -> None:
        window = DateWindow.parse("2024-01-01", "2024-01-31")
        deployments = [
            make_deployment(at(days=1), repo="web"),
            make_deployment(at(days=2), repo="api"),
            make_deployment(at(days=3), repo="web"),
        ]

        result = calculate_deployment_frequency(
            deployments, [], window, DeploymentSource.RELEASES
        )

        assert result.deployments_by_repo == {"api": 1, "web": 2}
        assert list(result.deployments_by_repo) == ["api", "web"]

    def test_pull_request_source_uses_merge_times(self) -> None:
        window = DateWindow.parse("2024-01-01", "2024-01-15")
        pull_requests = [
            make_pull_request(number=1, merged_at=at(days=9)),
            make_pull_request(number=2, merged_at=at(days=2), repo="web"),
        ]

        result = calculate_deployment_frequency(
            [], pull_requests, window, DeploymentSource.PULL_REQUESTS
        )

        assert result.total_deployments == 2
        assert result.deployments_per_day == pytest.approx(2 / 14)
        assert result.deployments_by_repo == {"api": 1, "web": 1}
        assert result.source is DeploymentSource.PULL_REQUESTS
        counts = {item.week: item.count for item in result.weekly_trend}
        assert counts[date(2024, 1, 7)] == 1
        assert counts[date(2023, 12, 31)] == 1

    def test_deployment_source_ignores_pull_requests(self) -> None:
        window = DateWindow.parse("2024-01-01", "2024-01-15")

        result = calculate_deployment_frequency(
            [make_deployment(at(days=1))],
            [make_pull_request(merged_at=at(days=2))] * 3,
            window,
            DeploymentSource.DEPLOYMENTS,
        )

        assert result.total_deployments == 1

    def test_no_events_yield_zero_values(self) -> None:
        window = DateWindow.parse("2024-01-01", "2024-01-29")

        result = calculate_deployment_frequency(
            [], [], window, DeploymentSource.PULL_REQUESTS
        )

        assert result.total_deployments == 0
        assert result.deployments_per_day == 0
        assert result.deployments_by_repo == {}
        assert result.performance_level is PerformanceLevel.LOW
        assert len(result.weekly_trend) == 5
        assert all(item.count == 0 for item in result.weekly_trend)

    def test_is_deterministic(self) -> None:
        window = DateWindow.parse("2024-01-01", "2024-02-01")
        deployments = [make_deployment(at(days=day), repo=f"r{day % 3}") for day in range(20)]

        first = calculate_deployment_frequency(deployments, [], window, DeploymentSource.DEPLOYMENTS)
        second = calculate_deployment_frequency(deployments, [], window, DeploymentSource.DEPLOYMENTS)

        assert first == second
