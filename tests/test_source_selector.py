from dora_metrics.core.exceptions import SourceError
from dora_metrics.core.fetching import RepositoryEventFetcher
from dora_metrics.core.schema.metrics import DeploymentSource
from dora_metrics.core.schema.window import DateWindow
from dora_metrics.core.sources import (
    BaseDeploymentProvider,
    DeploymentsProvider,
    DeploymentSourceSelector,
    ReleasesProvider,
)
from tests.builders import at, make_deployment
from tests.fakes import FakeEventSource, FakeLogger

WINDOW = DateWindow.parse("2024-01-01", "2024-01-31")


def _selector(source: FakeEventSource, logger: FakeLogger | None = None) -> DeploymentSourceSelector:
    logger = logger or FakeLogger()
    fetcher = RepositoryEventFetcher(source, logger, max_workers=2)
    return DeploymentSourceSelector(
        logger,
        (DeploymentsProvider(fetcher), ReleasesProvider(fetcher)),
    )


class TestDeploymentSourceSelector:
    def test_prefers_deployments(self) -> None:
        source = FakeEventSource(
            deployments={"api": [make_deployment(at(days=1), deployment_id=1)]},
            releases={"api": [make_deployment(at(days=2), deployment_id=2)]},
        )

        result = _selector(source).select("acme", ["api"], WINDOW)

        assert result.source is DeploymentSource.DEPLOYMENTS
        assert [event.id for event in result.events] == [1]
        assert not any(kind == "releases" for kind, _ in source.calls)

    def test_falls_back_to_releases_without_merging(self) -> None:
        source = FakeEventSource(
            releases={
                "api": [make_deployment(at(days=2), deployment_id=5)],
                "web": [make_deployment(at(days=6), repo="web", deployment_id=6)],
            },
        )

        result = _selector(source).select("acme", ["api", "web"], WINDOW)

        assert result.source is DeploymentSource.RELEASES
        assert [event.id for event in result.events] == [6, 5]

    def test_falls_back_to_pull_requests_when_everything_is_empty(self) -> None:
        logger = FakeLogger()

        result = _selector(FakeEventSource(), logger).select("acme", ["api"], WINDOW)

        assert result.source is DeploymentSource.PULL_REQUESTS
        assert result.events == ()
        selected = [ctx for msg, ctx in logger.at_level("info") if msg == "Deployment source selected"]
        assert selected == [{"source": "pull_requests", "events": 0}]

    def test_failed_deployment_fetch_counts_as_empty(self) -> None:
        source = FakeEventSource(
            releases={"web": [make_deployment(at(days=2), repo="web", deployment_id=3)]},
            failures={"api": SourceError("Failed to fetch deployments")},
        )

        result = _selector(source).select("acme", ["api", "web"], WINDOW)

        assert result.source is DeploymentSource.RELEASES
        assert [event.repo for event in result.events] == ["web"]

    def test_queries_custom_providers_in_order(self) -> None:
        calls: list[str] = []

        class _Provider(BaseDeploymentProvider):
            def __init__(self, source: DeploymentSource, events: list) -> None:
                super().__init__(fetcher=None)  # type: ignore[arg-type]
                self.source = source
                self._events = events

            def fetch(self, owner, repos, window):  # noqa: ANN001
                calls.append(self.source.value)
                return self._events

        selector = DeploymentSourceSelector(
            FakeLogger(),
            (
                _Provider(DeploymentSource.RELEASES, []),
                _Provider(DeploymentSource.DEPLOYMENTS, [make_deployment(at(days=1))]),
                _Provider(DeploymentSource.RELEASES, [make_deployment(at(days=2))]),
            ),
        )

        result = selector.select("acme", ["api"], WINDOW)

        assert calls == ["releases", "deployments"]
        assert result.source is DeploymentSource.DEPLOYMENTS
