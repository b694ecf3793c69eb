from typing import Sequence

from dora_metrics.core.ports.logger import Logger
from dora_metrics.core.schema.metrics import DeploymentSource, DeploymentSourceResult
from dora_metrics.core.schema.window import DateWindow
from dora_metrics.core.sources.base import BaseDeploymentProvider


class DeploymentSourceSelector:
    """Query providers in order and keep the first non-empty result.

    Sources are never merged. When every provider comes back empty the
    result is tagged ``PULL_REQUESTS`` so the metrics engine falls back to
    merge events.
    """

    def __init__(
        self,
        logger: Logger,
        providers: Sequence[BaseDeploymentProvider],
    ) -> None:
        self._logger = logger
        self._providers = list(providers)

    def select(
        self,
        owner: str,
        repos: Sequence[str],
        window: DateWindow,
    ) -> DeploymentSourceResult:
        for provider in self._providers:
            events = provider.fetch(owner, repos, window)
            if events:
                self._logger.info(
                    "Deployment source selected",
                    source=provider.source.value,
                    events=len(events),
                )
                return DeploymentSourceResult(
                    events=tuple(
                        sorted(events, key=lambda event: event.created_at, reverse=True)
                    ),
                    source=provider.source,
                )
            self._logger.info(
                "Deployment source empty",
                source=provider.source.value,
            )
        self._logger.info(
            "Deployment source selected",
            source=DeploymentSource.PULL_REQUESTS.value,
            events=0,
        )
        return DeploymentSourceResult(events=(), source=DeploymentSource.PULL_REQUESTS)
