from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from dora_metrics.core.exceptions import SourceError
from dora_metrics.core.fetching.outcome import RepositoryOutcome
from dora_metrics.core.ports.logger import Logger

T = TypeVar("T")

ProgressCallback = Callable[[int, int, str], None]


class RepositoryFanOut:
    """Run one fetch per repository on a bounded pool.

    A ``SourceError`` raised for one repository is captured in that
    repository's outcome and never reaches its siblings.
    """

    def __init__(self, logger: Logger, max_workers: int) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._logger = logger
        self._max_workers = max_workers

    def run(
        self,
        repos: Sequence[str],
        fetch: Callable[[str], Iterable[T]],
        *,
        kind: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> List[RepositoryOutcome[T]]:
        unique = list(dict.fromkeys(repos))
        if not unique:
            return []
        outcomes: dict[str, RepositoryOutcome[T]] = {}
        workers = min(self._max_workers, len(unique))
        with ThreadPoolExecutor(
            max_workers=workers,
            thread_name_prefix=f"dora-{kind}",
        ) as pool:
            futures = {pool.submit(self._capture, repo, fetch): repo for repo in unique}
            for completed, future in enumerate(as_completed(futures), start=1):
                outcome = future.result()
                outcomes[outcome.repo] = outcome
                self._report(outcome, kind, completed, len(futures), on_progress)
        return [outcomes[repo] for repo in unique]

    def _capture(
        self, repo: str, fetch: Callable[[str], Iterable[T]]
    ) -> RepositoryOutcome[T]:
        try:
            return RepositoryOutcome(repo=repo, events=tuple(fetch(repo)))
        except SourceError as error:
            return RepositoryOutcome(repo=repo, error=error)

    def _report(
        self,
        outcome: RepositoryOutcome[T],
        kind: str,
        completed: int,
        total: int,
        on_progress: Optional[ProgressCallback],
    ) -> None:
        if outcome.succeeded:
            self._logger.debug(
                "Repository fetched",
                kind=kind,
                repo=outcome.repo,
                events=len(outcome.events),
                progress=f"{completed}/{total}",
            )
        else:
            self._logger.error(
                "Repository fetch failed",
                kind=kind,
                repo=outcome.repo,
                error=str(outcome.error),
            )
        if on_progress is not None:
            on_progress(completed, total, outcome.repo)
