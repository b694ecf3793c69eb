from datetime import datetime, timezone
from itertools import islice
from typing import Callable, List, Optional, TypeVar

from github import GithubException
from requests import RequestException

from dora_metrics.core.exceptions import (
    CommitFetchError,
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourceRateLimitError,
)
from dora_metrics.core.ports.event_source import EventSource
from dora_metrics.core.ports.logger import Logger
from dora_metrics.core.schema.events import (
    CommitEvent,
    DeploymentEvent,
    PullRequestEvent,
    RepositoryMeta,
    RepositoryRef,
)
from dora_metrics.core.schema.window import DateWindow
from dora_metrics.infra.github.client import GitHubClient

T = TypeVar("T")

RELEASE_ENVIRONMENT = "production"
UNKNOWN_AUTHOR = "unknown"
DEFAULT_COMMIT_LIMIT = 100


class GitHubEventSource(EventSource):
    def __init__(
        self,
        client: GitHubClient,
        logger: Logger,
        *,
        commit_limit: int = DEFAULT_COMMIT_LIMIT,
    ) -> None:
        self._client = client
        self._logger = logger
        self._commit_limit = commit_limit

    def repositories(self, account: str) -> List[RepositoryMeta]:
        try:
            try:
                repos = self._client.list_organization_repositories(account)
            except GithubException as error:
                if error.status != 404:
                    raise
                self._logger.info(
                    "Organization not found, listing user repositories",
                    account=account,
                )
                repos = self._client.list_user_repositories(account)
        except (GithubException, RequestException) as error:
            self._translate_exception(
                "Failed to list repositories",
                error,
                resource=account,
            )
        return [self._to_repository_meta(repo) for repo in repos]

    def merged_pull_requests(
        self, owner: str, repo: str, window: DateWindow
    ) -> List[PullRequestEvent]:
        ref = RepositoryRef(owner=owner, name=repo)
        return self._collect_window(
            ref,
            "pull requests",
            lambda page: self._client.list_closed_pull_requests(owner, repo, page),
            window,
            timestamp_of=lambda pr: pr.merged_at,
            build=lambda pr: self._to_pull_request_event(ref, pr),
        )

    def deployments(
        self, owner: str, repo: str, window: DateWindow
    ) -> List[DeploymentEvent]:
        ref = RepositoryRef(owner=owner, name=repo)
        return self._collect_window(
            ref,
            "deployments",
            lambda page: self._client.list_deployments(owner, repo, page),
            window,
            timestamp_of=lambda deployment: deployment.created_at,
            build=lambda deployment: self._to_deployment_event(ref, deployment),
        )

    def releases(
        self, owner: str, repo: str, window: DateWindow
    ) -> List[DeploymentEvent]:
        ref = RepositoryRef(owner=owner, name=repo)
        return self._collect_window(
            ref,
            "releases",
            lambda page: self._client.list_releases(owner, repo, page),
            window,
            timestamp_of=_release_timestamp,
            build=lambda release: self._release_to_deployment_event(ref, release),
        )

    def _collect_window(
        self,
        ref: RepositoryRef,
        kind: str,
        fetch_page: Callable[[int], List],
        window: DateWindow,
        *,
        timestamp_of: Callable[[object], Optional[datetime]],
        build: Callable[[object], T],
    ) -> List[T]:
        """Walk pages newest first, keeping items inside ``window``.

        Items without a timestamp are skipped. Once a page holds an item
        older than the window start no further pages are requested, but the
        rest of that page is still filtered.
        """
        events: List[T] = []
        page_number = 0
        try:
            while True:
                page = fetch_page(page_number)
                if not page:
                    break
                reached_older = False
                for item in page:
                    timestamp = timestamp_of(item)
                    if timestamp is None:
                        continue
                    if window.contains(timestamp):
                        events.append(build(item))
                    elif timestamp < window.start:
                        reached_older = True
                if reached_older:
                    break
                page_number += 1
        except (GithubException, RequestException) as error:
            self._translate_exception(
                f"Failed to fetch {kind}",
                error,
                resource=ref.full_name,
            )
        return events

    def _to_pull_request_event(self, ref: RepositoryRef, pr) -> PullRequestEvent:
        try:
            commits = self._fetch_commits(ref, pr)
        except CommitFetchError as error:
            self._logger.warning(
                error.message,
                repo=error.resource,
                pr_number=error.pr_number,
                error=str(error.__cause__),
            )
            commits = ()
        additions, deletions, changed_files = self._pull_request_stats(ref, pr)
        return PullRequestEvent(
            repository=ref,
            number=pr.number,
            title=pr.title or "",
            author=pr.user.login if pr.user else UNKNOWN_AUTHOR,
            created_at=pr.created_at,
            merged_at=pr.merged_at,
            commits=commits,
            additions=additions,
            deletions=deletions,
            changed_files=changed_files,
            url=pr.html_url or "",
        )

    def _pull_request_stats(self, ref: RepositoryRef, pr) -> tuple[int, int, int]:
        # Listed pull requests lack these fields; reading them costs one GET.
        try:
            return (pr.additions or 0, pr.deletions or 0, pr.changed_files or 0)
        except (GithubException, RequestException) as error:
            self._logger.warning(
                "Failed to fetch pull request stats",
                repo=ref.full_name,
                pr_number=pr.number,
                error=str(error),
            )
            return (0, 0, 0)

    def _fetch_commits(self, ref: RepositoryRef, pr) -> tuple[CommitEvent, ...]:
        try:
            commits = list(islice(pr.get_commits(), self._commit_limit))
        except (GithubException, RequestException) as error:
            raise CommitFetchError(
                "Failed to fetch pull request commits",
                ref.full_name,
                pr.number,
            ) from error
        return tuple(self._to_commit_event(commit) for commit in commits)

    def _to_commit_event(self, commit) -> CommitEvent:
        details = commit.commit
        git_author = details.author if details else None
        message = details.message if details and details.message else ""
        if commit.author and commit.author.login:
            author = commit.author.login
        elif git_author and git_author.name:
            author = git_author.name
        else:
            author = UNKNOWN_AUTHOR
        return CommitEvent(
            sha=commit.sha,
            message=message.split("\n")[0],
            author=author,
            timestamp=git_author.date if git_author else None,
        )

    def _to_deployment_event(self, ref: RepositoryRef, deployment) -> DeploymentEvent:
        return DeploymentEvent(
            id=deployment.id,
            environment=deployment.environment,
            created_at=deployment.created_at,
            repository=ref,
            ref=deployment.ref,
            description=deployment.description,
        )

    def _release_to_deployment_event(self, ref: RepositoryRef, release) -> DeploymentEvent:
        return DeploymentEvent(
            id=release.id,
            environment=RELEASE_ENVIRONMENT,
            created_at=_release_timestamp(release),
            repository=ref,
            ref=release.tag_name,
            description=release.title,
        )

    def _to_repository_meta(self, repo) -> RepositoryMeta:
        return RepositoryMeta(
            name=repo.name,
            full_name=repo.full_name,
            description=repo.description,
            private=bool(repo.private),
            default_branch=repo.default_branch or "",
            updated_at=repo.updated_at,
        )

    def _translate_exception(
        self,
        message: str,
        error: Exception,
        resource: str | None = None,
    ) -> None:
        status = getattr(error, "status", None)
        headers = getattr(error, "headers", {}) or {}
        if status == 401:
            raise SourceAuthenticationError(message) from error
        if status == 404:
            raise SourceNotFoundError(
                message,
                resource or "resource",
            ) from error
        if status in (403, 429):
            retry_after = self._retry_after_from_headers(headers)
            if retry_after:
                raise SourceRateLimitError(message, retry_after) from error
        raise SourceError(f"{message}: {error}") from error

    def _retry_after_from_headers(self, headers) -> datetime | None:  # noqa: ANN001
        reset = headers.get("Retry-After") or headers.get("X-RateLimit-Reset")
        if reset is None:
            return None
        try:
            reset_time = float(reset)
            return datetime.fromtimestamp(reset_time, tz=timezone.utc)
        except (TypeError, ValueError):
            return None


def _release_timestamp(release) -> Optional[datetime]:  # noqa: ANN001
    if release.draft:
        return None
    return release.published_at or release.created_at
