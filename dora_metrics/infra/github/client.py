from typing import List

from github import Github

from dora_metrics.core.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_PAGE_SIZE = 100


class GitHubClient:
    """Page-level access to the GitHub REST endpoints the event source needs.

    Pages are zero-based. Listing order is whatever the endpoint is asked
    for: pull requests by last update, deployments and releases newest
    first. Failed calls are not retried.
    """

    def __init__(
        self,
        token: str | None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if not token:
            raise ConfigurationError("GITHUB_TOKEN environment variable is required")
        self._client = Github(
            login_or_token=token,
            base_url=base_url,
            per_page=page_size,
            retry=None,
            lazy=True,
        )

    def list_organization_repositories(self, org: str) -> List:
        repos = self._client.get_organization(org).get_repos(
            sort="updated",
            direction="desc",
        )
        return list(repos)

    def list_user_repositories(self, user: str) -> List:
        repos = self._client.get_user(user).get_repos(
            sort="updated",
            direction="desc",
        )
        return list(repos)

    def list_closed_pull_requests(self, owner: str, repo: str, page: int) -> List:
        pulls = self._repo(owner, repo).get_pulls(
            state="closed",
            sort="updated",
            direction="desc",
        )
        return pulls.get_page(page)

    def list_deployments(self, owner: str, repo: str, page: int) -> List:
        return self._repo(owner, repo).get_deployments().get_page(page)

    def list_releases(self, owner: str, repo: str, page: int) -> List:
        return self._repo(owner, repo).get_releases().get_page(page)

    def close(self) -> None:
        try:
            self._client.close()
        except AttributeError:
            return

    def _repo(self, owner: str, name: str):
        return self._client.get_repo(f"{owner}/{name}")

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()
