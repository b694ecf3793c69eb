from tests.fakes.clock import FakeClock
from tests.fakes.event_source import FakeEventSource
from tests.fakes.github import (
    FakeCommit,
    FakeDeployment,
    FakeGitAuthor,
    FakeGitCommit,
    FakeGitHubClient,
    FakePullRequest,
    FakePullRequestWithoutStats,
    FakeRelease,
    FakeRepositoryListing,
    FakeUser,
)
from tests.fakes.logger import FakeLogger

__all__ = [
    "FakeClock",
    "FakeCommit",
    "FakeDeployment",
    "FakeEventSource",
    "FakeGitAuthor",
    "FakeGitCommit",
    "FakeGitHubClient",
    "FakeLogger",
    "FakePullRequest",
    "FakePullRequestWithoutStats",
    "FakeRelease",
    "FakeRepositoryListing",
    "FakeUser",
]
