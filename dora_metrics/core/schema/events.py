from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class RepositoryRef:
    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True, slots=True)
class RepositoryMeta:
    name: str
    full_name: str
    description: Optional[str]
    private: bool
    default_branch: str
    updated_at: Optional[datetime]


@dataclass(frozen=True, slots=True)
class CommitEvent:
    sha: str
    message: str
    author: str
    timestamp: Optional[datetime]


@dataclass(frozen=True, slots=True)
class PullRequestEvent:
    repository: RepositoryRef
    number: int
    title: str
    author: str
    created_at: datetime
    merged_at: datetime
    commits: Tuple[CommitEvent, ...]
    additions: int
    deletions: int
    changed_files: int
    url: str

    @property
    def repo(self) -> str:
        return self.repository.name


@dataclass(frozen=True, slots=True)
class DeploymentEvent:
    id: int
    environment: str
    created_at: datetime
    repository: RepositoryRef
    ref: str
    description: Optional[str]

    @property
    def repo(self) -> str:
        return self.repository.name
