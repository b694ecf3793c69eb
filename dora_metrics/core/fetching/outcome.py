from dataclasses import dataclass
from typing import Generic, Optional, Tuple, TypeVar

from dora_metrics.core.exceptions import SourceError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class RepositoryOutcome(Generic[T]):
    repo: str
    events: Tuple[T, ...] = ()
    error: Optional[SourceError] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None
