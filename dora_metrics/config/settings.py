import os
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class GitHubSettings:
    token: Optional[str]
    base_url: str
    page_size: int


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    level: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class FetchSettings:
    max_workers: int
    commit_limit: int


@dataclass(frozen=True, slots=True)
class ReportSettings:
    org: Optional[str]
    repos: Tuple[str, ...]
    from_date: Optional[str]
    to_date: Optional[str]
    lookback_days: int


@dataclass(frozen=True, slots=True)
class Settings:
    github: GitHubSettings
    logging: LoggingSettings
    fetch: FetchSettings
    report: ReportSettings


def load_settings() -> Settings:
    from dotenv import load_dotenv

    load_dotenv()

    return Settings(
        github=GitHubSettings(
            token=_env_or_default("GITHUB_TOKEN"),
            base_url=_env_or_default("DORA_GITHUB_BASE_URL", "https://api.github.com"),
            page_size=_env_int("DORA_PAGE_SIZE", 100),
        ),
        logging=LoggingSettings(
            backend=_env_or_default("DORA_LOGGER_BACKEND", "console").lower(),
            name=_env_or_default("DORA_LOGGER_NAME", "dora_metrics"),
            level=_env_or_default("DORA_LOG_LEVEL", "INFO").upper(),
            logfire_token=_env_or_default("DORA_LOGFIRE_TOKEN"),
        ),
        fetch=FetchSettings(
            max_workers=_env_int("DORA_MAX_WORKERS", 4),
            commit_limit=_env_int("DORA_COMMIT_LIMIT", 100),
        ),
        report=ReportSettings(
            org=_env_or_default("DORA_ORG"),
            repos=_env_list("DORA_REPOS"),
            from_date=_env_or_default("DORA_FROM_DATE"),
            to_date=_env_or_default("DORA_TO_DATE"),
            lookback_days=_env_int("DORA_LOOKBACK_DAYS", 30),
        ),
    )


def _env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value


def _env_int(name: str, default: int) -> int:
    return int(_env_or_default(name) or default)


def _env_list(name: str) -> Tuple[str, ...]:
    value = _env_or_default(name, "")
    return tuple(item.strip() for item in value.split(",") if item.strip())
