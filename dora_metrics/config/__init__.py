from dora_metrics.config.settings import (
    FetchSettings,
    GitHubSettings,
    LoggingSettings,
    ReportSettings,
    Settings,
    load_settings,
)

__all__ = [
    'Settings',
    'GitHubSettings',
    'LoggingSettings',
    'FetchSettings',
    'ReportSettings',
    'load_settings',
]
