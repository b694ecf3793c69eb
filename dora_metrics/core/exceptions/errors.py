from datetime import datetime


class DoraError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(DoraError):
    pass


class InvalidDateRangeError(ConfigurationError):
    pass


class SourceError(DoraError):
    pass


class SourceAuthenticationError(SourceError):
    pass


class SourceRateLimitError(SourceError):
    def __init__(self, message: str, retry_after: datetime) -> None:
        self.retry_after = retry_after
        super().__init__(message)


class SourceNotFoundError(SourceError):
    def __init__(self, message: str, resource: str) -> None:
        self.resource = resource
        super().__init__(message)


class CommitFetchError(SourceError):
    def __init__(self, message: str, resource: str, pr_number: int) -> None:
        self.resource = resource
        self.pr_number = pr_number
        super().__init__(message)
