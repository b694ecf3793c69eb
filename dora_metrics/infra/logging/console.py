import logging
from typing import Any

from dora_metrics.core.ports.logger import Logger

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s [%(threadName)s]: %(message)s'


class _KeyValueFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = getattr(record, 'context', None)
        if context:
            pairs = ' '.join(
                f'{key}={value!r}' for key, value in sorted(context.items())
            )
            return f'{base} | {pairs}'
        return base


class ConsoleLogger(Logger):
    """Key=value console output; fan-out threads are named in each line."""

    def __init__(self, name: str, level: str = 'INFO') -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.getLevelName(level.upper()))
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(_KeyValueFormatter(LOG_FORMAT))
            self._logger.addHandler(handler)
        self._logger.propagate = False

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._logger.exception(message, extra={'context': kwargs})

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        self._logger.log(level, message, extra={'context': kwargs})
