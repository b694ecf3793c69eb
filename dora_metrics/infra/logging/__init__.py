from dora_metrics.infra.logging.console import ConsoleLogger
from dora_metrics.infra.logging.logfire import LogfireLogger, configure_logfire

__all__ = ["ConsoleLogger", "LogfireLogger", "configure_logfire"]
