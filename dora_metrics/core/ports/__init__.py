from dora_metrics.core.ports.clock import Clock
from dora_metrics.core.ports.event_source import EventSource
from dora_metrics.core.ports.logger import Logger

__all__ = [
    "Logger",
    "Clock",
    "EventSource",
]
