from dora_metrics.infra.clock.system import SystemClock

__all__ = ["SystemClock"]
