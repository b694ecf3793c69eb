from dataclasses import asdict
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Iterable, Tuple

from dora_metrics.core.schema.metrics import DoraMetrics


def to_payload(metrics: DoraMetrics) -> Dict[str, Any]:
    """Render metrics as JSON-compatible builtins."""
    return asdict(metrics, dict_factory=_json_dict)


def _json_dict(fields: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    return {key: _json_value(value) for key, value in fields}


def _json_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_json_value(item) for item in value]
    return value
