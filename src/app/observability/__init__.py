"""Observabilidade: request_id em contexto e métricas via logs.

Uso:
    from app.observability import get_request_id, set_request_id
    from app.observability import record_delivery, record_latency
"""

from app.observability.metrics import (
    record_delivery,
    record_latency,
    record_queue_depth,
)
from app.observability.request_id import (
    generate_request_id,
    get_request_id,
    reset_request_id,
    set_request_id,
)

__all__ = [
    "generate_request_id",
    "get_request_id",
    "record_delivery",
    "record_latency",
    "record_queue_depth",
    "reset_request_id",
    "set_request_id",
]
