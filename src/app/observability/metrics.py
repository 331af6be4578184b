"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (Cloud Logging, BigQuery, etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Entrega: resultado de cada tentativa de envio ao FCM
- Fila: ocupação da fila de despacho no momento do enfileiramento
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    request_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "worker_pool", "relay")
        operation: Nome da operação (ex: "send", "enqueue")
        latency_ms: Latência em milissegundos
        request_id: ID do request para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "request_id": request_id,
        },
    )


def record_delivery(
    worker_id: int,
    success: bool,
    latency_ms: float,
    error_type: str | None = None,
) -> None:
    """Registra o resultado de uma tentativa de entrega."""
    extra: dict[str, object] = {
        "metric_type": "delivery",
        "component": "worker_pool",
        "worker_id": worker_id,
        "success": success,
        "latency_ms": round(latency_ms, 2),
    }
    if error_type:
        extra["error_type"] = error_type

    logger.info("metric_delivery", extra=extra)


def record_queue_depth(depth: int, capacity: int) -> None:
    """Registra a ocupação da fila de despacho."""
    logger.debug(
        "metric_queue_depth",
        extra={
            "metric_type": "queue_depth",
            "component": "dispatch_queue",
            "depth": depth,
            "capacity": capacity,
        },
    )
