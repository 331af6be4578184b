"""Serviço do relay: estado de processo compartilhado, construído uma vez.

Agrupa fila de despacho, pool de workers, capacidade de entrega e gerador
de request_id. É criado no startup e injetado no handler HTTP (via
app.state) e no pool; não há variáveis globais.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.dispatch import DispatchQueue, WorkerPool
from app.observability import generate_request_id
from app.use_cases.webpush import RelayPushUseCase
from config.settings.relay import DEFAULT_DRAIN_TIMEOUT_SECONDS

if TYPE_CHECKING:
    from app.protocols.delivery import DeliveryCapabilityProtocol
    from app.protocols.payload_builder import PushMessageBuilderProtocol
    from app.protocols.request_id import RequestIdGeneratorProtocol
    from app.protocols.validator import IncomingRequestValidatorProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RelaySnapshot:
    """Estado observável do serviço (readiness)."""

    accepting: bool
    queue_depth: int
    queue_capacity: int
    workers_running: int
    workers_total: int
    delivered: int
    failed: int

    def as_dict(self) -> dict[str, Any]:
        return {
            "accepting": self.accepting,
            "queue_depth": self.queue_depth,
            "queue_capacity": self.queue_capacity,
            "workers_running": self.workers_running,
            "workers_total": self.workers_total,
            "delivered": self.delivered,
            "failed": self.failed,
        }


class RelayService:
    """Ciclo de vida do pipeline: start → (requests) → shutdown com drenagem.

    Args:
        delivery: Capacidade de entrega (ex: FirebaseDeliveryClient)
        validator: Validador do request recebido
        builder: Builder da PushMessage
        queue_capacity: Capacidade fixa da fila
        worker_count: Quantidade fixa de workers
        request_id_generator: Gerador de IDs de request (default UUID4)
        drain_timeout_seconds: Timeout padrão de drenagem no shutdown
    """

    def __init__(
        self,
        delivery: DeliveryCapabilityProtocol,
        *,
        validator: IncomingRequestValidatorProtocol,
        builder: PushMessageBuilderProtocol,
        queue_capacity: int,
        worker_count: int,
        request_id_generator: RequestIdGeneratorProtocol = generate_request_id,
        drain_timeout_seconds: float = DEFAULT_DRAIN_TIMEOUT_SECONDS,
    ) -> None:
        self.queue = DispatchQueue(queue_capacity)
        self.pool = WorkerPool(self.queue, delivery, worker_count)
        self.request_id_generator = request_id_generator
        self._drain_timeout_seconds = drain_timeout_seconds

        self.use_case = RelayPushUseCase(
            validator=validator,
            builder=builder,
            queue=self.queue,
        )

    def start(self) -> None:
        """Inicia os workers no event loop corrente."""
        self.pool.start()
        logger.info(
            "relay_service_started",
            extra={
                "queue_capacity": self.queue.capacity,
                "workers": self.pool.worker_count,
            },
        )

    async def shutdown(self, timeout_seconds: float | None = None) -> int:
        """Fecha a fila e drena as mensagens pendentes.

        Returns:
            Quantidade de mensagens abandonadas por timeout.
        """
        timeout = self._drain_timeout_seconds if timeout_seconds is None else timeout_seconds
        abandoned = await self.pool.shutdown(timeout)
        logger.info(
            "relay_service_stopped",
            extra={
                "delivered": self.pool.delivered,
                "failed": self.pool.failed,
                "abandoned": abandoned,
            },
        )
        return abandoned

    @property
    def ready(self) -> bool:
        return not self.queue.closed and self.pool.running == self.pool.worker_count

    def snapshot(self) -> RelaySnapshot:
        return RelaySnapshot(
            accepting=not self.queue.closed,
            queue_depth=self.queue.qsize(),
            queue_capacity=self.queue.capacity,
            workers_running=self.pool.running,
            workers_total=self.pool.worker_count,
            delivered=self.pool.delivered,
            failed=self.pool.failed,
        )

