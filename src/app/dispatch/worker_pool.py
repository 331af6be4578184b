"""Pool fixo de workers que drenam a fila e chamam o backend de entrega.

Cada worker: Idle → Sending → Idle, até a fila ser fechada e drenada.
Falha de entrega é logada e a mensagem descartada (sem retry, sem requeue).
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from app.observability import record_delivery
from utils.errors import ConfigurationError, QueueClosedError

if TYPE_CHECKING:
    from app.dispatch.queue import DispatchQueue
    from app.protocols.delivery import DeliveryCapabilityProtocol
    from app.protocols.models import PushMessage

logger = logging.getLogger(__name__)


class WorkerPool:
    """Workers concorrentes consumindo a DispatchQueue.

    Args:
        queue: Fila compartilhada de mensagens
        delivery: Capacidade de entrega (ex: FirebaseDeliveryClient)
        worker_count: Quantidade fixa de workers (>= 1)

    Raises:
        ConfigurationError: Se worker_count < 1.
    """

    def __init__(
        self,
        queue: DispatchQueue,
        delivery: DeliveryCapabilityProtocol,
        worker_count: int,
    ) -> None:
        if worker_count < 1:
            raise ConfigurationError(f"quantidade de workers deve ser >= 1 (recebido {worker_count})")
        self._queue = queue
        self._delivery = delivery
        self._worker_count = worker_count
        self._tasks: list[asyncio.Task[None]] = []
        self._delivered = 0
        self._failed = 0

    @property
    def worker_count(self) -> int:
        return self._worker_count

    @property
    def running(self) -> int:
        """Workers ainda ativos."""
        return sum(1 for task in self._tasks if not task.done())

    @property
    def delivered(self) -> int:
        return self._delivered

    @property
    def failed(self) -> int:
        return self._failed

    def start(self) -> None:
        """Cria os workers no event loop corrente.

        Raises:
            RuntimeError: Se o pool já foi iniciado.
        """
        if self._tasks:
            raise RuntimeError("worker pool já iniciado")
        for worker_id in range(1, self._worker_count + 1):
            task = asyncio.create_task(self._run(worker_id), name=f"relay-worker-{worker_id}")
            self._tasks.append(task)

    async def _run(self, worker_id: int) -> None:
        logger.info("worker_started", extra={"worker_id": worker_id})
        while True:
            try:
                message = await self._queue.get()
            except QueueClosedError:
                break
            try:
                await self._deliver(worker_id, message)
            finally:
                self._queue.task_done()
        logger.info("worker_stopped", extra={"worker_id": worker_id})

    async def _deliver(self, worker_id: int, message: PushMessage) -> None:
        started_at = time.perf_counter()
        try:
            message_id = await self._delivery.send(message)
        except Exception as exc:
            self._failed += 1
            latency_ms = (time.perf_counter() - started_at) * 1000
            logger.error(
                "delivery_failed",
                extra={
                    "worker_id": worker_id,
                    "token_prefix": message.token_prefix,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
            record_delivery(worker_id, success=False, latency_ms=latency_ms, error_type=type(exc).__name__)
            return

        self._delivered += 1
        latency_ms = (time.perf_counter() - started_at) * 1000
        logger.debug(
            "delivery_succeeded",
            extra={
                "worker_id": worker_id,
                "token_prefix": message.token_prefix,
                "message_id": message_id,
            },
        )
        record_delivery(worker_id, success=True, latency_ms=latency_ms)

    async def shutdown(self, timeout_seconds: float = 30.0) -> int:
        """Fecha a fila e drena mensagens pendentes antes de parar os workers.

        Mensagens ainda na fila após o timeout são abandonadas explicitamente.

        Returns:
            Quantidade de mensagens abandonadas.
        """
        self._queue.close()
        if not self._tasks:
            return 0

        logger.info(
            "worker_pool_draining",
            extra={
                "pending_messages": self._queue.qsize(),
                "timeout_seconds": timeout_seconds,
            },
        )
        _, pending = await asyncio.wait(self._tasks, timeout=timeout_seconds)
        if not pending:
            logger.info("worker_pool_drained", extra={"delivered": self._delivered, "failed": self._failed})
            return 0

        abandoned = self._queue.abandon()
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        logger.warning(
            "worker_pool_drain_timeout",
            extra={
                "abandoned_messages": abandoned,
                "cancelled_workers": len(pending),
            },
        )
        return abandoned
