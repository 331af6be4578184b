"""Fila de despacho: buffer FIFO limitado entre handler e workers.

- Capacidade fixa, definida na construção.
- `put` suspende o chamador enquanto a fila está cheia (backpressure);
  nunca descarta mensagens.
- `close` rejeita novos enfileiramentos; workers continuam drenando o que
  já está na fila até esvaziá-la.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.observability import record_queue_depth
from utils.errors import ConfigurationError, QueueClosedError

if TYPE_CHECKING:
    from app.protocols.models import PushMessage

logger = logging.getLogger(__name__)


class DispatchQueue:
    """Fila limitada de PushMessage com fechamento explícito.

    Args:
        capacity: Número máximo de mensagens aguardando envio (>= 1).

    Raises:
        ConfigurationError: Se capacity < 1.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ConfigurationError(f"capacidade da fila deve ser >= 1 (recebido {capacity})")
        self._capacity = capacity
        self._queue: asyncio.Queue[PushMessage] = asyncio.Queue(maxsize=capacity)
        self._closed = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def closed(self) -> bool:
        return self._closed

    def qsize(self) -> int:
        return self._queue.qsize()

    def full(self) -> bool:
        return self._queue.full()

    async def put(self, message: PushMessage) -> None:
        """Enfileira a mensagem, aguardando espaço se a fila estiver cheia.

        Raises:
            QueueClosedError: Fila fechada antes ou durante a espera.
        """
        if self._closed:
            raise QueueClosedError("fila de despacho fechada")
        try:
            await self._queue.put(message)
        except asyncio.QueueShutDown as exc:
            raise QueueClosedError("fila de despacho fechada") from exc
        record_queue_depth(self._queue.qsize(), self._capacity)

    async def get(self) -> PushMessage:
        """Remove a mensagem mais antiga, aguardando se a fila estiver vazia.

        Raises:
            QueueClosedError: Fila fechada e totalmente drenada.
        """
        try:
            return await self._queue.get()
        except asyncio.QueueShutDown as exc:
            raise QueueClosedError("fila de despacho fechada e vazia") from exc

    def task_done(self) -> None:
        self._queue.task_done()

    async def join(self) -> None:
        """Aguarda até que toda mensagem enfileirada tenha sido processada."""
        await self._queue.join()

    def close(self) -> None:
        """Rejeita novos enfileiramentos; o conteúdo atual continua disponível."""
        if self._closed:
            return
        self._closed = True
        self._queue.shutdown()
        logger.info(
            "dispatch_queue_closed",
            extra={"pending": self._queue.qsize(), "capacity": self._capacity},
        )

    def abandon(self) -> int:
        """Descarta tudo o que ainda está na fila. Retorna quantas foram descartadas."""
        self._closed = True
        abandoned = self._queue.qsize()
        self._queue.shutdown(immediate=True)
        return abandoned
