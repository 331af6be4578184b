"""Use case de ingestão: valida, codifica, monta e enfileira."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.dispatch.queue import DispatchQueue
    from app.protocols.models import IncomingRequest, PushMessage
    from app.protocols.payload_builder import PushMessageBuilderProtocol
    from app.protocols.validator import IncomingRequestValidatorProtocol

logger = logging.getLogger(__name__)


class RelayPushUseCase:
    """Orquestra validação → codificação/build → enfileiramento.

    Roda inteiro no contexto do request; retorna assim que a mensagem
    entra na fila. A entrega acontece depois, nos workers.
    """

    def __init__(
        self,
        validator: IncomingRequestValidatorProtocol,
        builder: PushMessageBuilderProtocol,
        queue: DispatchQueue,
    ) -> None:
        self._validator = validator
        self._builder = builder
        self._queue = queue

    async def execute(self, request: IncomingRequest) -> PushMessage:
        """Processa um request WebPush até a fila de despacho.

        Raises:
            ValidationError: Request inválido; nada é enfileirado.
            QueueClosedError: Serviço em shutdown.
        """
        validated = self._validator.validate(request)
        message = self._builder.build(validated, request.body)

        # Suspende aqui enquanto a fila estiver cheia
        await self._queue.put(message)

        logger.info(
            "relay_queued",
            extra={
                "token_prefix": message.token_prefix,
                "priority": message.priority.value,
                "ttl": message.ttl,
                "collapse_key": message.topic,
                "payload_size": len(request.body),
            },
        )
        return message
