"""Protocolo da capacidade de entrega (backend de push)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import PushMessage


class DeliveryCapabilityProtocol(Protocol):
    """Contrato mínimo para enviar uma PushMessage.

    Implementações fazem seu próprio IO, autenticação e serialização.
    Qualquer exceção é terminal para a mensagem.
    """

    async def send(self, message: PushMessage) -> str: ...
