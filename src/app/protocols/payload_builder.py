"""Protocolos de construção da mensagem de push."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import PushMessage, ValidatedRequest


class PushMessageBuilderProtocol(Protocol):
    """Contrato mínimo para construir a mensagem a partir do request validado."""

    def build(self, validated: ValidatedRequest, body: bytes) -> PushMessage: ...
