"""Protocolos de validação do request WebPush recebido."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import IncomingRequest, ValidatedRequest


class IncomingRequestValidatorProtocol(Protocol):
    """Contrato mínimo para validar path e headers.

    Levanta `utils.errors.ValidationError` (ou subclasse) em caso de falha.
    """

    def validate(self, request: IncomingRequest) -> ValidatedRequest: ...
