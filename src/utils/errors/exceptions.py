"""Exceções do relay WebPush → FCM.

Hierarquia:
- RelayError: base de todas as falhas do domínio
- ValidationError: request inválido (sempre 4xx, nunca reprocessado)
- DeliveryError: falha no envio ao FCM (apenas logada, mensagem descartada)
- QueueClosedError: fila fechada durante shutdown
- ConfigurationError: configuração inválida no startup (fatal)
"""

from __future__ import annotations


class RelayError(Exception):
    """Base para erros do relay."""


class ValidationError(RelayError):
    """Request rejeitado na validação.

    Args:
        message: Mensagem pública (uma linha) devolvida ao chamador.
        detail: Causa detalhada, apenas para logs.
    """

    status_code: int = 400

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail or message


class BadRequestError(ValidationError):
    """Path ou headers malformados (HTTP 400)."""

    status_code = 400


class UnsupportedMediaTypeError(ValidationError):
    """Content-Encoding ausente ou não suportado (HTTP 415)."""

    status_code = 415


class HeaderValueError(BadRequestError):
    """Falha ao extrair `key` do header `header`."""

    def __init__(self, message: str, *, header: str, key: str, detail: str | None = None) -> None:
        super().__init__(message, detail)
        self.header = header
        self.key = key


class MissingHeaderValueError(HeaderValueError):
    """Entrada `key=value` ausente no header."""


class MalformedHeaderError(HeaderValueError):
    """Entrada sem `=` ou com chave vazia."""


class EncodingError(ValidationError):
    """Falha de decodificação base64 de um valor recebido."""


class HeaderEncodingError(EncodingError, HeaderValueError):
    """Valor base64url inválido dentro de um header de criptografia."""


class DeliveryError(RelayError):
    """Falha no envio de uma mensagem ao backend de push."""

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class QueueClosedError(RelayError):
    """Enfileiramento após o fechamento da fila de despacho."""


class ConfigurationError(RelayError):
    """Configuração inválida; impede o boot do serviço."""
