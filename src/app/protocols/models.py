"""Modelos do pipeline de ingestão → despacho.

Todos imutáveis: criados uma vez por request e nunca alterados.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType


class Priority(StrEnum):
    """Prioridade de entrega no backend (derivada do header Urgency)."""

    NORMAL = "normal"
    HIGH = "high"


# Chaves do mapa de dados da mensagem FCM
DATA_KEY_PAYLOAD = "p"
DATA_KEY_PUBLIC_KEY = "k"
DATA_KEY_SALT = "s"
DATA_KEY_EXTRA = "x"


@dataclass(frozen=True, slots=True)
class IncomingRequest:
    """Request WebPush recebido, como visto pelo handler.

    Headers são normalizados para minúsculas; use `header()` para leitura
    case-insensitive.
    """

    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        normalized: dict[str, str] = {}
        for name, value in self.headers.items():
            normalized.setdefault(name.lower(), value)
        object.__setattr__(self, "headers", MappingProxyType(normalized))

    def header(self, name: str) -> str:
        """Valor do header `name` ou string vazia se ausente."""
        return self.headers.get(name.lower(), "")


@dataclass(frozen=True, slots=True)
class ValidatedRequest:
    """Resultado da validação de path e headers."""

    token: str
    extra: str = ""
    crypto_key_dh: bytes | None = None
    encryption_salt: bytes | None = None
    ttl: int | None = None
    topic: str | None = None
    priority: Priority = Priority.HIGH


@dataclass(frozen=True, slots=True)
class PushMessage:
    """Mensagem pronta para o backend de push.

    Attributes:
        token: Token do dispositivo (não vazio)
        data: Dados auxiliares (p, k, s, x), somente leitura
        title: Título fixo exibido na notificação
        ttl: Tempo de vida em segundos (None = default do backend)
        topic: Collapse key (None = sem coalescência)
        priority: Prioridade de entrega
    """

    token: str
    data: Mapping[str, str]
    title: str
    ttl: int | None = None
    topic: str | None = None
    priority: Priority = Priority.HIGH

    def __post_init__(self) -> None:
        if not self.token:
            raise ValueError("token é obrigatório")
        if self.ttl is not None and self.ttl < 0:
            raise ValueError("ttl deve ser >= 0")
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    @property
    def token_prefix(self) -> str:
        """Prefixo do token, seguro para logs."""
        return self.token[:8]
