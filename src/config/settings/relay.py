"""Settings do relay: bind HTTP, fila de despacho e pool de workers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_BIND: str = "127.0.0.1:42069"
DEFAULT_MAX_QUEUE_SIZE: int = 1024
DEFAULT_MAX_WORKERS: int = 4
DEFAULT_DRAIN_TIMEOUT_SECONDS: float = 30.0
DEFAULT_NOTIFICATION_TITLE: str = "🎺"


@dataclass(frozen=True)
class RelaySettings:
    """Configurações do pipeline de ingestão e despacho.

    Attributes:
        bind: Endereço host:porta do listener HTTP
        max_queue_size: Capacidade fixa da fila de despacho
        max_workers: Quantidade fixa de workers de envio
        drain_timeout_seconds: Tempo máximo de drenagem no shutdown
        notification_title: Título exibido na notificação Android
    """

    bind: str = DEFAULT_BIND
    max_queue_size: int = DEFAULT_MAX_QUEUE_SIZE
    max_workers: int = DEFAULT_MAX_WORKERS
    drain_timeout_seconds: float = DEFAULT_DRAIN_TIMEOUT_SECONDS
    notification_title: str = DEFAULT_NOTIFICATION_TITLE

    @property
    def host(self) -> str:
        """Host do bind (antes do último `:`, sem colchetes IPv6)."""
        host, _, _ = self.bind.rpartition(":")
        return host.strip("[]") or "0.0.0.0"

    @property
    def port(self) -> int:
        """Porta do bind (após o último `:`)."""
        _, _, port = self.bind.rpartition(":")
        return int(port)

    def validate(self) -> list[str]:
        """Valida configurações do relay.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        _, sep, port = self.bind.rpartition(":")
        if not sep or not port.isdigit():
            errors.append(f"RELAY_BIND inválido: {self.bind!r} (esperado host:porta)")

        if self.max_queue_size < 1:
            errors.append("RELAY_MAX_QUEUE_SIZE deve ser >= 1")

        if self.max_workers < 1:
            errors.append("RELAY_MAX_WORKERS deve ser >= 1")

        if self.drain_timeout_seconds < 0:
            errors.append("RELAY_DRAIN_TIMEOUT_SECONDS deve ser >= 0")

        return errors


def _load_from_env() -> RelaySettings:
    """Carrega RelaySettings a partir de variáveis de ambiente."""
    return RelaySettings(
        bind=os.getenv("RELAY_BIND", DEFAULT_BIND),
        max_queue_size=int(os.getenv("RELAY_MAX_QUEUE_SIZE", str(DEFAULT_MAX_QUEUE_SIZE))),
        max_workers=int(os.getenv("RELAY_MAX_WORKERS", str(DEFAULT_MAX_WORKERS))),
        drain_timeout_seconds=float(
            os.getenv("RELAY_DRAIN_TIMEOUT_SECONDS", str(DEFAULT_DRAIN_TIMEOUT_SECONDS))
        ),
        notification_title=os.getenv("RELAY_NOTIFICATION_TITLE", DEFAULT_NOTIFICATION_TITLE),
    )


@lru_cache(maxsize=1)
def get_relay_settings() -> RelaySettings:
    """Retorna instância cacheada de RelaySettings."""
    return _load_from_env()
