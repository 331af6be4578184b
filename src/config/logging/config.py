"""Configuração do logging JSON do relay.

Um único handler no root logger; loggers do uvicorn propagam para ele,
de modo que access log, erros do servidor e eventos do pipeline saem no
mesmo formato JSON com `request_id` e `service`.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="webpush_fcm_relay")

    logger = get_logger(__name__)
    logger.info("worker_started", extra={"worker_id": 1})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import RequestIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "webpush_fcm_relay"

# Loggers do servidor ASGI redirecionados para o handler JSON
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _build_handler(
    level: str,
    service_name: str,
    request_id_getter: Callable[[], str] | None,
) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(RequestIdFilter(service_name, request_id_getter))
    return handler


def _route_uvicorn_loggers(level: str) -> None:
    for name in UVICORN_LOGGERS:
        uv_logger = logging.getLogger(name)
        uv_logger.handlers = []
        uv_logger.propagate = True
        uv_logger.setLevel(level)


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    request_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala o handler JSON no root logger.

    Chamada uma vez no bootstrap; chamadas seguintes substituem o handler
    anterior (sem duplicar saída).

    Args:
        level: Nível de log (case-insensitive).
        service_name: Valor do campo `service` em todo record.
        request_id_getter: Fonte do `request_id` corrente (ContextVar do
            request HTTP). Sem getter, o campo sai vazio.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [_build_handler(level_upper, service_name, request_id_getter)]

    _route_uvicorn_loggers(level_upper)


def get_logger(name: str) -> logging.Logger:
    """Logger do módulo; `service` e `request_id` vêm do filter do handler."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
) -> None:
    """Registra que um valor opcional inválido foi trocado pelo default.

    Não é erro: o request segue normalmente (ex: header TTL não numérico
    vira o TTL default do backend).

    Args:
        logger: Logger do módulo que aplicou o fallback.
        component: Campo afetado (ex: "ttl").
        reason: Motivo curto (ex: "not_an_integer").
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason

    logger.debug("Fallback applied for %s", component, extra=extra)
