"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from app.observability import get_request_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_fcm_settings,
    get_relay_settings,
)
from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON estruturado com request_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        request_id_getter=get_request_id,
    )


def validate_runtime_settings(*, require_credentials: bool = True) -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local, exceto
    para erros da fila/pool, que sempre impedem o boot.

    Args:
        require_credentials: Valida credenciais FCM (False quando a
            capacidade de entrega é injetada).

    Raises:
        ConfigurationError: Configuração inválida.
    """
    base = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())

    relay_errors = get_relay_settings().validate()
    errors.extend(f"relay: {error}" for error in relay_errors)

    if require_credentials:
        errors.extend(f"fcm: {error}" for error in get_fcm_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict or relay_errors:
        details = "\n".join(f"- {error}" for error in errors)
        raise ConfigurationError(f"Configuração inválida para {base.environment}:\n{details}")
