"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="webpush_fcm_relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("relay_queued", extra={"priority": "high"})

Campos obrigatórios em todo log:
- request_id
- service
- level
- logger
- message
- asctime

Nunca logar payloads criptografados nem tokens completos de dispositivo.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import RequestIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "RequestIdFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
