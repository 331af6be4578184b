"""Agregador de settings do relay.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.fcm import FcmSettings, get_fcm_settings
from config.settings.relay import (
    DEFAULT_BIND,
    DEFAULT_MAX_QUEUE_SIZE,
    DEFAULT_MAX_WORKERS,
    DEFAULT_NOTIFICATION_TITLE,
    RelaySettings,
    get_relay_settings,
)

__all__ = [
    "DEFAULT_BIND",
    "DEFAULT_MAX_QUEUE_SIZE",
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_NOTIFICATION_TITLE",
    "DEFAULT_SERVICE_NAME",
    "BaseSettings",
    "Environment",
    "FcmSettings",
    "RelaySettings",
    "get_base_settings",
    "get_fcm_settings",
    "get_relay_settings",
]
