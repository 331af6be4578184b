"""Entrega de PushMessage via Firebase Cloud Messaging (firebase-admin).

O SDK firebase-admin é síncrono; cada envio roda em `asyncio.to_thread`
para não bloquear o event loop e permitir envios paralelos entre workers.

Mapeamento:
- data (p, k, s, x), título, ttl, collapse_key e priority → AndroidConfig
- APNs: content-available + mutable-content para a extensão de serviço iOS
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from firebase_admin import exceptions as firebase_exceptions
from firebase_admin import messaging

from utils.errors import DeliveryError

if TYPE_CHECKING:
    from collections.abc import Callable

    from firebase_admin import App

    from app.protocols.models import PushMessage

logger = logging.getLogger(__name__)


def to_fcm_message(message: PushMessage) -> messaging.Message:
    """Converte a PushMessage interna no modelo do SDK firebase-admin."""
    return messaging.Message(
        fid=message.token,
        android=messaging.AndroidConfig(
            data=dict(message.data),
            notification=messaging.AndroidNotification(title=message.title),
            ttl=message.ttl,
            collapse_key=message.topic,
            priority=message.priority.value,
        ),
        apns=messaging.APNSConfig(
            payload=messaging.APNSPayload(
                aps=messaging.Aps(content_available=True, mutable_content=True),
            ),
        ),
    )


class FirebaseDeliveryClient:
    """Capacidade de entrega FCM (implementa DeliveryCapabilityProtocol).

    Args:
        app: App firebase-admin inicializado (None = app default)
        dry_run: Valida a mensagem no FCM sem entregá-la
        send_fn: Função de envio (injetável em testes; default messaging.send)
    """

    def __init__(
        self,
        app: App | None = None,
        *,
        dry_run: bool = False,
        send_fn: Callable[..., str] | None = None,
    ) -> None:
        self._app = app
        self._dry_run = dry_run
        self._send_fn = send_fn or messaging.send

    def _send_sync(self, fcm_message: messaging.Message) -> str:
        kwargs: dict[str, Any] = {"dry_run": self._dry_run}
        if self._app is not None:
            kwargs["app"] = self._app
        return self._send_fn(fcm_message, **kwargs)

    async def send(self, message: PushMessage) -> str:
        """Envia a mensagem ao FCM.

        Returns:
            ID da mensagem atribuído pelo FCM.

        Raises:
            DeliveryError: Qualquer falha do SDK ou do FCM.
        """
        try:
            # O SDK valida os campos (ex: ttl) ao montar e ao serializar
            fcm_message = to_fcm_message(message)
            return await asyncio.to_thread(self._send_sync, fcm_message)
        except firebase_exceptions.FirebaseError as exc:
            raise DeliveryError(f"error sending fcm message: {exc}", code=exc.code) from exc
        except (ValueError, TypeError, OverflowError, OSError) as exc:
            raise DeliveryError(f"error sending fcm message: {exc}") from exc
