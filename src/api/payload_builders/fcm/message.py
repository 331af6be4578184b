"""Builder da PushMessage a partir do request validado."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.fcm.z85 import encode_z85
from app.protocols.models import (
    DATA_KEY_EXTRA,
    DATA_KEY_PAYLOAD,
    DATA_KEY_PUBLIC_KEY,
    DATA_KEY_SALT,
    PushMessage,
)
from config.settings.relay import DEFAULT_NOTIFICATION_TITLE

if TYPE_CHECKING:
    from app.protocols.models import ValidatedRequest


def build_push_message(
    validated: ValidatedRequest,
    encoded_payload: str,
    *,
    title: str = DEFAULT_NOTIFICATION_TITLE,
) -> PushMessage:
    """Monta a mensagem FCM. Construção pura, sem erros possíveis.

    Args:
        validated: Request já validado
        encoded_payload: Corpo criptografado, já codificado por `encode_z85`
        title: Título fixo da notificação

    Returns:
        PushMessage imutável, pronta para enfileirar
    """
    data = {DATA_KEY_PAYLOAD: encoded_payload}

    if validated.crypto_key_dh is not None:
        data[DATA_KEY_PUBLIC_KEY] = encode_z85(validated.crypto_key_dh)

    if validated.encryption_salt is not None:
        data[DATA_KEY_SALT] = encode_z85(validated.encryption_salt)

    if validated.extra:
        data[DATA_KEY_EXTRA] = validated.extra

    return PushMessage(
        token=validated.token,
        data=data,
        title=title,
        ttl=validated.ttl,
        topic=validated.topic,
        priority=validated.priority,
    )


class FcmMessageBuilder:
    """Builder de PushMessage (implementa PushMessageBuilderProtocol).

    Codifica o corpo e delega a montagem para `build_push_message`.
    """

    def __init__(self, title: str = DEFAULT_NOTIFICATION_TITLE) -> None:
        self._title = title

    def build(self, validated: ValidatedRequest, body: bytes) -> PushMessage:
        return build_push_message(validated, encode_z85(body), title=self._title)
