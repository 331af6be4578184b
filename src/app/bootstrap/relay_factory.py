"""Factory de wiring do relay (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.fcm import FcmMessageBuilder
from api.validators.webpush import WebPushRequestValidator
from app.observability import generate_request_id
from app.services.relay_service import RelayService

if TYPE_CHECKING:
    from app.protocols.delivery import DeliveryCapabilityProtocol
    from app.protocols.request_id import RequestIdGeneratorProtocol
    from config.settings import RelaySettings


def create_relay_service(
    delivery: DeliveryCapabilityProtocol,
    settings: RelaySettings,
    *,
    request_id_generator: RequestIdGeneratorProtocol = generate_request_id,
) -> RelayService:
    """Cria o RelayService com validador e builder concretos injetados."""
    return RelayService(
        delivery,
        validator=WebPushRequestValidator(),
        builder=FcmMessageBuilder(settings.notification_title),
        queue_capacity=settings.max_queue_size,
        worker_count=settings.max_workers,
        request_id_generator=request_id_generator,
        drain_timeout_seconds=settings.drain_timeout_seconds,
    )
