"""Protocolos e contratos do core da aplicação."""

from .delivery import DeliveryCapabilityProtocol
from .models import (
    DATA_KEY_EXTRA,
    DATA_KEY_PAYLOAD,
    DATA_KEY_PUBLIC_KEY,
    DATA_KEY_SALT,
    IncomingRequest,
    Priority,
    PushMessage,
    ValidatedRequest,
)
from .payload_builder import PushMessageBuilderProtocol
from .request_id import RequestIdGeneratorProtocol
from .validator import IncomingRequestValidatorProtocol

__all__ = [
    "DATA_KEY_EXTRA",
    "DATA_KEY_PAYLOAD",
    "DATA_KEY_PUBLIC_KEY",
    "DATA_KEY_SALT",
    "DeliveryCapabilityProtocol",
    "IncomingRequest",
    "IncomingRequestValidatorProtocol",
    "Priority",
    "PushMessage",
    "PushMessageBuilderProtocol",
    "RequestIdGeneratorProtocol",
    "ValidatedRequest",
]
