"""Construção de mensagens FCM a partir de requests WebPush."""

from api.payload_builders.fcm.message import FcmMessageBuilder, build_push_message
from api.payload_builders.fcm.z85 import Z85_ALPHABET, encode_z85, encoded_length

__all__ = [
    "Z85_ALPHABET",
    "FcmMessageBuilder",
    "build_push_message",
    "encode_z85",
    "encoded_length",
]
