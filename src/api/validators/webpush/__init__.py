"""Validadores do request WebPush recebido em /relay-to/.

Uso:
    from api.validators.webpush import WebPushRequestValidator

    validated = WebPushRequestValidator().validate(incoming)
"""

from api.validators.webpush.crypto_headers import (
    decode_base64url,
    extract_header_bytes,
    parse_key_values,
)
from api.validators.webpush.request import (
    WebPushRequestValidator,
    parse_path,
    parse_priority,
    parse_ttl,
    validate_incoming_request,
)

__all__ = [
    "WebPushRequestValidator",
    "decode_base64url",
    "extract_header_bytes",
    "parse_key_values",
    "parse_path",
    "parse_priority",
    "parse_ttl",
    "validate_incoming_request",
]
