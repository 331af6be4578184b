"""Validação do request WebPush: path, Content-Encoding e headers aesgcm.

Path esperado: /relay-to/fcm/{token}[/{extra...}]
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from api.validators.webpush.crypto_headers import extract_header_bytes
from app.protocols.models import Priority, ValidatedRequest
from config.logging import log_fallback
from utils.errors import BadRequestError, UnsupportedMediaTypeError

if TYPE_CHECKING:
    from app.protocols.models import IncomingRequest

logger = logging.getLogger(__name__)

TARGET_ENVIRONMENT = "fcm"
SUPPORTED_CONTENT_ENCODING = "aesgcm"
LOW_URGENCIES = frozenset({"very-low", "low"})
_TTL_RE = re.compile(r"^[+-]?[0-9]+$")
# TTL máximo aceito pelo FCM (28 dias)
MAX_TTL_SECONDS = 2_419_200

MSG_INVALID_PATH = "Invalid URL path"
MSG_INVALID_ENVIRONMENT = "Invalid target environment"
MSG_MISSING_TOKEN = "Missing device token"
MSG_UNSUPPORTED_ENCODING = "Unsupported content encoding"
MSG_PUBLIC_KEY = "Error retrieving public key"
MSG_SALT = "Error retrieving salt"


def parse_path(path: str) -> tuple[str, str]:
    """Extrai (token, extra) do path.

    Raises:
        BadRequestError: Path curto, ambiente diferente de fcm ou token vazio.
    """
    components = path.split("/")

    if len(components) < 4:
        raise BadRequestError(MSG_INVALID_PATH, f"Invalid URL path: {path}")

    if components[2] != TARGET_ENVIRONMENT:
        raise BadRequestError(
            MSG_INVALID_ENVIRONMENT, f"Invalid target environment: {components[2]}"
        )

    token = components[3]
    if not token:
        raise BadRequestError(MSG_MISSING_TOKEN)

    extra = "/".join(components[4:]) if len(components) > 4 else ""
    return token, extra


def parse_ttl(value: str) -> int | None:
    """Converte o header TTL em segundos.

    Valor inválido, negativo ou acima de MAX_TTL_SECONDS cai no default do
    backend (None), sem erro.
    """
    if not value:
        return None
    stripped = value.strip()
    if not _TTL_RE.match(stripped):
        log_fallback(logger, "ttl", reason="not_an_integer")
        return None
    # Sem sinal e sem zeros à esquerda: int() rejeita strings enormes
    digits = stripped.lstrip("+-").lstrip("0")
    if stripped.startswith("-") and digits:
        log_fallback(logger, "ttl", reason="negative")
        return None
    if len(digits) > len(str(MAX_TTL_SECONDS)) or int(digits or "0") > MAX_TTL_SECONDS:
        log_fallback(logger, "ttl", reason="above_maximum")
        return None
    return int(digits or "0")


def parse_priority(urgency: str) -> Priority:
    """very-low/low → normal; qualquer outro valor (ou ausente) → high."""
    if urgency in LOW_URGENCIES:
        return Priority.NORMAL
    return Priority.HIGH


def validate_incoming_request(request: IncomingRequest) -> ValidatedRequest:
    """Valida path e headers e devolve a estrutura tipada.

    Raises:
        BadRequestError: Path inválido ou headers de criptografia ausentes/malformados.
        UnsupportedMediaTypeError: Content-Encoding diferente de aesgcm.
    """
    token, extra = parse_path(request.path)

    content_encoding = request.header("Content-Encoding")
    if content_encoding != SUPPORTED_CONTENT_ENCODING:
        raise UnsupportedMediaTypeError(
            MSG_UNSUPPORTED_ENCODING,
            f"Unsupported content encoding: {content_encoding}",
        )

    crypto_key_dh = extract_header_bytes(
        request.header("Crypto-Key"), header="Crypto-Key", key="dh", message=MSG_PUBLIC_KEY
    )
    encryption_salt = extract_header_bytes(
        request.header("Encryption"), header="Encryption", key="salt", message=MSG_SALT
    )

    topic = request.header("Topic")

    return ValidatedRequest(
        token=token,
        extra=extra,
        crypto_key_dh=crypto_key_dh,
        encryption_salt=encryption_salt,
        ttl=parse_ttl(request.header("TTL")),
        topic=topic or None,
        priority=parse_priority(request.header("Urgency")),
    )


class WebPushRequestValidator:
    """Validador de requests WebPush (implementa IncomingRequestValidatorProtocol)."""

    def validate(self, request: IncomingRequest) -> ValidatedRequest:
        return validate_incoming_request(request)
