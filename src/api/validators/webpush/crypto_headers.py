"""Parse dos headers de criptografia aesgcm (Crypto-Key, Encryption).

Formato: lista de entradas `chave=valor` separadas por `;`, por exemplo
`dh=BNoRDbb84JGm...;p256ecdsa=BDd3_hVL9fZi...`.

Entradas vazias são ignoradas. Cada entrada é dividida apenas no primeiro
`=` (valores base64 podem conter padding). Entrada sem `=` ou com chave vazia
é rejeitada.
"""

from __future__ import annotations

import base64
import binascii
import re

from utils.errors import (
    HeaderEncodingError,
    MalformedHeaderError,
    MissingHeaderValueError,
)

_BASE64URL_RE = re.compile(r"^[A-Za-z0-9_-]*={0,2}$")


def parse_key_values(value: str, *, header: str, message: str) -> dict[str, str]:
    """Converte `a=1;b=2` em `{"a": "1", "b": "2"}`.

    Args:
        value: Valor bruto do header.
        header: Nome do header (para mensagens de erro).
        message: Mensagem pública usada se a entrada estiver malformada.

    Raises:
        MalformedHeaderError: Entrada sem `=` ou com chave vazia.
    """
    entries: dict[str, str] = {}
    for raw_entry in value.split(";"):
        entry = raw_entry.strip()
        if not entry:
            continue

        key, sep, entry_value = entry.partition("=")
        key = key.strip()
        if not sep or not key:
            raise MalformedHeaderError(
                message,
                header=header,
                key=key,
                detail=f"malformed entry {entry!r} in header {header}",
            )
        entries[key] = entry_value.strip()
    return entries


def decode_base64url(value: str) -> bytes:
    """Decodifica base64url sem padding (padding opcional é tolerado).

    Raises:
        binascii.Error: Valor fora do alfabeto base64url ou tamanho inválido.
    """
    if not _BASE64URL_RE.match(value):
        raise binascii.Error("invalid base64url alphabet")
    stripped = value.rstrip("=")
    padding = "=" * (-len(stripped) % 4)
    return base64.urlsafe_b64decode(stripped + padding)


def extract_header_bytes(header_value: str, *, header: str, key: str, message: str) -> bytes:
    """Localiza `key` no header e devolve seu valor base64url decodificado.

    Args:
        header_value: Valor bruto do header (ex: "dh=...;p256ecdsa=...").
        header: Nome do header (ex: "Crypto-Key").
        key: Chave procurada (ex: "dh").
        message: Mensagem pública de erro para o chamador.

    Raises:
        MissingHeaderValueError: Header ausente ou sem a chave.
        MalformedHeaderError: Entrada malformada.
        HeaderEncodingError: Valor não é base64url válido.
    """
    entries = parse_key_values(header_value, header=header, message=message)
    if key not in entries:
        raise MissingHeaderValueError(
            message,
            header=header,
            key=key,
            detail=f"value {key} not found in header {header}",
        )

    try:
        return decode_base64url(entries[key])
    except (binascii.Error, ValueError) as exc:
        raise HeaderEncodingError(
            message,
            header=header,
            key=key,
            detail=f"invalid base64url for {key} in header {header}: {exc}",
        ) from exc
