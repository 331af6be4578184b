"""Codificação binário → texto com alfabeto de 85 caracteres.

Variante do Z85 com ordem de alfabeto própria (dígitos, minúsculas,
maiúsculas e símbolos). Não é compatível com implementações Z85 padrão.
Só existe o sentido de codificação: o relay nunca decodifica.

Regras:
- Blocos de 4 bytes (big-endian) viram 5 caracteres, dígito mais
  significativo primeiro.
- Resto de 1 a 3 bytes (big-endian) vira `resto + 1` caracteres.
- Tamanho da saída: 5 * (n // 4) + (n % 4 + 1 se n % 4 else 0).
"""

from __future__ import annotations

Z85_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ.-:+=^!/*?&<>()[]{}@%$#"

_BASE = len(Z85_ALPHABET)
_BLOCK_SIZE = 4


def encoded_length(size: int) -> int:
    """Tamanho da saída de `encode_z85` para uma entrada de `size` bytes."""
    blocks, remainder = divmod(size, _BLOCK_SIZE)
    return blocks * 5 + (remainder + 1 if remainder else 0)


def _encode_value(value: int, width: int) -> list[str]:
    digits = [""] * width
    for i in range(width):
        value, digit = divmod(value, _BASE)
        digits[width - 1 - i] = Z85_ALPHABET[digit]
    return digits


def encode_z85(data: bytes) -> str:
    """Codifica `data` no alfabeto de 85 caracteres.

    Args:
        data: Bytes arbitrários (ex: payload criptografado).

    Returns:
        Texto determinístico; string vazia para entrada vazia.
    """
    blocks, remainder = divmod(len(data), _BLOCK_SIZE)
    out: list[str] = []

    for block in range(blocks):
        start = block * _BLOCK_SIZE
        value = int.from_bytes(data[start : start + _BLOCK_SIZE], "big")
        out.extend(_encode_value(value, 5))

    if remainder:
        value = 0
        for byte in data[blocks * _BLOCK_SIZE :]:
            value = (value << 8) | byte
        out.extend(_encode_value(value, remainder + 1))

    return "".join(out)
