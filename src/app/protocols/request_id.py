"""Protocolo de geração de request_id (injetável para testes)."""

from __future__ import annotations

from typing import Protocol


class RequestIdGeneratorProtocol(Protocol):
    """Gera um ID único por request recebido."""

    def __call__(self) -> str: ...
