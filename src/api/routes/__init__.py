"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (relay, health)
- Conversão do request HTTP para IncomingRequest
- Delegação para use_cases
- Respostas HTTP apropriadas (status, X-Request-Id)

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
