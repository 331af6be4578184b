"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.relay_service import RelayService, RelaySnapshot

__all__ = [
    "RelayService",
    "RelaySnapshot",
]
