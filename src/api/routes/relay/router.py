"""Endpoint de relay WebPush → FCM.

Endpoint:
- POST /relay-to/fcm/{token}[/{extra...}]: recebe o corpo WebPush
  criptografado (aesgcm) e enfileira a mensagem para o FCM.

Fluxo:
1. Gera request_id (devolvido em X-Request-Id em toda resposta)
2. Valida path e headers, codifica o corpo, monta a mensagem
3. Enfileira (pode aguardar se a fila estiver cheia) e responde 201

A entrega acontece depois, nos workers; seu resultado não chega ao chamador.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status

from app.observability import record_latency, reset_request_id, set_request_id
from app.protocols.models import IncomingRequest
from utils.errors import QueueClosedError, ValidationError

if TYPE_CHECKING:
    from app.services.relay_service import RelayService

logger = logging.getLogger(__name__)

router = APIRouter()

REQUEST_ID_HEADER = "X-Request-Id"


def get_relay_service(request: Request) -> RelayService:
    """Obtém o RelayService criado no lifespan."""
    return request.app.state.relay_service


def _plain_error(message: str, status_code: int, request_id: str) -> Response:
    return Response(
        content=f"{message}\n",
        media_type="text/plain",
        status_code=status_code,
        headers={REQUEST_ID_HEADER: request_id},
    )


@router.post("/relay-to/{target:path}", response_model=None)
async def relay_to(request: Request) -> Response:
    """Recebe um push WebPush criptografado e o enfileira para o FCM.

    Returns:
        201 vazio em caso de sucesso; 400/415 em texto puro se inválido;
        503 se o serviço estiver em shutdown.
    """
    service = get_relay_service(request)
    request_id = service.request_id_generator()
    token = set_request_id(request_id)
    started_at = time.perf_counter()

    try:
        # scope["path"] já decodificado; %3F e %23 continuam no token/extra
        incoming = IncomingRequest(
            path=request.scope["path"],
            headers=request.headers,
            body=await request.body(),
        )

        try:
            await service.use_case.execute(incoming)
        except ValidationError as exc:
            logger.error(
                "relay_rejected",
                extra={
                    "status_code": exc.status_code,
                    "error_type": type(exc).__name__,
                    "error": exc.detail,
                },
            )
            return _plain_error(exc.message, exc.status_code, request_id)
        except QueueClosedError:
            logger.warning("relay_rejected_shutting_down")
            return _plain_error(
                "Service shutting down", status.HTTP_503_SERVICE_UNAVAILABLE, request_id
            )

        record_latency(
            "relay",
            "enqueue",
            (time.perf_counter() - started_at) * 1000,
            request_id,
        )
        return Response(
            status_code=status.HTTP_201_CREATED,
            headers={REQUEST_ID_HEADER: request_id},
        )
    finally:
        reset_request_id(token)
