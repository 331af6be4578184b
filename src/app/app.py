"""Entrypoint do webpush-fcm-relay.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 42069

Uso (linha de comando):
    webpush-fcm-relay --bind 127.0.0.1:42069 \\
        --credentials-file-path /secrets/firebase.json \\
        --max-queue-size 1024 --max-workers 4
"""

from __future__ import annotations

import argparse
import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import create_delivery_client
from app.bootstrap.relay_factory import create_relay_service
from config.logging import get_logger
from config.settings import get_base_settings, get_fcm_settings, get_relay_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.services.relay_service import RelayService

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


def create_app(relay_service: RelayService | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        relay_service: Serviço já construído (testes). Se None, o lifespan
            cria o serviço com o cliente FCM configurado no ambiente.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Startup: valida settings, cria o serviço e inicia os workers.

        Shutdown: fecha a fila e drena mensagens pendentes.
        """
        service_name = get_base_settings().service_name
        logger.info("app_starting", extra={"service": service_name})
        validate_runtime_settings(require_credentials=relay_service is None)

        service = relay_service
        if service is None:
            delivery = create_delivery_client(get_fcm_settings())
            service = create_relay_service(delivery, get_relay_settings())

        app.state.relay_service = service
        service.start()

        yield

        logger.info("app_shutting_down", extra={"service": service_name})
        await service.shutdown()

    fastapi_app = FastAPI(
        title="webpush-fcm-relay",
        description="Relay de notificações WebPush criptografadas para o FCM",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_base_settings().service_name})
    return fastapi_app


def _build_arg_parser() -> argparse.ArgumentParser:
    relay = get_relay_settings()
    fcm = get_fcm_settings()
    parser = argparse.ArgumentParser(
        prog="webpush-fcm-relay",
        description="Relay de notificações WebPush para o Firebase Cloud Messaging",
    )
    parser.add_argument("--bind", default=relay.bind, help="Bind address")
    parser.add_argument(
        "--credentials-file-path",
        default=fcm.credentials_file_path,
        help="Path to the Firebase credentials file",
    )
    parser.add_argument(
        "--max-queue-size",
        type=int,
        default=relay.max_queue_size,
        help="Maximum number of messages to queue",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=relay.max_workers,
        help="Maximum number of workers",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entrypoint de linha de comando.

    Flags sobrescrevem as variáveis de ambiente equivalentes.
    """
    import uvicorn

    args = _build_arg_parser().parse_args(argv)

    if not args.credentials_file_path:
        msg = "Firebase server key not provided"
        logger.critical(msg)
        raise SystemExit(msg)

    os.environ["RELAY_BIND"] = args.bind
    os.environ["FCM_CREDENTIALS_FILE_PATH"] = args.credentials_file_path
    os.environ["RELAY_MAX_QUEUE_SIZE"] = str(args.max_queue_size)
    os.environ["RELAY_MAX_WORKERS"] = str(args.max_workers)
    get_relay_settings.cache_clear()
    get_fcm_settings.cache_clear()

    relay = get_relay_settings()
    relay_errors = relay.validate()
    if relay_errors:
        msg = "; ".join(relay_errors)
        logger.critical(msg)
        raise SystemExit(msg)

    logger.info("Starting on %s...", relay.bind)
    uvicorn.run(
        create_app(),
        host=relay.host,
        port=relay.port,
        log_config=None,
    )


# Aplicação ASGI exposta para uvicorn
app = create_app()


if __name__ == "__main__":
    main()
