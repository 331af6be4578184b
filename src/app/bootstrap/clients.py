"""Factories de clientes externos — Firebase Admin / FCM."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from firebase_admin import App

    from app.infra.fcm import FirebaseDeliveryClient
    from config.settings import FcmSettings

logger = logging.getLogger(__name__)

FIREBASE_APP_NAME = "webpush-fcm-relay"


def create_firebase_app(settings: FcmSettings) -> App:
    """Inicializa o app firebase-admin a partir da service account.

    Raises:
        ConfigurationError: Credenciais ausentes ou inválidas.
    """
    import firebase_admin
    from firebase_admin import credentials

    if not settings.credentials_file_path:
        raise ConfigurationError("Firebase credentials file not provided")

    try:
        return firebase_admin.get_app(FIREBASE_APP_NAME)
    except ValueError:
        pass

    try:
        credential = credentials.Certificate(settings.credentials_file_path)
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Error setting up FCM client: {exc}") from exc

    options = {"projectId": settings.project_id} if settings.project_id else None
    app = firebase_admin.initialize_app(credential, options=options, name=FIREBASE_APP_NAME)
    logger.info(
        "firebase_app_created",
        extra={"project": settings.project_id or credential.project_id},
    )
    return app


def create_delivery_client(settings: FcmSettings) -> FirebaseDeliveryClient:
    """Cria a capacidade de entrega FCM."""
    from app.infra.fcm import FirebaseDeliveryClient

    app = create_firebase_app(settings)
    return FirebaseDeliveryClient(app, dry_run=settings.dry_run)
