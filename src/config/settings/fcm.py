"""Settings do Firebase Cloud Messaging."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class FcmSettings:
    """Configurações do cliente FCM (firebase-admin).

    Attributes:
        credentials_file_path: Caminho do JSON da service account
        project_id: Projeto Firebase (opcional; inferido das credenciais)
        dry_run: Valida mensagens no FCM sem entregá-las
    """

    credentials_file_path: str = ""
    project_id: str = ""
    dry_run: bool = False

    def validate(self) -> list[str]:
        """Valida configurações mínimas do FCM."""
        errors: list[str] = []

        if not self.credentials_file_path:
            errors.append("FCM_CREDENTIALS_FILE_PATH não configurado")
        elif not os.path.isfile(self.credentials_file_path):
            errors.append(
                f"FCM_CREDENTIALS_FILE_PATH não encontrado: {self.credentials_file_path}"
            )

        return errors


def _load_from_env() -> FcmSettings:
    """Carrega FcmSettings a partir de variáveis de ambiente."""
    return FcmSettings(
        credentials_file_path=os.getenv(
            "FCM_CREDENTIALS_FILE_PATH", os.getenv("GOOGLE_APPLICATION_CREDENTIALS", "")
        ),
        project_id=os.getenv("FCM_PROJECT_ID", ""),
        dry_run=os.getenv("FCM_DRY_RUN", "").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_fcm_settings() -> FcmSettings:
    """Retorna instância cacheada de FcmSettings."""
    return _load_from_env()
