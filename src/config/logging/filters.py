"""Filter de contexto dos logs do relay.

Todo record ganha `request_id` (o mesmo devolvido em X-Request-Id) e
`service`. Um token de dispositivo passado por engano em `extra` é
reduzido ao prefixo antes de sair no log.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

TOKEN_PREFIX_LENGTH = 8


class RequestIdFilter(logging.Filter):
    """Enriquece records com request_id/service; nunca descarta record.

    Args:
        service_name: Valor do campo `service`.
        request_id_getter: Fonte do request_id corrente. Sem getter, usa "".
    """

    def __init__(
        self,
        service_name: str,
        request_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._request_id_getter = request_id_getter

    def _current_request_id(self) -> str:
        if self._request_id_getter is None:
            return ""
        return self._request_id_getter()

    def filter(self, record: logging.LogRecord) -> bool:
        # request_id explícito em `extra` tem precedência sobre o contexto
        if not getattr(record, "request_id", None):
            record.request_id = self._current_request_id()
        record.service = self._service_name

        token = getattr(record, "token", None)
        if isinstance(token, str) and len(token) > TOKEN_PREFIX_LENGTH:
            record.token = token[:TOKEN_PREFIX_LENGTH]
        return True
