"""Testes do RelayPushUseCase (validação → build → fila)."""

from __future__ import annotations

import base64

import pytest

from api.payload_builders.fcm import FcmMessageBuilder, encode_z85
from api.validators.webpush import WebPushRequestValidator
from app.dispatch import DispatchQueue
from app.protocols.models import IncomingRequest, Priority
from app.use_cases.webpush import RelayPushUseCase
from utils.errors import BadRequestError, QueueClosedError, UnsupportedMediaTypeError


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _request(path: str = "/relay-to/fcm/token-abc/x1", **headers: str) -> IncomingRequest:
    base_headers = {
        "Content-Encoding": "aesgcm",
        "Crypto-Key": f"dh={_b64url(b'dh-key-bytes')}",
        "Encryption": f"salt={_b64url(b'salt-bytes')}",
        "TTL": "30",
        "Urgency": "very-low",
    }
    base_headers.update(headers)
    return IncomingRequest(path=path, headers=base_headers, body=b"\xde\xad\xbe\xef\x01")


def _use_case(queue: DispatchQueue) -> RelayPushUseCase:
    return RelayPushUseCase(
        validator=WebPushRequestValidator(),
        builder=FcmMessageBuilder(),
        queue=queue,
    )


class TestRelayPushUseCase:
    @pytest.mark.asyncio
    async def test_valid_request_is_enqueued(self) -> None:
        queue = DispatchQueue(2)
        message = await _use_case(queue).execute(_request())

        assert queue.qsize() == 1
        assert await queue.get() is message
        assert message.token == "token-abc"
        assert message.data["p"] == encode_z85(b"\xde\xad\xbe\xef\x01")
        assert message.data["k"] == encode_z85(b"dh-key-bytes")
        assert message.data["s"] == encode_z85(b"salt-bytes")
        assert message.data["x"] == "x1"
        assert message.ttl == 30
        assert message.priority is Priority.NORMAL

    @pytest.mark.asyncio
    async def test_invalid_path_enqueues_nothing(self) -> None:
        queue = DispatchQueue(2)
        with pytest.raises(BadRequestError):
            await _use_case(queue).execute(_request("/relay-to/apns/token"))
        assert queue.qsize() == 0

    @pytest.mark.asyncio
    async def test_unsupported_encoding_enqueues_nothing(self) -> None:
        queue = DispatchQueue(2)
        with pytest.raises(UnsupportedMediaTypeError):
            await _use_case(queue).execute(_request(**{"Content-Encoding": "aes128gcm"}))
        assert queue.qsize() == 0

    @pytest.mark.asyncio
    async def test_closed_queue_rejects(self) -> None:
        queue = DispatchQueue(2)
        queue.close()
        with pytest.raises(QueueClosedError):
            await _use_case(queue).execute(_request())
