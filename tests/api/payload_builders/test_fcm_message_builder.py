"""Testes do builder de PushMessage."""

from __future__ import annotations

import pytest

from api.payload_builders.fcm import FcmMessageBuilder, build_push_message, encode_z85
from app.protocols.models import Priority, PushMessage, ValidatedRequest


def _validated(**overrides: object) -> ValidatedRequest:
    fields: dict[str, object] = {
        "token": "device-token-123",
        "extra": "",
        "crypto_key_dh": b"\x04\x01\x02\x03\x04",
        "encryption_salt": b"\x10\x20\x30\x40",
        "ttl": None,
        "topic": None,
        "priority": Priority.HIGH,
    }
    fields.update(overrides)
    return ValidatedRequest(**fields)  # type: ignore[arg-type]


class TestBuildPushMessage:
    def test_maps_payload_key_and_salt(self) -> None:
        """p, k e s são preenchidos com valores codificados."""
        validated = _validated()
        message = build_push_message(validated, "encoded-body")

        assert message.token == "device-token-123"
        assert message.data["p"] == "encoded-body"
        assert message.data["k"] == encode_z85(b"\x04\x01\x02\x03\x04")
        assert message.data["s"] == encode_z85(b"\x10\x20\x30\x40")
        assert "x" not in message.data

    def test_extra_is_forwarded_verbatim(self) -> None:
        message = build_push_message(_validated(extra="account/42"), "p")
        assert message.data["x"] == "account/42"

    def test_optional_crypto_fields_are_omitted(self) -> None:
        message = build_push_message(
            _validated(crypto_key_dh=None, encryption_salt=None), "p"
        )
        assert dict(message.data) == {"p": "p"}

    def test_ttl_topic_and_priority(self) -> None:
        message = build_push_message(
            _validated(ttl=3600, topic="inbox", priority=Priority.NORMAL), "p"
        )
        assert message.ttl == 3600
        assert message.topic == "inbox"
        assert message.priority is Priority.NORMAL

    def test_default_title_is_trumpet(self) -> None:
        message = build_push_message(_validated(), "p")
        assert message.title == "🎺"

    def test_custom_title(self) -> None:
        message = build_push_message(_validated(), "p", title="Nova mensagem")
        assert message.title == "Nova mensagem"

    def test_data_is_read_only(self) -> None:
        message = build_push_message(_validated(), "p")
        with pytest.raises(TypeError):
            message.data["p"] = "other"  # type: ignore[index]


class TestFcmMessageBuilder:
    def test_build_encodes_body(self) -> None:
        builder = FcmMessageBuilder()
        body = b"\xff\xff\xff\xff\x00"
        message = builder.build(_validated(), body)
        assert message.data["p"] == encode_z85(body)

    def test_build_empty_body(self) -> None:
        message = FcmMessageBuilder().build(_validated(), b"")
        assert message.data["p"] == ""

    def test_builder_title(self) -> None:
        message = FcmMessageBuilder(title="Relay").build(_validated(), b"x")
        assert message.title == "Relay"


class TestPushMessage:
    def test_empty_token_rejected(self) -> None:
        with pytest.raises(ValueError, match="token"):
            PushMessage(token="", data={"p": ""}, title="t")

    def test_negative_ttl_rejected(self) -> None:
        with pytest.raises(ValueError, match="ttl"):
            PushMessage(token="abc", data={"p": ""}, title="t", ttl=-1)

    def test_token_prefix_truncates(self) -> None:
        message = PushMessage(token="0123456789abcdef", data={}, title="t")
        assert message.token_prefix == "01234567"
