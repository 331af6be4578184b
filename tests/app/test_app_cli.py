"""Testes do entrypoint de linha de comando."""

from __future__ import annotations

import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from app.app import _build_arg_parser, main
from config.settings import get_fcm_settings, get_relay_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in (
        "RELAY_BIND",
        "RELAY_MAX_QUEUE_SIZE",
        "RELAY_MAX_WORKERS",
        "FCM_CREDENTIALS_FILE_PATH",
        "GOOGLE_APPLICATION_CREDENTIALS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_relay_settings.cache_clear()
    get_fcm_settings.cache_clear()
    yield
    get_relay_settings.cache_clear()
    get_fcm_settings.cache_clear()


def test_parser_defaults_come_from_settings() -> None:
    args = _build_arg_parser().parse_args([])
    assert args.bind == "127.0.0.1:42069"
    assert args.credentials_file_path == ""
    assert args.max_queue_size == 1024
    assert args.max_workers == 4


def test_parser_flags() -> None:
    args = _build_arg_parser().parse_args(
        [
            "--bind",
            "0.0.0.0:9000",
            "--credentials-file-path",
            "/secrets/fcm.json",
            "--max-queue-size",
            "10",
            "--max-workers",
            "2",
        ]
    )
    assert args.bind == "0.0.0.0:9000"
    assert args.credentials_file_path == "/secrets/fcm.json"
    assert args.max_queue_size == 10
    assert args.max_workers == 2


def test_main_without_credentials_exits() -> None:
    with pytest.raises(SystemExit, match="Firebase server key not provided"):
        main([])


def test_main_runs_uvicorn_on_bind() -> None:
    # main() grava as flags no ambiente
    with patch.dict(os.environ), patch("uvicorn.run") as run:
        main(["--bind", "127.0.0.1:5555", "--credentials-file-path", "/secrets/fcm.json"])
        credentials_path = get_fcm_settings().credentials_file_path

    run.assert_called_once()
    kwargs = run.call_args.kwargs
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 5555
    assert kwargs["log_config"] is None
    assert credentials_path == "/secrets/fcm.json"


def test_main_with_invalid_bind_exits_before_serving() -> None:
    with patch.dict(os.environ), patch("uvicorn.run") as run:
        with pytest.raises(SystemExit, match="RELAY_BIND"):
            main(["--bind", "localhost", "--credentials-file-path", "/secrets/fcm.json"])

    run.assert_not_called()
