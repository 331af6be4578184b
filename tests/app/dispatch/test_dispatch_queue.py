"""Testes da DispatchQueue (capacidade, backpressure, fechamento)."""

from __future__ import annotations

import asyncio

import pytest

from app.dispatch import DispatchQueue
from app.protocols.models import PushMessage
from utils.errors import ConfigurationError, QueueClosedError


def _message(token: str = "token-1") -> PushMessage:
    return PushMessage(token=token, data={"p": "x"}, title="t")


class TestDispatchQueueConstruction:
    @pytest.mark.parametrize("capacity", [0, -1])
    def test_rejects_non_positive_capacity(self, capacity: int) -> None:
        with pytest.raises(ConfigurationError):
            DispatchQueue(capacity)

    def test_capacity_is_fixed(self) -> None:
        queue = DispatchQueue(3)
        assert queue.capacity == 3
        assert queue.qsize() == 0
        assert queue.closed is False


class TestDispatchQueueFlow:
    @pytest.mark.asyncio
    async def test_fifo_order(self) -> None:
        queue = DispatchQueue(4)
        for token in ("a", "b", "c"):
            await queue.put(_message(token))

        received = [(await queue.get()).token for _ in range(3)]
        assert received == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_put_blocks_when_full(self) -> None:
        """Fila cheia suspende o produtor; nada é descartado."""
        queue = DispatchQueue(2)
        await queue.put(_message("a"))
        await queue.put(_message("b"))
        assert queue.full()

        producer = asyncio.create_task(queue.put(_message("c")))
        await asyncio.sleep(0.01)
        assert not producer.done()

        assert (await queue.get()).token == "a"
        await asyncio.wait_for(producer, timeout=1)
        assert queue.qsize() == 2

    @pytest.mark.asyncio
    async def test_put_after_close_raises(self) -> None:
        queue = DispatchQueue(2)
        queue.close()
        assert queue.closed is True
        with pytest.raises(QueueClosedError):
            await queue.put(_message())

    @pytest.mark.asyncio
    async def test_blocked_producer_released_on_close(self) -> None:
        queue = DispatchQueue(1)
        await queue.put(_message("a"))
        producer = asyncio.create_task(queue.put(_message("b")))
        await asyncio.sleep(0)

        queue.close()
        with pytest.raises(QueueClosedError):
            await asyncio.wait_for(producer, timeout=1)

    @pytest.mark.asyncio
    async def test_close_keeps_pending_messages_for_drain(self) -> None:
        queue = DispatchQueue(3)
        await queue.put(_message("a"))
        await queue.put(_message("b"))
        queue.close()

        assert (await queue.get()).token == "a"
        assert (await queue.get()).token == "b"
        with pytest.raises(QueueClosedError):
            await queue.get()

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self) -> None:
        queue = DispatchQueue(1)
        queue.close()
        queue.close()
        assert queue.closed is True

    @pytest.mark.asyncio
    async def test_abandon_discards_pending(self) -> None:
        queue = DispatchQueue(5)
        for token in ("a", "b", "c"):
            await queue.put(_message(token))

        assert queue.abandon() == 3
        assert queue.qsize() == 0
        with pytest.raises(QueueClosedError):
            await queue.get()

    @pytest.mark.asyncio
    async def test_join_waits_for_task_done(self) -> None:
        queue = DispatchQueue(2)
        await queue.put(_message())
        joiner = asyncio.create_task(queue.join())
        await asyncio.sleep(0)
        assert not joiner.done()

        await queue.get()
        queue.task_done()
        await asyncio.wait_for(joiner, timeout=1)
