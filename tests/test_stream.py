# tests/test_stream.py
import asyncio

import pytest

from randints.core.stream import ValueStream


@pytest.mark.asyncio
async def test_emitted_values_come_out_in_order():
    stream = ValueStream()
    for v in [5, 42, 0]:
        stream.emit(v)

    got = [await stream.next() for _ in range(3)]
    assert got == [5, 42, 0]
    assert len(stream) == 0


@pytest.mark.asyncio
async def test_buffered_values_are_returned_without_suspending():
    stream = ValueStream()
    stream.emit(3)
    stream.emit(9)
    assert len(stream) == 2

    assert await stream.next() == 3
    assert await stream.next() == 9


@pytest.mark.asyncio
async def test_next_suspends_until_emit():
    stream = ValueStream()
    task = asyncio.create_task(stream.next())
    await asyncio.sleep(0)

    assert not task.done()
    assert stream.waiting

    stream.emit(7)
    assert await asyncio.wait_for(task, 1) == 7
    assert not stream.waiting
    assert len(stream) == 0


@pytest.mark.asyncio
async def test_never_holds_value_and_waiter_together():
    stream = ValueStream()
    task = asyncio.create_task(stream.next())
    await asyncio.sleep(0)

    stream.emit(1)
    # delivered to the waiter, not buffered
    assert len(stream) == 0
    assert not stream.waiting
    assert await task == 1


def test_emit_works_without_event_loop():
    stream = ValueStream()
    for i in range(1000):
        stream.emit(i)
    assert len(stream) == 1000


@pytest.mark.asyncio
async def test_async_for_consumes_interleaved_emits():
    stream = ValueStream()
    received = []

    async def consume():
        async for v in stream:
            received.append(v)
            if len(received) == 6:
                return

    task = asyncio.create_task(consume())
    stream.emit(1)
    stream.emit(2)
    await asyncio.sleep(0)
    stream.emit(3)
    await asyncio.sleep(0)
    await asyncio.sleep(0)
    for v in (4, 5, 6):
        stream.emit(v)
        await asyncio.sleep(0)

    await asyncio.wait_for(task, 1)
    assert received == [1, 2, 3, 4, 5, 6]


@pytest.mark.asyncio
async def test_cancelled_waiter_does_not_swallow_next_value():
    stream = ValueStream()
    task = asyncio.create_task(stream.next())
    await asyncio.sleep(0)

    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert not stream.waiting

    stream.emit(11)
    assert len(stream) == 1
    assert await stream.next() == 11


@pytest.mark.asyncio
async def test_value_handed_over_then_cancelled_is_kept():
    stream = ValueStream()
    task = asyncio.create_task(stream.next())
    await asyncio.sleep(0)

    stream.emit(4)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    stream.emit(8)
    assert [await stream.next(), await stream.next()] == [4, 8]
