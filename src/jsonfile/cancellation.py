"""Run codec operations under an external cancellation signal."""

from __future__ import annotations

import asyncio
from typing import Any, Coroutine, Optional, TypeVar

T = TypeVar("T")


async def run_cancellable(
    coro: Coroutine[Any, Any, T], cancel_event: Optional[asyncio.Event] = None
) -> T:
    """Await ``coro``, abandoning it once ``cancel_event`` is set.

    Cancelling the awaiting task cancels ``coro`` as well. In both cases the
    caller sees ``asyncio.CancelledError`` and ``coro`` has finished unwinding,
    so any ``async with`` blocks inside it have released their resources.
    """
    if cancel_event is None:
        return await coro
    if cancel_event.is_set():
        coro.close()
        raise asyncio.CancelledError("Operation cancelled before it started.")

    op_task = asyncio.ensure_future(coro)
    waiter = asyncio.ensure_future(cancel_event.wait())
    try:
        await asyncio.wait({op_task, waiter}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        waiter.cancel()
        if not op_task.done():
            op_task.cancel()
        await asyncio.gather(op_task, waiter, return_exceptions=True)
    if op_task.cancelled():
        raise asyncio.CancelledError("Operation cancelled by cancel_event.")
    return op_task.result()
