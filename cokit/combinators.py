"""Awaiting several awaitables together, sleeping, and summing mixed results."""

from __future__ import annotations

import asyncio
import numbers
import time
from collections.abc import Awaitable, Iterable
from datetime import datetime, timedelta
from typing import Any


async def _cancel_all(tasks: Iterable[asyncio.Future]) -> None:
    pending = [task for task in tasks if not task.done()]
    for task in pending:
        task.cancel()
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)


async def when_all(*args: Awaitable[Any]) -> tuple[Any, ...]:
    """Run every awaitable concurrently and return their results in order.

    The first exception raised is propagated and the others are cancelled.
    """
    if not args:
        raise ValueError("when_all needs at least one awaitable")
    tasks = [asyncio.ensure_future(arg) for arg in args]
    try:
        return tuple(await asyncio.gather(*tasks))
    except BaseException:
        await _cancel_all(tasks)
        raise


async def when_any(*args: Awaitable[Any]) -> tuple[int, Any]:
    """Return ``(index, result)`` of the first awaitable to finish.

    If it raised, the exception is propagated. The rest are cancelled.
    """
    if not args:
        raise ValueError("when_any needs at least one awaitable")
    tasks = [asyncio.ensure_future(arg) for arg in args]
    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    except BaseException:
        await _cancel_all(tasks)
        raise
    index = min(position for position, task in enumerate(tasks) if task in done)
    await _cancel_all(tasks)
    return index, tasks[index].result()


def _seconds(duration: float | timedelta) -> float:
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)


async def sleep_for(seconds: float | timedelta) -> None:
    """Suspend for ``seconds`` (a number or a ``timedelta``)."""
    delay = _seconds(seconds)
    if delay > 0:
        await asyncio.sleep(delay)


async def sleep_until(deadline: float | datetime) -> None:
    """Suspend until ``deadline``, a ``datetime`` or seconds since the epoch.

    Returns at once if the deadline has passed.
    """
    if isinstance(deadline, datetime):
        now = datetime.now(deadline.tzinfo) if deadline.tzinfo else datetime.now()
        delay = (deadline - now).total_seconds()
    else:
        delay = float(deadline) - time.time()
    if delay > 0:
        await asyncio.sleep(delay)


def sum_ints(values: Iterable[Any]) -> int:
    """Add up the real numbers in ``values`` as an integer; skip everything else.

    Each addition is truncated to an integer.
    """
    total = 0
    for value in values:
        if isinstance(value, numbers.Real):
            total = int(total + value)
    return total