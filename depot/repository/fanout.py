"""Strategies for dispatching one call to many repositories.

The composite repository never awaits members itself; it hands a list of
zero-argument coroutine factories to a ``FanOutStrategy`` which decides
whether they run one after another or concurrently. Both strategies return
results in call order, so the merge rules of the composite repository hold
no matter which one is configured.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

T = TypeVar("T")

Call = Callable[[], Awaitable[T]]


class FanOutStrategy(ABC):
    @staticmethod
    def sequential() -> "FanOutStrategy":
        return SequentialFanOut()

    @staticmethod
    def concurrent() -> "FanOutStrategy":
        return ConcurrentFanOut()

    @abstractmethod
    async def gather(self, calls: Sequence[Call[T]]) -> list[T]:
        """Run every call and return the results in call order.

        The first exception raised by a call propagates unchanged and no
        further results are collected.
        """
        ...

    @abstractmethod
    async def first(self, calls: Sequence[Call[T]], predicate: Callable[[T], bool]) -> T | None:
        """Return the result of the first call, by position, that satisfies ``predicate``.

        Returns:
            The matching result, or None when no call produced one.
        """
        ...


class SequentialFanOut(FanOutStrategy):
    """Await calls one at a time, stopping at the first hit in ``first``."""

    async def gather(self, calls: Sequence[Call[T]]) -> list[T]:
        return [await call() for call in calls]

    async def first(self, calls: Sequence[Call[T]], predicate: Callable[[T], bool]) -> T | None:
        for call in calls:
            result = await call()
            if predicate(result):
                return result
        return None


class ConcurrentFanOut(FanOutStrategy):
    """Start every call at once.

    Results are still reported by position: ``first`` returns what the
    leftmost satisfying call produced, not whichever call finished first.
    Failures are also reported by position: the exception of the leftmost
    failing call is raised unchanged and the calls still running are
    cancelled.
    """

    async def gather(self, calls: Sequence[Call[T]]) -> list[T]:
        tasks = [asyncio.ensure_future(call()) for call in calls]
        try:
            # Await in position order so the earliest failing member decides the error.
            return [await task for task in tasks]
        finally:
            _cancel(tasks)

    async def first(self, calls: Sequence[Call[T]], predicate: Callable[[T], bool]) -> T | None:
        tasks = [asyncio.ensure_future(call()) for call in calls]
        try:
            # Await in position order so an earlier member always decides over a later one.
            for task in tasks:
                result = await task
                if predicate(result):
                    return result
            return None
        finally:
            _cancel(tasks)


def _cancel(tasks: Sequence["asyncio.Future[object]"]) -> None:
    for task in tasks:
        if not task.done():
            task.cancel()
        elif not task.cancelled():
            # Mark failures of abandoned calls as retrieved.
            task.exception()
