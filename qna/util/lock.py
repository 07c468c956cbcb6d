"""Shared/exclusive lock for asyncio tasks.

Readers share the lock; a writer holds it alone. Waiters are served in FIFO
order, so a reader arriving after a queued writer waits for that writer
instead of starving it.

Usage:
    lock = ReadWriteLock()

    async with lock.reader():
        snapshot = list(records.values())

    async with lock.writer():
        records[key] = value

A task cancelled while queued never acquires the lock. Release is synchronous,
so a holder cancelled inside its critical section still releases cleanly.
"""

import asyncio
from collections import deque
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class ReadWriteLock:
    """FIFO-fair reader/writer lock bound to the running event loop."""

    def __init__(self) -> None:
        self._readers = 0
        self._writer = False
        self._waiters: deque[tuple[bool, asyncio.Future[None]]] = deque()

    @property
    def readers(self) -> int:
        """Number of tasks currently holding the shared side."""
        return self._readers

    @property
    def writer_active(self) -> bool:
        """Whether a task currently holds the exclusive side."""
        return self._writer

    @property
    def waiting(self) -> int:
        """Number of queued tasks."""
        return len(self._waiters)

    async def acquire_read(self) -> None:
        """Acquire the shared side."""
        if not self._writer and not self._waiters:
            self._readers += 1
            return
        await self._wait(exclusive=False)

    async def acquire_write(self) -> None:
        """Acquire the exclusive side."""
        if not self._writer and self._readers == 0 and not self._waiters:
            self._writer = True
            return
        await self._wait(exclusive=True)

    def release_read(self) -> None:
        """Release the shared side."""
        if self._readers <= 0:
            raise RuntimeError("release_read() called without a reader")
        self._readers -= 1
        if self._readers == 0:
            self._wake()

    def release_write(self) -> None:
        """Release the exclusive side."""
        if not self._writer:
            raise RuntimeError("release_write() called without a writer")
        self._writer = False
        self._wake()

    @asynccontextmanager
    async def reader(self) -> AsyncIterator[None]:
        """Hold the shared side for the duration of the block."""
        await self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @asynccontextmanager
    async def writer(self) -> AsyncIterator[None]:
        """Hold the exclusive side for the duration of the block."""
        await self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    async def _wait(self, exclusive: bool) -> None:
        future: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        entry = (exclusive, future)
        self._waiters.append(entry)
        try:
            await future
        except asyncio.CancelledError:
            if future.done() and not future.cancelled():
                # Granted in the same loop iteration as the cancellation
                if exclusive:
                    self.release_write()
                else:
                    self.release_read()
            else:
                if entry in self._waiters:
                    self._waiters.remove(entry)
                self._wake()
            raise

    def _wake(self) -> None:
        """Grant the lock to the longest-waiting compatible tasks."""
        while self._waiters and not self._writer:
            exclusive, future = self._waiters[0]
            if future.done():
                self._waiters.popleft()
                continue
            if exclusive:
                if self._readers:
                    return
                self._waiters.popleft()
                self._writer = True
                future.set_result(None)
                return
            self._waiters.popleft()
            self._readers += 1
            future.set_result(None)
