"""Reader/writer lock for asyncio tasks."""

import asyncio
from contextlib import asynccontextmanager


class ReadWriteLock:
    """Lock that admits many concurrent readers or a single writer.

    A writer waiting for the lock blocks readers that arrive after it, so a
    steady stream of lookups cannot starve inserts.

    Usage:
        async with lock.reader():
            ...
        async with lock.writer():
            ...
    """

    def __init__(self):
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @property
    def readers(self) -> int:
        """Number of readers currently holding the lock."""
        return self._readers

    @property
    def writing(self) -> bool:
        """True while a writer holds the lock."""
        return self._writer

    async def acquire_read(self) -> None:
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer and self._waiting_writers == 0
            )
            self._readers += 1

    async def release_read(self) -> None:
        async with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    async def acquire_write(self) -> None:
        async with self._cond:
            self._waiting_writers += 1
            acquired = False
            try:
                await self._cond.wait_for(
                    lambda: not self._writer and self._readers == 0
                )
                acquired = True
            finally:
                self._waiting_writers -= 1
                if not acquired:
                    # Readers held back by this writer may proceed now
                    self._cond.notify_all()
            self._writer = True

    async def release_write(self) -> None:
        async with self._cond:
            self._writer = False
            self._cond.notify_all()

    @asynccontextmanager
    async def reader(self):
        """Hold the lock in shared mode."""
        await self.acquire_read()
        try:
            yield
        finally:
            await self.release_read()

    @asynccontextmanager
    async def writer(self):
        """Hold the lock in exclusive mode."""
        await self.acquire_write()
        try:
            yield
        finally:
            await self.release_write()
