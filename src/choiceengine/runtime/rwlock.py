"""Readers-writer lock guarding the keyword registry.

Keyword lookups happen on every selector invocation while registrations and
locale changes are rare administrative events, so the registry lets any
number of resolutions read concurrently and serializes only the writers.

- Multiple concurrent readers (keyword lookups, locale reads)
- Exclusive writer access (register, unregister, set_locale)
- Writer preference so a steady stream of renders cannot starve set_locale
- Reentrant reader locks

Upgrading a held read lock to a write lock, downgrading a write lock to a
read lock, and re-entering the write lock all raise RuntimeError; each of
those would deadlock or indicates a registry method calling back into itself.

Python 3.13+.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass
        >>> with lock.write():
        ...     pass
    """

    __slots__ = (
        "_active_readers",
        "_active_writer",
        "_condition",
        "_reader_threads",
        "_waiting_writers",
    )

    def __init__(self) -> None:
        """Initialize readers-writer lock."""
        self._condition = threading.Condition(threading.Lock())
        self._active_readers: int = 0
        self._active_writer: int | None = None
        self._waiting_writers: int = 0
        # thread id -> reentrant read depth
        self._reader_threads: dict[int, int] = {}

    @contextmanager
    def read(self) -> Generator[None]:
        """Acquire read lock (shared access).

        Raises:
            RuntimeError: If thread holds write lock (downgrade prohibited).
        """
        self._acquire_read()
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self) -> Generator[None]:
        """Acquire write lock (exclusive access).

        Raises:
            RuntimeError: If thread holds a read lock or already holds the write lock.
        """
        self._acquire_write()
        try:
            yield
        finally:
            self._release_write()

    def _acquire_read(self) -> None:
        thread_id = threading.get_ident()

        with self._condition:
            if thread_id in self._reader_threads:
                self._reader_threads[thread_id] += 1
                return

            if self._active_writer == thread_id:
                msg = (
                    "Cannot acquire read lock while holding write lock. "
                    "Release the write lock before acquiring a read lock."
                )
                raise RuntimeError(msg)

            while self._active_writer is not None or self._waiting_writers > 0:
                self._condition.wait()

            self._active_readers += 1
            self._reader_threads[thread_id] = 1

    def _release_read(self) -> None:
        thread_id = threading.get_ident()

        with self._condition:
            if thread_id not in self._reader_threads:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)

            self._reader_threads[thread_id] -= 1
            if self._reader_threads[thread_id] == 0:
                del self._reader_threads[thread_id]
                self._active_readers -= 1
                if self._active_readers == 0:
                    self._condition.notify_all()

    def _acquire_write(self) -> None:
        thread_id = threading.get_ident()

        with self._condition:
            if thread_id in self._reader_threads:
                msg = (
                    "Cannot upgrade read lock to write lock. "
                    "Release read lock before acquiring write lock."
                )
                raise RuntimeError(msg)

            if self._active_writer == thread_id:
                msg = (
                    "Cannot acquire write lock: already holding write lock. "
                    "Release the write lock before acquiring it again."
                )
                raise RuntimeError(msg)

            self._waiting_writers += 1
            while self._active_readers > 0 or self._active_writer is not None:
                self._condition.wait()
            self._waiting_writers -= 1
            self._active_writer = thread_id

    def _release_write(self) -> None:
        thread_id = threading.get_ident()

        with self._condition:
            if self._active_writer != thread_id:
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._active_writer = None
            self._condition.notify_all()
