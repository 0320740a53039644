"""
Reader-Writer Lock Module

A blocking reader-writer lock on top of threading.Condition.

- Any number of threads may hold the lock shared
- One thread may hold it exclusive, and then nobody else holds it
- Waiting writers block new readers, so read traffic cannot starve writes

There is no timeout and no cancellation. The lock is not re-entrant:
a thread holding it in either mode must release before acquiring again.
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class RWLock:
    """
    Reader-writer lock.

    Usage:
        lock = RWLock()
        with lock.read_locked():
            ...  # shared
        with lock.write_locked():
            ...  # exclusive
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        """Block until the lock can be held shared."""
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read() without a matching acquire_read()")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        """Block until the lock can be held exclusive."""
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write() without a matching acquire_write()")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    def __repr__(self) -> str:
        with self._cond:
            return (
                f"RWLock(readers={self._readers}, writer={self._writer}, "
                f"writers_waiting={self._writers_waiting})"
            )
