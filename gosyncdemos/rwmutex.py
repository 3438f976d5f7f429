"""A writer-preferring read/write lock."""

import threading
from contextlib import contextmanager


class ReadWriteMutex:
    """Read/write lock where a waiting writer blocks new readers."""

    def __init__(self):
        self._readers = 0
        self._writers_waiting = 0
        self._writer_active = False
        self._cond = threading.Condition()

    @property
    def readers(self):
        """Number of readers holding the lock."""
        with self._cond:
            return self._readers

    @property
    def writers_waiting(self):
        """Number of writers waiting for the lock."""
        with self._cond:
            return self._writers_waiting

    @property
    def writer_active(self):
        """Whether a writer holds the lock."""
        with self._cond:
            return self._writer_active

    def read_lock(self):
        """Take a shared lock once no writer is active or waiting."""
        with self._cond:
            self._cond.wait_for(
                lambda: self._writers_waiting == 0 and not self._writer_active
            )
            self._readers += 1

    def write_lock(self):
        """Take the exclusive lock once readers and any writer have left."""
        with self._cond:
            self._writers_waiting += 1
            self._cond.wait_for(
                lambda: self._readers == 0 and not self._writer_active
            )
            self._writers_waiting -= 1
            self._writer_active = True

    def read_unlock(self):
        """Release a shared lock; the last reader wakes the waiters."""
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def write_unlock(self):
        """Release the exclusive lock and wake the waiters."""
        with self._cond:
            self._writer_active = False
            self._cond.notify_all()

    @contextmanager
    def reading(self):
        """Hold the shared lock for the body of a ``with`` block."""
        self.read_lock()
        try:
            yield self
        finally:
            self.read_unlock()

    @contextmanager
    def writing(self):
        """Hold the exclusive lock for the body of a ``with`` block."""
        self.write_lock()
        try:
            yield self
        finally:
            self.write_unlock()