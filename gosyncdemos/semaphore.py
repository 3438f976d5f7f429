"""Counting semaphores built on a condition variable."""

import threading


class Semaphore:
    """A semaphore that holds a number of permits; acquirers block at zero.

    The initial permit count may be zero or negative, in which case that many
    extra releases are needed before an acquire can proceed.
    """

    def __init__(self, permits):
        self._permits = permits
        self._cond = threading.Condition()

    @property
    def permits(self):
        """Permits currently available."""
        with self._cond:
            return self._permits

    def acquire(self):
        """Take one permit, waiting until one is available."""
        with self._cond:
            self._cond.wait_for(lambda: self._permits > 0)
            self._permits -= 1

    def release(self):
        """Return one permit and wake one waiting acquirer."""
        with self._cond:
            self._permits += 1
            self._cond.notify()

    def __enter__(self):
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()


class WeightedSemaphore:
    """A semaphore whose permits are acquired and released several at a time."""

    def __init__(self, permits):
        self._permits = permits
        self._cond = threading.Condition()

    @property
    def permits(self):
        """Permits currently available."""
        with self._cond:
            return self._permits

    def acquire(self, n):
        """Take ``n`` permits, waiting until that many are available."""
        with self._cond:
            self._cond.wait_for(lambda: self._permits >= n)
            self._permits -= n

    def release(self, n):
        """Return ``n`` permits and wake the waiters."""
        with self._cond:
            self._permits += n
            self._cond.notify_all()