"""A reusable barrier built on a condition variable."""

import threading


class Barrier:
    """Blocks each caller of :meth:`wait` until ``size`` callers have arrived."""

    def __init__(self, size):
        if size < 1:
            raise ValueError("barrier size must be at least 1")
        self._size = size
        self._count = 0
        self._generation = 0
        self._cond = threading.Condition()

    @property
    def size(self):
        """Number of participants."""
        return self._size

    @property
    def waiting(self):
        """Number of participants currently suspended at the barrier."""
        with self._cond:
            return self._count

    def wait(self):
        """Wait until every participant has reached the barrier."""
        with self._cond:
            generation = self._generation
            self._count += 1
            if self._count == self._size:
                self._count = 0
                self._generation += 1
                self._cond.notify_all()
            else:
                self._cond.wait_for(lambda: self._generation != generation)