"""Closable pipes and the pipeline stages that connect them.

Each stage runs in its own daemon thread and hands back the pipe it writes
to. A shared :class:`threading.Event` acts as the quit signal: once it is set,
blocked stages stop and close their outputs.
"""

import threading
from collections import deque

_POLL_SECONDS = 0.01


class PipeClosed(Exception):
    """Raised on a send to a closed pipe, or a receive from a drained one."""


class Cancelled(Exception):
    """Raised when the quit signal fires while a pipe operation waits."""


class Pipe:
    """A closable FIFO between threads.

    With a capacity of zero a send waits until a receiver is ready to take
    the item; otherwise up to ``capacity`` items are buffered.
    """

    def __init__(self, capacity=0):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items = deque()
        self._waiting_receivers = 0
        self._closed = False
        self._cond = threading.Condition()

    @property
    def closed(self):
        """Whether :meth:`close` has been called."""
        with self._cond:
            return self._closed

    def _wait(self, ready, quit):
        while not ready():
            if quit is not None and quit.is_set():
                raise Cancelled()
            self._cond.wait(None if quit is None else _POLL_SECONDS)

    def send(self, item, quit=None):
        """Put ``item`` on the pipe, waiting for room or a receiver."""
        with self._cond:
            self._wait(
                lambda: self._closed
                or len(self._items) < self._capacity + self._waiting_receivers,
                quit,
            )
            if self._closed:
                raise PipeClosed("send on closed pipe")
            self._items.append(item)
            self._cond.notify_all()

    def receive(self, quit=None):
        """Take the oldest item, waiting until one arrives or the pipe closes."""
        with self._cond:
            self._waiting_receivers += 1
            self._cond.notify_all()
            try:
                self._wait(lambda: self._items or self._closed, quit)
            finally:
                self._waiting_receivers -= 1
            if self._items:
                item = self._items.popleft()
                self._cond.notify_all()
                return item
            raise PipeClosed("receive from closed pipe")

    def close(self):
        """Close the pipe; buffered items can still be received."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def __iter__(self):
        while True:
            try:
                yield self.receive()
            except PipeClosed:
                return


def _spawn(target):
    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    return thread


def _items(source, quit):
    """Yield items from ``source`` until it closes or ``quit`` fires."""
    while True:
        try:
            yield source.receive(quit)
        except (PipeClosed, Cancelled):
            return


def broadcast(quit, source, n):
    """Copy every item of ``source`` onto each of ``n`` new pipes."""
    outputs = [Pipe() for _ in range(n)]

    def run():
        try:
            for item in _items(source, quit):
                for output in outputs:
                    output.send(item, quit)
        except Cancelled:
            pass
        finally:
            for output in outputs:
                output.close()

    _spawn(run)
    return outputs


def fan_in(quit, *args):
    """Merge several pipes into one that closes when all of them are done."""
    output = Pipe()

    def forward(source):
        try:
            for item in _items(source, quit):
                output.send(item, quit)
        except Cancelled:
            pass

    forwarders = [_spawn(lambda source=source: forward(source)) for source in args]

    def close_when_done():
        for forwarder in forwarders:
            forwarder.join()
        output.close()

    _spawn(close_when_done)
    return output


def drain(quit, source):
    """Consume ``source``; the returned pipe closes once it is exhausted."""
    output = Pipe()

    def run():
        try:
            for _ in _items(source, quit):
                pass
        finally:
            output.close()

    _spawn(run)
    return output


def print_each(quit, source):
    """Print every item of ``source``.

    The returned pipe carries no items; it closes once ``source`` is done.
    """
    output = Pipe()

    def run():
        try:
            for item in _items(source, quit):
                print(item)
        finally:
            output.close()

    _spawn(run)
    return output


def take(quit, count, source):
    """Forward the first ``count`` items, then set ``quit`` to stop the rest."""
    output = Pipe()

    def run():
        remaining = count
        try:
            while remaining > 0:
                item = source.receive(quit)
                output.send(item)
                remaining -= 1
            if quit is not None:
                quit.set()
        except (PipeClosed, Cancelled):
            pass
        finally:
            output.close()

    _spawn(run)
    return output


def take_until(predicate, quit, source):
    """Forward items up to and including the first one failing ``predicate``."""
    output = Pipe()

    def run():
        try:
            while True:
                item = source.receive(quit)
                output.send(item)
                if not predicate(item):
                    return
        except (PipeClosed, Cancelled):
            pass
        finally:
            output.close()

    _spawn(run)
    return output