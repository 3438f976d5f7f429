"""An endless stream of square numbers and pipelines that consume it."""

import itertools
import threading

from .pipeline import Cancelled, Pipe, PipeClosed, drain, print_each, take, take_until


def generate_squares(quit=None):
    """Return a pipe yielding 0, 1, 4, 9, ... until ``quit`` is set."""
    squares = Pipe()

    def run():
        try:
            for number in itertools.count():
                squares.send(number * number, quit)
        except (Cancelled, PipeClosed):
            pass
        finally:
            squares.close()

    threading.Thread(target=run, daemon=True).start()
    return squares


def squares_main(limit=None):
    """Print squares, the first ``limit`` of them or forever; returns them."""
    quit = threading.Event()
    squares = generate_squares(quit)
    if limit is not None:
        squares = take(quit, limit, squares)
    values = []
    try:
        for square in squares:
            print(square)
            values.append(square)
    finally:
        quit.set()
    return values


def squares_until_main(limit=10000):
    """Print squares up to and including the first one above ``limit``."""
    quit = threading.Event()
    try:
        squares = generate_squares(quit)
        taken = take_until(lambda square: square <= limit, quit, squares)
        printed = print_each(quit, taken)
        for _ in drain(quit, printed):
            pass
    finally:
        quit.set()