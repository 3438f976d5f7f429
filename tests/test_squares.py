import math
import threading

from gosyncdemos.squares import generate_squares, squares_main, squares_until_main

FIRST_SQUARES = [0, 1, 4, 9, 16]


def test_generate_squares_starts_at_zero():
    quit = threading.Event()
    pipe = generate_squares(quit)
    values = [pipe.receive() for _ in range(5)]
    quit.set()
    assert values == FIRST_SQUARES


def test_generate_squares_stops_on_quit():
    quit = threading.Event()
    pipe = generate_squares(quit)
    pipe.receive()
    quit.set()
    rest = list(pipe)
    assert pipe.closed
    assert len(rest) <= 1


def test_squares_main_with_limit(capsys):
    assert squares_main(5) == FIRST_SQUARES
    lines = capsys.readouterr().out.split()
    assert [int(line) for line in lines] == FIRST_SQUARES


def test_squares_main_zero_limit():
    assert squares_main(0) == []


def test_squares_until_main_stops_after_first_above_limit(capsys):
    squares_until_main(100)
    values = [int(line) for line in capsys.readouterr().out.split()]
    assert values[-1] > 100
    assert all(value <= 100 for value in values[:-1])
    roots = [math.isqrt(value) for value in values]
    assert all(root * root == value for root, value in zip(roots, values))
    assert roots == list(range(len(values)))