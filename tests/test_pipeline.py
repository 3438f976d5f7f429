import itertools
import threading

import pytest

from gosyncdemos.pipeline import (
    Cancelled,
    Pipe,
    PipeClosed,
    broadcast,
    drain,
    fan_in,
    print_each,
    take,
    take_until,
)


def _feed(items, quit=None, finished=None):
    pipe = Pipe()

    def run():
        try:
            for item in items:
                pipe.send(item, quit)
        except Cancelled:
            pass
        finally:
            pipe.close()
            if finished is not None:
                finished.set()

    threading.Thread(target=run, daemon=True).start()
    return pipe


def _collect_all(pipes):
    results = [[] for _ in pipes]
    threads = [
        threading.Thread(target=lambda p=p, r=r: r.extend(p), daemon=True)
        for p, r in zip(pipes, results)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(5)
    return results


def test_buffered_pipe_is_fifo():
    pipe = Pipe(3)
    for item in ("a", "b", "c"):
        pipe.send(item)
    pipe.close()
    assert list(pipe) == ["a", "b", "c"]


def test_send_on_closed_pipe_raises():
    pipe = Pipe(1)
    pipe.close()
    with pytest.raises(PipeClosed):
        pipe.send(1)


def test_receive_from_drained_pipe_raises():
    pipe = Pipe()
    pipe.close()
    with pytest.raises(PipeClosed):
        pipe.receive()


def test_receive_is_cancelled_by_quit():
    quit = threading.Event()
    quit.set()
    with pytest.raises(Cancelled):
        Pipe().receive(quit)


def test_unbuffered_send_waits_for_receiver():
    pipe = Pipe()
    quit = threading.Event()
    quit.set()
    with pytest.raises(Cancelled):
        pipe.send("x", quit)
    sender = threading.Thread(target=pipe.send, args=("y",), daemon=True)
    sender.start()
    sender.join(0.1)
    assert sender.is_alive()
    assert pipe.receive() == "y"
    sender.join(2)
    assert not sender.is_alive()


def test_negative_capacity_is_rejected():
    with pytest.raises(ValueError):
        Pipe(-1)


def test_broadcast_copies_every_item():
    outputs = broadcast(None, _feed(range(20)), 2)
    first, second = _collect_all(outputs)
    assert first == list(range(20))
    assert second == list(range(20))


def test_broadcast_stops_on_quit():
    quit = threading.Event()
    quit.set()
    outputs = broadcast(quit, Pipe(), 3)
    assert _collect_all(outputs) == [[], [], []]
    assert all(output.closed for output in outputs)


def test_fan_in_merges_all_inputs():
    merged = fan_in(None, _feed(range(10)), _feed(range(100, 110)), _feed([]))
    items = list(merged)
    assert sorted(items) == sorted(list(range(10)) + list(range(100, 110)))
    assert [n for n in items if n >= 100] == list(range(100, 110))


def test_drain_consumes_source_and_closes():
    finished = threading.Event()
    result = drain(None, _feed(range(50), finished=finished))
    assert list(result) == []
    assert finished.wait(2)


def test_print_each_prints_items(capsys):
    result = print_each(None, _feed([1, 2, 3]))
    assert list(result) == []
    assert capsys.readouterr().out == "1\n2\n3\n"


def test_take_forwards_count_and_signals_quit():
    quit = threading.Event()
    taken = take(quit, 3, _feed(itertools.count(), quit))
    assert list(taken) == [0, 1, 2]
    assert quit.wait(2)


def test_take_stops_early_when_source_ends():
    quit = threading.Event()
    taken = take(quit, 5, _feed(["a", "b"]))
    assert list(taken) == ["a", "b"]
    assert not quit.is_set()


def test_take_until_includes_first_failing_item():
    quit = threading.Event()
    squares = _feed((i * i for i in itertools.count()), quit)
    taken = take_until(lambda s: s <= 50, quit, squares)
    result = list(taken)
    quit.set()
    assert result[:-1] == [i * i for i in range(8)]
    assert result[-1] > 50
    assert all(s <= 50 for s in result[:-1])


def test_take_until_closes_when_source_ends():
    taken = take_until(lambda s: True, None, _feed([4, 5]))
    assert list(taken) == [4, 5]