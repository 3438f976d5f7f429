# gosyncdemos

Synchronisation primitives built from a lock and a condition variable, plus a set
of small programs that show common concurrency patterns with threads.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The primitives

- `gosyncdemos.semaphore`: `Semaphore` (one permit at a time, usable as a
  context manager) and `WeightedSemaphore` (acquire or release several permits
  at once). Both start from any permit count, including zero.
- `gosyncdemos.rwmutex`: `ReadWriteMutex`, a readers–writer lock that prefers
  writers: once a writer is waiting, new readers are held back. Use
  `read_lock`/`read_unlock` and `write_lock`/`write_unlock`, or the
  `reading()` and `writing()` context managers.
- `gosyncdemos.barrier`: `Barrier`, which holds every participant in `wait()`
  until all of them have arrived, then resets for the next round.
- `gosyncdemos.pipeline`: a closable `Pipe` (unbuffered by default, or
  buffered with a `capacity`) and stages that connect pipes, each running in
  its own daemon thread: `broadcast`, `fan_in`, `drain`, `print_each`, `take`
  and `take_until`. A `threading.Event` passed as `quit` stops them; a pipe
  operation interrupted by it raises `Cancelled`, and using a closed pipe
  raises `PipeClosed`.

```python
import threading

from gosyncdemos.semaphore import Semaphore

done = Semaphore(0)

def work():
    print("working")
    done.release()

threading.Thread(target=work).start()
done.acquire()   # returns once the worker has finished
```

```python
from gosyncdemos.rwmutex import ReadWriteMutex

lock = ReadWriteMutex()
with lock.reading():
    ...          # many readers may be here together
with lock.writing():
    ...          # a writer is here alone
```

```python
import threading

from gosyncdemos.squares import generate_squares
from gosyncdemos.pipeline import take

quit = threading.Event()
print(list(take(quit, 5, generate_squares(quit))))   # [0, 1, 4, 9, 16]
```

## The demos

Each demo module holds functions that can be called directly from Python:

- `basics`: reading and searching files (`cat_report`, `grep_report`,
  `cat_main`, `grep_main`) and timed work items run one after another or in
  parallel (`run_work`, `dowork_main`).
- `conditions`: a `BankAccount` guarded by a condition variable, players
  waiting in a `GameLobby` (`game_sync_main`, and `game_timeout_main` where a
  timer starts the game early), and `writer_preference_main`.
- `letterfreq`: counting letter frequencies in downloaded RFC texts, one
  document at a time or with a thread per document.
- `squares`: an endless stream of square numbers cut short by `take` or
  `take_until`.
- `bakery`: a five-step cupcake recipe run one tray after another.
- `workerpool`: a tiny HTTP file server with a fixed pool of three workers.
  `worker_pool_main()` listens on `localhost:8888`, serves files from
  `../asset`, and answers `429 Too Many Requests` when every worker is busy.
  `build_response` gives the answer for a raw request without any network.
- `wordpipeline`: downloading pages, extracting words, and finding the
  longest and most frequent ones with fan-in and broadcast.
- `forkjoin`: scanning a directory tree for the source file with the deepest
  nested block and the one with the most functions, file by file
  (`fork_join_synchronized`) or with forked tasks over `.go` files
  (`fork_join`).
- `looplevel`: SHA-256 hashes of each file in a directory (`hash_files`), and
  one hash for the whole directory in file-name order (`directory_hash`).

The `*_main` functions that take `argv` parse it like command-line
arguments, for example:

```python
from gosyncdemos.forkjoin import fork_join_main

fork_join_main(["path/to/project"])
```

## What it does not do

The package installs no command. There is no command-line entry point that
picks a demo to run; call the demo functions from Python as shown above.