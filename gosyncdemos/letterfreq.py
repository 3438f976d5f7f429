"""Letter frequencies over a range of RFC documents, sequential or threaded."""

import threading
import time
import urllib.error
import urllib.request
from collections import Counter

ALL_LETTERS = "qwertyuiop@asdfghjkl;:]zxcvbnm,./\\1234567890-^ふあうわん"
RFC_URL = "https://rfc-editor.org/rfc/rfc{}.txt"
_RFC_NUMBERS = range(1000, 1031)
_FETCH_TIMEOUT = 30
_THREADED_DEADLINE = 5


def _empty_counts():
    return Counter(dict.fromkeys(ALL_LETTERS, 0))


def count_letters(body):
    """Count each tracked character in ``body``, taking each byte as one character.

    Upper-case letters count as lower-case ones. Text is encoded as UTF-8 first.
    """
    if isinstance(body, str):
        body = body.encode("utf-8")
    counts = _empty_counts()
    for char in body.decode("latin-1").lower():
        if char in counts:
            counts[char] += 1
    return counts


def format_frequencies(frequency):
    """Render counts as ``c-n `` pairs in the tracked-character order."""
    return "".join(f"{char}-{frequency.get(char, 0)} " for char in ALL_LETTERS)


def fetch(url):
    """Download ``url``; a non-200 answer raises ``RuntimeError``."""
    try:
        with urllib.request.urlopen(url, timeout=_FETCH_TIMEOUT) as response:
            status, reason = response.status, response.reason
            body = response.read()
    except urllib.error.HTTPError as error:
        raise RuntimeError(
            f"Server returning error status code: {error.code} {error.reason}"
        ) from error
    if status != 200:
        raise RuntimeError(f"Server returning error status code: {status} {reason}")
    return body


def _urls():
    return [RFC_URL.format(number) for number in _RFC_NUMBERS]


def letter_freq_main():
    """Count letters over the RFC range one document at a time."""
    total = _empty_counts()
    for url in _urls():
        try:
            body = fetch(url)
        except OSError:
            continue
        total.update(count_letters(body))
        print("Completed:", url)
    print(format_frequencies(total) + "Done")
    return total


def letter_freq_mutex_main():
    """Count letters over the RFC range with a thread per document."""
    total = _empty_counts()
    lock = threading.Lock()

    def worker(url):
        try:
            body = fetch(url)
        except OSError:
            return
        counts = count_letters(body)
        with lock:
            total.update(counts)
        print("Completed:", url)

    threads = [
        threading.Thread(target=worker, args=(url,), daemon=True) for url in _urls()
    ]
    for thread in threads:
        thread.start()
    deadline = time.monotonic() + _THREADED_DEADLINE
    for thread in threads:
        thread.join(max(0.0, deadline - time.monotonic()))
    with lock:
        snapshot = Counter(total)
    print(format_frequencies(snapshot) + "Done")
    return snapshot