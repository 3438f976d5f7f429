"""A word-statistics pipeline over RFC documents built from pipe stages.

Each stage runs in a daemon thread, reads from one pipe and writes to a new
one, and stops early when the shared quit event is set.
"""

import re
import threading
from collections import Counter

from .letterfreq import RFC_URL
from .letterfreq import fetch as fetch_url
from .pipeline import Cancelled, Pipe, PipeClosed, broadcast, fan_in, take

DOWNLOADERS = 20
WORD_LIMIT = 10000
_WORD = re.compile(r"[a-zA-Z]+")


def _spawn(target):
    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    return thread


def _received(source, quit):
    """Yield items of ``source`` until it closes; ``Cancelled`` propagates."""
    while True:
        try:
            yield source.receive(quit)
        except PipeClosed:
            return


def generate_urls(quit, start=100, stop=131):
    """Return a pipe carrying the RFC URLs numbered ``start`` up to ``stop``."""
    urls = Pipe()

    def run():
        try:
            for number in range(start, stop):
                urls.send(RFC_URL.format(number), quit)
        except Cancelled:
            pass
        finally:
            urls.close()

    _spawn(run)
    return urls


def download_pages(quit, urls, fetch=fetch_url):
    """Return a pipe carrying the text of each page named on ``urls``."""
    pages = Pipe()

    def run():
        try:
            for url in _received(urls, quit):
                body = fetch(url)
                if isinstance(body, bytes):
                    body = body.decode("utf-8", errors="replace")
                pages.send(body, quit)
        except Cancelled:
            pass
        finally:
            pages.close()

    _spawn(run)
    return pages


def extract_words(quit, pages):
    """Return a pipe carrying every alphabetic word of ``pages``, lower-cased."""
    words = Pipe()

    def run():
        try:
            for page in _received(pages, quit):
                for word in _WORD.findall(page):
                    words.send(word.lower(), quit)
        except Cancelled:
            pass
        finally:
            words.close()

    _spawn(run)
    return words


def longest_words(quit, words, count=10):
    """Return a pipe carrying the ``count`` longest distinct words, comma-joined.

    Nothing is sent if ``quit`` fires before ``words`` is exhausted.
    """
    output = Pipe()

    def run():
        try:
            unique = list(dict.fromkeys(_received(words, quit)))
            unique.sort(key=len, reverse=True)
            output.send(", ".join(unique[:count]), quit)
        except Cancelled:
            pass
        finally:
            output.close()

    _spawn(run)
    return output


def frequent_words(quit, words, count=10):
    """Return a pipe carrying the ``count`` most frequent words, comma-joined.

    Nothing is sent if ``quit`` fires before ``words`` is exhausted.
    """
    output = Pipe()

    def run():
        try:
            frequency = Counter(_received(words, quit))
            ranked = sorted(frequency, key=frequency.__getitem__, reverse=True)
            output.send(", ".join(ranked[:count]), quit)
        except Cancelled:
            pass
        finally:
            output.close()

    _spawn(run)
    return output


def _consume(pipe):
    items = []
    for item in pipe:
        print(item)
        items.append(item)
    return items


def _download_all(quit, urls):
    pages = [download_pages(quit, urls) for _ in range(DOWNLOADERS)]
    return fan_in(quit, *pages)


def pipeline_main_v1():
    """Print the generated URLs."""
    quit = threading.Event()
    try:
        return _consume(generate_urls(quit))
    finally:
        quit.set()


def pipeline_main_v2():
    """Download each URL in turn and print the pages."""
    quit = threading.Event()
    try:
        return _consume(download_pages(quit, generate_urls(quit)))
    finally:
        quit.set()


def pipeline_main_v3():
    """Download each URL in turn and print every word of the pages."""
    quit = threading.Event()
    try:
        pages = download_pages(quit, generate_urls(quit))
        return _consume(extract_words(quit, pages))
    finally:
        quit.set()


def fan_in_fan_out_main():
    """Download with many workers, merge the pages and print every word."""
    quit = threading.Event()
    try:
        merged = _download_all(quit, generate_urls(quit))
        return _consume(extract_words(quit, merged))
    finally:
        quit.set()


def fan_in_fan_out_main_v2():
    """Download with many workers and print the longest words."""
    quit = threading.Event()
    try:
        merged = _download_all(quit, generate_urls(quit))
        return _consume(longest_words(quit, extract_words(quit, merged)))
    finally:
        quit.set()


def _report(quit, words):
    longest_source, frequent_source = broadcast(quit, words, 2)
    longest = longest_words(quit, longest_source)
    frequent = frequent_words(quit, frequent_source)
    print("longest words are")
    longest_items = _consume(longest)
    print("most frequent words are")
    frequent_items = _consume(frequent)
    return longest_items, frequent_items


def broadcast_main():
    """Print the longest and the most frequent words of all pages."""
    quit = threading.Event()
    try:
        merged = _download_all(quit, generate_urls(quit))
        return _report(quit, extract_words(quit, merged))
    finally:
        quit.set()


def conditional_quit_main():
    """Like :func:`broadcast_main`, stopping the downloads after the first words."""
    quit = threading.Event()
    quit_words = threading.Event()
    try:
        merged = _download_all(quit_words, generate_urls(quit_words))
        words = extract_words(quit_words, merged)
        first_words = take(quit_words, WORD_LIMIT, words)
        return _report(quit, first_words)
    finally:
        quit_words.set()
        quit.set()