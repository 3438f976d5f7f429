"""Small file and timing demos: cat, grep and a batch of timed work items."""

import argparse
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime


def read_file(filename):
    """Return the whole text of ``filename``; raises ``OSError`` if unreadable."""
    with open(filename, encoding="utf-8", errors="replace", newline="") as handle:
        return handle.read()


def contains_text(search, content):
    """Whether ``search`` occurs anywhere in ``content``."""
    return search in content


def cat_report(filename):
    """Describe the contents of ``filename``, or report that it is missing."""
    try:
        content = read_file(filename)
    except OSError:
        return f"couldn't found {filename}"
    return f"file content:\n {content}"


def grep_report(search, filename):
    """Report whether ``filename`` contains ``search``, or that it is missing."""
    try:
        content = read_file(filename)
    except OSError:
        return f"couldn't found {filename}"
    found = contains_text(search, content)
    return f"file {filename} contains {search}: {str(found).lower()}\n"


def _timestamp():
    return datetime.now().strftime("%H:%M:%S")


def do_work(work_id, seconds=1.0):
    """Announce the start of a work item, sleep, then announce its end."""
    print(f"work {work_id} started at {_timestamp()}")
    time.sleep(seconds)
    print(f"work {work_id} finished at {_timestamp()}")


def run_work(parallel, count=5, seconds=1.0):
    """Run ``count`` work items one after another or all at once."""
    if not parallel:
        for work_id in range(count):
            do_work(work_id, seconds)
        return
    workers = [
        threading.Thread(target=do_work, args=(work_id, seconds))
        for work_id in range(count)
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()


def _file_parser(description):
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("-filename1", "--filename1", default="", help="a file name")
    parser.add_argument("-filename2", "--filename2", default="", help="a file name")
    return parser


def cat_main(argv=None):
    """Print the contents of two files, each read in its own thread."""
    args = _file_parser("Print two files.").parse_args(argv)
    files = [args.filename1, args.filename2]
    with ThreadPoolExecutor() as pool:
        for report in pool.map(cat_report, files):
            print(report, end="")
    return 0


def grep_main(argv=None):
    """Report whether each of two files contains the search text."""
    parser = _file_parser("Search two files for a text.")
    parser.add_argument("-search", "--search", default="my", help="search text")
    args = parser.parse_args(argv)
    files = [args.filename1, args.filename2]
    with ThreadPoolExecutor() as pool:
        for report in pool.map(lambda name: grep_report(args.search, name), files):
            print(report, end="")
    return 0


def dowork_main(argv=None):
    """Run five one-second work items, sequentially or in parallel."""
    parser = argparse.ArgumentParser(description="Run timed work items.")
    parser.add_argument(
        "-is_parallel", "--is_parallel", action="store_true", help="run in parallel"
    )
    args = parser.parse_args(argv)
    run_work(args.is_parallel)
    return 0