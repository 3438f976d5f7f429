"""Find the most deeply nested source file and the one with most functions.

One version works file by file; the other forks a task per statistic and per
file and joins their results.
"""

import argparse
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


@dataclass(frozen=True)
class FileContent:
    """The lines of a file."""

    file: str
    lines: tuple = ()


@dataclass(frozen=True)
class FileStat:
    """A per-file statistic."""

    file_name: str = ""
    value: int = 0


def read_lines(path):
    """Read the lines of ``path``; raises ``OSError`` if it cannot be read."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return FileContent(path, tuple(handle.read().splitlines()))


def deepest_nested_block(content):
    """The deepest ``{`` nesting level reached in ``content``."""
    deepest = 0
    level = 0
    for line in content.lines:
        for char in line:
            if char == "{":
                level += 1
                deepest = max(deepest, level)
            elif char == "}":
                level -= 1
    return FileStat(content.file, deepest)


def number_of_funcs(content):
    """The number of lines in ``content`` that contain ``func ``."""
    return FileStat(content.file, sum("func " in line for line in content.lines))


def _walk(root):
    if os.path.isfile(root):
        yield root
        return
    for directory, subdirs, files in os.walk(root):
        subdirs.sort()
        for name in sorted(files):
            yield os.path.join(directory, name)


def _best(stats):
    best = FileStat()
    for stat in stats:
        if stat.value > best.value:
            best = stat
    return best


def _contents(paths):
    for path in paths:
        try:
            yield read_lines(path)
        except OSError:
            continue


def fork_join_synchronized(root):
    """Scan every file under ``root`` one at a time.

    Returns the deepest-nesting and the most-functions statistics; on a tie
    the file met first wins.
    """
    deepest = FileStat()
    most_funcs = FileStat()
    for content in _contents(_walk(root)):
        depth = deepest_nested_block(content)
        funcs = number_of_funcs(content)
        if depth.value > deepest.value:
            deepest = depth
        if funcs.value > most_funcs.value:
            most_funcs = funcs
    return deepest, most_funcs


def fork_join(root):
    """Scan the ``.go`` files under ``root`` with a task per file and statistic."""
    paths = (path for path in _walk(root) if path.endswith(".go"))
    with ThreadPoolExecutor() as pool:
        forks = [
            (
                pool.submit(deepest_nested_block, content),
                pool.submit(number_of_funcs, content),
            )
            for content in _contents(paths)
        ]
        deepest = _best(depth.result() for depth, _ in forks)
        most_funcs = _best(funcs.result() for _, funcs in forks)
    return deepest, most_funcs


def _parse(argv, description):
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("directory", help="root directory to scan")
    return parser.parse_args(argv).directory


def fork_join_synchronized_main(argv=None):
    """Report the scan of a directory done file by file."""
    root = _parse(argv, "Find nesting and function counts file by file.")
    deepest, most_funcs = fork_join_synchronized(root)
    print(f"{deepest.file_name} has deepest nested code block of {deepest.value}")
    print(
        f"{most_funcs.file_name} has highest number of func of {most_funcs.value}"
    )
    return 0


def fork_join_main(argv=None):
    """Report the scan of a directory done with forked tasks."""
    root = _parse(argv, "Find nesting and function counts with forked tasks.")
    deepest, most_funcs = fork_join(root)
    print(f"{deepest.file_name} has deepest nested code block of {deepest.value}")
    print(f"{most_funcs.file_name} has the highest number of func {most_funcs.value}")
    return 0