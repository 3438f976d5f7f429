"""Loop-level parallelism: hash every file of a directory, or fold them into one hash.

The map form hashes each file independently and in parallel. The fold form
also hashes in parallel but feeds the digests into the directory hash in file
name order, so the result does not depend on which thread finishes first.
"""

import argparse
import hashlib
import os
from concurrent.futures import ThreadPoolExecutor, as_completed

_CHUNK = 64 * 1024


def file_hash(path):
    """The SHA-256 digest of the file at ``path``; raises ``OSError`` if unreadable."""
    digest = hashlib.sha256()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK), b""):
            digest.update(chunk)
    return digest.digest()


def _file_names(directory):
    """Names of the non-directory entries of ``directory``, sorted."""
    with os.scandir(directory) as entries:
        return sorted(
            entry.name for entry in entries if not entry.is_dir(follow_symlinks=False)
        )


def _hash_each(directory):
    """Yield ``(name, digest)`` for each file of ``directory`` as hashing finishes."""
    names = _file_names(directory)
    with ThreadPoolExecutor() as pool:
        futures = {
            pool.submit(file_hash, os.path.join(directory, name)): name
            for name in names
        }
        for future in as_completed(futures):
            yield futures[future], future.result()


def hash_files(directory):
    """Map each file name in ``directory`` to its SHA-256 digest, in name order.

    Subdirectories are skipped; the files are hashed in parallel.
    """
    return dict(sorted(_hash_each(directory)))


def directory_hash(directory):
    """SHA-256 over the digests of the files in ``directory``, taken in name order."""
    names = _file_names(directory)
    combined = hashlib.sha256()
    with ThreadPoolExecutor() as pool:
        digests = pool.map(
            lambda name: file_hash(os.path.join(directory, name)), names
        )
        for digest in digests:
            combined.update(digest)
    return combined.digest()


def _parse(argv, description):
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("directory", help="directory whose files are hashed")
    return parser.parse_args(argv).directory


def map_main(argv=None):
    """Print ``name - hexdigest`` for every file of a directory as each is done."""
    directory = _parse(argv, "Hash every file of a directory in parallel.")
    for name, digest in _hash_each(directory):
        print(f"{name} - {digest.hex()}")
    return 0


def fold_main(argv=None):
    """Print the combined hash of the files of a directory."""
    directory = _parse(argv, "Hash a directory from the hashes of its files.")
    print(directory_hash(directory).hex())
    return 0