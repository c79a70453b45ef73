"""Streaming file hashing utility."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from hashlib import _Hash

CHUNK_SIZE = 64 * 1024  # 64 KB

SUPPORTED_ALGORITHMS: dict[str, Callable[[], _Hash]] = {
    "md5": hashlib.md5,
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
}


def new_hash(algorithm: str) -> _Hash | None:
    """Return a fresh digest for ``algorithm`` or None if it is not supported."""
    factory = SUPPORTED_ALGORITHMS.get(algorithm.lower())
    if factory is None:
        return None
    return factory()


def hash_file(path: Path, algorithm: str, chunk_size: int = CHUNK_SIZE) -> str | None:
    """Hash a file, streaming in chunks. Returns None for unknown algorithms."""
    digest = new_hash(algorithm)
    if digest is None:
        return None
    with open(path, "rb") as f:
        while chunk := f.read(chunk_size):
            digest.update(chunk)
    return digest.hexdigest()
