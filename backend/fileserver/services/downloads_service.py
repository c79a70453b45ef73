"""Downloads directory service — listing with optional hashing and deletion.

All methods are blocking filesystem calls; route handlers run them in the
threadpool. The only state is the directory path, fixed at construction.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from fileserver.schemas.files import FileRecord
from fileserver.utils.hashing import CHUNK_SIZE, hash_file

logger = logging.getLogger(__name__)


def display_name(name: str) -> str:
    """Valid UTF-8 form of a filesystem name, undecodable bytes become U+FFFD."""
    return os.fsencode(name).decode("utf-8", "replace")


class UnknownFileError(FileNotFoundError):
    """Delete target does not exist in the downloads directory."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown file {name}")
        self.name = name


class DeleteFailedError(OSError):
    """Delete target exists but could not be removed."""

    def __init__(self, name: str, cause: OSError) -> None:
        super().__init__(f"Failed to delete file {name}: {cause}")
        self.name = name
        self.cause = cause


class DownloadsService:
    """Flat view over a single downloads directory."""

    def __init__(self, directory: str | Path, chunk_size: int = CHUNK_SIZE) -> None:
        self._directory = Path(directory)
        self._chunk_size = chunk_size

    @property
    def directory(self) -> Path:
        return self._directory

    def ensure_directory(self) -> None:
        """Create the directory (with parents) if missing."""
        self._directory.mkdir(parents=True, exist_ok=True)

    def list_files(self, algorithm: str = "") -> list[FileRecord]:
        """Snapshot of every entry, most recently modified first.

        Any OSError aborts the whole listing; a partial result is never
        returned. Unsupported algorithms leave ``hash_sum`` unset.
        """
        records: list[FileRecord] = []
        for entry in self._directory.iterdir():
            info = entry.stat()
            hash_sum = None
            if algorithm:
                hash_sum = hash_file(entry, algorithm, self._chunk_size)
            records.append(
                FileRecord(
                    name=display_name(entry.name),
                    size=info.st_size,
                    last_modified=int(info.st_mtime),
                    hash_sum=hash_sum,
                )
            )

        # sorted() is stable, ties keep enumeration order
        return sorted(records, key=lambda r: r.last_modified, reverse=True)

    def resolve(self, name: str) -> Path | None:
        """Join ``name`` onto the directory; None unless it names a direct entry.

        The check is lexical, symlinks are not followed, so the returned path
        names the directory entry itself. The directory itself is not an entry.
        """
        base = os.path.normpath(self._directory)
        candidate = os.path.normpath(os.path.join(base, name.lstrip("/")))
        if candidate == base or os.path.dirname(candidate) != base:
            return None
        return Path(candidate)

    def delete_file(self, name: str) -> None:
        """Remove ``name`` from the directory.

        Symlinks are removed themselves, never their targets; empty
        directories are removed too. Raises UnknownFileError if it is
        absent, DeleteFailedError if the lookup or the removal fails.
        """
        path = self.resolve(name)
        if path is None:
            raise UnknownFileError(name)

        try:
            mode = path.lstat().st_mode
        except (FileNotFoundError, NotADirectoryError):
            raise UnknownFileError(name) from None
        except OSError as exc:
            raise DeleteFailedError(name, exc) from exc

        try:
            if stat.S_ISDIR(mode):
                path.rmdir()
            else:
                path.unlink()
        except OSError as exc:
            raise DeleteFailedError(name, exc) from exc

        logger.info("Deleted %s", path)
