"""Filesystem capabilities consumed by the directory tree builder."""

import os
import stat
from dataclasses import dataclass
from typing import List

from .errors import BlockSizeProbeFailed, from_os_error


@dataclass(frozen=True)
class EntryInfo:
    """What inspecting a single filesystem object tells us."""

    is_dir: bool
    size: int


class FileSystem:
    """Read-only access to a filesystem hierarchy.

    Subclasses raise the errors from :mod:`dutree.errors` instead of OSError.
    """

    def inspect(self, path) -> EntryInfo:
        """Return information about ``path`` without following symlinks."""
        raise NotImplementedError

    def list_entries(self, path) -> List[str]:
        """Return the names of the entries of directory ``path``."""
        raise NotImplementedError

    def block_size(self, path) -> int:
        """Return the block size of the filesystem holding ``path``."""
        raise NotImplementedError


class OsFileSystem(FileSystem):
    """The filesystem of the running operating system."""

    def inspect(self, path) -> EntryInfo:
        try:
            st = os.lstat(path)
        except OSError as e:
            raise from_os_error(path, e) from e
        return EntryInfo(is_dir=stat.S_ISDIR(st.st_mode), size=st.st_size)

    def list_entries(self, path) -> List[str]:
        # Sorted by name so the report is stable between runs.
        try:
            with os.scandir(path) as it:
                return sorted(entry.name for entry in it)
        except OSError as e:
            raise from_os_error(path, e) from e

    def block_size(self, path) -> int:
        try:
            bsize = os.statvfs(path).f_bsize
        except (OSError, AttributeError) as e:
            raise BlockSizeProbeFailed(f"{path}: {e}") from e
        if bsize <= 0:
            raise BlockSizeProbeFailed(f"{path}: unexpected block size {bsize}")
        return bsize
