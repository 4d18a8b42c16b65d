"""Directory trees with accumulated disk usage.

A tree is built once by walking the filesystem depth first and is never
modified afterwards. Every directory node owns its files and sub-directories
exclusively, so reporting on it any number of times does not touch the
filesystem again.
"""

import os
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .errors import BlockSizeProbeFailed, FileSystemError
from .fs import EntryInfo, FileSystem, OsFileSystem
from .utils.diagnostics import echo_error
from .utils.formatting import DEFAULT_BLOCK_SIZE, POSIX_UNIT_SIZE, calc_size


@dataclass(frozen=True)
class FileEntry:
    """A file that is not a directory and the units allocated to it."""

    path: str
    size: int


@dataclass(frozen=True)
class DirectoryNode:
    """A directory and everything beneath it.

    Attributes:
        path: Path of the directory as it was reached.
        size: Units allocated to the directory itself plus everything beneath.
        own_size: Units allocated to the directory object alone.
        files: Files directly in the directory, in listing order.
        subdirs: Sub-directories, in listing order.
        block_size: Filesystem block size used for this node.
        unit_size: Display unit size.
    """

    path: str
    size: int
    own_size: int
    files: Tuple[FileEntry, ...] = ()
    subdirs: Tuple["DirectoryNode", ...] = ()
    block_size: int = DEFAULT_BLOCK_SIZE
    unit_size: int = POSIX_UNIT_SIZE


def probe_block_size(fs: FileSystem, path) -> int:
    """Return the block size of the filesystem holding ``path``, or 4096."""
    try:
        return fs.block_size(path)
    except BlockSizeProbeFailed:
        return DEFAULT_BLOCK_SIZE


def build_tree(
    path,
    unit_size: int = POSIX_UNIT_SIZE,
    fs: Optional[FileSystem] = None,
    report: Callable[[str], None] = echo_error,
) -> DirectoryNode:
    """Build a directory tree rooted at ``path``.

    Errors met on the way are passed to ``report`` and never abort the walk:
    a path that cannot be inspected still yields a node one block in size,
    and an entry that cannot be inspected is skipped.

    Args:
        path: File or directory to start from.
        unit_size: Display unit size in bytes.
        fs: Filesystem to read, the operating system's by default.
        report: Callable receiving one diagnostic message per error.

    Returns:
        DirectoryNode: Root of the fully built tree.
    """
    if fs is None:
        fs = OsFileSystem()

    try:
        info = fs.inspect(path)
    except FileSystemError as e:
        report(str(e))
        block_size = probe_block_size(fs, path)
        own_size = calc_size(0, block_size, unit_size)
        return DirectoryNode(
            path=path,
            size=own_size,
            own_size=own_size,
            block_size=block_size,
            unit_size=unit_size,
        )

    return _build_node(fs, path, info, unit_size, report)


class _Frame:
    """A directory whose entries are still being visited."""

    def __init__(self, fs, path, info: EntryInfo, unit_size, report):
        self.path = path
        self.block_size = probe_block_size(fs, path)
        self.own_size = calc_size(info.size, self.block_size, unit_size)
        self.total = self.own_size
        self.files = []
        self.subdirs = []

        names = []
        if info.is_dir:
            try:
                names = fs.list_entries(path)
            except FileSystemError as e:
                report(str(e))
        self.names = iter(names)

    def close(self, unit_size) -> DirectoryNode:
        return DirectoryNode(
            path=self.path,
            size=self.total,
            own_size=self.own_size,
            files=tuple(self.files),
            subdirs=tuple(self.subdirs),
            block_size=self.block_size,
            unit_size=unit_size,
        )


def _build_node(fs, path, info: EntryInfo, unit_size, report) -> DirectoryNode:
    # Directories still being visited, innermost last.
    stack = [_Frame(fs, path, info, unit_size, report)]
    while True:
        frame = stack[-1]
        name = next(frame.names, None)
        if name is None:
            node = frame.close(unit_size)
            stack.pop()
            if not stack:
                return node
            parent = stack[-1]
            parent.subdirs.append(node)
            parent.total += node.size
            continue

        entry_path = os.path.join(frame.path, name)
        try:
            entry = fs.inspect(entry_path)
        except FileSystemError as e:
            report(str(e))
            continue

        if entry.is_dir:
            stack.append(_Frame(fs, entry_path, entry, unit_size, report))
        else:
            size = calc_size(entry.size, frame.block_size, unit_size)
            frame.files.append(FileEntry(path=entry_path, size=size))
            frame.total += size
