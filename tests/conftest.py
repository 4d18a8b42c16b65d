"""Shared fixtures for the dutree tests."""

import posixpath

import pytest

from dutree.errors import BlockSizeProbeFailed, NotFound, PermissionDenied, ReadError
from dutree.fs import EntryInfo, FileSystem


class FakeFileSystem(FileSystem):
    """An in-memory filesystem.

    ``tree`` maps names to either a byte count (a file) or another mapping
    (a directory) and stands for the current directory. Absolute paths are
    looked up in the same mapping. Listing order is insertion order.
    """

    def __init__(self, tree, dir_size=4096, block_size=4096, denied=(), broken=()):
        self.tree = tree
        self.dir_size = dir_size
        self.fs_block_size = block_size
        self.denied = {posixpath.normpath(p) for p in denied}
        self.broken = {posixpath.normpath(p) for p in broken}
        self.calls = []

    def _lookup(self, path):
        norm = posixpath.normpath(path).lstrip("/")
        node = self.tree
        if norm in (".", ""):
            return node
        for part in norm.split("/"):
            if not isinstance(node, dict) or part not in node:
                raise NotFound(path, "No such file or directory")
            node = node[part]
        return node

    def inspect(self, path):
        self.calls.append(("inspect", path))
        if posixpath.normpath(path) in self.broken:
            raise ReadError(path, "Input/output error")
        node = self._lookup(path)
        is_dir = isinstance(node, dict)
        return EntryInfo(is_dir=is_dir, size=self.dir_size if is_dir else node)

    def list_entries(self, path):
        self.calls.append(("list_entries", path))
        if posixpath.normpath(path) in self.denied:
            raise PermissionDenied(path, "Permission denied")
        node = self._lookup(path)
        if not isinstance(node, dict):
            raise ReadError(path, "Not a directory")
        return list(node)

    def block_size(self, path):
        self.calls.append(("block_size", path))
        if self.fs_block_size is None:
            raise BlockSizeProbeFailed(path)
        return self.fs_block_size


@pytest.fixture
def testdata():
    """The files used by the multiple directories scenarios."""
    return {
        "testdata": {
            "exactly_4k.txt": 4096,
            "over_4k.txt": 5678,
            "under_4k.txt": 3456,
            "subdir": {"over_4m.txt": 5678 * 1024},
        }
    }


@pytest.fixture
def fake_fs(testdata):
    """A fake filesystem holding the ``testdata`` tree."""
    return FakeFileSystem(testdata)


@pytest.fixture
def diagnostics():
    """A list collecting diagnostic messages."""
    return []
