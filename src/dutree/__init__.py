"""Disk usage of file hierarchies, in the manner of Posix du."""

from .dirtree import DirectoryNode, FileEntry, build_tree
from .fs import EntryInfo, FileSystem, OsFileSystem
from .options import DuOptions
from .report import format_tree
from .utils.formatting import calc_size

__all__ = [
    "DirectoryNode",
    "DuOptions",
    "EntryInfo",
    "FileEntry",
    "FileSystem",
    "OsFileSystem",
    "build_tree",
    "calc_size",
    "format_tree",
]
