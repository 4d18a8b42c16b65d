"""Turn a built directory tree into report lines."""

from typing import List

from .dirtree import DirectoryNode
from .utils.formatting import OUT_FORMAT, fix_path


def format_tree(
    root: DirectoryNode,
    line_format: str = OUT_FORMAT,
    list_all: bool = False,
    summarise: bool = False,
) -> List[str]:
    """Return the report lines for ``root``.

    Files come first when ``list_all`` is set, then the lines of every
    sub-directory unless ``summarise`` is set, and finally the line for
    ``root`` itself. Callers must not set both flags.

    Args:
        root: Tree to report on.
        line_format: Template with ``{size}`` and ``{path}`` fields.
        list_all: Write a line for every file, not just directories.
        summarise: Write only the total for ``root``.

    Returns:
        list: One string per reported entry.
    """
    out = []
    # (node, done): a node is pushed again once its files and sub-directories
    # are scheduled, so its own line comes after theirs.
    stack = [(root, False)]
    while stack:
        node, done = stack.pop()
        if done:
            out.append(line_format.format(size=node.size, path=fix_path(node.path)))
            continue
        if list_all:
            for f in node.files:
                out.append(line_format.format(size=f.size, path=fix_path(f.path)))
        stack.append((node, True))
        if not summarise:
            stack.extend((subdir, False) for subdir in reversed(node.subdirs))
    return out
