"""Utility functions for sizing and formatting output."""

import os

# Posix says sizes are reported in 512-byte units, `-k` switches to 1024.
POSIX_UNIT_SIZE = 512
KILO_UNIT_SIZE = 1024

# Used when the filesystem block size cannot be probed.
DEFAULT_BLOCK_SIZE = 4096

OUT_FORMAT = "{size}\t{path}"


def calc_size(size_bytes, block_size, unit_size):
    """Convert a size in bytes into the number of display units allocated.

    Filesystems allocate space in blocks rather than bytes, so the space in
    use is the byte count rounded up to a whole number of blocks. That
    allocation is then rounded up to a whole number of display units. An
    empty file still occupies one block.

    Args:
        size_bytes: Size in bytes, must not be negative.
        block_size: Filesystem block size in bytes.
        unit_size: Display unit size in bytes.

    Returns:
        int: Number of display units.

    Raises:
        ValueError: If any of the arguments is out of range.
    """
    if size_bytes < 0:
        raise ValueError(f"size must not be negative: {size_bytes}")
    if block_size <= 0:
        raise ValueError(f"unexpected block size: {block_size}")
    if unit_size <= 0:
        raise ValueError(f"unexpected unit size: {unit_size}")

    blocks = max(1, -(-size_bytes // block_size))
    return -(-(blocks * block_size) // unit_size)


def fix_path(path):
    """Prefix relative paths with './' unless they already start with '.'.

    Args:
        path: Path to normalize.

    Returns:
        str: The cleaned path, absolute paths are returned as is.
    """
    path = os.path.normpath(path)
    if os.path.isabs(path) or path.startswith("."):
        return path
    return "./" + path
