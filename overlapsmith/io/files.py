"""
Text file access for read and overlap files.

Existing files are recognised as gzip by their magic bytes, so a compressed
overlap file without a .gz suffix still opens. New files are compressed when
their name ends in .gz or .gzip.
"""

import gzip
from pathlib import Path
from typing import TextIO, Union

GZIP_MAGIC = b'\x1f\x8b'
GZIP_SUFFIXES = ('.gz', '.gzip')


def is_gzipped(filepath: Union[str, Path]) -> bool:
    """True if the file holds gzip data, or will be written as gzip."""
    filepath = Path(filepath)
    if filepath.is_file():
        with open(filepath, 'rb') as f:
            return f.read(2) == GZIP_MAGIC
    return filepath.suffix.lower() in GZIP_SUFFIXES


def open_file(filepath: Union[str, Path], mode: str = 'r') -> TextIO:
    """
    Open a read or overlap file in text mode.

    Args:
        filepath: Path to file
        mode: 'r', 'w' or 'a'

    Returns:
        Text handle, decompressing or compressing as needed
    """
    if mode not in ('r', 'w', 'a'):
        raise ValueError(f"Unsupported file mode: {mode!r}")

    filepath = Path(filepath)
    if mode == 'w':
        compressed = filepath.suffix.lower() in GZIP_SUFFIXES
    else:
        compressed = is_gzipped(filepath)

    if compressed:
        return gzip.open(filepath, mode + 't')
    return open(filepath, mode)
