"""
I/O module for OverlapSmith.

Handles read registries and overlap serialisation:
- files.py: gzip-aware file opening
- registry.py: read name to id registry built from FASTA/FASTQ
- overlap_writer.py: tab-separated output of finalized overlaps
"""

from .files import (
    is_gzipped,
    open_file,
)

from .registry import (
    build_read_registry,
    detect_read_format,
    iter_read_lengths,
    read_names_by_id,
)

from .overlap_writer import (
    format_overlap,
    write_overlaps,
)

__all__ = [
    "is_gzipped",
    "open_file",
    "build_read_registry",
    "detect_read_format",
    "iter_read_lengths",
    "read_names_by_id",
    "format_overlap",
    "write_overlaps",
]
