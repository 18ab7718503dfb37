"""
Serialisation of finalized overlaps.

Output uses the same nine leading columns as the input, with read names
restored from the registry, followed by a cigar column that is empty when no
alignment is attached.
"""

import logging
from pathlib import Path
from typing import Iterable, Mapping, Union

from ..overlaps.records import Overlap
from .files import open_file

logger = logging.getLogger(__name__)


def format_overlap(overlap: Overlap, names: Mapping[int, str]) -> str:
    """
    Format one overlap as a tab-separated line (without newline).

    Args:
        overlap: Overlap to format
        names: Read id to read name mapping
    """
    return "\t".join([
        names[overlap.qid],
        str(overlap.qlen),
        str(overlap.qstart),
        str(overlap.qend),
        str(overlap.strand),
        names[overlap.tid],
        str(overlap.tlen),
        str(overlap.tstart),
        str(overlap.tend),
        overlap.cigar if overlap.cigar is not None else "",
    ])


def write_overlaps(
    overlaps: Iterable[Overlap],
    names: Mapping[int, str],
    filepath: Union[str, Path],
) -> int:
    """
    Write overlaps to a tab-separated file.

    Args:
        overlaps: Overlaps to write
        names: Read id to read name mapping
        filepath: Output path (gzipped if it ends in .gz)

    Returns:
        Number of overlaps written
    """
    count = 0
    with open_file(filepath, 'w') as f:
        for overlap in overlaps:
            f.write(format_overlap(overlap, names) + "\n")
            count += 1

    logger.info(f"Wrote {count} overlaps to {filepath}")
    return count
