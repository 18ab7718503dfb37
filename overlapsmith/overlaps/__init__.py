"""
Overlap processing for OverlapSmith.

Main Components:
    - Strand, Overlap: overlap record data structures
    - is_valid_overlap / classify_overlap: geometric validation
    - extend_overlaps: in-place, strand-aware boundary extension
    - DedupStrategy, select_primary_overlaps: handling of repeated read pairs
    - parse_paf: streaming overlap file parser
"""

from .records import (
    Overlap,
    OverlapFormatError,
    Strand,
)

from .validation import (
    MAX_LENGTH_RATIO,
    MIN_LENGTH_RATIO,
    OL_THRESHOLD,
    OverlapTopology,
    classify_overlap,
    is_valid_overlap,
    overlap_topology,
)

from .extension import (
    EXTENSION_CAP,
    extend_overlap,
    extend_overlaps,
)

from .dedup import (
    DedupStrategy,
    find_primary_overlaps,
    pair_key,
    select_primary_overlaps,
)

from .parser import (
    OverlapFileError,
    parse_paf,
)

__all__ = [
    # Records
    'Overlap',
    'OverlapFormatError',
    'Strand',

    # Validation
    'MAX_LENGTH_RATIO',
    'MIN_LENGTH_RATIO',
    'OL_THRESHOLD',
    'OverlapTopology',
    'classify_overlap',
    'is_valid_overlap',
    'overlap_topology',

    # Extension
    'EXTENSION_CAP',
    'extend_overlap',
    'extend_overlaps',

    # Deduplication
    'DedupStrategy',
    'find_primary_overlaps',
    'pair_key',
    'select_primary_overlaps',

    # Parsing
    'OverlapFileError',
    'parse_paf',
]
