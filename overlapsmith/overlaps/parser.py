#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OverlapSmith v0.1.0

Streaming parser for pairwise overlap files.

Input is tab-separated text (PAF-like), one overlap per line. Only the first
nine columns are used:

    qname  qlen  qstart  qend  strand  tname  tlen  tstart  tend  [ignored...]

Lines are dropped without error when a read name is not registered, when
the overlap is a self-overlap, when the read pair was already seen, or when
the candidate fails geometric validation. Malformed numbers or strand
characters abort the whole parse.

Author: OverlapSmith Development Team
"""

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from ..io.files import open_file
from .dedup import DedupStrategy, pair_key, select_primary_overlaps
from .records import Overlap, OverlapFormatError, Strand
from .validation import (
    MAX_LENGTH_RATIO,
    MIN_LENGTH_RATIO,
    OL_THRESHOLD,
    is_valid_overlap,
)

logger = logging.getLogger(__name__)

N_OVERLAP_FIELDS = 9


class OverlapFileError(OSError):
    """Raised when the overlap file cannot be opened."""
    pass


def _parse_coordinate(field: str, name: str) -> int:
    # Unsigned decimal, optionally with a leading '+'
    digits = field[1:] if field.startswith('+') else field
    if not (digits.isascii() and digits.isdigit()):
        raise OverlapFormatError(f"Invalid {name}: {field!r}")
    return int(digits)


def parse_paf(
    path: Union[str, Path],
    name_to_id: Mapping[str, int],
    strategy: Union[DedupStrategy, str] = DedupStrategy.ORDERED,
    threshold: int = OL_THRESHOLD,
    min_ratio: float = MIN_LENGTH_RATIO,
    max_ratio: float = MAX_LENGTH_RATIO,
    log: Optional[logging.Logger] = None,
) -> List[Overlap]:
    """
    Parse an overlap file into validated, deduplicated overlaps.

    Args:
        path: Overlap file (plain or gzipped)
        name_to_id: Read name to numeric id registry
        strategy: Deduplication strategy for repeated read pairs
        threshold: Validation threshold for unaligned remainders
        min_ratio: Lowest accepted target/query span ratio
        max_ratio: Highest accepted target/query span ratio
        log: Logger receiving diagnostics (module logger if None)

    Returns:
        Accepted overlaps in input order

    Raises:
        OverlapFileError: If the file cannot be opened
        OverlapFormatError: If a line has a malformed field
    """
    log = log or logger
    path = Path(path)
    strategy = DedupStrategy.parse(strategy)

    try:
        handle = open_file(path, 'r')
    except OSError as e:
        raise OverlapFileError(f"Cannot open overlap file {path}: {e}") from e

    overlaps: List[Overlap] = []
    processed = set()
    skipped: Dict[str, int] = {'unknown': 0, 'self': 0, 'duplicate': 0, 'invalid': 0}

    with handle:
        for line_no, line in enumerate(handle, start=1):
            if line.endswith('\n'):
                line = line[:-1]
                if line.endswith('\r'):
                    line = line[:-1]
            if not line:
                continue

            data = line.split('\t')

            # Unknown reads are skipped before any other field is inspected
            qid = name_to_id.get(data[0])
            if qid is None:
                skipped['unknown'] += 1
                continue
            if len(data) > 5:
                tid = name_to_id.get(data[5])
                if tid is None:
                    skipped['unknown'] += 1
                    continue
            if len(data) < N_OVERLAP_FIELDS:
                raise OverlapFormatError(
                    f"{path}:{line_no}: expected at least {N_OVERLAP_FIELDS} fields, got {len(data)}"
                )

            try:
                qlen = _parse_coordinate(data[1], 'query length')
                qstart = _parse_coordinate(data[2], 'query start')
                qend = _parse_coordinate(data[3], 'query end')
                strand = Strand.from_char(data[4])
                tlen = _parse_coordinate(data[6], 'target length')
                tstart = _parse_coordinate(data[7], 'target start')
                tend = _parse_coordinate(data[8], 'target end')
            except OverlapFormatError as e:
                raise OverlapFormatError(f"{path}:{line_no}: {e}") from e

            # Cannot have self-overlaps
            if qid == tid:
                skipped['self'] += 1
                continue

            # The first overlap seen between two reads is assumed to be the best one
            key = pair_key(qid, tid, strategy)
            if key is not None:
                if key in processed:
                    skipped['duplicate'] += 1
                    continue
                processed.add(key)

            if is_valid_overlap(
                qlen, qstart, qend, strand, tlen, tstart, tend,
                threshold=threshold, min_ratio=min_ratio, max_ratio=max_ratio,
            ):
                overlaps.append(Overlap(qid, qlen, qstart, qend, strand, tid, tlen, tstart, tend))
            else:
                skipped['invalid'] += 1

    if strategy is DedupStrategy.PRIMARY:
        n_candidates = len(overlaps)
        overlaps = select_primary_overlaps(overlaps)
        skipped['duplicate'] += n_candidates - len(overlaps)

    log.debug(
        "Skipped lines: "
        + ", ".join(f"{reason}={count}" for reason, count in skipped.items())
    )
    log.info(f"Total overlaps {len(overlaps)}")
    return overlaps

# OverlapSmith v0.1.0
