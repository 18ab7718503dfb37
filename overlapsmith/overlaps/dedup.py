#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OverlapSmith v0.1.0

Deduplication strategies for overlaps between the same pair of reads.

    ORDERED    first occurrence of each (qid, tid) pair wins, keyed as
               encountered; (A, B) and (B, A) are distinct pairs
    CANONICAL  first occurrence of each unordered pair wins
    PRIMARY    keep every candidate while parsing, then keep the overlap
               with the longest target span per unordered pair

ORDERED is the default. It assumes the aligner output is sorted so that the
first overlap seen for a pair is the best one.

Author: OverlapSmith Development Team
"""

from collections import defaultdict
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

from .records import Overlap


class DedupStrategy(Enum):
    """How overlaps between the same two reads are collapsed."""
    ORDERED = "ordered"
    CANONICAL = "canonical"
    PRIMARY = "primary"

    @classmethod
    def parse(cls, value) -> 'DedupStrategy':
        """Accept either a DedupStrategy or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown dedup strategy: {value!r} (expected one of: {valid})")


def pair_key(qid: int, tid: int, strategy: DedupStrategy) -> Optional[Tuple[int, int]]:
    """
    Key used to detect repeated pairs while parsing.

    Returns None for PRIMARY, which does not dedup during the parse.
    """
    if strategy is DedupStrategy.ORDERED:
        return (qid, tid)
    if strategy is DedupStrategy.CANONICAL:
        return (qid, tid) if qid <= tid else (tid, qid)
    return None


def find_primary_overlaps(overlaps: List[Overlap]) -> Set[int]:
    """
    Find the primary overlap of every unordered read pair.

    For pairs with several overlaps the one with the longest target span is
    kept; on ties the last one seen wins.

    Args:
        overlaps: Overlaps in input order

    Returns:
        Set of indices into ``overlaps`` that are primary
    """
    ovlps_for_pairs: Dict[Tuple[int, int], List[int]] = defaultdict(list)
    for i, overlap in enumerate(overlaps):
        key = pair_key(overlap.qid, overlap.tid, DedupStrategy.CANONICAL)
        ovlps_for_pairs[key].append(i)

    kept_overlap_ids = set()
    for ids in ovlps_for_pairs.values():
        kept_id = ids[0]
        for i in ids[1:]:
            if overlaps[i].target_overlap_length() >= overlaps[kept_id].target_overlap_length():
                kept_id = i
        kept_overlap_ids.add(kept_id)

    return kept_overlap_ids


def select_primary_overlaps(overlaps: List[Overlap]) -> List[Overlap]:
    """Keep only primary overlaps, preserving input order."""
    primary = find_primary_overlaps(overlaps)
    return [o for i, o in enumerate(overlaps) if i in primary]

# OverlapSmith v0.1.0
