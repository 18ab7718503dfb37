#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OverlapSmith v0.1.0

In-place extension of overlap boundaries.

Aligners often stop short of the read ends. Each accepted overlap is widened
toward the physical ends of both reads, by at most EXTENSION_CAP bases per
side, never past either read's length.

On the reverse strand the target runs opposite to the query, so extending
the target start moves the query end and extending the target end moves the
query start.

Author: OverlapSmith Development Team
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

import numpy as np

from .records import Overlap, Strand

logger = logging.getLogger(__name__)

EXTENSION_CAP = 2500


def extend_overlap(overlap: Overlap, cap: int = EXTENSION_CAP) -> Overlap:
    """
    Widen a single overlap in place.

    Args:
        overlap: Overlap to extend
        cap: Maximum number of bases added on each side

    Returns:
        The same overlap object, for chaining
    """
    o = overlap
    if o.strand is Strand.FORWARD:
        beginning = min(o.tstart, o.qstart, cap)
        o.tstart -= beginning
        o.qstart -= beginning

        end = min(o.tlen - o.tend, o.qlen - o.qend, cap)
        o.tend += end
        o.qend += end
    else:
        beginning = min(o.tstart, o.qlen - o.qend, cap)
        o.tstart -= beginning
        o.qend += beginning

        end = min(o.tlen - o.tend, o.qstart, cap)
        o.tend += end
        o.qstart -= end

    return o


def _extend_slice(overlaps: Sequence[Overlap], indices: np.ndarray, cap: int) -> int:
    for i in indices:
        extend_overlap(overlaps[int(i)], cap)
    return len(indices)


def extend_overlaps(
    overlaps: List[Overlap],
    cap: int = EXTENSION_CAP,
    threads: int = 1,
) -> List[Overlap]:
    """
    Extend every overlap in the collection in place.

    Records are independent, so with ``threads > 1`` the collection is split
    into disjoint contiguous slices and each worker only touches its own
    slice. The result does not depend on the thread count.

    Args:
        overlaps: Accepted overlaps
        cap: Maximum number of bases added on each side
        threads: Number of worker threads

    Returns:
        The same list, for chaining
    """
    if threads < 1:
        raise ValueError(f"threads must be >= 1, got {threads}")

    if threads == 1 or len(overlaps) < 2:
        for overlap in overlaps:
            extend_overlap(overlap, cap)
        return overlaps

    n_chunks = min(threads, len(overlaps))
    chunks = np.array_split(np.arange(len(overlaps)), n_chunks)

    with ThreadPoolExecutor(max_workers=n_chunks) as executor:
        futures = [executor.submit(_extend_slice, overlaps, chunk, cap) for chunk in chunks]
        extended = sum(future.result() for future in futures)

    logger.debug(f"Extended {extended} overlaps across {n_chunks} slices")
    return overlaps

# OverlapSmith v0.1.0
