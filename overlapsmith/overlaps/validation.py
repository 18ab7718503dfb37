#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OverlapSmith v0.1.0

Geometric validation of candidate overlaps.

A candidate is accepted when the aligned spans on both reads have similar
lengths and the unaligned remainders fit one of four layouts:

    QUERY_CONTAINED    query (almost) fully covered by the alignment
    TARGET_CONTAINED   target (almost) fully covered by the alignment
    PREFIX             query suffix overlaps the target prefix
    SUFFIX             query prefix overlaps the target suffix

Remainders up to OL_THRESHOLD bases are treated as negligible. The defaults
must stay fixed for output to remain compatible with downstream stages.

Author: OverlapSmith Development Team
"""

from enum import Enum
from typing import Optional

from .records import Overlap, Strand

OL_THRESHOLD = 2500
MIN_LENGTH_RATIO = 0.9
MAX_LENGTH_RATIO = 1.111


class OverlapTopology(Enum):
    """Layout of an accepted overlap."""
    QUERY_CONTAINED = "query_contained"
    TARGET_CONTAINED = "target_contained"
    PREFIX = "prefix"
    SUFFIX = "suffix"


def _spans_in_bounds(length: int, start: int, end: int) -> bool:
    return 0 <= start <= end <= length


def classify_overlap(
    qlen: int,
    qstart: int,
    qend: int,
    strand: Strand,
    tlen: int,
    tstart: int,
    tend: int,
    threshold: int = OL_THRESHOLD,
    min_ratio: float = MIN_LENGTH_RATIO,
    max_ratio: float = MAX_LENGTH_RATIO,
) -> Optional[OverlapTopology]:
    """
    Classify a candidate overlap by its layout.

    Branches are tested in a fixed order and the first match wins, so a
    candidate that is both query-contained and a prefix overlap is reported
    as QUERY_CONTAINED.

    Args:
        qlen, qstart, qend: Query length and aligned span
        strand: Target orientation relative to the query
        tlen, tstart, tend: Target length and aligned span
        threshold: Largest unaligned remainder treated as negligible
        min_ratio: Lowest accepted target/query span ratio
        max_ratio: Highest accepted target/query span ratio

    Returns:
        OverlapTopology of the first matching layout, or None if rejected
    """
    if not (_spans_in_bounds(qlen, qstart, qend) and _spans_in_bounds(tlen, tstart, tend)):
        return None

    query_span = qend - qstart
    target_span = tend - tstart
    # An empty query span has no ratio; it is rejected even for short reads
    # that would otherwise count as contained
    if query_span == 0:
        return None

    ratio = target_span / query_span
    if ratio < min_ratio or ratio > max_ratio:
        return None

    if qlen - query_span <= threshold:
        return OverlapTopology.QUERY_CONTAINED

    if tlen - target_span <= threshold:
        return OverlapTopology.TARGET_CONTAINED

    # Bring the query span into the target's orientation
    if strand is Strand.REVERSE:
        qstart, qend = qlen - qend, qlen - qstart

    if qstart > threshold and tstart <= threshold and qlen - qend <= threshold:
        return OverlapTopology.PREFIX

    if tstart > threshold and qstart <= threshold and tlen - tend <= threshold:
        return OverlapTopology.SUFFIX

    return None


def is_valid_overlap(
    qlen: int,
    qstart: int,
    qend: int,
    strand: Strand,
    tlen: int,
    tstart: int,
    tend: int,
    threshold: int = OL_THRESHOLD,
    min_ratio: float = MIN_LENGTH_RATIO,
    max_ratio: float = MAX_LENGTH_RATIO,
) -> bool:
    """
    Decide whether a candidate overlap is geometrically acceptable.

    Example:
        >>> is_valid_overlap(10000, 100, 9900, Strand.FORWARD, 10000, 50, 9850)
        True
    """
    topology = classify_overlap(
        qlen, qstart, qend, strand, tlen, tstart, tend,
        threshold=threshold, min_ratio=min_ratio, max_ratio=max_ratio,
    )
    return topology is not None


def overlap_topology(overlap: Overlap, threshold: int = OL_THRESHOLD) -> Optional[OverlapTopology]:
    """Classify an existing overlap record with the default ratio bounds."""
    return classify_overlap(
        overlap.qlen, overlap.qstart, overlap.qend, overlap.strand,
        overlap.tlen, overlap.tstart, overlap.tend,
        threshold=threshold,
    )

# OverlapSmith v0.1.0
