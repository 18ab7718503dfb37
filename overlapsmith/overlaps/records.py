#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OverlapSmith v0.1.0

Overlap record data structures.

An overlap relates two reads (query and target) through an aligned span on
each. Coordinates are always expressed in each read's own forward
orientation; the strand tells how the target is oriented relative to the
query.

    Forward:  Q: ------[=========]---->
              T:    ---[=========]-------->

    Reverse:  Q: ------[=========]---->
              T: <-----[=========]----
                 (target span read right-to-left against the query)

Author: OverlapSmith Development Team
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OverlapFormatError(ValueError):
    """Raised when an overlap line cannot be parsed."""
    pass


class Strand(Enum):
    """Orientation of the target read relative to the query read."""
    FORWARD = "+"
    REVERSE = "-"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, char: str) -> 'Strand':
        """
        Parse the canonical strand character.

        Args:
            char: '+' or '-'

        Returns:
            Matching Strand

        Raises:
            OverlapFormatError: If the character is not a valid strand
        """
        if char == "+":
            return cls.FORWARD
        if char == "-":
            return cls.REVERSE
        raise OverlapFormatError(f"Invalid strand character: {char!r}")


@dataclass
class Overlap:
    """
    Pairwise overlap between two reads.

    Attributes:
        qid: Query read id
        qlen: Query read length
        qstart: Start of the aligned span on the query
        qend: End of the aligned span on the query
        strand: Target orientation relative to the query
        tid: Target read id
        tlen: Target read length
        tstart: Start of the aligned span on the target
        tend: End of the aligned span on the target
        cigar: Optional alignment operations, carried through untouched

    Two overlaps are equal when they describe the same aligned spans for the
    same read pair; lengths and cigar are not compared.
    """
    qid: int
    qlen: int
    qstart: int
    qend: int
    strand: Strand
    tid: int
    tlen: int
    tstart: int
    tend: int
    cigar: Optional[str] = None

    def __eq__(self, other):
        if not isinstance(other, Overlap):
            return NotImplemented
        return (
            self.qid == other.qid
            and self.qstart == other.qstart
            and self.qend == other.qend
            and self.strand == other.strand
            and self.tid == other.tid
            and self.tstart == other.tstart
            and self.tend == other.tend
        )

    def query_overlap_length(self) -> int:
        """Length of the aligned span on the query."""
        return self.qend - self.qstart

    def target_overlap_length(self) -> int:
        """Length of the aligned span on the target."""
        return self.tend - self.tstart

    def return_other_id(self, read_id: int) -> int:
        """Return the id of the read on the other side of the overlap."""
        if self.qid == read_id:
            return self.tid
        return self.qid

    def __str__(self) -> str:
        return (
            f"{self.qid}:{self.qstart}-{self.qend} {self.strand} "
            f"{self.tid}:{self.tstart}-{self.tend}"
        )

# OverlapSmith v0.1.0
