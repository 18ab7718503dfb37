#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OverlapSmith v0.1.0

Read registry: numbering of reads by name.

Overlap records refer to reads by numeric id. Ids are assigned in the order
reads appear in the FASTA/FASTQ read set, starting at 0.

Author: OverlapSmith Development Team
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, Mapping, Tuple, Union

from Bio import SeqIO

from .files import open_file

logger = logging.getLogger(__name__)

FASTA_SUFFIXES = {'.fa', '.fasta', '.fna', '.fas'}
FASTQ_SUFFIXES = {'.fq', '.fastq'}


def detect_read_format(filepath: Union[str, Path]) -> str:
    """
    Detect whether a read file is FASTA or FASTQ.

    The file extension is checked first (ignoring a trailing .gz); otherwise
    the first non-empty character decides ('>' for FASTA, '@' for FASTQ).

    Returns:
        'fasta' or 'fastq'
    """
    filepath = Path(filepath)
    suffixes = [s.lower() for s in filepath.suffixes if s.lower() not in ('.gz', '.gzip')]
    if suffixes:
        if suffixes[-1] in FASTA_SUFFIXES:
            return 'fasta'
        if suffixes[-1] in FASTQ_SUFFIXES:
            return 'fastq'

    with open_file(filepath, 'r') as handle:
        for line in handle:
            if not line.strip():
                continue
            if line.startswith('>'):
                return 'fasta'
            if line.startswith('@'):
                return 'fastq'
            break

    raise ValueError(f"Cannot determine read format of {filepath}")


def iter_read_lengths(filepath: Union[str, Path]) -> Iterator[Tuple[str, int]]:
    """
    Yield (read name, read length) for every read in a FASTA/FASTQ file.

    Args:
        filepath: Read file (can be gzipped)
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Read file not found: {filepath}")

    fmt = detect_read_format(filepath)
    with open_file(filepath, 'r') as handle:
        for record in SeqIO.parse(handle, fmt):
            yield record.id, len(record.seq)


def build_read_registry(filepath: Union[str, Path]) -> Dict[str, int]:
    """
    Build the read name to id mapping from a read set.

    Args:
        filepath: FASTA/FASTQ read file (can be gzipped)

    Returns:
        Dictionary mapping read name to id

    Raises:
        FileNotFoundError: If the read file does not exist
        ValueError: If a read name occurs more than once
    """
    name_to_id: Dict[str, int] = {}
    for name, _ in iter_read_lengths(filepath):
        if name in name_to_id:
            raise ValueError(f"Duplicate read name in {filepath}: {name}")
        name_to_id[name] = len(name_to_id)

    logger.info(f"Registered {len(name_to_id)} reads from {filepath}")
    return name_to_id


def read_names_by_id(name_to_id: Mapping[str, int]) -> Dict[int, str]:
    """Invert a read registry."""
    return {read_id: name for name, read_id in name_to_id.items()}

# OverlapSmith v0.1.0
