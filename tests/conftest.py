#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OverlapSmith v0.1.0

Pytest configuration and shared fixtures.

Author: OverlapSmith Development Team
"""

import pytest
from pathlib import Path
import tempfile
import shutil


def paf_line(qname, qlen, qstart, qend, strand, tname, tlen, tstart, tend, extra=("9700", "9800", "60")):
    """Build one tab-separated overlap line (without newline)."""
    fields = [qname, qlen, qstart, qend, strand, tname, tlen, tstart, tend, *extra]
    return "\t".join(str(f) for f in fields)


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="overlapsmith_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def read_registry():
    """Small read name to id registry."""
    return {"readA": 0, "readB": 1, "readC": 2}


@pytest.fixture
def write_paf(temp_output_dir):
    """Factory writing overlap lines to a file and returning its path."""
    def _write(lines, name="overlaps.paf", trailing_newline=True, newline="\n"):
        path = temp_output_dir / name
        text = newline.join(lines)
        if trailing_newline and lines:
            text += newline
        with open(path, "w", newline="") as f:
            f.write(text)
        return path
    return _write


@pytest.fixture
def simple_fasta():
    """Three reads in FASTA format."""
    return (
        ">readA description\nACGTACGTAC\n"
        ">readB\nGGGGCCCC\n"
        ">readC\nATATATATATAT\n"
    )


@pytest.fixture
def simple_fastq():
    """Two reads in FASTQ format."""
    return """@read1
ATCGATCGATCG
+
IIIIIIIIIIII
@read2
GCTAGCTAGCTA
+
IIIIIIIIIIII
"""

# OverlapSmith v0.1.0
