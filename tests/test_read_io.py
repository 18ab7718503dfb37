#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OverlapSmith v0.1.0

Tests for the read registry and overlap writer.

Author: OverlapSmith Development Team
"""

import gzip

import pytest
from overlapsmith.io import (
    build_read_registry,
    detect_read_format,
    format_overlap,
    is_gzipped,
    iter_read_lengths,
    open_file,
    read_names_by_id,
    write_overlaps,
)
from overlapsmith.overlaps import Overlap, Strand, parse_paf


class TestFileHelpers:
    """Test gzip detection and text file opening."""

    def test_gzip_detected_by_content(self, temp_output_dir):
        """Test that a compressed file without a .gz suffix is recognised."""
        path = temp_output_dir / "overlaps.paf"
        with gzip.open(path, "wt") as f:
            f.write("readA\t10000\t100\t9900\t+\treadB\t10000\t50\t9850\n")

        assert is_gzipped(path)
        with open_file(path) as f:
            assert f.readline().startswith("readA\t10000")

    def test_plain_file_with_gz_suffix(self, temp_output_dir):
        """Test that an existing file is judged by content, not by name."""
        path = temp_output_dir / "reads.fa.gz"
        path.write_text(">readA\nACGT\n")

        assert not is_gzipped(path)

    def test_new_file_judged_by_suffix(self, temp_output_dir):
        """Test output paths that do not exist yet."""
        assert is_gzipped(temp_output_dir / "out.paf.GZ")
        assert not is_gzipped(temp_output_dir / "out.paf")

    def test_unsupported_mode(self, temp_output_dir):
        """Test that binary modes are refused."""
        with pytest.raises(ValueError):
            open_file(temp_output_dir / "out.paf", "rb")


class TestReadRegistry:
    """Test building the read name to id registry."""

    def test_fasta_registry(self, temp_output_dir, simple_fasta):
        """Test that ids follow file order."""
        path = temp_output_dir / "reads.fasta"
        path.write_text(simple_fasta)

        assert build_read_registry(path) == {"readA": 0, "readB": 1, "readC": 2}

    def test_fastq_registry(self, temp_output_dir, simple_fastq):
        """Test a FASTQ read set."""
        path = temp_output_dir / "reads.fastq"
        path.write_text(simple_fastq)

        assert build_read_registry(path) == {"read1": 0, "read2": 1}

    def test_gzipped_reads(self, temp_output_dir, simple_fasta):
        """Test a gzip-compressed FASTA file."""
        path = temp_output_dir / "reads.fa.gz"
        with gzip.open(path, "wt") as f:
            f.write(simple_fasta)

        assert build_read_registry(path) == {"readA": 0, "readB": 1, "readC": 2}

    def test_format_sniffed_without_extension(self, temp_output_dir, simple_fastq):
        """Test format detection from file content."""
        path = temp_output_dir / "reads.txt"
        path.write_text(simple_fastq)

        assert detect_read_format(path) == "fastq"

    def test_read_lengths(self, temp_output_dir, simple_fasta):
        """Test read length extraction."""
        path = temp_output_dir / "reads.fasta"
        path.write_text(simple_fasta)

        assert list(iter_read_lengths(path)) == [("readA", 10), ("readB", 8), ("readC", 12)]

    def test_duplicate_names_rejected(self, temp_output_dir):
        """Test that repeated read names are an error."""
        path = temp_output_dir / "reads.fasta"
        path.write_text(">r1\nACGT\n>r1\nGGCC\n")

        with pytest.raises(ValueError):
            build_read_registry(path)

    def test_missing_file(self, temp_output_dir):
        """Test a read file that does not exist."""
        with pytest.raises(FileNotFoundError):
            build_read_registry(temp_output_dir / "missing.fasta")

    def test_invert_registry(self):
        """Test id to name lookup."""
        assert read_names_by_id({"a": 0, "b": 1}) == {0: "a", 1: "b"}


class TestOverlapWriter:
    """Test serialisation of finalized overlaps."""

    names = {0: "readA", 1: "readB"}

    def test_format_without_cigar(self):
        """Test that an absent cigar leaves the last column empty."""
        o = Overlap(0, 10000, 50, 10000, Strand.REVERSE, 1, 10000, 0, 9950)

        line = format_overlap(o, self.names)

        assert line == "readA\t10000\t50\t10000\t-\treadB\t10000\t0\t9950\t"

    def test_format_with_cigar(self):
        """Test that an attached cigar is written through."""
        o = Overlap(0, 10000, 50, 10000, Strand.FORWARD, 1, 10000, 0, 9950, cigar="9950M")

        assert format_overlap(o, self.names).endswith("\t+\treadB\t10000\t0\t9950\t9950M")

    def test_written_file_parses_back(self, temp_output_dir):
        """Test that written overlaps can be read by the parser."""
        overlaps = [
            Overlap(0, 10000, 50, 10000, Strand.FORWARD, 1, 10000, 0, 9950),
            Overlap(1, 10000, 0, 10000, Strand.REVERSE, 0, 10000, 0, 10000),
        ]
        path = temp_output_dir / "out.paf"

        assert write_overlaps(overlaps, self.names, path) == 2
        assert parse_paf(path, {"readA": 0, "readB": 1}) == overlaps

    def test_gzipped_output(self, temp_output_dir):
        """Test writing compressed output."""
        o = Overlap(0, 10000, 50, 10000, Strand.FORWARD, 1, 10000, 0, 9950)
        path = temp_output_dir / "out.paf.gz"

        write_overlaps([o], self.names, path)

        with gzip.open(path, "rt") as f:
            assert f.read().startswith("readA\t10000\t50\t10000\t+")

# OverlapSmith v0.1.0
