#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for OverlapSmith.

This module provides the main CLI entry point and all subcommands for
the OverlapSmith overlap stage.
"""

import logging
import sys
from pathlib import Path

import click
import yaml

from .version import __version__
from .config.schema import (
    ConfigValidationError,
    load_config,
    overlap_settings,
    save_config_template,
    validate_config,
)
from .io import build_read_registry, read_names_by_id, write_overlaps
from .overlaps import DedupStrategy, OverlapFileError, OverlapFormatError
from .pipeline import prepare_overlaps

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    OverlapSmith: overlap ingestion for long-read error correction

    Parses pairwise read overlaps, drops self, duplicate and geometrically
    invalid overlaps, and extends the survivors toward the read ends.
    """
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='overlapsmith_config.yaml',
              help='Output configuration file path')
def config_init(output):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating configuration template: {output}")

    try:
        save_config_template(Path(output))
        click.echo(f"✓ Configuration file created: {output}")
    except OSError as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        cfg = load_config(Path(config_file))
    except ConfigValidationError as e:
        click.echo(f"✗ Error validating configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(cfg)
    if errors:
        click.echo("\n✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True))
@click.option('--format', '-f', type=click.Choice(['yaml', 'summary']), default='summary',
              help='Output format')
def config_show(config_file, format):
    """Display configuration settings."""
    try:
        cfg = load_config(Path(config_file))
    except ConfigValidationError as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    if format == 'yaml':
        click.echo(yaml.dump(cfg, default_flow_style=False, sort_keys=False))
        return

    click.echo(f"Configuration from: {config_file}")
    click.echo("=" * 60)
    ovl = cfg['overlaps']
    click.echo("\nOverlap Settings:")
    click.echo(f"  Threshold: {ovl['threshold']} bp")
    click.echo(f"  Span ratio: {ovl['min_ratio']} - {ovl['max_ratio']}")
    click.echo(f"  Extension cap: {ovl['extension_cap']} bp")
    click.echo(f"  Deduplication: {ovl['dedup']}")
    click.echo("\nHardware Settings:")
    click.echo(f"  Threads: {cfg['hardware']['threads']}")


# ============================================================================
# Overlap Stage
# ============================================================================

@main.command()
@click.argument('reads', type=click.Path(exists=True, dir_okay=False))
@click.argument('overlaps', type=click.Path(dir_okay=False))
@click.argument('output', type=click.Path(dir_okay=False))
@click.option('--threads', '-t', type=click.IntRange(min=1), default=None,
              help='Number of threads used for overlap extension')
@click.option('--dedup', type=click.Choice([s.value for s in DedupStrategy]), default=None,
              help='Strategy for repeated read pairs (default: ordered)')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True), default=None,
              help='YAML configuration file')
def overlaps(reads, overlaps, output, threads, dedup, config_file):
    """
    Process an overlap file.

    READS is the FASTA/FASTQ read set, OVERLAPS the aligner output and
    OUTPUT the file receiving the finalized overlaps.
    """
    logger = logging.getLogger("overlapsmith")

    try:
        cfg = load_config(Path(config_file) if config_file else None)
        if threads is not None:
            cfg['hardware']['threads'] = threads
        if dedup is not None:
            cfg['overlaps']['dedup'] = dedup
        settings = overlap_settings(cfg)

        name_to_id = build_read_registry(reads)
        finalized = prepare_overlaps(overlaps, name_to_id, settings, log=logger)
        write_overlaps(finalized, read_names_by_id(name_to_id), output)
    except (OverlapFormatError, OverlapFileError, ConfigValidationError, OSError, ValueError) as e:
        click.echo(f"✗ Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Wrote {len(finalized)} overlaps to {output}")


if __name__ == '__main__':
    main()
