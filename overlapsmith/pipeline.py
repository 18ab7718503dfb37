#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OverlapSmith v0.1.0

Overlap stage: parse, deduplicate, validate and extend.

The collection returned by prepare_overlaps() is built once and extended
once; callers downstream must treat it as read-only, which lets it be
shared between worker threads without locking.

Author: OverlapSmith Development Team
"""

import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .config.schema import OverlapSettings, overlap_settings
from .overlaps.extension import extend_overlaps
from .overlaps.parser import parse_paf
from .overlaps.records import Overlap

logger = logging.getLogger(__name__)


def prepare_overlaps(
    overlaps_path: Union[str, Path],
    name_to_id: Mapping[str, int],
    config: Optional[Union[Dict[str, Any], OverlapSettings]] = None,
    log: Optional[logging.Logger] = None,
) -> List[Overlap]:
    """
    Run the overlap stage end to end.

    Args:
        overlaps_path: Overlap file from the aligner
        name_to_id: Read name to numeric id registry
        config: Configuration dictionary or OverlapSettings (defaults if None)
        log: Logger receiving diagnostics (module logger if None)

    Returns:
        Finalized overlaps in input order
    """
    log = log or logger
    settings = config if isinstance(config, OverlapSettings) else overlap_settings(config)

    start = time.time()
    overlaps = parse_paf(
        overlaps_path,
        name_to_id,
        strategy=settings.dedup,
        threshold=settings.threshold,
        min_ratio=settings.min_ratio,
        max_ratio=settings.max_ratio,
        log=log,
    )
    extend_overlaps(overlaps, cap=settings.extension_cap, threads=settings.threads)

    log.debug(
        f"Overlap stage finished in {time.time() - start:.2f}s "
        f"(dedup={settings.dedup.value}, threads={settings.threads})"
    )
    return overlaps

# OverlapSmith v0.1.0
