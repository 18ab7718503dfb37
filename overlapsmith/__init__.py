#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OverlapSmith v0.1.0

Package initialization and version metadata.

Author: OverlapSmith Development Team
"""

from .version import __version__

__all__ = ["__version__"]

# OverlapSmith v0.1.0
