#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OverlapSmith v0.1.0

Version information.

Author: OverlapSmith Development Team
"""

__version__ = "0.1.0"

# OverlapSmith v0.1.0
