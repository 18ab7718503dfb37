"""
OverlapSmith v0.1.0

Configuration management for OverlapSmith.

Author: OverlapSmith Development Team
"""

from .schema import (
    DEFAULT_CONFIG,
    ConfigValidationError,
    OverlapSettings,
    load_config,
    overlap_settings,
    save_config_template,
    validate_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigValidationError",
    "OverlapSettings",
    "load_config",
    "overlap_settings",
    "save_config_template",
    "validate_config",
]
