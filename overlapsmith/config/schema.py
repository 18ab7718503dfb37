"""
OverlapSmith v0.1.0

Configuration schema for OverlapSmith.

Defines all available configuration parameters with defaults and validation.

Author: OverlapSmith Development Team
"""

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..overlaps.dedup import DedupStrategy


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Overlap Processing
    # ========================================================================
    'overlaps': {
        'threshold': 2500,  # Unaligned remainder treated as negligible (bp)
        'min_ratio': 0.9,  # Target/query aligned span ratio bounds
        'max_ratio': 1.111,
        'extension_cap': 2500,  # Max bases added per side when extending
        'dedup': 'ordered',  # 'ordered', 'canonical', 'primary'
    },

    # ========================================================================
    # Hardware Settings
    # ========================================================================
    'hardware': {
        'threads': 1,  # Worker threads for overlap extension
    },

    # ========================================================================
    # Output
    # ========================================================================
    'output': {
        'logging': {
            'level': 'INFO',
        },
    },
}

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass
class OverlapSettings:
    """Typed view of the overlap-processing configuration."""
    threshold: int = 2500
    min_ratio: float = 0.9
    max_ratio: float = 1.111
    extension_cap: int = 2500
    dedup: DedupStrategy = DedupStrategy.ORDERED
    threads: int = 1


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file, merging with defaults.

    Args:
        config_path: Path to YAML configuration file (None = defaults only)

    Returns:
        Configuration dictionary
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                user_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in config file {config_path}: {e}")

        if user_config:
            if not isinstance(user_config, dict):
                raise ConfigValidationError(
                    f"Config file {config_path} must contain a mapping at the top level"
                )
            config = _merge_into_defaults(config, user_config)

    return config


def _merge_into_defaults(defaults: Dict, overrides: Dict, prefix: str = '') -> Dict:
    """
    Overlay user settings onto the defaults, section by section.

    Raises:
        ConfigValidationError: If a default section is given a non-mapping value
    """
    merged = dict(defaults)

    for key, value in overrides.items():
        default = merged.get(key)
        if isinstance(default, dict):
            if not isinstance(value, dict):
                raise ConfigValidationError(
                    f"Section '{prefix}{key}' must be a mapping, got {value!r}"
                )
            merged[key] = _merge_into_defaults(default, value, f"{prefix}{key}.")
        else:
            merged[key] = value

    return merged


def save_config_template(output_path: Path):
    """
    Save the default configuration to file.

    Args:
        output_path: Output file path
    """
    with open(output_path, 'w') as f:
        yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False, sort_keys=False)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []
    sections = {
        'overlaps': config.get('overlaps', {}),
        'hardware': config.get('hardware', {}),
        'output': config.get('output', {}),
    }
    if isinstance(sections['output'], dict):
        sections['output.logging'] = sections['output'].get('logging', {})
    for name, section in sections.items():
        if not isinstance(section, dict):
            errors.append(f"Section '{name}' must be a mapping, got {section!r}")
    if errors:
        return errors

    overlaps = sections['overlaps']

    for key in ('threshold', 'extension_cap'):
        value = overlaps.get(key)
        if not _is_int(value) or value < 0:
            errors.append(f"overlaps.{key} must be a non-negative integer, got {value!r}")

    min_ratio = overlaps.get('min_ratio')
    max_ratio = overlaps.get('max_ratio')
    if not _is_number(min_ratio) or not _is_number(max_ratio):
        errors.append(f"overlaps.min_ratio/max_ratio must be numbers, got {min_ratio!r}/{max_ratio!r}")
    elif not 0 < min_ratio <= max_ratio:
        errors.append(f"Invalid ratio bounds: need 0 < min_ratio <= max_ratio, got {min_ratio}/{max_ratio}")

    dedup = overlaps.get('dedup')
    try:
        DedupStrategy.parse(dedup)
    except ValueError as e:
        errors.append(str(e))

    threads = sections['hardware'].get('threads')
    if not _is_int(threads) or threads < 1:
        errors.append(f"hardware.threads must be a positive integer, got {threads!r}")

    level = sections['output.logging'].get('level', 'INFO')
    if str(level).upper() not in VALID_LOG_LEVELS:
        errors.append(f"Invalid logging level: {level}")

    return errors


def overlap_settings(config: Optional[Dict[str, Any]] = None) -> OverlapSettings:
    """
    Build typed overlap settings from a configuration dictionary.

    Raises:
        ConfigValidationError: If the configuration is invalid
    """
    if config is None:
        config = DEFAULT_CONFIG

    errors = validate_config(config)
    if errors:
        raise ConfigValidationError("; ".join(errors))

    overlaps = config['overlaps']
    return OverlapSettings(
        threshold=overlaps['threshold'],
        min_ratio=float(overlaps['min_ratio']),
        max_ratio=float(overlaps['max_ratio']),
        extension_cap=overlaps['extension_cap'],
        dedup=DedupStrategy.parse(overlaps['dedup']),
        threads=config['hardware']['threads'],
    )
