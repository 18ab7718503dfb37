#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
OverlapSmith v0.1.0

Tests for configuration loading and validation.

Author: OverlapSmith Development Team
"""

import copy

import pytest
import yaml
from overlapsmith.config import (
    DEFAULT_CONFIG,
    ConfigValidationError,
    load_config,
    overlap_settings,
    save_config_template,
    validate_config,
)
from overlapsmith.overlaps import DedupStrategy


class TestLoadConfig:
    """Test loading and merging configuration files."""

    def test_defaults(self):
        """Test that no file gives the defaults."""
        assert load_config() == DEFAULT_CONFIG

    def test_defaults_not_shared(self):
        """Test that callers get an independent copy."""
        config = load_config()
        config['overlaps']['threshold'] = 1

        assert DEFAULT_CONFIG['overlaps']['threshold'] == 2500

    def test_user_values_merged(self, temp_output_dir):
        """Test that user values override defaults key by key."""
        path = temp_output_dir / "config.yaml"
        path.write_text(yaml.dump({'overlaps': {'dedup': 'canonical'}, 'hardware': {'threads': 4}}))

        config = load_config(path)

        assert config['overlaps']['dedup'] == 'canonical'
        assert config['overlaps']['threshold'] == 2500
        assert config['hardware']['threads'] == 4

    def test_invalid_yaml(self, temp_output_dir):
        """Test that broken YAML raises a validation error."""
        path = temp_output_dir / "config.yaml"
        path.write_text("overlaps: [unclosed\n")

        with pytest.raises(ConfigValidationError):
            load_config(path)

    def test_missing_file(self, temp_output_dir):
        """Test a configuration file that does not exist."""
        with pytest.raises(FileNotFoundError):
            load_config(temp_output_dir / "missing.yaml")

    @pytest.mark.parametrize("text", [
        "overlaps: null\n",
        "hardware: 4\n",
        "output:\n  logging: verbose\n",
    ])
    def test_section_not_a_mapping(self, temp_output_dir, text):
        """Test that a section replaced by a scalar or null is rejected."""
        path = temp_output_dir / "config.yaml"
        path.write_text(text)

        with pytest.raises(ConfigValidationError, match="must be a mapping"):
            load_config(path)

    def test_template_round_trip(self, temp_output_dir):
        """Test that the saved template loads back to the defaults."""
        path = temp_output_dir / "template.yaml"
        save_config_template(path)

        assert load_config(path) == DEFAULT_CONFIG


class TestValidateConfig:
    """Test configuration validation."""

    def test_defaults_valid(self):
        """Test that the defaults pass validation."""
        assert validate_config(DEFAULT_CONFIG) == []

    @pytest.mark.parametrize("section,key,value", [
        ('overlaps', 'threshold', -1),
        ('overlaps', 'extension_cap', 'far'),
        ('overlaps', 'dedup', 'best'),
        ('overlaps', 'min_ratio', 2.0),
        ('hardware', 'threads', 0),
    ])
    def test_invalid_values(self, section, key, value):
        """Test that each bad value is reported."""
        config = copy.deepcopy(DEFAULT_CONFIG)
        config[section][key] = value

        errors = validate_config(config)

        assert len(errors) == 1

    def test_invalid_log_level(self):
        """Test an unknown logging level."""
        config = copy.deepcopy(DEFAULT_CONFIG)
        config['output']['logging']['level'] = 'LOUD'

        assert validate_config(config) == ["Invalid logging level: LOUD"]

    @pytest.mark.parametrize("section,value", [
        ('overlaps', None),
        ('hardware', 4),
        ('output', 'quiet'),
    ])
    def test_section_not_a_mapping(self, section, value):
        """Test that non-mapping sections are reported instead of raising."""
        config = copy.deepcopy(DEFAULT_CONFIG)
        config[section] = value

        assert validate_config(config) == [f"Section '{section}' must be a mapping, got {value!r}"]


class TestOverlapSettings:
    """Test the typed settings view."""

    def test_default_settings(self):
        """Test settings derived from the defaults."""
        settings = overlap_settings()

        assert settings.threshold == 2500
        assert settings.extension_cap == 2500
        assert settings.min_ratio == 0.9
        assert settings.max_ratio == 1.111
        assert settings.dedup is DedupStrategy.ORDERED
        assert settings.threads == 1

    def test_invalid_config_raises(self):
        """Test that invalid configuration cannot produce settings."""
        config = copy.deepcopy(DEFAULT_CONFIG)
        config['hardware']['threads'] = 0

        with pytest.raises(ConfigValidationError):
            overlap_settings(config)

# OverlapSmith v0.1.0
