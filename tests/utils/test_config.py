"""Unit tests for configuration and logging helpers."""

import logging
import tempfile
from pathlib import Path

from geodist.utils.config import GeoConfig, load_config
from geodist.utils.logging import get_logger


class TestConfig:
    """Test suite for YAML configuration loading."""

    def test_missing_file(self):
        """Test that a missing file gives an empty config."""
        assert load_config("/nonexistent/geodist.yaml") == {}

    def test_load_yaml(self):
        """Test loading a YAML mapping."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "geodist.yaml"
            path.write_text("log_level: debug\nextra: 1\n", encoding="utf-8")

            assert load_config(str(path)) == {"log_level": "debug", "extra": 1}
            assert GeoConfig.load(str(path)).log_level == "DEBUG"

    def test_invalid_yaml(self):
        """Test that unparsable YAML gives an empty config."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "broken.yaml"
            path.write_text("log_level: [unclosed\n", encoding="utf-8")

            assert load_config(str(path)) == {}

    def test_non_mapping_yaml(self):
        """Test that a YAML list is ignored."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "list.yaml"
            path.write_text("- a\n- b\n", encoding="utf-8")

            assert load_config(str(path)) == {}

    def test_defaults(self):
        """Test GeoConfig defaults."""
        assert GeoConfig().log_level == "INFO"
        assert GeoConfig.from_dict({}).log_level == "INFO"

    def test_unknown_level_falls_back(self):
        """Test that an unknown level name falls back to INFO."""
        assert GeoConfig.from_dict({"log_level": "loud"}).log_level == "INFO"

    def test_numeric_level(self):
        """Test that a numeric level is kept as is."""
        assert GeoConfig.from_dict({"log_level": 10}).log_level == 10
        logger = get_logger("geodist.test.numeric", GeoConfig.from_dict({"log_level": 30}).log_level)
        assert logger.level == logging.WARNING


class TestGetLogger:
    """Test suite for get_logger."""

    def test_single_handler(self):
        """Test that repeated calls do not stack handlers."""
        logger = get_logger("geodist.test.single")
        get_logger("geodist.test.single")
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO

    def test_level_override(self):
        """Test that a level name overrides the default level."""
        logger = get_logger("geodist.test.level", "debug")
        assert logger.level == logging.DEBUG
