"""Unit tests for policy OCR configuration loader."""

import tempfile
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from policy_ocr.config_loader import (
    DEFAULT_CONFIG_PATH,
    Config,
    CorrectionConfig,
    IOConfig,
    LoggingConfig,
    PolicyOCRConfig,
    ProcessingConfig,
    get_default_config,
    load_config,
)


class TestCorrectionConfig:
    """Test CorrectionConfig model."""

    def test_default_values(self):
        assert CorrectionConfig().enabled is True

    def test_disabled(self):
        assert CorrectionConfig(enabled=False).enabled is False


class TestProcessingConfig:
    """Test ProcessingConfig model with validation."""

    def test_default_values(self):
        assert ProcessingConfig().workers == 1

    def test_custom_workers(self):
        assert ProcessingConfig(workers=4).workers == 4

    def test_workers_must_be_positive(self):
        with pytest.raises(ValidationError):
            ProcessingConfig(workers=0)

        with pytest.raises(ValidationError):
            ProcessingConfig(workers=-2)


class TestIOAndLoggingConfig:
    """Test IOConfig and LoggingConfig models."""

    def test_io_defaults(self):
        config = IOConfig()
        assert config.default_input == "sample.txt"
        assert config.encoding == "utf-8"

    def test_logging_defaults(self):
        config = LoggingConfig()
        assert config.level == "INFO"
        assert "%(message)s" in config.format

    def test_logging_level_normalised(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_unknown_logging_level(self):
        with pytest.raises(ValidationError, match="Unknown log level"):
            LoggingConfig(level="LOUD")


class TestPolicyOCRConfig:
    """Test complete module configuration."""

    def test_default_values(self):
        config = PolicyOCRConfig()
        assert config.correction.enabled is True
        assert config.processing.workers == 1
        assert config.io.default_input == "sample.txt"

    def test_nested_dict(self):
        config = PolicyOCRConfig(
            **{"correction": {"enabled": False}, "processing": {"workers": 3}}
        )
        assert config.correction.enabled is False
        assert config.processing.workers == 3
        assert config.io.encoding == "utf-8"  # Untouched default

    def test_instances_do_not_share_sections(self):
        config1 = PolicyOCRConfig()
        config2 = PolicyOCRConfig()
        config1.correction.enabled = False
        assert config2.correction.enabled is True


class TestLoadConfig:
    """Test load_config function."""

    def test_load_valid_config(self):
        config_dict = {
            "correction": {"enabled": False},
            "processing": {"workers": 2},
        }

        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump(config_dict, f)
            temp_path = Path(f.name)

        try:
            config = load_config(temp_path)
            assert isinstance(config, Config)
            assert config.policy_ocr.correction.enabled is False
            assert config.policy_ocr.processing.workers == 2
        finally:
            temp_path.unlink()

    def test_load_empty_file_uses_defaults(self, tmp_path):
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("", encoding="utf-8")

        config = load_config(config_path)

        assert config.policy_ocr.correction.enabled is True

    def test_load_nonexistent_file(self):
        with pytest.raises(FileNotFoundError):
            load_config(Path("nonexistent.yaml"))

    def test_load_invalid_yaml(self, tmp_path):
        config_path = tmp_path / "broken.yaml"
        config_path.write_text("invalid: yaml: content: [", encoding="utf-8")

        with pytest.raises(yaml.YAMLError):
            load_config(config_path)

    def test_load_invalid_config_values(self, tmp_path):
        config_path = tmp_path / "bad.yaml"
        config_path.write_text(
            yaml.dump({"processing": {"workers": 0}}), encoding="utf-8"
        )

        with pytest.raises(ValidationError):
            load_config(config_path)

    def test_load_default_config_file(self):
        """Test loading the bundled config.yaml file."""
        assert DEFAULT_CONFIG_PATH.exists()

        config = load_config(DEFAULT_CONFIG_PATH)
        assert config.policy_ocr.correction.enabled is True
        assert config.policy_ocr.processing.workers == 1
        assert config.policy_ocr.io.default_input == "sample.txt"
        assert config.policy_ocr.logging.level == "INFO"


class TestGetDefaultConfig:
    """Test get_default_config function."""

    def test_returns_default_config(self):
        config = get_default_config()
        assert isinstance(config, Config)
        assert config.policy_ocr.correction.enabled is True

    def test_multiple_calls_return_independent_instances(self):
        config1 = get_default_config()
        config2 = get_default_config()
        assert config1 is not config2
        assert config1.policy_ocr.io == config2.policy_ocr.io
