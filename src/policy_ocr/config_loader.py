"""Configuration loader with Pydantic validation for the policy OCR module.

This module provides type-safe configuration loading from YAML files using
Pydantic models for validation and default values.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CorrectionConfig(BaseModel):
    """Single-segment correction configuration.

    Attributes:
        enabled: Repair ILL/ERR entries by single-segment search. When
            disabled, entries are reported in plain mode (ILL/ERR tags only).
    """

    enabled: bool = True


class ProcessingConfig(BaseModel):
    """Batch processing configuration.

    Attributes:
        workers: Number of worker threads (1 = process inline)
    """

    workers: int = Field(default=1, ge=1)


class IOConfig(BaseModel):
    """Input/output configuration.

    Attributes:
        default_input: Input file used when none is given on the command line
        encoding: Text encoding for input and output files
    """

    default_input: str = "sample.txt"
    encoding: str = "utf-8"


class LoggingConfig(BaseModel):
    """Logging configuration for the command-line entry point.

    Attributes:
        level: Root log level name (DEBUG, INFO, WARNING, ...)
        format: Log record format string
    """

    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalise to upper case and reject unknown level names."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {v!r}, expected one of {', '.join(LOG_LEVELS)}"
            )
        return level


class PolicyOCRConfig(BaseModel):
    """Complete policy OCR configuration.

    Attributes:
        correction: Correction configuration
        processing: Batch processing configuration
        io: Input/output configuration
        logging: Logging configuration
    """

    correction: CorrectionConfig = Field(default_factory=CorrectionConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    io: IOConfig = Field(default_factory=IOConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class Config(BaseModel):
    """Root configuration container.

    Attributes:
        policy_ocr: Policy OCR module configuration
    """

    policy_ocr: PolicyOCRConfig = Field(default_factory=PolicyOCRConfig)


def load_config(config_path: Path) -> Config:
    """Load and validate configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated Config object with all settings

    Raises:
        FileNotFoundError: If config file does not exist
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If configuration validation fails

    Example:
        >>> config = load_config(Path("src/policy_ocr/config.yaml"))
        >>> print(config.policy_ocr.processing.workers)
        1
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.debug(f"Loading policy OCR config from {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_dict = yaml.safe_load(f) or {}

    # Wrap flat YAML structure in 'policy_ocr' key for Config model
    return Config(policy_ocr=PolicyOCRConfig(**config_dict))


def get_default_config() -> Config:
    """Get default configuration from bundled config.yaml file.

    Returns:
        Config object loaded from src/policy_ocr/config.yaml, or the
        hardcoded defaults if the file is missing.
    """
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    else:
        # Fallback to hardcoded defaults if config file is missing
        return Config()
