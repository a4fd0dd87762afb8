"""
Application configuration management.

Runtime settings come from the environment (``MODCHECK_*``) or a
``.env`` file. Which checks run, and how, comes from a YAML analysis
configuration file.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from modcheck.exceptions import ConfigurationError
from modcheck.models import Severity


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MODCHECK_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"
    max_workers: int = Field(4, ge=1)
    config_file: Optional[Path] = None
    output_format: str = "plain"


def load_settings() -> Settings:
    """
    Read runtime settings from the environment.

    Raises:
        ConfigurationError: If a ``MODCHECK_*`` value is invalid
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


class CheckConfig(BaseModel):
    """Configuration of a single check."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    severity: Severity = Severity.ERROR
    tokens: Optional[List[str]] = None
    options: Dict[str, Any] = Field(default_factory=dict)


class AnalysisConfig(BaseModel):
    """Check selection and options, keyed by check name."""

    model_config = ConfigDict(extra="forbid")

    checks: Dict[str, CheckConfig] = Field(default_factory=dict)

    def for_check(self, name: str) -> CheckConfig:
        """Return the configuration of ``name``, or the defaults if absent."""
        return self.checks.get(name) or CheckConfig()


def parse_analysis_config(data: Optional[Dict[str, Any]], source: str = "<config>") -> AnalysisConfig:
    """
    Validate a raw mapping into an AnalysisConfig.

    Raises:
        ConfigurationError: If the mapping does not match the schema
    """
    try:
        return AnalysisConfig.model_validate(data or {})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid analysis configuration in {source}: {e}") from e


def load_analysis_config(path: Optional[Union[str, Path]] = None) -> AnalysisConfig:
    """
    Load the analysis configuration from a YAML file.

    Args:
        path: Path to the YAML file. If None, every check runs with defaults.

    Returns:
        Validated AnalysisConfig

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid
    """
    if path is None:
        return AnalysisConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse configuration {config_path}: {e}") from e

    if data is not None and not isinstance(data, dict):
        raise ConfigurationError(f"Configuration {config_path} must be a mapping")

    return parse_analysis_config(data, source=str(config_path))

