"""
Application Configuration

Non-secret runtime configuration (logging) loaded from YAML files with
environment-specific overrides.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, Union
import yaml
import os
from pathlib import Path

APP_ENV_VAR = 'LOGIN_CHECKER_ENV'
DEFAULT_ENV = 'dev'


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field('INFO', description="Log level")
    format: str = Field('json', description="Log format (json or text)")
    file: Optional[str] = Field(None, description="Log file path, None to disable")
    max_bytes: int = Field(10485760, ge=1024, description="Max log file size")
    backup_count: int = Field(5, ge=1, le=20, description="Number of backup log files")
    console: bool = Field(True, description="Log to console")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator('format')
    @classmethod
    def validate_format(cls, v):
        valid_formats = ['json', 'text']
        if v.lower() not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return v.lower()


class AppConfig(BaseModel):
    """Main application configuration."""
    environment: str = Field(DEFAULT_ENV, description="Environment name")
    logging: LoggingConfig = LoggingConfig()

    model_config = ConfigDict(validate_assignment=True)


def _default_config_dir() -> Path:
    config_dir = Path('config')
    if not config_dir.exists():
        # Relative to the package checkout
        config_dir = Path(__file__).resolve().parent.parent.parent / 'config'
    return config_dir


def load_app_config(
    env: Optional[str] = None,
    config_dir: Optional[Union[str, Path]] = None
) -> AppConfig:
    """
    Load configuration from YAML files.

    Loads base.yaml and merges environment-specific overrides.

    Args:
        env: Environment name ('dev', 'prod'). Default from LOGIN_CHECKER_ENV or 'dev'
        config_dir: Directory holding the YAML files

    Returns:
        Validated AppConfig object

    Raises:
        FileNotFoundError: If config files not found
        ValidationError: If configuration is invalid
    """
    if env is None:
        env = os.getenv(APP_ENV_VAR, DEFAULT_ENV)

    config_dir = Path(config_dir) if config_dir is not None else _default_config_dir()
    if not config_dir.exists():
        raise FileNotFoundError(f"Config directory not found: {config_dir}")

    base_file = config_dir / 'base.yaml'
    if not base_file.exists():
        raise FileNotFoundError(f"Base config not found: {base_file}")

    with open(base_file) as f:
        config = yaml.safe_load(f) or {}

    env_file = config_dir / f'{env}.yaml'
    if env_file.exists():
        with open(env_file) as f:
            env_config = yaml.safe_load(f) or {}
            config = deep_merge(config, env_config)

    config.setdefault('environment', env)
    return AppConfig(**config)


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override values

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result
