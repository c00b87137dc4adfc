"""
Configuration Management System for Comfort Catalogue

Centralized configuration with a 3-tier precedence hierarchy:
environment → local.yaml → defaults.yaml (falling back to model defaults).
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = (
    "https://script.google.com/macros/s/"
    "AKfycbyDj5ZveFJlT1AIxB-46g4wyQgEGunAei0T8LXE-Y-wLoqQ8LUcFAdHRJexGL94F-d3/exec"
)

PACKAGE_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config" / "settings"


class ValidationLevel(Enum):
    """Configuration validation strictness levels"""
    STRICT = "strict"      # Fail fast on validation errors
    LENIENT = "lenient"    # Log warnings, use defaults


class RemoteConfig(BaseModel):
    """Remote spreadsheet endpoint configuration"""
    model_config = ConfigDict(extra='forbid')

    api_url: str = Field(default=DEFAULT_API_URL, description="Apps Script web app URL")
    timeout: float = Field(default=30.0, ge=1.0, le=300.0, description="Request timeout (seconds)")
    follow_redirects: bool = Field(default=True, description="Apps Script answers with a 302")

    @field_validator("api_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("api_url must be an http(s) URL")
        return value


class UIConfig(BaseModel):
    """UI Configuration"""
    model_config = ConfigDict(extra='forbid')

    page_title: str = Field(default="Comfort Digital Catalogue", description="Browser tab / header title")
    page_icon: str = Field(default="🛏️")
    layout: str = Field(default="wide", description="Streamlit page layout")

    # Placeholder images
    thumbnail_placeholder: str = Field(default="https://placehold.co/150x150/EEE/31343C?text=No+Image")
    detail_placeholder: str = Field(default="https://placehold.co/1400x1400/EEE/31343C?text=No+Image")
    preview_placeholder: str = Field(default="https://placehold.co/500x500/EEE/31343C?text=No+Image")
    login_background_url: str = Field(
        default="https://images.pexels.com/photos/271624/pexels-photo-271624.jpeg"
                "?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1"
    )


class LoggingConfig(BaseModel):
    """Logging Configuration"""
    model_config = ConfigDict(extra='forbid')

    level: str = Field(default="DEBUG", description="File log level")
    log_dir: str = Field(default="data/logs", description="Directory for rotating log files")
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024)
    backup_count: int = Field(default=5, ge=0, le=50)


class AppConfig(BaseModel):
    """Complete application configuration"""
    model_config = ConfigDict(extra='forbid')

    remote: RemoteConfig = Field(default_factory=RemoteConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Metadata
    schema_version: int = Field(default=1, description="Configuration schema version")


# Environment variable → (section, key, type)
ENV_MAP: Dict[str, tuple] = {
    'CATALOGUE_API_URL': ('remote', 'api_url', str),
    'CATALOGUE_API_TIMEOUT': ('remote', 'timeout', float),
    'CATALOGUE_PAGE_TITLE': ('ui', 'page_title', str),
    'LOG_LEVEL': ('logging', 'level', str),
    'CATALOGUE_LOG_LEVEL': ('logging', 'level', str),
    'CATALOGUE_LOG_DIR': ('logging', 'log_dir', str),
}


class ConfigManager:
    """Centralized configuration manager with env → local → defaults precedence"""

    def __init__(self, config_dir: Optional[Path] = None, env_file: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else PACKAGE_CONFIG_DIR
        self._defaults: Optional[Dict[str, Any]] = None
        self._local: Optional[Dict[str, Any]] = None

        if env_file is not None:
            load_dotenv(dotenv_path=env_file)
        else:
            load_dotenv()

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file"""
        if not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.warning(f"Failed to load {file_path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring {file_path}: top level is not a mapping")
            return {}
        return data

    def _load_defaults(self) -> Dict[str, Any]:
        if self._defaults is None:
            self._defaults = self._load_yaml_file(self.config_dir / "defaults.yaml")
        return self._defaults

    def _load_local(self) -> Dict[str, Any]:
        if self._local is None:
            self._local = self._load_yaml_file(self.config_dir / "local.yaml")
        return self._local

    def _deep_merge(self, base: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Deep merge configuration dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Extract configuration overrides from environment variables"""
        overrides: Dict[str, Any] = {}
        for env_key, (section, config_key, cast) in ENV_MAP.items():
            value = os.getenv(env_key)
            if value is None or not value.strip():
                continue
            try:
                converted = cast(value.strip())
            except ValueError:
                logger.warning(f"Ignoring {env_key}={value!r}: expected {cast.__name__}")
                continue
            overrides.setdefault(section, {})[config_key] = converted
        return overrides

    def _merge_configs(self) -> Dict[str, Any]:
        """Merge configurations with precedence: env → local → defaults"""
        merged = AppConfig().model_dump()
        self._deep_merge(merged, self._load_defaults())
        self._deep_merge(merged, self._load_local())
        self._deep_merge(merged, self._get_env_overrides())
        return merged

    def get_config(self, validation_level: ValidationLevel = ValidationLevel.STRICT) -> AppConfig:
        """Get merged configuration with validation"""
        merged_config = self._merge_configs()

        try:
            return AppConfig(**merged_config)
        except ValidationError as e:
            if validation_level == ValidationLevel.STRICT:
                raise ConfigurationError(f"Configuration validation failed: {e}") from e
            logger.warning(f"Configuration validation failed, using defaults: {e}")
            return AppConfig()


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Get global configuration manager instance"""
    global _config_manager
    if _config_manager is None or config_dir is not None:
        _config_manager = ConfigManager(config_dir)
    return _config_manager


def get_config(validation_level: ValidationLevel = ValidationLevel.STRICT) -> AppConfig:
    """Get current application configuration"""
    return get_config_manager().get_config(validation_level)
