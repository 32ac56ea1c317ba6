"""
Configuration management for TweetSpan.

Configuration is loaded from:
1. Environment variables (highest priority), e.g.
   ``TWEETSPAN_EXTRACTION__CHECK_URL_OVERLAP=false``
2. tweetspan.yaml file
3. Default values (lowest priority)
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.config import ExtractionConfig
from .exceptions import ConfigurationError


class ExtractionSettings(BaseModel):
    """Extraction options."""

    extract_urls_without_protocol: bool = True
    check_url_overlap: bool = True

    def to_config(self) -> ExtractionConfig:
        return ExtractionConfig(
            extract_urls_without_protocol=self.extract_urls_without_protocol,
            check_url_overlap=self.check_url_overlap,
        )


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["text", "json"] = "text"
    file: str | None = None


class Settings(BaseSettings):
    """Main settings class that combines all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="TWEETSPAN_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def load_yaml_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Without *path*, ``tweetspan.yaml`` is looked up in the working
    directory, then ``config/``, then ``~/.config/tweetspan/``.

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping
    """
    if path is None:
        candidates = [
            Path("tweetspan.yaml"),
            Path("config/tweetspan.yaml"),
            Path.home() / ".config" / "tweetspan" / "tweetspan.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                path = candidate
                break

    if not path or not path.exists():
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}", config_key=str(path)) from exc

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected a mapping at the top of {path}", config_key=str(path),
        )
    return data


def _env_overrides(settings: BaseSettings) -> dict[str, Any]:
    return settings.model_dump(exclude_unset=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    YAML values fill in defaults; environment variables take precedence.

    Raises:
        ConfigurationError: If the merged configuration is invalid
    """
    yaml_config = load_yaml_config()
    try:
        from_env = Settings()
        merged = _merge(yaml_config, _env_overrides(from_env))
        return Settings(**merged)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


def reload_settings() -> Settings:
    """Force reload of settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
