"""
Configuration management for pageclip using Pydantic.
"""

from __future__ import annotations

import logging
import re
import threading
from pathlib import Path
from typing import Any, ClassVar, List, cast

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Setup Logging ---
log = logging.getLogger(__name__)

# --- Nested Configuration Models ---


class ExtractionSettings(BaseModel):
    """Configuration for strategy selection and both extraction paths."""

    parser: str = Field(default="html.parser", description="BeautifulSoup tree builder used to parse pages.")

    # Strategy selection
    structured_hosts: List[str] = Field(
        default=["twitter.com", "x.com"],
        description="Hosts (and their subdomains) that use the per-post extractor.",
    )
    post_selectors: List[str] = Field(
        default=['[data-testid="tweet"]', 'article[role="article"]'],
        description="Post container selectors, tried in order until one matches.",
    )

    # Structured path
    author_selector: str = Field(default='[data-testid="User-Name"]', description="Author block inside a post.")
    handle_selector: str = Field(default='a[href^="/"]', description="Handle link inside the author block.")
    quote_selector: str = Field(default='[data-testid="quoteTweet"]', description="Quoted post container.")
    quote_text_selector: str = Field(default='[data-testid="tweetText"]', description="Text of a quoted post.")
    media_url_marker: str = Field(default="pbs.twimg.com/media", description="Substring identifying media images.")
    media_quality: str = Field(default="large", description="Value forced into the media name= parameter.")
    media_default_query: str = Field(
        default="format=jpg&name=large", description="Query appended to media URLs that have none."
    )
    title_suffix: str = Field(default=" on X", description="Appended to the first author's name for the title.")
    extra_noise_labels: List[str] = Field(
        default_factory=list, description="Additional exact UI labels dropped from post text."
    )
    extra_noise_patterns: List[str] = Field(
        default_factory=list, description="Additional full-match regexes dropped from post text."
    )

    # Generic path
    content_selectors: List[str] = Field(
        default=[
            "article",
            '[role="main"]',
            "main",
            ".post-content",
            ".article-content",
            ".entry-content",
            ".content",
            "#content",
        ],
        description="Content region selectors in order of preference.",
    )
    strip_selectors: List[str] = Field(
        default=[
            "script",
            "style",
            "nav",
            "header",
            "footer",
            "aside",
            ".comments",
            "#comments",
            ".sidebar",
            ".advertisement",
            ".ad",
            '[role="navigation"]',
            '[role="banner"]',
            '[role="contentinfo"]',
        ],
        description="Non-content subtrees removed from the selected region.",
    )
    image_hint_attributes: List[str] = Field(
        default=["srcset", "loading"], description="Image attributes dropped once detached from the live page."
    )

    @field_validator("structured_hosts")
    @classmethod
    def normalize_hosts(cls, v: List[str]) -> List[str]:
        return [host.strip().lower().lstrip(".") for host in v if host.strip()]

    @field_validator("post_selectors", "content_selectors")
    @classmethod
    def validate_selector_chain(cls, v: List[str]) -> List[str]:
        """Ensure a selector chain is not empty."""
        if not v:
            raise ValueError("selector chain must contain at least one selector")
        return v

    @field_validator("extra_noise_patterns")
    @classmethod
    def validate_patterns(cls, v: List[str]) -> List[str]:
        for pattern in v:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"invalid noise pattern {pattern!r}: {e}") from e
        return v


class MonitoringConfig(BaseModel):
    """Configuration for logging."""

    log_level: str = Field(default="WARNING", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(
        default=None,
        description="Path to log file. If None, logs to console.",
    )

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    project_name: str = "pageclip"
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="PAGECLIP_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    for path in (current_dir / "pageclip.yaml", current_dir / "pageclip.yml"):
        if path.exists():
            return path
    return None


# --- Lazy Configuration Loader ---


class LazyConfig:
    """
    A proxy for the Config object that delays its loading and validation
    until an attribute is first accessed. This prevents configuration errors
    from crashing the application on import.
    """

    _config: ClassVar[Config | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __getattr__(self, name: str) -> Any:
        if self.__class__._config is None:
            with self.__class__._lock:
                if self.__class__._config is None:
                    self.__class__._config = self._load_config_with_fallback()
        return getattr(self.__class__._config, name)

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded configuration so the next access reloads it."""
        with cls._lock:
            cls._config = None

    def _load_config_with_fallback(self) -> Config:
        """Load configuration from file or fall back to defaults."""
        config_path = find_config_file()
        if config_path:
            try:
                log.info("Lazy loading configuration from: %s", config_path)
                return Config.from_yaml(config_path)
            except (ValidationError, FileNotFoundError, yaml.YAMLError) as e:
                log.error(
                    "Failed to load or validate configuration from '%s': %s. "
                    "Falling back to default settings. Please check your config file.",
                    config_path,
                    e,
                    exc_info=log.getEffectiveLevel() <= logging.DEBUG,
                )
        else:
            log.info("No config file found. Using default settings for lazy load.")

        try:
            return Config()
        except ValidationError as e:
            log.critical("FATAL: Default configuration is invalid: %s", e, exc_info=True)
            raise RuntimeError(f"Default configuration is invalid, cannot start: {e}") from e


# --- Global Settings Instance ---
settings: "Config" = cast("Config", LazyConfig())
