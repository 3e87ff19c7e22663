from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator

from portfolio_terminal.constants import (
    DEFAULT_OWNER_NAME,
    DEFAULT_PROMPT,
    DEFAULT_THEME_NAME,
)
from portfolio_terminal.core.common.exceptions import ConfigurationError
from portfolio_terminal.core.domain.model_bases import DomainModel
from portfolio_terminal.core.domain.theme import get_theme, theme_names

logger = logging.getLogger(__name__)

ENV_PREFIX = "TERMINAL_"


def _env_to_float(name: str, default: float, env: Mapping[str, str]) -> float:
    """Return an environment variable parsed as a float."""
    value = env.get(name)
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric value for %s: %r", name, value)
        return default


def _validate_http_url(value: str | None) -> str | None:
    if value is not None and not value.startswith(("http://", "https://")):
        raise ValueError("URL must start with http:// or https://")
    return value


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.WARNING
    log_file: str | None = None


class TerminalConfig(DomainModel):
    """Interactive terminal settings."""

    default_theme: str = DEFAULT_THEME_NAME
    prompt: str = DEFAULT_PROMPT

    @field_validator("default_theme")
    @classmethod
    def validate_default_theme(cls, v: str) -> str:
        if get_theme(v) is None:
            raise ValueError(
                f"Unknown theme '{v}'. Available themes: {', '.join(theme_names())}"
            )
        return v.strip().lower()


class ContactConfig(DomainModel):
    """Where contact form submissions are posted."""

    endpoint_url: str | None = "http://localhost:3000/api/contact"
    timeout: float = Field(default=10.0, gt=0)

    @field_validator("endpoint_url")
    @classmethod
    def validate_endpoint_url(cls, v: str | None) -> str | None:
        return _validate_http_url(v)


class ResumeConfig(DomainModel):
    """Resume download location announced by the resume command."""

    url: str = "/api/resume"
    filename: str = "Hassan_Kazmi_Resume.pdf"


class PortfolioSourceConfig(DomainModel):
    """Where the portfolio snapshot is loaded from."""

    data_file: str | None = None
    api_url: str | None = None
    timeout: float = Field(default=10.0, gt=0)

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str | None) -> str | None:
        return _validate_http_url(v)


class SocialLinksConfig(DomainModel):
    """Fallback profile links used when the snapshot carries none."""

    github: str = "https://github.com/hassankazmi"
    linkedin: str = "https://linkedin.com/in/hassankazmi"
    instagram: str = "https://instagram.com/kazmi.gram"


class AppConfig(DomainModel):
    """Complete application configuration."""

    owner_name: str = DEFAULT_OWNER_NAME
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    terminal: TerminalConfig = Field(default_factory=TerminalConfig)
    contact: ContactConfig = Field(default_factory=ContactConfig)
    resume: ResumeConfig = Field(default_factory=ResumeConfig)
    portfolio: PortfolioSourceConfig = Field(default_factory=PortfolioSourceConfig)
    socials: SocialLinksConfig = Field(default_factory=SocialLinksConfig)

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Create an AppConfig holding only the values set in the environment."""
        return cls.model_validate(env_overrides(environ))


def env_overrides(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Collect ``TERMINAL_*`` variables into a nested configuration dict."""
    env: Mapping[str, str] = environ if environ is not None else os.environ
    overrides: dict[str, Any] = {}

    def put(path: str, value: Any) -> None:
        section, _, key = path.partition(".")
        if key:
            overrides.setdefault(section, {})[key] = value
        else:
            overrides[section] = value

    string_settings = {
        "OWNER_NAME": "owner_name",
        "LOG_LEVEL": "logging.level",
        "LOG_FILE": "logging.log_file",
        "DEFAULT_THEME": "terminal.default_theme",
        "CONTACT_URL": "contact.endpoint_url",
        "RESUME_URL": "resume.url",
        "PORTFOLIO_FILE": "portfolio.data_file",
        "PORTFOLIO_URL": "portfolio.api_url",
    }
    for suffix, path in string_settings.items():
        value = env.get(f"{ENV_PREFIX}{suffix}")
        if value:
            put(path, value.upper() if suffix == "LOG_LEVEL" else value)

    if f"{ENV_PREFIX}CONTACT_TIMEOUT" in env:
        put(
            "contact.timeout",
            _env_to_float(f"{ENV_PREFIX}CONTACT_TIMEOUT", 10.0, env),
        )

    return overrides


def _merge_dicts(base: dict[str, Any], override: Mapping[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            _merge_dicts(base[key], value)
        else:
            base[key] = value


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load configuration from defaults, an optional YAML file and the environment.

    Environment variables win over the file, the file wins over defaults.

    Raises:
        ConfigurationError: If the file has an unsupported format, cannot be
            parsed or holds invalid values.
    """
    config_data: dict[str, Any] = AppConfig().model_dump()

    if config_path:
        path = Path(config_path)
        if not path.exists():
            logger.warning("Configuration file not found: %s", config_path)
        else:
            if path.suffix.lower() not in (".yaml", ".yml"):
                raise ConfigurationError(
                    f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
                    details={"path": str(path)},
                )
            try:
                with open(path, encoding="utf-8") as f:
                    file_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(
                    f"Invalid YAML in {path}: {exc}", details={"path": str(path)}
                ) from exc
            if not isinstance(file_config, Mapping):
                raise ConfigurationError(
                    f"Configuration file {path} must contain a mapping",
                    details={"path": str(path)},
                )
            _merge_dicts(config_data, file_config)
            logger.debug("Loaded configuration file %s", path)

    _merge_dicts(config_data, env_overrides(environ))

    try:
        return AppConfig.model_validate(config_data)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
