from __future__ import annotations

from pathlib import Path

import pytest

from portfolio_terminal.core.common.exceptions import ConfigurationError
from portfolio_terminal.core.config.app_config import (
    AppConfig,
    LogLevel,
    env_overrides,
    load_config,
)


def test_defaults() -> None:
    cfg = load_config(environ={})
    assert cfg.owner_name == "Hassan"
    assert cfg.logging.level is LogLevel.WARNING
    assert cfg.terminal.default_theme == "default"
    assert cfg.contact.endpoint_url == "http://localhost:3000/api/contact"
    assert cfg.socials.github == "https://github.com/hassankazmi"


def test_env_overrides_are_nested() -> None:
    overrides = env_overrides(
        {
            "TERMINAL_OWNER_NAME": "Ada",
            "TERMINAL_LOG_LEVEL": "debug",
            "TERMINAL_DEFAULT_THEME": "matrix",
            "TERMINAL_CONTACT_TIMEOUT": "2.5",
            "UNRELATED": "x",
        }
    )
    assert overrides == {
        "owner_name": "Ada",
        "logging": {"level": "DEBUG"},
        "terminal": {"default_theme": "matrix"},
        "contact": {"timeout": 2.5},
    }


def test_non_numeric_timeout_falls_back_to_default() -> None:
    overrides = env_overrides({"TERMINAL_CONTACT_TIMEOUT": "soon"})
    assert overrides == {"contact": {"timeout": 10.0}}


def test_from_env() -> None:
    cfg = AppConfig.from_env(environ={"TERMINAL_PORTFOLIO_FILE": "data.json"})
    assert cfg.portfolio.data_file == "data.json"


def test_yaml_file_then_environment(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "owner_name: Grace\n"
        "terminal:\n"
        "  default_theme: Cyberpunk\n"
        "resume:\n"
        "  filename: grace.pdf\n",
        encoding="utf-8",
    )

    cfg = load_config(config_file, environ={"TERMINAL_OWNER_NAME": "Ada"})

    assert cfg.owner_name == "Ada"
    assert cfg.terminal.default_theme == "cyberpunk"
    assert cfg.resume.filename == "grace.pdf"
    assert cfg.resume.url == "/api/resume"


def test_missing_file_uses_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "absent.yaml", environ={})
    assert cfg == AppConfig()


def test_unsupported_file_format(tmp_path: Path) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text("{}", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(config_file, environ={})


def test_invalid_yaml(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("terminal: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(config_file, environ={})


def test_non_mapping_yaml(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(config_file, environ={})


@pytest.mark.parametrize(
    "environ",
    [
        {"TERMINAL_DEFAULT_THEME": "neon"},
        {"TERMINAL_CONTACT_URL": "ftp://example.com"},
        {"TERMINAL_LOG_LEVEL": "LOUD"},
    ],
)
def test_invalid_values_raise_configuration_error(environ: dict[str, str]) -> None:
    with pytest.raises(ConfigurationError):
        load_config(environ=environ)
