from __future__ import annotations

import io
import json
from collections.abc import Iterator
from pathlib import Path

import pytest

from portfolio_terminal import cli
from portfolio_terminal.core.config.app_config import AppConfig
from portfolio_terminal.core.domain.contact import ContactFormData, ContactSubmitResult

from tests.conftest import SECTION_ROWS, SETTING_ROWS


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "portfolio.json"
    path.write_text(
        json.dumps({"sections": SECTION_ROWS, "settings": SETTING_ROWS}),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "_configure_logging", lambda cfg: None)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("TERMINAL_PORTFOLIO_FILE", "TERMINAL_PORTFOLIO_URL", "TERMINAL_DEFAULT_THEME"):
        monkeypatch.delenv(name, raising=False)


def scripted_input(lines: list[str]):
    feed: Iterator[str] = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    return read


def test_parser_options() -> None:
    args = cli.parse_cli_args(["--data", "p.json", "--theme", "matrix", "-c", "help"])
    assert args.data_file == "p.json"
    assert args.theme == "matrix"
    assert args.command == "help"


def test_data_sources_are_mutually_exclusive() -> None:
    with pytest.raises(SystemExit):
        cli.parse_cli_args(["--data", "a.json", "--data-url", "https://x.example"])


def test_cli_args_override_config() -> None:
    args = cli.parse_cli_args(["--theme", "dracula", "--log-level", "debug", "--data-url", "https://api.example.com/p"])
    cfg = cli.apply_cli_args(args)
    assert cfg.terminal.default_theme == "dracula"
    assert cfg.logging.level.value == "DEBUG"
    assert cfg.portfolio.api_url == "https://api.example.com/p"
    assert cfg.portfolio.data_file is None


def test_one_shot_success(data_file: Path) -> None:
    out = io.StringIO()
    code = cli.main(["--data", str(data_file), "-c", "skills --backend"], out=out)
    assert code == 0
    assert "Skills - Backend" in out.getvalue()


def test_one_shot_failure_exit_code(data_file: Path) -> None:
    out = io.StringIO()
    code = cli.main(["--data", str(data_file), "-c", "skils"], out=out)
    assert code == 1
    assert "Did you mean: skills, stats?" in out.getvalue()


def test_missing_data_file_still_runs(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = io.StringIO()
    code = cli.main(["--data", str(tmp_path / "missing.json"), "-c", "skills"], out=out)
    assert code == 0
    assert "No skills data available." in out.getvalue()
    assert "Warning:" in capsys.readouterr().err


def test_invalid_config_file_exits_with_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("terminal:\n  default_theme: neon\n", encoding="utf-8")
    code = cli.main(["--config", str(config_file), "-c", "help"], out=io.StringIO())
    assert code == 1
    assert "ERROR:" in capsys.readouterr().err


def test_repl_runs_until_exit(data_file: Path) -> None:
    out = io.StringIO()
    code = cli.main(
        ["--data", str(data_file)],
        input_fn=scripted_input(["hello", "", "theme matrix", "exit", "bye"]),
        out=out,
    )
    text = out.getvalue()
    assert code == 0
    assert "heyyyy" in text
    assert 'Theme changed to "matrix"' in text
    assert "byeeee" not in text


def test_repl_stops_at_end_of_input(data_file: Path) -> None:
    out = io.StringIO()
    code = cli.main(["--data", str(data_file)], input_fn=scripted_input(["stats"]), out=out)
    assert code == 0
    assert "PORTFOLIO STATISTICS" in out.getvalue()


@pytest.mark.asyncio
async def test_repl_prompts_for_contact_form() -> None:
    submitted: list[ContactFormData] = []

    async def submitter(data: ContactFormData) -> ContactSubmitResult:
        submitted.append(data)
        return ContactSubmitResult(success=True, message="Message sent successfully!")

    cfg = AppConfig()
    service = cli.CommandService.create_default(cfg, contact_submitter=submitter)
    session = cli.TerminalSession(service)
    out = io.StringIO()

    code = await cli.run_repl(
        session,
        "> ",
        scripted_input(["contact", "Ann", "ann@example.com", "Hello!"]),
        out,
    )

    assert code == 0
    assert submitted == [
        ContactFormData(name="Ann", email="ann@example.com", message="Hello!")
    ]
    assert "✓ Message sent successfully!" in out.getvalue()


@pytest.mark.asyncio
async def test_contact_form_validation_is_reported() -> None:
    session = cli.TerminalSession(cli.CommandService.create_default(AppConfig()))
    out = io.StringIO()

    await cli.run_repl(
        session, "> ", scripted_input(["contact", "Ann", "not-an-email", "Hi"]), out
    )

    assert "✗ Please enter a valid email address" in out.getvalue()
