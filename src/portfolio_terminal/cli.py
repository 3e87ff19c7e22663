"""
Command line front end.

Runs the interpreter as a read-eval-print loop on a text terminal, or runs a
single command with ``-c`` and exits with 0 on success and 1 on failure.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable
from typing import TextIO

from dotenv import load_dotenv

from portfolio_terminal import __version__
from portfolio_terminal.core.commands.service import CommandService
from portfolio_terminal.core.common.exceptions import (
    ConfigurationError,
    PortfolioDataError,
)
from portfolio_terminal.core.common.logging_utils import (
    configure_logging_with_environment_tagging,
)
from portfolio_terminal.core.config.app_config import AppConfig, LogLevel, load_config
from portfolio_terminal.core.domain.command_results import (
    CommandOutput,
    StructuredContent,
)
from portfolio_terminal.core.domain.contact import ContactForm, ContactFormData
from portfolio_terminal.core.domain.portfolio import PortfolioData
from portfolio_terminal.core.domain.theme import Theme, theme_names
from portfolio_terminal.core.services.contact_service import HttpContactSubmitter
from portfolio_terminal.core.services.portfolio_provider import (
    fetch_portfolio,
    load_portfolio_file,
)
from portfolio_terminal.core.services.terminal_session import TerminalSession

logger = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({"exit", "quit"})
CLEAR_SCREEN = "\033[2J\033[H"

InputFn = Callable[[str], str]


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-terminal",
        description="Browse a developer portfolio through terminal commands",
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        metavar="PATH",
        help="Path to a YAML configuration file",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--data",
        dest="data_file",
        metavar="PATH",
        help="Portfolio snapshot file (JSON or YAML)",
    )
    source.add_argument(
        "--data-url",
        dest="data_url",
        metavar="URL",
        help="Portfolio API endpoint to fetch the snapshot from",
    )
    parser.add_argument(
        "--theme",
        choices=theme_names(),
        help="Initial color theme",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        type=str.upper,
        help="Set the logging level",
    )
    parser.add_argument(
        "-c",
        "--command",
        dest="command",
        help="Run a single command and exit",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_cli_parser().parse_args(argv)


def apply_cli_args(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides on top of it."""
    cfg = load_config(args.config_file)

    if args.theme is not None:
        cfg.terminal.default_theme = args.theme
    if args.log_level is not None:
        cfg.logging.level = LogLevel(args.log_level)
    if args.data_file is not None:
        cfg.portfolio.data_file = args.data_file
        cfg.portfolio.api_url = None
    if args.data_url is not None:
        cfg.portfolio.api_url = args.data_url
        cfg.portfolio.data_file = None
    return cfg


def _configure_logging(cfg: AppConfig) -> None:
    configure_logging_with_environment_tagging(
        level=getattr(logging, cfg.logging.level.value),
        log_file=cfg.logging.log_file,
    )


async def load_portfolio(cfg: AppConfig) -> PortfolioData | None:
    """Load the snapshot named by the configuration, if any.

    A snapshot that cannot be loaded is reported and the terminal runs
    without data.
    """
    source = cfg.portfolio
    try:
        if source.data_file:
            return load_portfolio_file(source.data_file)
        if source.api_url:
            return await fetch_portfolio(source.api_url, timeout=source.timeout)
    except PortfolioDataError as exc:
        logger.error("Portfolio data unavailable: %s", exc.message)
        sys.stderr.write(f"Warning: {exc.message}\n")
    return None


def build_service(cfg: AppConfig) -> CommandService:
    submitter = (
        HttpContactSubmitter(cfg.contact.endpoint_url, timeout=cfg.contact.timeout)
        if cfg.contact.endpoint_url
        else None
    )
    return CommandService.create_default(cfg, contact_submitter=submitter)


def _colorize(text: str, hex_color: str) -> str:
    red, green, blue = (int(hex_color[i : i + 2], 16) for i in (1, 3, 5))
    return f"\033[38;2;{red};{green};{blue}m{text}\033[0m"


def render_output(output: CommandOutput, theme: Theme, *, color: bool) -> str:
    text = output.render_text()
    if not color or not text:
        return text
    hex_color = theme.colors.text if output.success else theme.colors.error
    return _colorize(text, hex_color)


async def fill_contact_form(form: ContactForm, input_fn: InputFn, out: TextIO) -> None:
    """Prompt for each form field and submit the result."""
    values: dict[str, str] = {}
    try:
        for field in form.fields:
            values[field] = input_fn(f"{field.capitalize()}: ")
    except (EOFError, KeyboardInterrupt):
        out.write("\nMessage cancelled.\n")
        return

    result = await form.submit(ContactFormData(**values))
    prefix = "✓" if result.success else "✗"
    out.write(f"{prefix} {result.message}\n")


async def run_repl(
    session: TerminalSession,
    prompt: str,
    input_fn: InputFn = input,
    out: TextIO = sys.stdout,
) -> int:
    color = out.isatty()
    out.write("Type 'help' to see available commands. Type 'exit' to leave.\n")
    while True:
        shown_prompt = (
            _colorize(prompt, session.theme.colors.accent) if color else prompt
        )
        try:
            line = input_fn(shown_prompt)
        except EOFError:
            out.write("\n")
            return 0
        except KeyboardInterrupt:
            out.write("\n")
            continue

        if line.strip().lower() in EXIT_COMMANDS:
            return 0

        output = await session.submit(line)
        if output is None:
            continue
        if output.is_clear:
            if color:
                out.write(CLEAR_SCREEN)
            continue

        out.write(render_output(output, session.theme, color=color) + "\n")
        content = output.content
        if isinstance(content, StructuredContent) and content.form is not None:
            await fill_contact_form(content.form, input_fn, out)


async def run(
    args: argparse.Namespace,
    cfg: AppConfig,
    input_fn: InputFn = input,
    out: TextIO = sys.stdout,
) -> int:
    portfolio_data = await load_portfolio(cfg)
    session = TerminalSession(build_service(cfg), portfolio_data=portfolio_data)

    if args.command is not None:
        output = await session.submit(args.command)
        if output is None:
            return 1
        if not output.is_clear:
            out.write(output.render_text() + "\n")
        return 0 if output.success else 1

    return await run_repl(session, cfg.terminal.prompt, input_fn, out)


def main(
    argv: list[str] | None = None,
    input_fn: InputFn = input,
    out: TextIO | None = None,
) -> int:
    """Entry point; returns the process exit code."""
    load_dotenv()
    args = parse_cli_args(argv)
    try:
        cfg = apply_cli_args(args)
    except ConfigurationError as exc:
        sys.stderr.write(f"ERROR: {exc.message}\n")
        return 1

    _configure_logging(cfg)
    return asyncio.run(run(args, cfg, input_fn, out or sys.stdout))


if __name__ == "__main__":
    sys.exit(main())
