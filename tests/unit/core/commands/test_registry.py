from __future__ import annotations

import pytest

from portfolio_terminal.core.commands.registry import (
    CommandRegistry,
    command,
    create_default_registry,
    get_all_handler_classes,
)
from portfolio_terminal.core.common.exceptions import CommandRegistrationError

from tests.unit.core.commands.stubs import StubHandler


def test_register_and_resolve_aliases() -> None:
    registry = CommandRegistry()
    handler = StubHandler("experience", aliases=["exp", "Work"])
    registry.register(handler)

    assert registry.resolve("EXP") == "experience"
    assert registry.resolve("work") == "experience"
    assert registry.resolve("unknown") == "unknown"
    assert registry.get("exp") is handler
    assert "Experience" in registry
    assert len(registry) == 1


def test_duplicate_name_is_rejected() -> None:
    registry = CommandRegistry()
    registry.register(StubHandler("help"))
    with pytest.raises(CommandRegistrationError):
        registry.register(StubHandler("HELP"))


def test_alias_colliding_with_name_is_rejected() -> None:
    registry = CommandRegistry()
    registry.register(StubHandler("help"))
    with pytest.raises(CommandRegistrationError) as exc_info:
        registry.register(StubHandler("assist", aliases=["help"]))
    assert exc_info.value.details == {"alias": "help"}
    # The failed registration leaves no trace.
    assert "assist" not in registry


def test_name_colliding_with_alias_is_rejected() -> None:
    registry = CommandRegistry()
    registry.register(StubHandler("help", aliases=["h"]))
    with pytest.raises(CommandRegistrationError):
        registry.register(StubHandler("h"))


def test_empty_name_is_rejected() -> None:
    with pytest.raises(CommandRegistrationError):
        CommandRegistry().register(StubHandler(""))


def test_hidden_commands_are_listed_separately() -> None:
    registry = CommandRegistry()
    registry.register(StubHandler("help"))
    registry.register(StubHandler("bankai", hidden=True))
    registry.register(StubHandler("about"))

    assert registry.command_names() == ["help", "about"]
    assert registry.command_names(include_hidden=True) == ["help", "bankai", "about"]
    assert registry.hidden_names() == ["bankai"]
    assert [h.name for h in registry.visible_commands()] == ["help", "about"]


def test_command_decorator_rejects_duplicate_declarations() -> None:
    create_default_registry()

    with pytest.raises(CommandRegistrationError):

        @command("help")
        class AnotherHelp(StubHandler):
            pass


def test_default_registry_contains_builtin_commands() -> None:
    registry = create_default_registry()
    visible = registry.command_names()
    assert visible == [
        "help",
        "about",
        "skills",
        "experience",
        "projects",
        "certifications",
        "contact",
        "resume",
        "clear",
        "history",
        "stats",
        "theme",
        "github",
        "linkedin",
        "instagram",
        "hello",
        "bye",
    ]
    assert set(registry.hidden_names()) == {"tatakae", "gear5", "bankai", "maki-zenin"}
    assert set(get_all_handler_classes()) == set(
        registry.command_names(include_hidden=True)
    )


@pytest.mark.parametrize(
    ("alias", "canonical"),
    [
        ("?", "help"),
        ("h", "help"),
        ("exp", "experience"),
        ("work", "experience"),
        ("certs", "certifications"),
        ("certificates", "certifications"),
        ("cv", "resume"),
        ("cls", "clear"),
        ("statistics", "stats"),
        ("color", "theme"),
        ("colors", "theme"),
        ("insta", "instagram"),
    ],
)
def test_default_aliases(alias: str, canonical: str) -> None:
    assert create_default_registry().resolve(alias) == canonical
