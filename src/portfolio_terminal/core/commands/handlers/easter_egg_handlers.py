"""
Hidden anime-themed commands.

They resolve and run like any other command but are left out of help,
autocomplete and suggestions.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.commands.registry import command
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.parsed_command import FlagValue


class EasterEggHandler(ICommandHandler):
    """Base for hidden commands that print a fixed scene and an achievement."""

    egg_name: str = ""
    scene: str = ""
    achievement: str = ""

    @property
    def name(self) -> str:
        return self.egg_name

    @property
    def description(self) -> str:
        return "???"

    @property
    def usage(self) -> str:
        return self.egg_name

    @property
    def hidden(self) -> bool:
        return True

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        text = f'{self.scene}\n\nAchievement Unlocked: "{self.achievement}" 🎖️'
        return CommandOutput.structured(
            "easter_egg", text, {"name": self.egg_name, "achievement": self.achievement}
        )


@command("tatakae")
class TatakaeCommandHandler(EasterEggHandler):
    egg_name = "tatakae"
    achievement = "The Rumbling"
    scene = """\
    ⚔️  TATAKAE! TATAKAE! ⚔️

    "If you win, you live.
     If you lose, you die.
     If you don't fight, you can't win!"

    - Eren Yeager, Attack on Titan

    🔥 Keep moving forward! 🔥"""


@command("gear5")
class Gear5CommandHandler(EasterEggHandler):
    egg_name = "gear5"
    achievement = "Joyboy Returns"
    scene = """\
    🌟 GEAR 5 ACTIVATED! 🌟

         ⚡ ☀️ ⚡
        ╔═══════════╗
        ║  SUN GOD  ║
        ║   NIKA    ║
        ╚═══════════╝
         ⚡ ☀️ ⚡

    "I'm the freest person in the world!"

    - Monkey D. Luffy, One Piece"""


@command("bankai")
class BankaiCommandHandler(EasterEggHandler):
    egg_name = "bankai"
    achievement = "Soul Reaper"
    scene = """\
    ⚡ BANKAI! ⚡

        ╔═══════════════╗
        ║   卍  解      ║
        ║   BANKAI      ║
        ╚═══════════════╝

    "Bankai: Tensa Zangetsu!"

    - Ichigo Kurosaki, Bleach

    ⚔️  Spiritual pressure intensifies... ⚔️"""


@command("maki-zenin")
class MakiZeninCommandHandler(EasterEggHandler):
    egg_name = "maki-zenin"
    achievement = "Zenin Clan Rebel"
    scene = """\
    💚 heyyyy shorty

         ⚔️  ✨  ⚔️
        ╔═══════════╗
        ║ MAKI-Zenin║
        ╚═══════════╝
         ⚔️  ✨  ⚔️

    "I'll show you what a Zenin without cursed energy can do!"

    - Maki Zenin, Jujutsu Kaisen

    🔥 Heavenly Restriction Activated! 🔥"""
