"""
Contact command handler.

Returns the owner's contact details together with an interactive
``ContactForm``. The form is bound to the submitter configured on the
command service; the handler itself never sends anything.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from portfolio_terminal.core.commands.handler import ICommandHandler
from portfolio_terminal.core.commands.registry import command
from portfolio_terminal.core.domain.command_context import ExecutionContext
from portfolio_terminal.core.domain.command_results import CommandOutput
from portfolio_terminal.core.domain.contact import ContactForm
from portfolio_terminal.core.domain.parsed_command import FlagValue

# Social links shown with the contact details, in display order.
CONTACT_SOCIALS = (("github", "GitHub"), ("linkedin", "LinkedIn"), ("twitter", "Twitter"))


@command("contact")
class ContactCommandHandler(ICommandHandler):
    """Handler for the contact command."""

    @property
    def name(self) -> str:
        return "contact"

    @property
    def description(self) -> str:
        return "Display contact information and form"

    @property
    def usage(self) -> str:
        return "contact"

    async def execute(
        self,
        args: Sequence[str],
        flags: Mapping[str, FlagValue],
        context: ExecutionContext,
    ) -> CommandOutput:
        contact_info = (
            context.portfolio_data.contact_info if context.portfolio_data else None
        )
        submitter = (
            self._command_service.contact_submitter
            if self._command_service is not None
            else None
        )
        form = ContactForm(submitter, contact_info)

        lines = ["Contact Information"]
        data: dict[str, object] = {"fields": list(form.fields)}
        if contact_info is not None:
            if contact_info.email:
                lines.append(f"  Email: {contact_info.email}")
            for key, label in CONTACT_SOCIALS:
                url = contact_info.socials.get(key)
                if url:
                    lines.append(f"  {label}: {url}")
            data["contact_info"] = contact_info.model_dump(by_alias=True)

        lines.append("")
        lines.append("Send a Message")
        lines.append("  Fill in your name, email and message to get in touch.")

        return CommandOutput.structured(
            "contact_form", "\n".join(lines), data, form=form
        )
