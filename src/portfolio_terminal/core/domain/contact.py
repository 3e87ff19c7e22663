"""
Contact form domain objects.

The ``contact`` command does not send anything itself. It returns a
``ContactForm`` bound to an injected submitter; the caller collects the
fields and awaits ``ContactForm.submit``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from pydantic import Field

from portfolio_terminal.core.domain.model_bases import DomainModel, ValueObject

if TYPE_CHECKING:
    from portfolio_terminal.core.domain.portfolio import ContactInfo

logger = logging.getLogger(__name__)

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ContactFormData(ValueObject):
    name: str = ""
    email: str = ""
    message: str = ""


class ContactSubmitResult(DomainModel):
    success: bool
    message: str
    errors: dict[str, str] = Field(default_factory=dict)


ContactSubmitter = Callable[[ContactFormData], Awaitable[ContactSubmitResult]]


def validate_contact_form(data: ContactFormData) -> dict[str, str]:
    """Return a mapping of field name to error message, empty when valid."""
    errors: dict[str, str] = {}

    if not data.name.strip():
        errors["name"] = "Name is required"

    if not data.email.strip():
        errors["email"] = "Email is required"
    elif not EMAIL_REGEX.match(data.email):
        errors["email"] = "Please enter a valid email address"

    if not data.message.strip():
        errors["message"] = "Message cannot be empty"

    return errors


class ContactForm:
    """An interactive contact form bound to a submit callback."""

    fields: tuple[str, ...] = ("name", "email", "message")

    def __init__(
        self,
        submitter: ContactSubmitter | None,
        contact_info: ContactInfo | None = None,
    ) -> None:
        self._submitter = submitter
        self.contact_info = contact_info

    @property
    def can_submit(self) -> bool:
        return self._submitter is not None

    async def submit(self, data: ContactFormData) -> ContactSubmitResult:
        errors = validate_contact_form(data)
        if errors:
            first_message = next(iter(errors.values()))
            return ContactSubmitResult(success=False, message=first_message, errors=errors)

        if self._submitter is None:
            logger.warning("Contact form submitted but no submitter is configured")
            return ContactSubmitResult(
                success=False,
                message="Messaging is not available right now. Please use the email above.",
            )

        return await self._submitter(data)
