"""
Command output domain model.

Every command invocation produces exactly one ``CommandOutput``. Its content
is a tagged union so that the interpreter never depends on a rendering
technology: ``TextContent`` is plain text, ``StructuredContent`` names a UI
element (``node``) together with a serializable payload and a plain-text
rendering that text-only callers can print.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field

from portfolio_terminal.core.domain.contact import ContactForm
from portfolio_terminal.core.domain.model_bases import DomainModel


class OutputAction(str, Enum):
    """What the caller should do with a command output."""

    RENDER = "render"
    CLEAR = "clear"


class TextContent(DomainModel):
    kind: Literal["text"] = "text"
    text: str = ""


class StructuredContent(DomainModel):
    """A named UI element with a payload and a plain-text fallback."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: Literal["structured"] = "structured"
    node: str
    data: dict[str, Any] = Field(default_factory=dict)
    text: str = ""
    # Interactive form bound to a live callback; never serialized.
    form: ContactForm | None = Field(default=None, exclude=True)


OutputContent = Annotated[TextContent | StructuredContent, Field(discriminator="kind")]


class CommandOutput(DomainModel):
    """
    Result of a command execution.

    ``content`` is always present, also on failure, and is what the user sees.
    ``error`` is the loggable detail and may differ from the content.
    """

    success: bool
    content: OutputContent = Field(default_factory=TextContent)
    error: str | None = None
    action: OutputAction = OutputAction.RENDER

    @classmethod
    def text(cls, text: str, *, success: bool = True) -> CommandOutput:
        return cls(success=success, content=TextContent(text=text))

    @classmethod
    def structured(
        cls,
        node: str,
        text: str,
        data: dict[str, Any] | None = None,
        *,
        form: ContactForm | None = None,
    ) -> CommandOutput:
        return cls(
            success=True,
            content=StructuredContent(node=node, text=text, data=data or {}, form=form),
        )

    @classmethod
    def failure(
        cls, content: str | StructuredContent, error: str | None = None
    ) -> CommandOutput:
        body = TextContent(text=content) if isinstance(content, str) else content
        return cls(success=False, content=body, error=error)

    @classmethod
    def clear(cls) -> CommandOutput:
        return cls(success=True, action=OutputAction.CLEAR)

    @property
    def is_clear(self) -> bool:
        return self.action is OutputAction.CLEAR

    def render_text(self) -> str:
        """Return the plain-text form of the content."""
        return self.content.text
