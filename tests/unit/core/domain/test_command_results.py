from __future__ import annotations

from portfolio_terminal.core.domain.command_results import (
    CommandOutput,
    OutputAction,
    StructuredContent,
    TextContent,
)


def test_text_output() -> None:
    output = CommandOutput.text("hi")
    assert output.success is True
    assert output.content == TextContent(text="hi")
    assert output.action is OutputAction.RENDER
    assert output.render_text() == "hi"


def test_failure_keeps_visible_content_and_error_detail() -> None:
    output = CommandOutput.failure("Visible", error="detail")
    assert output.success is False
    assert output.render_text() == "Visible"
    assert output.error == "detail"


def test_clear_output_has_no_sentinel_text() -> None:
    output = CommandOutput.clear()
    assert output.is_clear
    assert output.render_text() == ""


def test_content_union_is_discriminated_by_kind() -> None:
    output = CommandOutput.model_validate(
        {
            "success": True,
            "content": {"kind": "structured", "node": "download", "text": "t"},
        }
    )
    assert isinstance(output.content, StructuredContent)
    assert output.content.data == {}
