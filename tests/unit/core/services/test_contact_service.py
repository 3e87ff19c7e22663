from __future__ import annotations

import json

import httpx
import pytest
from pytest_httpx import HTTPXMock

from portfolio_terminal.core.domain.contact import ContactFormData
from portfolio_terminal.core.services.contact_service import HttpContactSubmitter

ENDPOINT = "https://portfolio.example.com/api/contact"
FORM = ContactFormData(name="Ann", email="ann@example.com", message="Hello there")


@pytest.mark.asyncio
async def test_successful_submission(httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_response(
        url=ENDPOINT, method="POST", json={"success": True, "message": "Got it!"}
    )

    result = await HttpContactSubmitter(ENDPOINT)(FORM)

    assert result.success is True
    assert result.message == "Got it!"
    request = httpx_mock.get_request()
    assert request is not None
    assert json.loads(request.content) == {
        "name": "Ann",
        "email": "ann@example.com",
        "message": "Hello there",
    }


@pytest.mark.asyncio
async def test_success_without_message_uses_default(httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_response(url=ENDPOINT, method="POST", json={})
    result = await HttpContactSubmitter(ENDPOINT)(FORM)
    assert result.message == "Message sent successfully!"


@pytest.mark.asyncio
async def test_error_response_uses_server_error(httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_response(
        url=ENDPOINT, method="POST", status_code=429, json={"error": "Too many requests"}
    )
    result = await HttpContactSubmitter(ENDPOINT)(FORM)
    assert result.success is False
    assert result.message == "Too many requests"


@pytest.mark.asyncio
async def test_error_response_without_detail(httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_response(url=ENDPOINT, method="POST", status_code=500, json={})
    result = await HttpContactSubmitter(ENDPOINT)(FORM)
    assert result.message == "Failed to send message"


@pytest.mark.asyncio
async def test_network_error(httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_exception(httpx.ConnectError("refused"))
    result = await HttpContactSubmitter(ENDPOINT)(FORM)
    assert result.success is False
    assert result.message == "Network error. Please try again later."


@pytest.mark.asyncio
async def test_shared_client_is_used(httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_response(url=ENDPOINT, method="POST", json={"message": "ok"})
    async with httpx.AsyncClient() as client:
        result = await HttpContactSubmitter(ENDPOINT, client=client)(FORM)
    assert result.message == "ok"


@pytest.mark.asyncio
async def test_email_is_redacted_in_logs(
    httpx_mock: HTTPXMock, caplog: pytest.LogCaptureFixture
) -> None:
    httpx_mock.add_response(url=ENDPOINT, method="POST", json={})
    with caplog.at_level("INFO", logger="portfolio_terminal.core.services.contact_service"):
        await HttpContactSubmitter(ENDPOINT)(FORM)
    assert "ann@example.com" not in caplog.text
    assert "a***@example.com" in caplog.text
