"""
HTTP delivery of contact form submissions.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from portfolio_terminal.core.common.logging_utils import redact_email
from portfolio_terminal.core.domain.contact import (
    ContactFormData,
    ContactSubmitResult,
)

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = "Failed to send message"
NETWORK_ERROR_MESSAGE = "Network error. Please try again later."
DEFAULT_SUCCESS_MESSAGE = "Message sent successfully!"


class HttpContactSubmitter:
    """
    Posts contact form data as JSON to a contact endpoint.

    Instances are async callables matching ``ContactSubmitter``. Failures are
    reported through the returned ``ContactSubmitResult``, never raised.
    """

    def __init__(
        self,
        endpoint_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Args:
            endpoint_url: URL the form is POSTed to.
            timeout: Request timeout in seconds, used when no client is given.
            client: Optional shared client; one is created per call otherwise.
        """
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self._client = client

    async def __call__(self, data: ContactFormData) -> ContactSubmitResult:
        logger.info(
            "Submitting contact form from %s to %s",
            redact_email(data.email),
            self.endpoint_url,
        )
        try:
            if self._client is not None:
                response = await self._post(self._client, data)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await self._post(client, data)
            body = response.json()
        except (httpx.RequestError, ValueError) as exc:
            logger.warning("Contact submission failed: %s", exc)
            return ContactSubmitResult(success=False, message=NETWORK_ERROR_MESSAGE)

        payload: dict[str, Any] = body if isinstance(body, dict) else {}
        if not response.is_success:
            logger.warning(
                "Contact endpoint returned status %s", response.status_code
            )
            return ContactSubmitResult(
                success=False,
                message=payload.get("error") or DEFAULT_FAILURE_MESSAGE,
            )

        return ContactSubmitResult(
            success=True, message=payload.get("message") or DEFAULT_SUCCESS_MESSAGE
        )

    async def _post(
        self, client: httpx.AsyncClient, data: ContactFormData
    ) -> httpx.Response:
        return await client.post(self.endpoint_url, json=data.model_dump())
