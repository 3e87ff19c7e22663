"""
Loading the read-only portfolio snapshot.

A snapshot document is either a ``PortfolioData`` mapping (the shape served
by the portfolio API) or raw store rows under ``sections`` and ``settings``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx
import yaml
from pydantic import ValidationError

from portfolio_terminal.core.common.exceptions import PortfolioDataError
from portfolio_terminal.core.domain.portfolio import PortfolioData

logger = logging.getLogger(__name__)


def parse_portfolio_document(document: Any, source: str | None = None) -> PortfolioData:
    """Validate a decoded snapshot document.

    Raises:
        PortfolioDataError: If the document has neither supported shape or
            fails validation.
    """
    if not isinstance(document, Mapping):
        raise PortfolioDataError(
            "Portfolio document must be a mapping", source=source
        )
    try:
        if "sections" in document:
            return PortfolioData.from_records(
                document.get("sections") or [], document.get("settings") or []
            )
        return PortfolioData.model_validate(document)
    except ValidationError as exc:
        raise PortfolioDataError(
            f"Invalid portfolio data: {exc.error_count()} validation error(s)",
            source=source,
            details={"errors": exc.errors(include_url=False)},
        ) from exc


def load_portfolio_file(path: str | Path) -> PortfolioData:
    """Read a snapshot from a JSON or YAML file."""
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PortfolioDataError(
            f"Cannot read portfolio file {file_path}: {exc}", source=str(file_path)
        ) from exc

    try:
        if file_path.suffix.lower() in (".yaml", ".yml"):
            document = yaml.safe_load(raw)
        else:
            document = json.loads(raw)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise PortfolioDataError(
            f"Cannot parse portfolio file {file_path}: {exc}", source=str(file_path)
        ) from exc

    data = parse_portfolio_document(document, source=str(file_path))
    logger.info(
        "Loaded portfolio from %s (%d skills, %d projects)",
        file_path,
        len(data.skills),
        len(data.projects),
    )
    return data


async def fetch_portfolio(
    url: str,
    timeout: float = 10.0,
    client: httpx.AsyncClient | None = None,
) -> PortfolioData:
    """Fetch a snapshot from the portfolio API."""
    try:
        if client is not None:
            response = await client.get(url)
        else:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.get(url)
        response.raise_for_status()
        document = response.json()
    except httpx.HTTPStatusError as exc:
        raise PortfolioDataError(
            f"Portfolio API returned status {exc.response.status_code}",
            source=url,
        ) from exc
    except (httpx.RequestError, ValueError) as exc:
        raise PortfolioDataError(
            f"Cannot fetch portfolio from {url}: {exc}", source=url
        ) from exc

    data = parse_portfolio_document(document, source=url)
    logger.info("Fetched portfolio from %s", url)
    return data
