"""HTTP boundary shared by the Flask app and the serverless entry point.

Turns ``(method, query params)`` into a ``RelayResponse`` (status, headers,
JSON body) so both front doors behave identically:

- ``OPTIONS``  → 204, CORS pre-flight headers, empty body, no upstream calls
- ``GET``      → 200 ``{"result": [...], "totalResults": n}``
- failures     → 500 ``{"error": "...", "details": "..."}``
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from config.settings import Settings
from relay.aggregator import aggregate
from relay.client import OrcidClient
from relay.errors import ConfigurationError
from relay.models import ErrorEnvelope

logger = logging.getLogger(__name__)

CORS_HEADERS: dict[str, str] = {"Access-Control-Allow-Origin": "*"}

PREFLIGHT_HEADERS: dict[str, str] = {
    **CORS_HEADERS,
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

JSON_HEADERS: dict[str, str] = {**CORS_HEADERS, "Content-Type": "application/json"}

CONFIG_ERROR_MESSAGE = "Server configuration error"
SEARCH_ERROR_MESSAGE = "Failed to search ORCID"


@dataclass
class RelayResponse:
    """Framework-neutral HTTP response."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    def to_event_response(self) -> dict[str, Any]:
        """Return the ``{statusCode, headers, body}`` shape serverless runtimes expect."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }


def preflight_response() -> RelayResponse:
    return RelayResponse(status_code=204, headers=dict(PREFLIGHT_HEADERS))


def json_response(status_code: int, payload: Mapping[str, Any]) -> RelayResponse:
    return RelayResponse(
        status_code=status_code,
        headers=dict(JSON_HEADERS),
        body=json.dumps(payload, ensure_ascii=False),
    )


def error_response(error: str, details: str) -> RelayResponse:
    envelope = ErrorEnvelope(error=error, details=details)
    return json_response(500, envelope.model_dump())


def resolve_query(params: Optional[Mapping[str, Any]], default: str) -> str:
    """Return the ``q`` parameter, or *default* when it is missing or blank."""
    if not params:
        return default
    query = params.get("q")
    if not isinstance(query, str) or not query.strip():
        return default
    return query


def handle_request(
    method: str,
    params: Optional[Mapping[str, Any]] = None,
    settings: Optional[Settings] = None,
    client: Optional[OrcidClient] = None,
) -> RelayResponse:
    """Serve one relay request.

    Args:
        method: HTTP method of the inbound request.
        params: Query-string parameters (only ``q`` is read).
        settings: Relay configuration; read from the environment if omitted.
        client: Optional ORCID client, mainly for tests.

    Returns:
        A ``RelayResponse``. This function never raises; fatal errors become
        500 responses with an ``error``/``details`` body.
    """
    if (method or "").upper() == "OPTIONS":
        return preflight_response()

    try:
        settings = settings or Settings()
    except ConfigurationError as exc:
        logger.error("Relay misconfigured: %s", exc)
        return error_response(CONFIG_ERROR_MESSAGE, str(exc))

    query = resolve_query(params, settings.default_query)
    logger.info("Search query: %r", query)

    try:
        envelope = asyncio.run(aggregate(query, settings, client=client))
    except ConfigurationError as exc:
        logger.error("Relay misconfigured: %s", exc)
        return error_response(CONFIG_ERROR_MESSAGE, str(exc))
    except Exception as exc:
        logger.exception("Error in search for query=%r", query)
        return error_response(SEARCH_ERROR_MESSAGE, str(exc))

    return json_response(200, envelope.model_dump(by_alias=True))
