"""
Serverless entry point for the ORCID relay.

Deploy ``main`` as the function handler. The event is expected to carry
``httpMethod`` and ``queryStringParameters``; the return value is the usual
``{"statusCode", "headers", "body"}`` mapping.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

from dotenv import load_dotenv

from relay.transport import handle_request

load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


def main(event: Optional[dict[str, Any]] = None, context: Any = None) -> dict[str, Any]:
    """Handle one function invocation."""
    event = event or {}
    method = event.get("httpMethod") or "GET"
    params = event.get("queryStringParameters") or {}
    logger.debug("Received event: method=%s params=%r", method, params)

    relay_response = handle_request(method, params)
    return relay_response.to_event_response()
