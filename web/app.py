"""
Flask web server for the ORCID relay.

Routes
──────
GET      /api/search?q=...   Search ORCID and return normalised researchers (JSON)
OPTIONS  /api/search         CORS pre-flight
GET      /?q=...             Same as /api/search (matches the function URL layout)
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv
from flask import Flask, Response, request

# Allow running as `python web/app.py` from the project root
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

load_dotenv()

from config.settings import Settings
from relay.transport import RelayResponse, handle_request

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

app = Flask(__name__)


def _to_flask(relay_response: RelayResponse) -> Response:
    return Response(
        relay_response.body,
        status=relay_response.status_code,
        headers=relay_response.headers,
    )


# ── Relay ──────────────────────────────────────────────────────────────────

@app.route("/", methods=["GET", "OPTIONS"], provide_automatic_options=False)
@app.route("/api/search", methods=["GET", "OPTIONS"], provide_automatic_options=False)
def search():
    """Relay a researcher search to ORCID.

    Query params:
      q  (optional) — ORCID search query, defaults to ``archaeology``
    """
    relay_response = handle_request(request.method, request.args)
    return _to_flask(relay_response)


# ── Entry point ────────────────────────────────────────────────────────────

if __name__ == "__main__":
    settings = Settings()
    app.run(debug=settings.debug, host="0.0.0.0", port=settings.port)
