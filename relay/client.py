"""Async HTTP access to the token function and the ORCID public API.

Each ``OrcidClient`` wraps one ``httpx.AsyncClient`` and lives for a single
relay request. The underlying client is lazy-initialised so tests can inject
an ``httpx.MockTransport`` without touching the network.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import httpx

from relay.errors import DetailFetchFailure, UpstreamAuthError, UpstreamSearchError

if TYPE_CHECKING:
    from config.settings import Settings

logger = logging.getLogger(__name__)


class OrcidClient:
    """Thin wrapper over the three upstream calls the relay makes."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialise and return the ``httpx.AsyncClient``."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.settings.request_timeout,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> OrcidClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ── Helpers ────────────────────────────────────────────────────────────

    @staticmethod
    def _auth_headers(token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }

    # ── Upstream calls ─────────────────────────────────────────────────────

    async def fetch_token(self) -> str:
        """Ask the token function for an ORCID access token.

        Raises:
            UpstreamAuthError: On transport errors, non-2xx responses, a
                non-JSON body, or a body without ``access_token``.
        """
        url = self.settings.token_function_url
        logger.info("Calling token function at %s", url)
        try:
            response = await self.client.get(url)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            raise UpstreamAuthError(f"Token function request failed: {exc}") from exc

        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(token, str) or not token:
            raise UpstreamAuthError("Failed to get access token from token function")

        logger.info("Got access token successfully")
        return token

    async def search(self, query: str, token: str) -> dict[str, Any]:
        """Run an ORCID expanded search and return the parsed JSON body.

        ``httpx`` URL-encodes *query* when building the request.

        Raises:
            UpstreamSearchError: On transport errors, non-2xx responses, or a
                body that is not a JSON object.
        """
        url = f"{self.settings.orcid_api_base}/search/"
        params = {"q": query, "start": 0, "rows": self.settings.search_rows}
        logger.info("Searching ORCID at %s q=%r rows=%d", url, query, self.settings.search_rows)
        try:
            response = await self.client.get(
                url, params=params, headers=self._auth_headers(token)
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            raise UpstreamSearchError(f"ORCID search failed: {exc}") from exc

        if not isinstance(payload, dict):
            raise UpstreamSearchError("ORCID search returned an unexpected body")

        logger.info("ORCID search completed, status: %d", response.status_code)
        return payload

    async def fetch_record(self, orcid: str, token: str) -> dict[str, Any]:
        """Fetch the full ``/record`` document for one ORCID iD.

        Raises:
            DetailFetchFailure: On any transport, status or decoding failure.
        """
        url = f"{self.settings.orcid_api_base}/{orcid}/record"
        try:
            response = await self.client.get(url, headers=self._auth_headers(token))
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            raise DetailFetchFailure(orcid, str(exc) or type(exc).__name__) from exc

        if not isinstance(payload, dict):
            raise DetailFetchFailure(orcid, "record body is not a JSON object")
        return payload
