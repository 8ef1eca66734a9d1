"""Search aggregation: token → search → parallel record fan-out → normalise.

Flow
────
1. settings.validate()            ConfigurationError if the token URL is unset
2. client.fetch_token()           UpstreamAuthError on failure
3. client.search(query, token)    UpstreamSearchError on failure
4. first ``max_records`` hits     fetched concurrently; each failure becomes a
                                  failed ``DetailOutcome`` and is logged
5. normalise the successes        records without a name are dropped
6. SearchEnvelope(result, totalResults=num-found)

Steps 1–3 fail fast with no retries. Once the search has succeeded the
request always produces an envelope, possibly with an empty ``result``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Optional

from relay.client import OrcidClient
from relay.errors import DetailFetchFailure
from relay.models import DetailOutcome, Researcher, SearchEnvelope
from relay.normalizer import normalize

if TYPE_CHECKING:
    from config.settings import Settings

logger = logging.getLogger(__name__)


def hit_identifiers(search_payload: dict[str, Any], limit: int) -> list[str]:
    """Return the ORCID iDs of the first *limit* search hits.

    Hits inside the window that lack an ``orcid-identifier.path`` are skipped.
    """
    hits = search_payload.get("result")
    if not isinstance(hits, list):
        return []

    orcids: list[str] = []
    for hit in hits[:limit]:
        identifier = hit.get("orcid-identifier") if isinstance(hit, dict) else None
        path = identifier.get("path") if isinstance(identifier, dict) else None
        if isinstance(path, str) and path:
            orcids.append(path)
        else:
            logger.warning("Skipping search hit without an ORCID path: %r", hit)
    return orcids


def total_results(search_payload: dict[str, Any]) -> int:
    """Return the upstream ``num-found`` count, or 0 when absent."""
    found = search_payload.get("num-found")
    try:
        return int(found) if found is not None else 0
    except (TypeError, ValueError):
        return 0


async def fetch_detail(client: OrcidClient, orcid: str, token: str) -> DetailOutcome:
    """Fetch one record, capturing any failure instead of raising it."""
    try:
        record = await client.fetch_record(orcid, token)
    except DetailFetchFailure as exc:
        logger.error("Error fetching record for ORCID %s: %s", orcid, exc.reason)
        return DetailOutcome(orcid=orcid, error=exc.reason)
    return DetailOutcome(orcid=orcid, record=record)


def settle(orcid: str, result: Any) -> DetailOutcome:
    """Turn one ``gather`` slot into a ``DetailOutcome``."""
    if isinstance(result, DetailOutcome):
        return result
    logger.error("Error fetching record for ORCID %s: %r", orcid, result)
    return DetailOutcome(orcid=orcid, error=str(result) or type(result).__name__)


def collect(outcomes: list[DetailOutcome]) -> list[Researcher]:
    """Normalise successful outcomes, dropping failures and nameless records."""
    researchers: list[Researcher] = []
    for outcome in outcomes:
        if not outcome.ok:
            continue
        researcher = normalize(outcome.record)
        if researcher is not None:
            researchers.append(researcher)
    return researchers


async def aggregate(
    query: str,
    settings: Settings,
    client: Optional[OrcidClient] = None,
) -> SearchEnvelope:
    """Run the full relay pipeline for *query*.

    Args:
        query: ORCID search query (already defaulted by the caller).
        settings: Relay configuration.
        client: Optional pre-built client; when given, the caller owns it and
            it is not closed here.

    Returns:
        A ``SearchEnvelope`` with at most ``settings.max_records`` entries.

    Raises:
        ConfigurationError: If the token endpoint is not configured.
        UpstreamAuthError: If no access token could be obtained.
        UpstreamSearchError: If the search call failed.
    """
    settings.validate()

    owns_client = client is None
    if client is None:
        client = OrcidClient(settings)

    try:
        token = await client.fetch_token()
        payload = await client.search(query, token)

        orcids = hit_identifiers(payload, settings.max_records)
        settled = await asyncio.gather(
            *(fetch_detail(client, orcid, token) for orcid in orcids),
            return_exceptions=True,
        )
    finally:
        if owns_client:
            await client.aclose()

    outcomes = [settle(orcid, result) for orcid, result in zip(orcids, settled)]
    researchers = collect(outcomes)
    total = total_results(payload)
    failed = sum(1 for outcome in outcomes if outcome.error is not None)

    logger.info(
        "Aggregated query=%r: %d researchers from %d lookups (%d failed), totalResults=%d",
        query, len(researchers), len(orcids), failed, total,
    )
    return SearchEnvelope(result=researchers, total_results=total)
