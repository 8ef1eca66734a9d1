"""Flatten ORCID v3.0 records into ``Researcher`` objects.

Responsibilities:
- Pull the identifier, name, latest employment, keywords and country out of
  the deeply nested ``/record`` payload
- Degrade every missing or ``null`` field to its documented default
- Drop records with no usable identifier or no derivable name

The ORCID record schema makes nearly every block optional (private fields
come back as ``null``), so each lookup below goes through ``_mapping`` /
``_first`` instead of direct indexing.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from relay.countries import resolve_country
from relay.models import AFFILIATION_NOT_AVAILABLE, LOCATION_NOT_AVAILABLE, Researcher

logger = logging.getLogger(__name__)

#: The seed term of every search; it tells clients nothing about a researcher.
SEED_KEYWORD = "archaeology"


# ── Safe accessors ─────────────────────────────────────────────────────────────


def _mapping(value: Any) -> dict[str, Any]:
    """Return *value* if it is a dict, otherwise an empty dict."""
    return value if isinstance(value, dict) else {}


def _first(value: Any) -> Optional[dict[str, Any]]:
    """Return the first element of a non-empty list if it is a dict."""
    if isinstance(value, list) and value and isinstance(value[0], dict):
        return value[0]
    return None


def _text(value: Any) -> str:
    """Return the ``value`` string of an ORCID ``{"value": ...}`` wrapper."""
    inner = _mapping(value).get("value")
    return inner if isinstance(inner, str) else ""


# ── Field extractors ───────────────────────────────────────────────────────────


def extract_name(record: dict[str, Any]) -> str:
    """Return ``"<given-names> <family-name>"`` trimmed, or ``""``."""
    name = _mapping(_mapping(record.get("person")).get("name"))
    given = _text(name.get("given-names"))
    family = _text(name.get("family-name"))
    return f"{given} {family}".strip()


def extract_employment(record: dict[str, Any]) -> str:
    """Return the organisation of the most recent employment entry.

    ORCID orders affiliation groups newest first, so the first summary of the
    first group is the current (or latest) employer.
    """
    employments = _mapping(
        _mapping(record.get("activities-summary")).get("employments")
    )
    group = _first(employments.get("affiliation-group"))
    if group is None:
        return AFFILIATION_NOT_AVAILABLE

    summary = _first(group.get("summaries"))
    if summary is None:
        return AFFILIATION_NOT_AVAILABLE

    organization = _mapping(_mapping(summary.get("employment-summary")).get("organization"))
    org_name = organization.get("name")
    if isinstance(org_name, str) and org_name.strip():
        return org_name
    return AFFILIATION_NOT_AVAILABLE


def extract_keywords(record: dict[str, Any]) -> list[str]:
    """Return keyword contents in order, minus the seed term."""
    keywords = _mapping(_mapping(record.get("person")).get("keywords")).get("keyword")
    if not isinstance(keywords, list):
        return []

    contents: list[str] = []
    for keyword in keywords:
        content = _mapping(keyword).get("content")
        if not isinstance(content, str):
            continue
        if content.lower() == SEED_KEYWORD:
            continue
        contents.append(content)
    return contents


def extract_location(record: dict[str, Any]) -> str:
    """Return the country name of the first address, or the sentinel."""
    addresses = _mapping(_mapping(record.get("person")).get("addresses"))
    address = _first(addresses.get("address"))
    if address is None:
        return LOCATION_NOT_AVAILABLE

    code = _text(address.get("country"))
    if not code:
        return LOCATION_NOT_AVAILABLE
    return resolve_country(code) or code


# ── Public entry point ─────────────────────────────────────────────────────────


def normalize(record: Any) -> Optional[Researcher]:
    """Convert one raw ORCID record into a ``Researcher``.

    Args:
        record: Parsed JSON body of ``GET /v3.0/{orcid}/record``.

    Returns:
        A ``Researcher``, or ``None`` when the record has no identifier path
        or no usable name. Missing employment, keywords or address never cause
        ``None``; they fall back to their defaults.

    Examples:
        >>> normalize({"orcid-identifier": {"path": "0000-0001"}}) is None  # no name
        True
    """
    if not isinstance(record, dict):
        return None

    identifier = record.get("orcid-identifier")
    if not isinstance(identifier, dict):
        return None

    orcid = identifier.get("path")
    if not isinstance(orcid, str) or not orcid:
        return None

    name = extract_name(record)
    if not name:
        logger.debug("Skipping ORCID %s: no name on record", orcid)
        return None

    orcid_url = identifier.get("uri")
    if not isinstance(orcid_url, str) or not orcid_url:
        orcid_url = f"https://orcid.org/{orcid}"

    return Researcher(
        orcid=orcid,
        name=name,
        location=extract_location(record),
        employment=extract_employment(record),
        keywords=extract_keywords(record),
        orcid_url=orcid_url,
    )
