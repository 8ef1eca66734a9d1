"""
Exception hierarchy for the ORCID relay.

Fatal errors (``ConfigurationError``, ``UpstreamError`` and its subclasses)
end the request with an error envelope. ``DetailFetchFailure`` describes a
single failed record lookup; the aggregator records it in a
``DetailOutcome`` and never lets it escape.
"""

from __future__ import annotations


class RelayError(Exception):
    """Base class for all relay errors."""


class ConfigurationError(RelayError):
    """A required setting (e.g. the token endpoint) is missing."""


class UpstreamError(RelayError):
    """The token service or the ORCID search call failed."""


class UpstreamAuthError(UpstreamError):
    """The token service was unreachable or returned no access token."""


class UpstreamSearchError(UpstreamError):
    """The ORCID search request failed."""


class DetailFetchFailure(RelayError):
    """A per-record lookup failed."""

    def __init__(self, orcid: str, reason: str) -> None:
        super().__init__(f"Error fetching record for ORCID {orcid}: {reason}")
        self.orcid = orcid
        self.reason = reason
