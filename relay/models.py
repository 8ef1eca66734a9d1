"""
Pydantic models shared across the relay.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

LOCATION_NOT_AVAILABLE = "Location not available"
AFFILIATION_NOT_AVAILABLE = "Affiliation not available"


class Researcher(BaseModel):
    """A flattened ORCID profile as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    orcid: str
    name: str
    location: str = LOCATION_NOT_AVAILABLE
    employment: str = AFFILIATION_NOT_AVAILABLE
    keywords: list[str] = Field(default_factory=list)
    orcid_url: str = Field(alias="orcidUrl")


class SearchEnvelope(BaseModel):
    """Successful relay response.

    ``total_results`` is the match count reported by the ORCID search, not
    ``len(result)``: the fan-out cap and failed lookups both shrink the list.
    """

    model_config = ConfigDict(populate_by_name=True)

    result: list[Researcher] = Field(default_factory=list)
    total_results: int = Field(default=0, alias="totalResults")


class ErrorEnvelope(BaseModel):
    """Fatal relay response."""

    error: str
    details: str = ""


@dataclass
class DetailOutcome:
    """Settled result of one record lookup: either ``record`` or ``error``."""

    orcid: str
    record: Optional[dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.record)
