"""
Shared fixtures: a fake token function + ORCID API served through
``httpx.MockTransport`` so no test touches the network.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
import pytest

from config.settings import Settings
from relay.client import OrcidClient

TOKEN_URL = "https://token.example.test/get-token"
API_BASE = "https://pub.orcid.org/v3.0"


def make_record(
    orcid: str,
    given: Optional[str] = "Jane",
    family: Optional[str] = "Doe",
    organization: Optional[str] = "University of York",
    country: Optional[str] = "GB",
    keywords: Optional[list[str]] = None,
) -> dict[str, Any]:
    """Build a trimmed-down ORCID v3.0 ``/record`` document."""
    name: dict[str, Any] = {
        "given-names": {"value": given} if given is not None else None,
        "family-name": {"value": family} if family is not None else None,
    }
    person: dict[str, Any] = {
        "name": name,
        "keywords": {"keyword": [{"content": k} for k in (keywords or [])]},
        "addresses": {
            "address": [{"country": {"value": country}}] if country else []
        },
    }
    groups = []
    if organization:
        groups.append({
            "summaries": [
                {"employment-summary": {"organization": {"name": organization}}}
            ]
        })
    return {
        "orcid-identifier": {
            "path": orcid,
            "uri": f"https://orcid.org/{orcid}",
            "host": "orcid.org",
        },
        "person": person,
        "activities-summary": {"employments": {"affiliation-group": groups}},
    }


class FakeOrcid:
    """Request handler standing in for the token function and ORCID."""

    def __init__(self) -> None:
        self.token: Optional[str] = "test-token"
        self.token_status = 200
        self.search_status = 200
        self.num_found: Optional[int] = None
        self.hits: list[str] = []
        self.records: dict[str, dict[str, Any]] = {}
        self.unreachable: set[str] = set()
        self.timing_out: set[str] = set()
        self.broken: set[str] = set()
        self.search_exception: Optional[Exception] = None
        self.requests: list[httpx.Request] = []

    def add(self, record: dict[str, Any]) -> None:
        orcid = record["orcid-identifier"]["path"]
        self.hits.append(orcid)
        self.records[orcid] = record

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)

        if url.startswith(TOKEN_URL):
            if self.token_status != 200:
                return httpx.Response(self.token_status, json={"error": "nope"})
            token_body = {"access_token": self.token} if self.token else {}
            return httpx.Response(200, json=token_body)

        path = request.url.path
        if path.endswith("/search/"):
            if self.search_exception is not None:
                raise self.search_exception
            if self.search_status != 200:
                return httpx.Response(self.search_status, json={"error": "down"})
            body: dict[str, Any] = {
                "result": [
                    {"orcid-identifier": {"path": o, "uri": f"https://orcid.org/{o}"}}
                    for o in self.hits
                ],
            }
            if self.num_found is not None:
                body["num-found"] = self.num_found
            return httpx.Response(200, json=body)

        if path.endswith("/record"):
            orcid = path.rstrip("/").split("/")[-2]
            if orcid in self.unreachable:
                raise httpx.ConnectError("connection refused", request=request)
            if orcid in self.timing_out:
                raise httpx.ReadTimeout("timed out", request=request)
            if orcid in self.broken:
                raise RuntimeError(f"handler blew up for {orcid}")
            if orcid not in self.records:
                return httpx.Response(404, json={"error": "not found"})
            return httpx.Response(200, json=self.records[orcid])

        return httpx.Response(404)

    def client(self, settings: Settings) -> OrcidClient:
        return OrcidClient(settings, transport=httpx.MockTransport(self.handler))

    def record_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/record")]


@pytest.fixture
def settings() -> Settings:
    return Settings(token_function_url=TOKEN_URL, orcid_api_base=API_BASE)


@pytest.fixture
def fake_orcid() -> FakeOrcid:
    return FakeOrcid()
