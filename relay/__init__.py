"""
ORCID relay core package.

Modules
───────
errors      — exception hierarchy (configuration / upstream / per-record)
models      — Pydantic models (Researcher, SearchEnvelope, ErrorEnvelope) + DetailOutcome
countries   — ISO alpha-2 code → country display name
normalizer  — nested ORCID record → flat Researcher
client      — httpx client for the token function and ORCID search/record calls
aggregator  — token → search → parallel record fan-out → SearchEnvelope
transport   — method + query params → RelayResponse (CORS, JSON, error mapping)
"""
