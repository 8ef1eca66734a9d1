"""Application settings — all configuration loaded from environment variables.

Usage:
    from config.settings import Settings
    settings = Settings()
    settings.validate()   # raises ConfigurationError if TOKEN_FUNCTION_URL is missing
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from relay.errors import ConfigurationError

#: Upper bound on detail lookups per request, regardless of configuration.
MAX_RECORDS_CAP = 10


def _env_number(name: str, default: str, cast=int):
    """Read a numeric env var, raising ``ConfigurationError`` if it does not parse."""
    raw = os.environ.get(name, default)
    try:
        return cast(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"{name} must be a number, got {raw!r}."
        ) from None


@dataclass
class Settings:
    """Centralised relay configuration.

    All values are read from environment variables at instantiation time
    so that tests can override them by patching ``os.environ``.
    """

    # ── Upstream endpoints ──────────────────────────────────────────────────
    token_function_url: str = field(
        default_factory=lambda: os.environ.get("TOKEN_FUNCTION_URL", "")
    )
    orcid_api_base: str = field(
        default_factory=lambda: os.environ.get(
            "ORCID_API_BASE", "https://pub.orcid.org/v3.0"
        ).rstrip("/")
    )

    # ── Search ──────────────────────────────────────────────────────────────
    search_rows: int = field(
        default_factory=lambda: _env_number("SEARCH_ROWS", "20")
    )
    max_records: int = field(
        default_factory=lambda: _env_number("MAX_RECORDS", "10")
    )
    request_timeout: float = field(
        default_factory=lambda: _env_number("REQUEST_TIMEOUT", "30", float)
    )
    default_query: str = field(
        default_factory=lambda: os.environ.get("DEFAULT_QUERY", "archaeology")
    )

    # ── Flask ───────────────────────────────────────────────────────────────
    debug: bool = field(
        default_factory=lambda: os.environ.get("FLASK_DEBUG", "0") == "1"
    )
    port: int = field(
        default_factory=lambda: _env_number("PORT", "5001")
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )

    def __post_init__(self) -> None:
        self.max_records = max(0, min(self.max_records, MAX_RECORDS_CAP))

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if any required setting is missing."""
        if not self.token_function_url:
            raise ConfigurationError(
                "TOKEN_FUNCTION_URL environment variable is not set. "
                "Point it at the function that issues ORCID access tokens."
            )
