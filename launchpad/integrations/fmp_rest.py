from __future__ import annotations

import re
from typing import Any, Optional

import requests

_APIKEY_RE = re.compile(r"(apikey)=[^&]+", re.IGNORECASE)


def sanitize_url(url: str) -> str:
    """Mask the apikey query param so URLs are safe to log."""
    return _APIKEY_RE.sub(r"\1=***", url)


class FmpQuoteClient:
    """Batched FinancialModelingPrep quote lookup (one request for many symbols)."""

    _BASE_URL = "https://financialmodelingprep.com/api/v3"

    def __init__(
        self,
        api_key: str = "demo",
        *,
        session: Optional[Any] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = (base_url or self._BASE_URL).rstrip("/")
        self.session = session or requests
        self.timeout = timeout

    def quote_url(self, symbols: list[str] | tuple[str, ...]) -> str:
        return f"{self.base_url}/quote/{','.join(symbols)}"

    def get_quotes(self, symbols: list[str] | tuple[str, ...]) -> Any:
        """Return the decoded payload as-is; shape checks belong to the caller."""
        response = self.session.get(
            self.quote_url(symbols),
            params={"apikey": self.api_key},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()
