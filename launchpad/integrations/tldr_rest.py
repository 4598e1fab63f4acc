from __future__ import annotations

from typing import Any, Optional

import requests


class TldrRestClient:
    """Raw fetches against the three TLDR surfaces the headline resolver probes."""

    _BASE_URL = "https://tldr.tech"
    _LATEST_PATH = "/api/latest/tech"
    _FEED_PATH = "/tech.rss"

    def __init__(
        self,
        *,
        session: Optional[Any] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = (base_url or self._BASE_URL).rstrip("/")
        self.session = session or requests
        self.timeout = timeout

    def fetch_latest(self) -> Any:
        response = self.session.get(
            f"{self.base_url}{self._LATEST_PATH}",
            headers={"accept": "application/json"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    def fetch_feed(self) -> str:
        response = self.session.get(
            f"{self.base_url}{self._FEED_PATH}",
            headers={"accept": "application/rss+xml,application/xml"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.text

    def fetch_homepage(self) -> str:
        response = self.session.get(f"{self.base_url}/", timeout=self.timeout)
        response.raise_for_status()
        return response.text
