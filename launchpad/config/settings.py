import os
from functools import lru_cache

from pydantic import BaseModel, field_validator

DEFAULT_TICKER_SYMBOLS = ["AAPL", "MSFT", "GOOGL", "NVDA"]


class Settings(BaseModel):
    LAUNCHPAD_NEWS_BASE_URL: str = "https://tldr.tech"
    LAUNCHPAD_QUOTE_BASE_URL: str = "https://financialmodelingprep.com/api/v3"
    LAUNCHPAD_QUOTE_API_KEY: str = "demo"
    LAUNCHPAD_TICKER_SYMBOLS: list[str] = DEFAULT_TICKER_SYMBOLS
    LAUNCHPAD_QUOTE_POLL_INTERVAL_SEC: float = 60.0
    LAUNCHPAD_HTTP_TIMEOUT_SEC: float | None = None

    @field_validator("LAUNCHPAD_NEWS_BASE_URL", "LAUNCHPAD_QUOTE_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("LAUNCHPAD_QUOTE_POLL_INTERVAL_SEC")
    @classmethod
    def positive_interval(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("poll interval must be positive")
        return value

    @field_validator("LAUNCHPAD_HTTP_TIMEOUT_SEC")
    @classmethod
    def positive_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("http timeout must be positive")
        return value

    @classmethod
    def from_env(cls) -> "Settings":
        raw_symbols = os.getenv("LAUNCHPAD_TICKER_SYMBOLS", "")
        symbols = [s.strip().upper() for s in raw_symbols.split(",") if s.strip()]
        if not symbols:
            symbols = list(DEFAULT_TICKER_SYMBOLS)

        values = {"LAUNCHPAD_TICKER_SYMBOLS": symbols}
        for key in (
            "LAUNCHPAD_NEWS_BASE_URL",
            "LAUNCHPAD_QUOTE_BASE_URL",
            "LAUNCHPAD_QUOTE_API_KEY",
            "LAUNCHPAD_QUOTE_POLL_INTERVAL_SEC",
            "LAUNCHPAD_HTTP_TIMEOUT_SEC",
        ):
            raw = os.getenv(key)
            if raw is not None and raw.strip() != "":
                values[key] = raw.strip()

        return cls.model_validate(values)


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
