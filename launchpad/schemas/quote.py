from typing import Any, Literal

from pydantic import BaseModel


class TickerRow(BaseModel):
    symbol: str
    price_text: str
    percentage: float
    percentage_text: str
    direction: Literal["up", "down"]


class TickerState(BaseModel):
    symbols: list[str]
    quotes: list[Any]
    loop_quotes: list[Any]
    loading: bool
    rows: list[TickerRow]
