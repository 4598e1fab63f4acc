from typing import Literal

from pydantic import BaseModel, ConfigDict

HeadlineSource = Literal["api", "feed", "scrape", "fallback"]


class Headline(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    summary: str | None = None
    source: HeadlineSource
