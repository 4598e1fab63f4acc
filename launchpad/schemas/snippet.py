from typing import Literal

from pydantic import BaseModel, ConfigDict


class Snippet(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["nugget", "history"]
    section_title: str
    heading: str
    body: str
    link_text: str
    link_url: str
    code: str | None = None
