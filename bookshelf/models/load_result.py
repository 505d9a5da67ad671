"""Load cycle result data models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from bookshelf.models.book import Bucket


class LoadState(str, Enum):
    """State of the sheet loader."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class LoadResult(BaseModel):
    """Outcome of one fetch-parse-render cycle."""

    state: LoadState
    message: str
    card_counts: dict[Bucket, int] = Field(default_factory=dict)
    records_shown: int = 0
    finished_at: datetime = Field(default_factory=datetime.now)

    @property
    def ok(self) -> bool:
        return self.state is LoadState.SUCCESS
