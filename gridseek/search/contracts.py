"""Event and result contracts shared by the search core and its sinks."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EventKind(str, Enum):
    DISCOVERED = "discovered"
    ON_PATH = "on_path"


class SearchStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"


class SearchEvent(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    cell: int = Field(ge=0)
    kind: EventKind


class SearchResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: SearchStatus
    start: int
    end: int
    path: list[int] = Field(default_factory=list)
    cost: int | None = None
    expanded: int = 0
    discovered: int = 0

    @model_validator(mode="after")
    def validate_outcome(self) -> "SearchResult":
        if self.status == SearchStatus.SUCCEEDED:
            if self.cost is None:
                raise ValueError("succeeded result requires a cost")
            if not self.path or self.path[0] != self.end:
                raise ValueError("succeeded path must begin at the end cell")
        elif self.path:
            raise ValueError("only a succeeded result carries a path")
        return self

    @property
    def found(self) -> bool:
        return self.status == SearchStatus.SUCCEEDED

    def route(self) -> list[int]:
        """Return the start-to-end cell sequence, both endpoints included."""
        if not self.found:
            return []
        return [self.start, *reversed(self.path)]


EventSink = Callable[[SearchEvent], None]
