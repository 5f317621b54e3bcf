## Pydantic Schemas for Structured Output
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    id: str = Field(min_length=1)
    label: str


class Phase(BaseModel):
    # title and any other keys the model emits are passed through untouched
    model_config = ConfigDict(extra="allow")

    id: str = Field(min_length=1)
    items: List[Item] = Field(default_factory=list)


class RoadmapDocument(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str = Field(min_length=1)
    phases: List[Phase]
    edges: List[Any] = Field(default_factory=list)


class RoadmapRequest(BaseModel):
    goal: str | None = None
