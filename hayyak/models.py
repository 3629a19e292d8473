from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

Coords = Tuple[float, float]


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class RouteStop(Record):
    id: str
    title: str
    time: str
    icon: str
    coords: Optional[Coords] = None
    crowdLevel: int = Field(ge=0, le=100)


class Suggestion(Record):
    id: str
    title: str
    info: str
    icon: str
    realTime: bool = False
    rating: Optional[float] = None
    coords: Optional[Coords] = None


class Restaurant(Record):
    name: str
    info: str
    icon: str
    coords: Optional[Coords] = None
    price: str
    calories: str = "Varies"


class MoodPlace(Record):
    name: str
    info: str
    coords: Optional[Coords] = None


class MoodCategory(Record):
    keywords: Tuple[str, ...] = ()
    response: str
    places: Tuple[MoodPlace, ...] = ()

    @field_validator("keywords")
    @classmethod
    def dedupe_keywords(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        # keywords behave as a set; first occurrence keeps its position
        return tuple(dict.fromkeys(value))


class AdvisorPlace(BaseModel):
    name: str
    info: str


class AdvisorReply(BaseModel):
    response: str
    places: list[AdvisorPlace] = Field(min_length=3, max_length=3)


class AdvisorRequest(BaseModel):
    message: Optional[str] = None

    @field_validator("message", mode="before")
    @classmethod
    def scalar_to_text(cls, value: object) -> object:
        # zero and false count as a missing message
        if isinstance(value, bool):
            return "true" if value else None
        if isinstance(value, (int, float)):
            return str(value) if value else None
        return value
