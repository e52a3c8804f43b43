from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class User(BaseModel):
    id: NonEmptyStr
    Firstname: NonEmptyStr
    Surname: NonEmptyStr


class UserCreate(User):
    # Only the three record fields may appear in a create request.
    model_config = ConfigDict(extra="forbid")


class Place(BaseModel):
    id: NonEmptyStr
    name: NonEmptyStr
    location: NonEmptyStr


class PlaceUpsert(BaseModel):
    name: NonEmptyStr
    location: NonEmptyStr


class ErrorResponse(BaseModel):
    error: str


class HomeResponse(BaseModel):
    home: str


class HelloResponse(BaseModel):
    hello: str


class MetricsSnapshot(BaseModel):
    counters: dict[str, Any]
    latency_ms: dict[str, Any]
