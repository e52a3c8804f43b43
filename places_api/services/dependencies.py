from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request, status

from places_api.services.place_store import PlaceStore
from places_api.services.user_store import UserStore

JSON_MEDIA_TYPE = "application/json"
UNSUPPORTED_MEDIA_TYPE_MESSAGE = "Unsupported Media Type. Content-Type must be application/json"
MALFORMED_JSON_MESSAGE = "Request body must be valid JSON"


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_place_store(request: Request) -> PlaceStore:
    return request.app.state.place_store


def media_type_of(content_type: str | None) -> str:
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


async def json_payload(request: Request) -> Any:
    """Return the decoded JSON body, refusing anything not sent as JSON."""

    if media_type_of(request.headers.get("content-type")) != JSON_MEDIA_TYPE:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=UNSUPPORTED_MEDIA_TYPE_MESSAGE,
        )

    try:
        return await request.json()
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MALFORMED_JSON_MESSAGE) from exc
