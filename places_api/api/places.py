from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response, status

from places_api.models.schemas import ErrorResponse, Place, PlaceUpsert
from places_api.services.dependencies import get_place_store, json_payload
from places_api.services.errors import RecordNotFoundError
from places_api.services.place_store import PlaceStore
from places_api.services.validation import PLACE_UPSERT_RULE

router = APIRouter(prefix="/places", tags=["places"])


@router.put(
    "/{place_id}",
    response_model=Place,
    summary="Create or replace a place",
    responses={
        201: {"model": Place, "description": "Place created"},
        400: {"model": ErrorResponse, "description": "Missing required fields"},
        415: {"model": ErrorResponse, "description": "Body is not application/json"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": PlaceUpsert.model_json_schema()}},
        }
    },
)
async def upsert_place(
    place_id: str,
    response: Response,
    payload: Any = Depends(json_payload),
    store: PlaceStore = Depends(get_place_store),
) -> Place:
    try:
        body = PLACE_UPSERT_RULE.parse(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    place, created = store.upsert_place(place_id, name=body.name, location=body.location)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return place


@router.delete(
    "/{place_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a place",
    responses={404: {"model": ErrorResponse, "description": "Place not found"}},
)
async def delete_place(place_id: str, store: PlaceStore = Depends(get_place_store)) -> Response:
    try:
        store.delete_place(place_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
