from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from places_api.models.schemas import ErrorResponse, User, UserCreate
from places_api.services.dependencies import get_user_store, json_payload
from places_api.services.user_store import UserStore
from places_api.services.validation import USER_CREATE_RULE

router = APIRouter(tags=["users"])


@router.get("/data", response_model=list[User], summary="List all users")
async def list_users(store: UserStore = Depends(get_user_store)) -> list[User]:
    return store.list_users()


@router.get(
    "/data/{user_id}",
    response_model=User,
    summary="Get a user by id",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
async def get_user(user_id: str, store: UserStore = Depends(get_user_store)) -> User:
    user = store.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.post(
    "/data",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new user",
    responses={
        400: {"model": ErrorResponse, "description": "Missing or unexpected fields, or duplicate id"},
        415: {"model": ErrorResponse, "description": "Body is not application/json"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": UserCreate.model_json_schema()}},
        }
    },
)
async def create_user(
    payload: Any = Depends(json_payload),
    store: UserStore = Depends(get_user_store),
) -> User:
    try:
        user = USER_CREATE_RULE.parse(payload)
        # Duplicate ids are a 400, not a 409, to match the published contract.
        return store.add_user(user)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
