from __future__ import annotations

from fastapi import APIRouter

from places_api.models.schemas import HelloResponse, HomeResponse

router = APIRouter(tags=["pages"])


@router.get("/", response_model=HomeResponse)
async def home() -> HomeResponse:
    return HomeResponse(home="Home page")


@router.get("/index", response_model=HelloResponse)
async def index() -> HelloResponse:
    return HelloResponse(hello="Hello World!")


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
