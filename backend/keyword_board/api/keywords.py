"""
Keyword Resource API

Provides list / create / delete endpoints for keyword records.
"""

from typing import Optional

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from keyword_board.api.deps import KeywordServiceDep
from keyword_board.common.errors import AppError, MethodNotAllowedError
from keyword_board.domain.keyword import (
    KeywordCreate,
    KeywordCreateResponse,
    KeywordPage,
    MessageResponse,
)

router = APIRouter(
    prefix="/keywords",
    tags=["Keywords"],
)


@router.get("", response_model=KeywordPage)
async def list_keywords(
    service: KeywordServiceDep,
    page: Optional[str] = Query(None, description="Page number, defaults to 1"),
    limit: Optional[str] = Query(None, description="Items per page, defaults to 15"),
):
    """
    Get Keyword List

    Non-numeric `page` / `limit` values fall back to the defaults.
    """
    try:
        return await service.get_page(page, limit)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.post("", response_model=KeywordCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_keywords(
    data: KeywordCreate,
    service: KeywordServiceDep,
):
    """
    Create Keywords

    One record is stored per entry in `channels`.
    """
    try:
        created = await service.create(data)
        return KeywordCreateResponse(
            message="Keywords saved successfully",
            created_records=created,
        )
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.delete("", response_model=MessageResponse)
async def delete_keyword(
    service: KeywordServiceDep,
    id: Optional[str] = Query(None, description="Keyword ID"),
):
    """
    Delete Keyword
    """
    try:
        await service.delete(id)
        return MessageResponse(message="Keyword deleted successfully")
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.api_route("", methods=["HEAD"], include_in_schema=False)
async def head_keywords():
    """
    HEAD is not part of the resource

    Without this route HEAD would fall through to the static frontend mount.
    """
    raise MethodNotAllowedError()
