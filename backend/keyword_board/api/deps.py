"""
API Dependency Injection Module

Provides the dependencies required by FastAPI routes.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from keyword_board.config import get_settings
from keyword_board.db.session import get_db as _get_db
from keyword_board.repositories import KeywordRepository
from keyword_board.repositories.sqlalchemy import SQLAlchemyKeywordRepository
from keyword_board.services import KeywordService


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency

    Yields:
        AsyncSession: Async database session
    """
    async for session in _get_db(request):
        yield session


# Database session dependency type
DbSession = Annotated[AsyncSession, Depends(get_db)]


# ============ Repository Dependencies ============

def get_keyword_repo(db: DbSession) -> KeywordRepository:
    """Get Keyword Repository"""
    return SQLAlchemyKeywordRepository(db)


KeywordRepoDep = Annotated[KeywordRepository, Depends(get_keyword_repo)]


# ============ Service Dependencies ============

def get_keyword_service(repo: KeywordRepoDep) -> KeywordService:
    """Get Keyword Service"""
    return KeywordService(repo, default_page_size=get_settings().DEFAULT_PAGE_SIZE)


# Dependency type aliases
KeywordServiceDep = Annotated[KeywordService, Depends(get_keyword_service)]
