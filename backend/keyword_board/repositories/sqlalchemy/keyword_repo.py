"""
Keyword Repository SQLAlchemy Implementation

Provides concrete database operation implementation for Keywords.
"""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from keyword_board.common.pagination import page_offset
from keyword_board.common.time import ensure_utc, to_utc_naive
from keyword_board.db.models import Keyword as KeywordORM
from keyword_board.domain.keyword import KeywordCreate, KeywordModel
from keyword_board.repositories.keyword_repo import KeywordRepository


class SQLAlchemyKeywordRepository(KeywordRepository):
    """
    Keyword Repository SQLAlchemy Implementation

    Uses SQLAlchemy ORM to implement database operations for Keywords.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Repository

        Args:
            session: Async database session
        """
        self.session = session

    def _to_domain(self, entity: KeywordORM) -> KeywordModel:
        """Convert ORM entity to domain model"""
        return KeywordModel(
            id=entity.id,
            username=entity.username,
            channels=list(entity.channels),
            available=entity.available,
            unavailable=entity.unavailable,
            created=entity.created,
            created_by=entity.created_by,
            created_at=ensure_utc(entity.created_at),
        )

    async def get_all(self, page: int = 1, page_size: int = 15) -> tuple[list[KeywordModel], int]:
        """Get Keyword list in insertion order"""
        count_query = select(func.count()).select_from(KeywordORM)
        total_result = await self.session.execute(count_query)
        total = total_result.scalar() or 0

        query = (
            select(KeywordORM)
            .order_by(KeywordORM.seq.asc())
            .offset(page_offset(page, page_size))
            .limit(page_size)
        )
        result = await self.session.execute(query)
        entities = result.scalars().all()

        return [self._to_domain(e) for e in entities], total

    async def create_many(self, items: list[KeywordCreate]) -> list[KeywordModel]:
        """Insert all items and commit once"""
        entities = [
            KeywordORM(
                username=item.username,
                channels=list(item.channels or []),
                available=item.available,
                unavailable=item.unavailable,
                created=item.created,
                created_by=item.created_by,
                created_at=to_utc_naive(item.created_at),
            )
            for item in items
        ]
        self.session.add_all(entities)
        await self.session.commit()
        return [self._to_domain(e) for e in entities]

    async def get_by_id(self, id: str) -> Optional[KeywordModel]:
        """Get Keyword by ID"""
        result = await self.session.execute(
            select(KeywordORM).where(KeywordORM.id == id)
        )
        entity = result.scalar_one_or_none()
        return self._to_domain(entity) if entity else None

    async def delete(self, id: str) -> bool:
        """Delete Keyword"""
        result = await self.session.execute(
            select(KeywordORM).where(KeywordORM.id == id)
        )
        entity = result.scalar_one_or_none()

        if not entity:
            return False

        await self.session.delete(entity)
        await self.session.commit()
        return True
