"""
Keyword Repository Interface

Defines the data access interface for Keywords.
"""

from abc import ABC, abstractmethod
from typing import Optional

from keyword_board.domain.keyword import KeywordCreate, KeywordModel


class KeywordRepository(ABC):
    """Keyword Repository Interface"""

    @abstractmethod
    async def get_all(self, page: int = 1, page_size: int = 15) -> tuple[list[KeywordModel], int]:
        """
        Get Keyword List (Pagination)

        Records come back in storage (insertion) order.

        Args:
            page: Page number, 1-based
            page_size: Items per page

        Returns:
            tuple[list[KeywordModel], int]: (List, Total count)
        """
        pass

    @abstractmethod
    async def create_many(self, items: list[KeywordCreate]) -> list[KeywordModel]:
        """
        Insert several keywords in one transaction

        Either every item is stored or none is.

        Args:
            items: Fully resolved creation data, one channel each

        Returns:
            list[KeywordModel]: Created keywords, in input order
        """
        pass

    @abstractmethod
    async def get_by_id(self, id: str) -> Optional[KeywordModel]:
        """Get Keyword by ID"""
        pass

    @abstractmethod
    async def delete(self, id: str) -> bool:
        """
        Delete Keyword

        Returns:
            True if deleted, False if no keyword has this id
        """
        pass
