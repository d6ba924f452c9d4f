"""
Keyword Management Service Module

Provides business logic processing for Keywords: paginated listing,
per-channel fan-out creation and deletion by id.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from keyword_board.common.errors import InfrastructureError, NotFoundError, ValidationError
from keyword_board.common.pagination import parse_positive_int, total_pages
from keyword_board.domain.keyword import KeywordCreate, KeywordModel, KeywordPage
from keyword_board.repositories.keyword_repo import KeywordRepository

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 15


class KeywordService:
    """
    Keyword Management Service

    Handles business rules for keywords and translates storage failures into
    InfrastructureError.
    """

    def __init__(self, repo: KeywordRepository, default_page_size: int = DEFAULT_PAGE_SIZE):
        """
        Initialize Service

        Args:
            repo: Keyword Repository
            default_page_size: Page size used when `limit` is absent or invalid
        """
        self.repo = repo
        self.default_page_size = default_page_size

    async def get_page(self, page: Optional[str] = None, limit: Optional[str] = None) -> KeywordPage:
        """
        Get one page of keywords

        Both parameters are raw query strings; absent or non-numeric values fall
        back to page 1 and the default page size.

        Args:
            page: Raw page number
            limit: Raw page size

        Returns:
            KeywordPage: Records plus total page count

        Raises:
            InfrastructureError: Storage failure
        """
        page_num = parse_positive_int(page, DEFAULT_PAGE)
        page_size = parse_positive_int(limit, self.default_page_size)

        try:
            records, total = await self.repo.get_all(page=page_num, page_size=page_size)
        except SQLAlchemyError as exc:
            logger.exception("Failed to list keywords")
            raise InfrastructureError() from exc

        return KeywordPage(
            records=records,
            total_pages=total_pages(total, page_size),
            total=total,
            page=page_num,
            limit=page_size,
        )

    async def create(self, data: KeywordCreate) -> list[KeywordModel]:
        """
        Create one keyword per channel

        Every stored record carries a single-element channel list; all other
        fields are copied verbatim. The inserts share one transaction.

        Args:
            data: Creation data

        Returns:
            list[KeywordModel]: Created keywords, in channel order

        Raises:
            ValidationError: username or channels missing, or a blank channel
            InfrastructureError: Storage failure, nothing is stored
        """
        if not data.username or not data.channels:
            raise ValidationError(
                message="Missing required fields",
                code="missing_required_fields",
            )
        if any(not channel or not channel.strip() for channel in data.channels):
            raise ValidationError(
                message="Channel names must not be empty",
                code="empty_channel_name",
            )

        created_by = data.created_by or data.username
        items = [
            data.model_copy(update={"channels": [channel], "created_by": created_by})
            for channel in data.channels
        ]

        try:
            created = await self.repo.create_many(items)
        except SQLAlchemyError as exc:
            logger.exception(
                "Failed to create keywords for user %s (%d channels)",
                data.username,
                len(items),
            )
            raise InfrastructureError() from exc

        logger.info("Created %d keyword(s) for user %s", len(created), data.username)
        return created

    async def delete(self, id: Optional[str]) -> None:
        """
        Delete Keyword

        Args:
            id: Keyword ID

        Raises:
            ValidationError: id missing
            NotFoundError: Keyword not found
            InfrastructureError: Storage failure
        """
        if not id or not id.strip():
            raise ValidationError(
                message="Keyword ID is required",
                code="missing_keyword_id",
            )

        try:
            deleted = await self.repo.delete(id)
        except SQLAlchemyError as exc:
            logger.exception("Failed to delete keyword %s", id)
            raise InfrastructureError() from exc

        if not deleted:
            raise NotFoundError(
                message="Keyword not found",
                code="keyword_not_found",
            )
