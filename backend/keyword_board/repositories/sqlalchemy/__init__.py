"""
SQLAlchemy Repository Implementation Module Initialization
"""

from keyword_board.repositories.sqlalchemy.keyword_repo import SQLAlchemyKeywordRepository

__all__ = [
    "SQLAlchemyKeywordRepository",
]
