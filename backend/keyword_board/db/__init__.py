"""
Database Module Initialization
"""

from keyword_board.db.session import Database, get_db
from keyword_board.db.models import Base, Keyword

__all__ = [
    "Database",
    "get_db",
    "Base",
    "Keyword",
]
