"""
API Router Module Initialization
"""

from keyword_board.api.deps import get_db
from keyword_board.api.keywords import router as keywords_router

__all__ = [
    "get_db",
    "keywords_router",
]
