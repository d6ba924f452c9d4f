"""
Data Access Layer Module Initialization
"""

from keyword_board.repositories.keyword_repo import KeywordRepository

__all__ = [
    "KeywordRepository",
]
