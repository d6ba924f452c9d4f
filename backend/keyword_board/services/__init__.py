"""
Service Layer Module Initialization
"""

from keyword_board.services.keyword_service import KeywordService

__all__ = [
    "KeywordService",
]
