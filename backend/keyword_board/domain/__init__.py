"""
Domain Model Module Initialization
"""

from keyword_board.domain.keyword import (
    KeywordCreate,
    KeywordModel,
    KeywordPage,
    KeywordCreateResponse,
    MessageResponse,
)

__all__ = [
    "KeywordCreate",
    "KeywordModel",
    "KeywordPage",
    "KeywordCreateResponse",
    "MessageResponse",
]
