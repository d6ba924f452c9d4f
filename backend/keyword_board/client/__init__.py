"""
Keyword Board Client Module
"""

from keyword_board.client.api_client import KeywordApiClient, KeywordApiError
from keyword_board.client.controller import (
    KeywordBoard,
    KeywordCard,
    SubmissionRejected,
    parse_submission,
)

__all__ = [
    "KeywordApiClient",
    "KeywordApiError",
    "KeywordBoard",
    "KeywordCard",
    "SubmissionRejected",
    "parse_submission",
]
