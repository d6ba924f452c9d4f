"""
Keyword Board Controller Module

Client-side state for the keyword board: current page cursor, rendered cards,
selection, and the submit / delete flows. Mirrors the browser page in
frontend/script.js.
"""

import asyncio
import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

import httpx

from keyword_board.client.api_client import KeywordApiClient, KeywordApiError
from keyword_board.domain.keyword import KeywordModel

logger = logging.getLogger(__name__)

PAGE_SIZE = 15

CHANNEL_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9]+$")

MISSING_INPUT_MESSAGE = "Please provide both username and channel names."
INVALID_CHANNEL_MESSAGE = "Channel names must be alphanumeric (e.g., channel01, channel02)."
NOTHING_SELECTED_MESSAGE = "Please select at least one item to delete."

CHECK = "✅"
CROSS = "❌"


class SubmissionRejected(Exception):
    """Form input that must not be sent to the server"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def glyph(flag: bool) -> str:
    return CHECK if flag else CROSS


@dataclass
class KeywordCard:
    """One rendered keyword card"""

    id: str
    channels: str
    available: bool
    unavailable: bool
    created: bool
    created_by: str
    created_at: Optional[datetime]
    selected: bool = False

    @classmethod
    def from_record(cls, record: KeywordModel) -> "KeywordCard":
        return cls(
            id=record.id,
            channels=", ".join(record.channels),
            available=record.available,
            unavailable=record.unavailable,
            created=record.created,
            created_by=record.created_by,
            created_at=record.created_at,
        )

    def render(self) -> str:
        created_at = self.created_at.isoformat() if self.created_at else "-"
        return "\n".join(
            [
                f"[{'x' if self.selected else ' '}] Channel Name: {self.channels}",
                f"    Available - {glyph(self.available)}",
                f"    Unavailable - {glyph(self.unavailable)}",
                f"    Created - {glyph(self.created)}",
                f"    Created By - {self.created_by}",
                f"    Created At - {created_at}",
            ]
        )


def parse_submission(username: str, channel_text: str) -> tuple[str, list[str]]:
    """
    Validate the username / comma-separated channel form

    Returns:
        tuple[str, list[str]]: Trimmed username and channel tokens

    Raises:
        SubmissionRejected: Empty input or a non-alphanumeric channel name
    """
    username = username.strip()
    channel_text = channel_text.strip()
    channels = [token.strip() for token in channel_text.split(",")] if channel_text else []

    if not username or not channels:
        raise SubmissionRejected(MISSING_INPUT_MESSAGE)
    if not all(CHANNEL_NAME_PATTERN.match(name) for name in channels):
        raise SubmissionRejected(INVALID_CHANNEL_MESSAGE)
    return username, channels


class KeywordBoard:
    """
    Keyword Board Controller

    Every interaction is a fetch-then-rerender cycle: no optimistic updates,
    no caching, no retries. Failures are either alerted or logged.
    """

    def __init__(
        self,
        api: KeywordApiClient,
        alert: Optional[Callable[[str], None]] = None,
        page_size: int = PAGE_SIZE,
    ):
        """
        Initialize Controller

        Args:
            api: Keyword API client
            alert: User-facing notification callback, logs a warning by default
            page_size: Records per page
        """
        self.api = api
        self.alert = alert or (lambda message: logger.warning("%s", message))
        self.page_size = page_size
        self.current_page = 1
        self.total_pages = 1
        self.cards: list[KeywordCard] = []
        self.select_all = False

    @property
    def page_label(self) -> str:
        return f"Page {self.current_page}"

    async def refresh(self, page: Optional[int] = None) -> bool:
        """
        Fetch a page and replace every card

        Returns:
            bool: False if the fetch failed and the view was left as is
        """
        page = self.current_page if page is None else page
        try:
            result = await self.api.list_keywords(page=page, limit=self.page_size)
        except (KeywordApiError, httpx.HTTPError) as exc:
            logger.error("Error fetching keywords: %s", exc)
            return False

        self.total_pages = result.total_pages
        self.cards = [KeywordCard.from_record(record) for record in result.records]
        self.select_all = False
        return True

    async def previous_page(self) -> bool:
        """Go back one page; no-op on the first page"""
        if self.current_page > 1:
            self.current_page -= 1
            await self.refresh(self.current_page)
            return True
        return False

    async def next_page(self) -> bool:
        """Advance one page; no-op on the last page"""
        if self.current_page < self.total_pages:
            self.current_page += 1
            await self.refresh(self.current_page)
            return True
        return False

    async def submit(self, username: str, channel_text: str) -> bool:
        """
        Create one keyword per channel token, then refresh the current page

        Returns:
            bool: True if every create call succeeded
        """
        try:
            username, channels = parse_submission(username, channel_text)
        except SubmissionRejected as exc:
            self.alert(exc.message)
            return False

        results = await asyncio.gather(
            *(
                self.api.create_keyword(
                    username=username,
                    channels=[channel],
                    created_by=username,
                )
                for channel in channels
            ),
            return_exceptions=True,
        )
        failures = self._log_failures("Error saving data", results)

        await self.refresh()
        return not failures

    async def delete(self, id: str) -> bool:
        """Delete a single keyword; the server message is alerted on failure"""
        try:
            await self.api.delete_keyword(id)
        except KeywordApiError as exc:
            self.alert(f"Error: {exc.message}")
            return False
        except httpx.HTTPError as exc:
            logger.error("Error deleting keyword: %s", exc)
            return False

        await self.refresh()
        return True

    def selected_ids(self) -> list[str]:
        return [card.id for card in self.cards if card.selected]

    def set_selected(self, id: str, checked: bool) -> None:
        for card in self.cards:
            if card.id == id:
                card.selected = checked

    def toggle_select_all(self, checked: bool) -> None:
        """Propagate the select-all state to every card"""
        self.select_all = checked
        for card in self.cards:
            card.selected = checked

    async def bulk_delete(self) -> bool:
        """
        Delete every selected keyword concurrently, then refresh

        Returns:
            bool: True if every delete call succeeded
        """
        ids = self.selected_ids()
        if not ids:
            self.alert(NOTHING_SELECTED_MESSAGE)
            return False

        results = await asyncio.gather(
            *(self.api.delete_keyword(id) for id in ids),
            return_exceptions=True,
        )
        failures = self._log_failures("Error deleting keywords", results)

        await self.refresh()
        return not failures

    def render(self) -> str:
        """Render the board as text: cards followed by the page label"""
        blocks = [card.render() for card in self.cards]
        blocks.append(f"{self.page_label} of {self.total_pages}")
        return "\n\n".join(blocks)

    @staticmethod
    def _log_failures(prefix: str, results: list) -> list[BaseException]:
        failures = [r for r in results if isinstance(r, BaseException)]
        for failure in failures:
            if not isinstance(failure, (KeywordApiError, httpx.HTTPError)):
                raise failure
            logger.error("%s: %s", prefix, failure)
        return failures
