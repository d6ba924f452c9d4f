"""
Keyword Board Client Integration Tests

Drives the controller against the real application over an ASGI transport.
Submit and bulk delete issue concurrent requests, so every request gets its
own session from a file-backed database.
"""

from typing import AsyncGenerator
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport

from keyword_board.api.deps import get_db
from keyword_board.client.api_client import KeywordApiClient, KeywordApiError
from keyword_board.client.controller import KeywordBoard
from keyword_board.db.session import Database
from keyword_board.main import app


@pytest_asyncio.fixture
async def keyword_api(tmp_path) -> AsyncGenerator[KeywordApiClient, None]:
    database = Database(
        f"sqlite+aiosqlite:///{tmp_path / 'board.db'}",
        connect_args={"check_same_thread": False},
    )

    async def _session():
        async with database.session() as session:
            yield session

    app.dependency_overrides[get_db] = _session

    async with KeywordApiClient(
        base_url="http://test", transport=ASGITransport(app=app)
    ) as client:
        yield client

    app.dependency_overrides = {}
    await database.dispose()


@pytest.mark.asyncio
async def test_submit_then_delete(keyword_api):
    alert = MagicMock()
    board = KeywordBoard(keyword_api, alert=alert)

    assert await board.submit("bob", "chan1, chan2") is True

    assert sorted(card.channels for card in board.cards) == ["chan1", "chan2"]
    assert board.total_pages == 1
    assert all(card.created_by == "bob" for card in board.cards)

    target = next(card for card in board.cards if card.channels == "chan1")
    assert await board.delete(target.id) is True

    assert [card.channels for card in board.cards] == ["chan2"]
    alert.assert_not_called()


@pytest.mark.asyncio
async def test_bulk_delete_all(keyword_api):
    board = KeywordBoard(keyword_api)
    await board.submit("bob", "a,b,c")

    board.toggle_select_all(True)
    assert await board.bulk_delete() is True

    assert board.cards == []
    assert board.total_pages == 0


@pytest.mark.asyncio
async def test_delete_unknown_surfaces_server_message(keyword_api):
    alert = MagicMock()
    board = KeywordBoard(keyword_api, alert=alert)

    assert await board.delete("0123456789abcdef") is False

    alert.assert_called_once_with("Error: Keyword not found")


@pytest.mark.asyncio
async def test_api_client_error_status(keyword_api):
    with pytest.raises(KeywordApiError) as exc_info:
        await keyword_api.create_keyword(username="", channels=["chan1"])

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Missing required fields"


@pytest.mark.asyncio
async def test_paging_across_pages(keyword_api):
    board = KeywordBoard(keyword_api, page_size=2)
    await board.submit("bob", "a,b,c")

    assert board.total_pages == 2
    first_page = {card.channels for card in board.cards}
    assert len(first_page) == 2

    assert await board.next_page() is True
    second_page = {card.channels for card in board.cards}
    assert first_page | second_page == {"a", "b", "c"}
    assert len(second_page) == 1
    assert await board.next_page() is False
