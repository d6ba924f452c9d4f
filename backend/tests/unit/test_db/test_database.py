"""
Test Database Handle
"""

import pytest
from sqlalchemy import text

from keyword_board.common.errors import InfrastructureError
from keyword_board.config import Settings
from keyword_board.db.session import Database


@pytest.mark.asyncio
async def test_connect_creates_schema(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'keywords.db'}")

    await database.connect()
    assert database.connected is True

    async with database.session() as session:
        result = await session.execute(text("SELECT COUNT(*) FROM keywords"))
        assert result.scalar() == 0

    await database.dispose()
    assert database.connected is False


@pytest.mark.asyncio
async def test_session_connects_lazily(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'keywords.db'}")
    assert database.connected is False

    async with database.session() as session:
        result = await session.execute(text("SELECT COUNT(*) FROM keywords"))
        assert result.scalar() == 0

    assert database.connected is True
    await database.dispose()


@pytest.mark.asyncio
async def test_connect_failure_is_infrastructure_error(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'keywords.db'}")

    with pytest.raises(InfrastructureError) as exc_info:
        await database.connect()

    assert exc_info.value.status_code == 500
    assert database.connected is False
    await database.dispose()


def test_from_settings(tmp_path):
    settings = Settings(
        DATABASE_TYPE="sqlite",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'keywords.db'}",
    )

    database = Database.from_settings(settings)

    assert database.url == settings.DATABASE_URL
