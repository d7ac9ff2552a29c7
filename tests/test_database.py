"""
Tests for database session management
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from lijstje.common import database
from lijstje.common.database import DatabaseSessionManager


@pytest.mark.asyncio
async def test_session_requires_init():
    manager = DatabaseSessionManager()

    with pytest.raises(RuntimeError):
        async with manager.session():
            pass


@pytest.mark.asyncio
async def test_init_uses_asyncpg_driver(monkeypatch):
    engine = AsyncMock()
    create_engine = MagicMock(return_value=engine)
    monkeypatch.setattr(database, "create_async_engine", create_engine)
    manager = DatabaseSessionManager()

    await manager.init("postgresql://u:p@localhost:5432/lijstje", echo=True)
    await manager.init("postgresql://ignored")

    create_engine.assert_called_once()
    url = create_engine.call_args.args[0]
    assert url == "postgresql+asyncpg://u:p@localhost:5432/lijstje"
    assert create_engine.call_args.kwargs["echo"] is True
    assert manager.initialized

    await manager.close()
    engine.dispose.assert_awaited_once()
    assert not manager.initialized


@pytest.mark.asyncio
async def test_lazy_init_disabled(monkeypatch):
    monkeypatch.setenv("DB_LAZY_INIT", "0")
    monkeypatch.setattr(database, "sessionmanager", DatabaseSessionManager())

    with pytest.raises(RuntimeError):
        await database._ensure_initialized()
