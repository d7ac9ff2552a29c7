"""
Shared pytest fixtures
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from lijstje.common.product_repository import ProductRepository

FIXED_NOW = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def household_id():
    return uuid4()


@pytest.fixture
def product_id():
    return uuid4()


@pytest.fixture
def mock_db():
    """AsyncSession stand-in; commit/rollback/execute are awaitable mocks"""
    return AsyncMock()


@pytest.fixture
def mock_repository():
    """Repository mock with the real method signatures"""
    return AsyncMock(spec=ProductRepository)
