"""
Tests for the product repository SQL layer (mocked session)
"""
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from lijstje.common.product_repository import ProductRepository


def _result(rows=(), one=None, rowcount=0):
    result = MagicMock()
    result.fetchall.return_value = list(rows)
    result.fetchone.return_value = one
    result.rowcount = rowcount
    return result


@pytest.fixture
def repository():
    return ProductRepository()


class TestProductRepository:

    @pytest.mark.asyncio
    async def test_get_product(self, repository, mock_db, product_id, household_id):
        row = SimpleNamespace(_mapping={"id": product_id, "name": "Melk",
                                        "frequency_correction_factor": 1.05})
        mock_db.execute.return_value = _result(one=row)

        product = await repository.get_product(product_id, household_id, mock_db)

        assert product == {"id": product_id, "name": "Melk", "frequency_correction_factor": 1.05}
        query, params = mock_db.execute.await_args.args
        assert "household_id = :household_id" in str(query)
        assert params == {"product_id": product_id, "household_id": household_id}

    @pytest.mark.asyncio
    async def test_get_product_missing(self, repository, mock_db, product_id, household_id):
        mock_db.execute.return_value = _result(one=None)

        assert await repository.get_product(product_id, household_id, mock_db) is None

    @pytest.mark.asyncio
    async def test_upsert_snooze(self, repository, mock_db, product_id, household_id, now):
        until = now + timedelta(hours=24)

        await repository.upsert_snooze(household_id, product_id, until, mock_db)

        query, params = mock_db.execute.await_args.args
        assert "ON CONFLICT (household_id, product_id)" in str(query)
        assert params["snoozed_until"] == until
        mock_db.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_correction_factor(self, repository, mock_db, product_id, household_id):
        mock_db.execute.return_value = _result(rowcount=1)
        assert await repository.update_correction_factor(product_id, household_id, 1.05, mock_db)

        mock_db.execute.return_value = _result(rowcount=0)
        assert not await repository.update_correction_factor(product_id, household_id, 1.05, mock_db)

    @pytest.mark.asyncio
    async def test_insert_product_defaults(self, repository, mock_db, household_id):
        category_id = uuid4()

        product = await repository.insert_product(household_id, "Appels", "🍎", category_id, mock_db)

        assert product["frequency_correction_factor"] == 1.0
        assert product["household_id"] == household_id
        _, params = mock_db.execute.await_args.args
        assert params == product

    @pytest.mark.asyncio
    async def test_purchase_history_grouped(self, repository, mock_db, household_id):
        melk, brood = uuid4(), uuid4()
        t = datetime(2025, 3, 1, tzinfo=timezone.utc)
        mock_db.execute.return_value = _result(rows=[
            SimpleNamespace(product_id=melk, purchased_at=t),
            SimpleNamespace(product_id=brood, purchased_at=t - timedelta(days=1)),
            SimpleNamespace(product_id=melk, purchased_at=t - timedelta(days=7)),
        ])

        history = await repository.get_purchase_history(household_id, mock_db)

        assert history == {
            melk: [t, t - timedelta(days=7)],
            brood: [t - timedelta(days=1)],
        }

    @pytest.mark.asyncio
    async def test_active_snoozes(self, repository, mock_db, household_id, now):
        snoozed = uuid4()
        mock_db.execute.return_value = _result(rows=[SimpleNamespace(product_id=snoozed)])

        assert await repository.get_active_snoozed_product_ids(household_id, now, mock_db) == {snoozed}
        _, params = mock_db.execute.await_args.args
        assert params == {"household_id": household_id, "now": now}

    @pytest.mark.asyncio
    async def test_products_with_category_empty_ids(self, repository, mock_db, household_id):
        assert await repository.get_products_with_category(household_id, [], mock_db) == []
        mock_db.execute.assert_not_awaited()
