"""
Tests for product creation with category prediction
"""
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from lijstje.domain.products import ProductCreationFailureReason, ProductCreationService

FRUIT_ID = uuid4()
ZUIVEL_ID = uuid4()
OVERIG_ID = uuid4()


async def _echo_insert(household_id, name, emoji, category_id, db):
    return {
        "id": uuid4(),
        "household_id": household_id,
        "name": name,
        "emoji": emoji,
        "category_id": category_id,
        "frequency_correction_factor": 1.0,
    }


@pytest.fixture
def service(mock_repository):
    mock_repository.list_categories.return_value = [
        {"id": FRUIT_ID, "name": "Groente & Fruit", "display_order": 1},
        {"id": ZUIVEL_ID, "name": "Zuivel", "display_order": 2},
        {"id": OVERIG_ID, "name": "Overig", "display_order": 99},
    ]
    mock_repository.insert_product.side_effect = _echo_insert
    return ProductCreationService(repository=mock_repository)


class TestCreateProduct:

    @pytest.mark.asyncio
    async def test_predicts_category_via_alias(self, service, mock_repository, mock_db, household_id):
        result = await service.create_product(household_id, "  Appels ", mock_db)

        assert result.ok is True
        assert result.predicted_category == "Fruit & Groente"
        assert result.product["name"] == "Appels"
        assert result.product["category_id"] == FRUIT_ID
        assert result.product["emoji"] == "🍎"
        mock_repository.list_categories.assert_awaited_once_with(household_id, mock_db)
        mock_db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_kaas(self, service, mock_db, household_id):
        result = await service.create_product(household_id, "Jonge kaas", mock_db)

        assert result.product["category_id"] == ZUIVEL_ID
        assert result.product["emoji"] == "🧀"

    @pytest.mark.asyncio
    async def test_unknown_name_goes_to_overig(self, service, mock_db, household_id):
        result = await service.create_product(household_id, "Xyzzy", mock_db)

        assert result.ok is True
        assert result.predicted_category == "Overig"
        assert result.product["category_id"] == OVERIG_ID
        assert result.product["emoji"] == "📦"

    @pytest.mark.asyncio
    async def test_unresolved_category_uses_overig(self, service, mock_db, household_id):
        # Household has no drinks category
        result = await service.create_product(household_id, "Cola", mock_db)

        assert result.predicted_category == "Dranken"
        assert result.product["category_id"] == OVERIG_ID
        assert result.product["emoji"] == "🥤"

    @pytest.mark.asyncio
    async def test_explicit_category_and_emoji(self, service, mock_repository, mock_db, household_id):
        result = await service.create_product(
            household_id, "Appels", mock_db, category_id=ZUIVEL_ID, emoji="🍏"
        )

        assert result.product["category_id"] == ZUIVEL_ID
        assert result.product["emoji"] == "🍏"
        assert result.predicted_category is None
        mock_repository.list_categories.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_explicit_emoji_kept_when_predicting(self, service, mock_db, household_id):
        result = await service.create_product(household_id, "Appels", mock_db, emoji="🍏")

        assert result.product["category_id"] == FRUIT_ID
        assert result.product["emoji"] == "🍏"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   ", None])
    async def test_name_required(self, service, mock_repository, mock_db, household_id, name):
        result = await service.create_product(household_id, name, mock_db)

        assert result.ok is False
        assert result.reason == ProductCreationFailureReason.NAME_REQUIRED
        mock_repository.insert_product.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_categories(self, service, mock_repository, mock_db, household_id):
        mock_repository.list_categories.return_value = []

        result = await service.create_product(household_id, "Appels", mock_db)

        assert result.reason == ProductCreationFailureReason.CATEGORY_NOT_FOUND
        mock_repository.insert_product.assert_not_awaited()
        mock_db.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_insert_failure(self, service, mock_repository, mock_db, household_id):
        mock_repository.insert_product.side_effect = IntegrityError(
            "INSERT INTO products", {}, Exception("fk violation")
        )

        result = await service.create_product(household_id, "Appels", mock_db)

        assert result.reason == ProductCreationFailureReason.STORAGE_ERROR
        mock_db.rollback.assert_awaited_once()
        mock_db.commit.assert_not_awaited()
