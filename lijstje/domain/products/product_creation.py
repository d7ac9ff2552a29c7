"""
Product Creation Service - new product with predicted category and emoji

Flow:
1. Validate name (non-empty after trim)
2. No category given: predict category + emoji from the name
3. Resolve the predicted name to a household category (exact, alias, normalized)
4. Still nothing: the household "Overig" category
5. Insert the product

Example:
- Input: name="Appels", no category
- Predict: "Fruit & Groente", 🍎
- Resolve: household has "Groente & Fruit" -> alias hit
- Output: product in "Groente & Fruit" with 🍎
"""
from enum import Enum
from typing import Any, Dict, Optional
from uuid import UUID

import structlog
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lijstje.common.product_repository import product_repository
from lijstje.domain.classification.category_aliases import (
    find_category_id_by_predicted_name,
    find_fallback_category_id,
)
from lijstje.domain.classification.category_predictor import category_predictor
from lijstje.domain.classification.concepts import FALLBACK_EMOJI

logger = structlog.get_logger()


class ProductCreationFailureReason(str, Enum):
    """Why a product was not created"""
    NAME_REQUIRED = "name_required"
    CATEGORY_NOT_FOUND = "category_not_found"
    STORAGE_ERROR = "storage_error"


class ProductCreationResult(BaseModel):
    """Outcome of a create-product request"""
    ok: bool
    reason: Optional[ProductCreationFailureReason] = None
    product: Optional[Dict[str, Any]] = None
    predicted_category: Optional[str] = None

    @classmethod
    def failure(cls, reason: ProductCreationFailureReason) -> "ProductCreationResult":
        return cls(ok=False, reason=reason)


class ProductCreationService:
    """
    Creates household products, predicting the category when none is given.

    Usage:
        result = await product_creation_service.create_product(
            household_id=household_id,
            name="Appels",
            db=db_session,
        )
        if result.ok:
            print(result.product["category_id"], result.product["emoji"])
    """

    def __init__(self, repository=product_repository, predictor=category_predictor):
        self.repository = repository
        self.predictor = predictor

    async def create_product(
        self,
        household_id: UUID,
        name: Optional[str],
        db: AsyncSession,
        category_id: Optional[UUID] = None,
        emoji: Optional[str] = None,
    ) -> ProductCreationResult:
        """
        Create a product for the household.

        Args:
            household_id: Owning household
            name: Product name as typed (trimmed before storing)
            db: Database session (committed or rolled back here)
            category_id: Explicit category, skips prediction
            emoji: Explicit emoji, otherwise the predicted one

        Returns:
            ProductCreationResult
        """
        clean_name = (name or "").strip()
        if not clean_name:
            return ProductCreationResult.failure(ProductCreationFailureReason.NAME_REQUIRED)

        final_category_id = category_id
        final_emoji = emoji
        predicted_category = None

        try:
            if not final_category_id:
                prediction = self.predictor.predict(clean_name)
                predicted_category = prediction.category_name

                categories = await self.repository.list_categories(household_id, db)
                final_category_id = (
                    find_category_id_by_predicted_name(prediction.category_name, categories)
                    or find_fallback_category_id(categories)
                )

                if not final_emoji:
                    final_emoji = prediction.emoji

                logger.info("product_category_predicted",
                           household_id=str(household_id),
                           name=clean_name,
                           predicted=prediction.category_name,
                           matched_term=prediction.matched_term,
                           category_id=str(final_category_id) if final_category_id else None)

            if not final_category_id:
                logger.warning("product_category_not_found",
                              household_id=str(household_id),
                              name=clean_name,
                              predicted=predicted_category)
                return ProductCreationResult.failure(ProductCreationFailureReason.CATEGORY_NOT_FOUND)

            product = await self.repository.insert_product(
                household_id=household_id,
                name=clean_name,
                emoji=final_emoji or FALLBACK_EMOJI,
                category_id=final_category_id,
                db=db,
            )
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("product_create_failed",
                        household_id=str(household_id),
                        name=clean_name,
                        error=str(e),
                        exc_info=True)
            await db.rollback()
            return ProductCreationResult.failure(ProductCreationFailureReason.STORAGE_ERROR)

        return ProductCreationResult(
            ok=True,
            product=product,
            predicted_category=predicted_category,
        )


# Singleton instance
product_creation_service = ProductCreationService()
