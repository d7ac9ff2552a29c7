"""
Expected Purchases - products a household is likely to need again soon

Flow per household:
1. Purchase history grouped by product
2. Learned interval (purchase_frequency) x frequency_correction_factor
3. Next purchase date = last purchase + corrected interval
4. Skip products that are snoozed or already unchecked on the list
5. Most due first, limited to EXPECTED_PURCHASES_LIMIT
"""
import math
from datetime import datetime, timezone
from typing import Callable, List, Optional
from uuid import UUID

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lijstje.common.config import get_settings
from lijstje.common.product_repository import product_repository
from lijstje.domain.cadence.purchase_frequency import (
    SECONDS_PER_DAY,
    calculate_purchase_frequency,
    get_last_purchase_date,
    predict_next_purchase_date,
)
from lijstje.domain.cadence.schemas import ExpectedProduct
from lijstje.domain.cadence.snooze_service import DEFAULT_FACTOR
from lijstje.domain.classification.concepts import FALLBACK_EMOJI

logger = structlog.get_logger()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExpectedPurchasesService:
    """Computes the "expected soon" list from purchase history."""

    def __init__(self, repository=product_repository, clock: Callable[[], datetime] = _utcnow):
        self.repository = repository
        self.clock = clock

    async def get_expected(
        self,
        household_id: UUID,
        db: AsyncSession,
        limit: Optional[int] = None,
    ) -> List[ExpectedProduct]:
        """
        Products most due for purchase.

        Args:
            household_id: Household to compute for
            db: Database session (read only)
            limit: Max products, defaults to EXPECTED_PURCHASES_LIMIT

        Returns:
            ExpectedProduct list, most due first. Empty on storage errors.
        """
        if limit is None:
            limit = get_settings().expected_purchases_limit
        now = self.clock()

        try:
            history = await self.repository.get_purchase_history(household_id, db)
            if not history:
                return []

            products = await self.repository.get_products_with_category(
                household_id, list(history.keys()), db
            )
            snoozed = await self.repository.get_active_snoozed_product_ids(household_id, now, db)
            on_list = await self.repository.get_unchecked_list_product_ids(household_id, db)
        except SQLAlchemyError as e:
            logger.error("expected_purchases_query_failed",
                        household_id=str(household_id),
                        error=str(e),
                        exc_info=True)
            return []

        expected = []
        for product in products:
            product_id = product["id"]
            if product_id in snoozed or product_id in on_list:
                continue

            purchases = history.get(product_id, [])
            frequency = calculate_purchase_frequency(purchases)
            if frequency is None or frequency <= 0:
                continue

            last_purchase = get_last_purchase_date(purchases)
            if last_purchase is None:
                continue

            factor = product.get("frequency_correction_factor")
            corrected = frequency * (DEFAULT_FACTOR if factor is None else float(factor))
            next_date = predict_next_purchase_date(last_purchase, corrected)
            days_until = max(0, math.ceil((next_date - now).total_seconds() / SECONDS_PER_DAY))

            expected.append(ExpectedProduct(
                id=product_id,
                name=product["name"],
                emoji=product.get("emoji") or FALLBACK_EMOJI,
                category_id=product.get("category_id"),
                category_name=product.get("category_name"),
                category_display_order=product.get("category_display_order"),
                frequency_days=corrected,
                next_purchase_date=next_date,
                days_until_expected=days_until,
            ))

        expected.sort(key=lambda p: p.next_purchase_date)

        logger.info("expected_purchases_computed",
                   household_id=str(household_id),
                   candidates=len(products),
                   snoozed=len(snoozed),
                   on_list=len(on_list),
                   returned=min(len(expected), limit))

        return expected[:limit]


# Singleton instance
expected_purchases_service = ExpectedPurchasesService()
