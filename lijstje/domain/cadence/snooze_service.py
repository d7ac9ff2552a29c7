"""
Snooze Service - defer an expected product and correct its purchase cadence

Snoozing hides a product from the expected list for SNOOZE_HOURS and
compounds its frequency_correction_factor by SNOOZE_CORRECTION_FACTOR,
capped at FACTOR_MAX. Expected purchases multiply the learned interval by
this factor, so a product that keeps getting snoozed resurfaces later.

Both writes (snooze upsert, factor update) are committed together. If either
fails the session is rolled back and nothing is persisted.

Example:
- factor 1.0 -> snooze -> 1.05 -> snooze -> 1.1025 -> ... -> 2.0 (cap)
"""
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
from uuid import UUID

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from lijstje.common.product_repository import product_repository
from lijstje.domain.cadence.schemas import SnoozeFailureReason, SnoozeResult

logger = structlog.get_logger()

# Business constants, not runtime configuration
SNOOZE_HOURS = 24
SNOOZE_CORRECTION_FACTOR = 1.05
FACTOR_MAX = 2.0
DEFAULT_FACTOR = 1.0


def next_correction_factor(current: Optional[float]) -> float:
    """Compound one snooze onto the current factor (None -> 1.0), capped."""
    current = DEFAULT_FACTOR if current is None else float(current)
    return min(FACTOR_MAX, current * SNOOZE_CORRECTION_FACTOR)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SnoozeService:
    """
    Applies snoozes for a household's products.

    Usage:
        result = await snooze_service.snooze(product_id, household_id, db)
        if not result.ok:
            ...  # map result.reason to a response
    """

    def __init__(self, repository=product_repository, clock: Callable[[], datetime] = _utcnow):
        self.repository = repository
        self.clock = clock

    async def snooze(
        self,
        product_id: UUID,
        household_id: UUID,
        db: AsyncSession,
    ) -> SnoozeResult:
        """
        Snooze a product for SNOOZE_HOURS and bump its correction factor.

        Args:
            product_id: Product to snooze
            household_id: Caller's household (ownership check)
            db: Database session (committed or rolled back here)

        Returns:
            SnoozeResult, never raises for storage failures
        """
        try:
            product = await self.repository.get_product(product_id, household_id, db)
        except SQLAlchemyError as e:
            logger.error("snooze_product_lookup_failed",
                        product_id=str(product_id),
                        household_id=str(household_id),
                        error=str(e),
                        exc_info=True)
            await db.rollback()
            return SnoozeResult.failure(product_id, SnoozeFailureReason.STORAGE_ERROR)

        if product is None:
            logger.warning("snooze_product_not_found",
                          product_id=str(product_id),
                          household_id=str(household_id))
            return SnoozeResult.failure(product_id, SnoozeFailureReason.NOT_FOUND)

        snoozed_until = self.clock() + timedelta(hours=SNOOZE_HOURS)
        current_factor = product.get("frequency_correction_factor")
        new_factor = next_correction_factor(current_factor)

        try:
            await self.repository.upsert_snooze(household_id, product_id, snoozed_until, db)
            await self.repository.update_correction_factor(product_id, household_id, new_factor, db)
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("snooze_write_failed",
                        product_id=str(product_id),
                        household_id=str(household_id),
                        error=str(e),
                        exc_info=True)
            await db.rollback()
            return SnoozeResult.failure(product_id, SnoozeFailureReason.STORAGE_ERROR)

        logger.info("snooze_applied",
                   product_id=str(product_id),
                   household_id=str(household_id),
                   snoozed_until=snoozed_until.isoformat(),
                   previous_factor=current_factor,
                   factor=new_factor)

        return SnoozeResult(
            ok=True,
            product_id=product_id,
            snoozed_until=snoozed_until,
            frequency_correction_factor=new_factor,
        )


# Singleton instance
snooze_service = SnoozeService()
