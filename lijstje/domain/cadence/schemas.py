"""
Data schemas for cadence module
"""
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class SnoozeFailureReason(str, Enum):
    """Why a snooze was not applied"""
    NOT_FOUND = "not_found"          # Product missing or owned by another household
    STORAGE_ERROR = "storage_error"  # Write failed, nothing persisted


class SnoozeResult(BaseModel):
    """
    Outcome of a snooze action.

    Callers map reason to a status code; NOT_FOUND must not reveal whether
    the product exists in another household.
    """
    ok: bool
    reason: Optional[SnoozeFailureReason] = None
    product_id: UUID
    snoozed_until: Optional[datetime] = None
    frequency_correction_factor: Optional[float] = Field(None, gt=0, le=2.0)

    @classmethod
    def failure(cls, product_id: UUID, reason: SnoozeFailureReason) -> "SnoozeResult":
        return cls(ok=False, reason=reason, product_id=product_id)

    model_config = {
        "json_schema_extra": {
            "example": {
                "ok": True,
                "reason": None,
                "product_id": "0b6f0c2e-54a4-4a59-9d55-0f3f4b2b7e11",
                "snoozed_until": "2025-03-02T09:30:00+00:00",
                "frequency_correction_factor": 1.1025,
            }
        }
    }


class ExpectedProduct(BaseModel):
    """A product predicted to be bought again soon."""
    id: UUID
    name: str
    emoji: str
    category_id: Optional[UUID] = None
    category_name: Optional[str] = None
    category_display_order: Optional[int] = None
    frequency_days: float = Field(..., gt=0, description="Corrected purchase interval in days")
    next_purchase_date: datetime
    days_until_expected: int = Field(..., ge=0)
