"""
Cadence Module - purchase frequency, snoozing and expected purchases

- Purchase frequency (pure): weighted interval between purchases
- Snooze: hide a product for 24h, compound its correction factor x1.05 (max 2.0)
- Expected purchases: interval x correction factor -> most due products
"""

from lijstje.domain.cadence.expected_purchases import (
    ExpectedPurchasesService,
    expected_purchases_service,
)
from lijstje.domain.cadence.schemas import (
    ExpectedProduct,
    SnoozeFailureReason,
    SnoozeResult,
)
from lijstje.domain.cadence.snooze_service import (
    FACTOR_MAX,
    SNOOZE_CORRECTION_FACTOR,
    SNOOZE_HOURS,
    SnoozeService,
    next_correction_factor,
    snooze_service,
)

__all__ = [
    'ExpectedProduct',
    'ExpectedPurchasesService',
    'FACTOR_MAX',
    'SNOOZE_CORRECTION_FACTOR',
    'SNOOZE_HOURS',
    'SnoozeFailureReason',
    'SnoozeResult',
    'SnoozeService',
    'expected_purchases_service',
    'next_correction_factor',
    'snooze_service',
]
