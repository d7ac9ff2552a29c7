"""
Purchase frequency - learned interval between purchases of a product

Pure functions over purchase timestamps:
- accidental double taps (< 30 s apart) count once
- at least 3 purchases needed before a frequency is trusted
- recent intervals weigh more: 1.0, 0.8, 0.6, ... floored at 0.2
"""
import math
from datetime import date, datetime, timedelta
from typing import List, Optional, Sequence

BUFFER_SECONDS = 30
MIN_PURCHASES = 3
SECONDS_PER_DAY = 24 * 60 * 60


def filter_recent_purchases(purchases: Sequence[datetime]) -> List[datetime]:
    """
    Drop purchases made within BUFFER_SECONDS of the next newer purchase.

    Returns:
        Filtered timestamps, newest first
    """
    if not purchases:
        return []

    ordered = sorted(purchases, reverse=True)
    filtered = [ordered[0]]

    # Compare with the neighbour in the sorted list, not the last kept entry
    for newer, older in zip(ordered, ordered[1:]):
        if (newer - older).total_seconds() >= BUFFER_SECONDS:
            filtered.append(older)

    return filtered


def calculate_purchase_frequency(purchases: Sequence[datetime]) -> Optional[float]:
    """
    Weighted average purchase interval in days.

    Args:
        purchases: Purchase timestamps for one product (any order)

    Returns:
        Interval in days, or None with too little history
    """
    if len(purchases) < MIN_PURCHASES:
        return None

    filtered = filter_recent_purchases(purchases)
    if len(filtered) < 2:
        return None

    oldest_first = list(reversed(filtered))
    intervals = [
        (later - earlier).total_seconds() / SECONDS_PER_DAY
        for earlier, later in zip(oldest_first, oldest_first[1:])
    ]

    total_weighted = 0.0
    total_weight = 0.0
    for age, interval in enumerate(reversed(intervals)):
        weight = max(1.0 - age * 0.2, 0.2)
        total_weighted += interval * weight
        total_weight += weight

    return total_weighted / total_weight


def predict_next_purchase_date(last_purchase: datetime, frequency_days: float) -> datetime:
    """Last purchase plus the frequency rounded (half up) to whole days."""
    return last_purchase + timedelta(days=math.floor(frequency_days + 0.5))


def get_lead_time_days(frequency_days: float) -> int:
    """Days ahead to suggest: weekly 1, fortnightly 2, otherwise 3."""
    if frequency_days < 7:
        return 1
    elif frequency_days < 14:
        return 2
    return 3


def should_show_in_suggestions(
    next_purchase_date: datetime,
    frequency_days: float,
    today: Optional[date] = None,
) -> bool:
    """True once today reaches the next purchase date minus the lead time."""
    today = today or date.today()
    suggestion_date = next_purchase_date.date() - timedelta(days=get_lead_time_days(frequency_days))
    return today >= suggestion_date


def get_last_purchase_date(purchases: Sequence[datetime]) -> Optional[datetime]:
    """Most recent purchase after buffer filtering."""
    filtered = filter_recent_purchases(purchases)
    return filtered[0] if filtered else None


def has_recent_purchase(
    purchases: Sequence[datetime],
    now: datetime,
    buffer_seconds: int = BUFFER_SECONDS,
) -> bool:
    """True if the newest purchase happened less than buffer_seconds ago."""
    if not purchases:
        return False
    return (now - max(purchases)).total_seconds() < buffer_seconds
