"""Status classification for categories and individual items."""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING

from ..constants import (
    CRITICAL_PERCENTAGE_THRESHOLD,
    EXPIRING_SOON_DAYS_THRESHOLD,
    LOW_QUANTITY_WARNING_RATIO,
    WARNING_PERCENTAGE_THRESHOLD,
)

if TYPE_CHECKING:
    from ..models import InventoryItem

_ONE_DAY = timedelta(days=1)


def get_status_from_percentage(percentage: float) -> str:
    """Category status for a completion percentage."""
    if percentage < CRITICAL_PERCENTAGE_THRESHOLD:
        return "critical"
    if percentage < WARNING_PERCENTAGE_THRESHOLD:
        return "warning"
    return "ok"


def _as_datetime(value: date | datetime, now: datetime) -> datetime:
    if not isinstance(value, datetime):
        value = datetime.combine(value, datetime.min.time())
    if value.tzinfo is None and now.tzinfo is not None:
        value = value.replace(tzinfo=now.tzinfo)
    elif value.tzinfo is not None and now.tzinfo is None:
        value = value.astimezone().replace(tzinfo=None)
    return value


def get_days_until_expiration(
    expiration_date: date | datetime | None,
    never_expires: bool = False,
    now: datetime | None = None,
) -> int | None:
    """Whole days until expiration, rounded up. Negative once expired.

    Returns None for never-expiring or undated items.
    """
    if never_expires or expiration_date is None:
        return None
    now = now or datetime.now()
    delta = _as_datetime(expiration_date, now) - now
    return math.ceil(delta / _ONE_DAY)


def is_item_expired(
    expiration_date: date | datetime | None,
    never_expires: bool = False,
    now: datetime | None = None,
) -> bool:
    if never_expires or expiration_date is None:
        return False
    now = now or datetime.now()
    return _as_datetime(expiration_date, now) < now


def get_item_status(
    current_quantity: float,
    recommended_quantity: float,
    expiration_date: date | datetime | None = None,
    never_expires: bool = False,
    marked_as_enough: bool = False,
    now: datetime | None = None,
    expiring_soon_days: int = EXPIRING_SOON_DAYS_THRESHOLD,
) -> str:
    """Item status. Expiration takes precedence over quantity."""
    days = get_days_until_expiration(expiration_date, never_expires, now)
    if days is not None:
        if days < 0:
            return "critical"
        if days <= expiring_soon_days:
            return "warning"

    if marked_as_enough:
        return "ok"

    if current_quantity == 0:
        return "critical"
    if current_quantity < recommended_quantity * LOW_QUANTITY_WARNING_RATIO:
        return "warning"
    return "ok"


def calculate_item_status(
    item: InventoryItem,
    recommended_quantity: float | None = None,
    now: datetime | None = None,
    expiring_soon_days: int = EXPIRING_SOON_DAYS_THRESHOLD,
) -> str:
    """Status for an inventory item, using its cached recommendation by default."""
    if recommended_quantity is None:
        recommended_quantity = item.recommended_quantity
    return get_item_status(
        item.quantity,
        recommended_quantity,
        item.expiration_date,
        item.never_expires,
        item.marked_as_enough,
        now=now,
        expiring_soon_days=expiring_soon_days,
    )
