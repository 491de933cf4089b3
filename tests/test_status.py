"""Tests for category and item status classification."""

from datetime import date, datetime, timedelta

import pytest

from stockpile.calculations.status import (
    calculate_item_status,
    get_days_until_expiration,
    get_item_status,
    get_status_from_percentage,
    is_item_expired,
)
from stockpile.models import InventoryItem

NOW = datetime(2025, 1, 10, 12, 0)


@pytest.mark.parametrize(
    "percentage,expected",
    [
        (0, "critical"),
        (24.9, "critical"),
        (25, "warning"),
        (49.99, "warning"),
        (50, "ok"),
        (130, "ok"),
    ],
)
def test_status_from_percentage(percentage, expected):
    """25% and 50% are the critical and warning boundaries."""
    assert get_status_from_percentage(percentage) == expected


def test_days_until_expiration():
    """Partial days round up; past dates are negative."""
    assert get_days_until_expiration(NOW + timedelta(days=4), now=NOW) == 4
    assert get_days_until_expiration(NOW + timedelta(days=3, hours=1), now=NOW) == 4
    assert get_days_until_expiration(NOW - timedelta(days=1), now=NOW) == -1


def test_days_until_expiration_for_plain_dates():
    """A date expires at the start of that day."""
    assert get_days_until_expiration(date(2025, 1, 14), now=NOW) == 4
    assert get_days_until_expiration(date(2025, 1, 9), now=NOW) == -1


def test_days_until_expiration_not_applicable():
    """Never-expiring and undated items have no countdown."""
    assert get_days_until_expiration(None, now=NOW) is None
    assert get_days_until_expiration(NOW, never_expires=True, now=NOW) is None


def test_is_item_expired():
    assert is_item_expired(NOW - timedelta(minutes=1), now=NOW)
    assert not is_item_expired(NOW + timedelta(minutes=1), now=NOW)
    assert not is_item_expired(NOW - timedelta(days=5), never_expires=True, now=NOW)
    assert not is_item_expired(None, now=NOW)


def test_item_status_expired_beats_override():
    """Expired items are critical even when marked as enough."""
    status = get_item_status(
        10, 5, NOW - timedelta(days=2), marked_as_enough=True, now=NOW
    )
    assert status == "critical"


def test_item_status_expiring_soon():
    """Items inside the soon window are warnings regardless of quantity."""
    assert get_item_status(0, 5, NOW + timedelta(days=10), now=NOW) == "warning"
    assert get_item_status(
        10, 5, NOW + timedelta(days=10), now=NOW, expiring_soon_days=7
    ) == "ok"


def test_item_status_by_quantity():
    """Quantity decides once expiration is out of the picture."""
    assert get_item_status(0, 10, now=NOW) == "critical"
    assert get_item_status(0, 10, marked_as_enough=True, now=NOW) == "ok"
    assert get_item_status(4, 10, now=NOW) == "warning"
    assert get_item_status(5, 10, now=NOW) == "ok"


def test_calculate_item_status_uses_cached_recommendation():
    """The item's stored recommended quantity is the default target."""
    item = InventoryItem(
        id="1", name="Candles", category_id="light-power", quantity=2,
        unit="pieces", recommended_quantity=6,
    )
    assert calculate_item_status(item, now=NOW) == "warning"
    assert calculate_item_status(item, recommended_quantity=4, now=NOW) == "ok"
