"""Progressive (monthly compounding) late interest"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from auction_payments.config import settings
from auction_payments.utils.date_utils import to_date
from auction_payments.utils.money import Number, to_decimal


def months_late(due_date: date, now: date | datetime, days_per_month: Optional[int] = None) -> int:
    """
    Full late periods elapsed since the due date.

    A period is a fixed block of days_per_month days (30 by default), not a
    calendar month. Both sides are compared as dates, time of day ignored.
    """
    days_per_month = days_per_month or settings.days_per_month
    today = to_date(now)
    if today <= due_date:
        return 0
    return (today - due_date).days // days_per_month


def apply_progressive_interest(
    base_amount: Number,
    due_date: date,
    late_interest_percent: Number,
    now: date | datetime,
) -> Decimal:
    """
    Compound the late interest rate once per full late period.

    Returns the base amount unchanged when not yet late. No rounding is
    applied; callers round for display.

    Example:
        1000.00 due 2024-01-01, 2% per month, now 2024-04-01
        90 days -> 3 periods -> 1000 * 1.02^3 = 1061.208
    """
    base = to_decimal(base_amount)
    periods = months_late(due_date, now)
    if periods <= 0:
        return base

    factor = 1 + to_decimal(late_interest_percent) / 100
    result = base
    for _ in range(periods):
        result = result * factor
    return result
