"""Calendar resolution for monthly installment plans"""

import calendar
from datetime import date, datetime, time, timedelta
from typing import List, Optional

from auction_payments.config import settings
from auction_payments.domain.exceptions import InvalidDueDayError, InvalidScheduleError
from auction_payments.domain.installments import build_installments
from auction_payments.domain.models import InstallmentObligation, ScheduledInstallment

END_OF_DAY = time(23, 59, 59, 999000)

# Due day assumed when pricing a plan whose due day is not set yet
DEFAULT_DUE_DAY = 15


def due_date_for(
    start_year: int,
    start_month: int,
    due_day: int,
    index: int,
    clamp: Optional[bool] = None,
) -> date:
    """
    Due date of the installment at position `index` (0-based).

    The month advances by `index` from the anchor month. When `due_day`
    exceeds the length of the target month the surplus rolls into the
    following month (31 in April -> May 1st). Pass clamp=True, or set
    clamp_due_day, to land on the last day of the month instead.
    """
    if not 1 <= due_day <= 31:
        raise InvalidDueDayError(f"Due day must be between 1 and 31, got {due_day}")
    if not 1 <= start_month <= 12:
        raise InvalidScheduleError(f"Start month must be between 1 and 12, got {start_month}")
    if index < 0:
        raise InvalidScheduleError(f"Installment index must be non-negative, got {index}")

    if clamp is None:
        clamp = settings.clamp_due_day

    target_month = start_month - 1 + index
    year = start_year + target_month // 12
    month = target_month % 12 + 1

    if clamp:
        last_day = calendar.monthrange(year, month)[1]
        return date(year, month, min(due_day, last_day))

    return date(year, month, 1) + timedelta(days=due_day - 1)


def end_of_day(day: date) -> datetime:
    """Naive 23:59:59.999 on the given day; no timezone conversion"""
    return datetime.combine(day, END_OF_DAY)


def has_schedule(obligation: InstallmentObligation) -> bool:
    """Start month and due day are both known"""
    return obligation.start_month is not None and bool(obligation.due_day)


def build_schedule(
    obligation: InstallmentObligation, default_due_day: Optional[int] = None
) -> List[ScheduledInstallment]:
    """
    Installments of an obligation with their due dates.

    Empty when the start month has not been filled in yet, or when the due
    day is missing and no default_due_day is given.
    """
    due_day = obligation.due_day or default_due_day
    if obligation.start_month is None or not due_day:
        return []

    start_year, start_month = obligation.start_month
    counts = obligation.counts
    installments = build_installments(obligation.total_amount, counts.triple, counts.double, counts.single)

    return [
        ScheduledInstallment(
            index=inst.index,
            weight=inst.weight,
            base_amount=inst.base_amount,
            due_date=due_date_for(start_year, start_month, due_day, inst.index),
        )
        for inst in installments
    ]
