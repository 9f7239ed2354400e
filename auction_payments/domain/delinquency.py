"""Overdue evaluation and arrears breakdown for auction obligations"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from auction_payments.domain.installments import total_installments
from auction_payments.domain.interest import apply_progressive_interest
from auction_payments.domain.models import (
    CashObligation,
    DelinquencySummary,
    DownPaymentObligation,
    InstallmentObligation,
    Obligation,
    PaymentStatus,
    PaymentType,
    ScheduleRow,
)
from auction_payments.domain.schedule import build_schedule, due_date_for, end_of_day, has_schedule
from auction_payments.utils.date_utils import days_between, to_datetime

logger = logging.getLogger(__name__)


def _is_past(due_date: Optional[date], now: datetime) -> bool:
    """A due date has passed once `now` is beyond 23:59:59.999 of that day"""
    if due_date is None:
        return False
    return now > end_of_day(due_date)


def _plan_size(obligation: InstallmentObligation) -> int:
    counts = obligation.counts
    return total_installments(counts.triple, counts.double, counts.single)


def _cash_overdue(obligation: CashObligation, now: datetime) -> bool:
    if obligation.fully_paid:
        return False
    return _is_past(obligation.cash_due_date, now)


def _installments_overdue(obligation: InstallmentObligation, now: datetime) -> bool:
    plan_size = _plan_size(obligation)
    if obligation.fully_paid or obligation.installments_paid >= plan_size:
        return False
    if not has_schedule(obligation):
        return False

    start_year, start_month = obligation.start_month
    next_due = due_date_for(start_year, start_month, obligation.due_day, obligation.installments_paid)
    return _is_past(next_due, now)


def _down_payment_overdue(obligation: DownPaymentObligation, now: datetime) -> bool:
    plan_size = _plan_size(obligation)
    if obligation.fully_paid or obligation.installments_paid >= 1 + plan_size:
        return False

    if obligation.installments_paid == 0:
        return _is_past(obligation.down_payment_due_date, now)

    if not has_schedule(obligation):
        return False

    # First paid slot is the down payment
    effective_paid = obligation.installments_paid - 1
    start_year, start_month = obligation.start_month
    for i in range(plan_size):
        due = due_date_for(start_year, start_month, obligation.due_day, i)
        if i >= effective_paid and _is_past(due, now):
            return True
    return False


def is_overdue(obligation: Obligation, now: date | datetime) -> bool:
    """
    Whether the obligation has a payment past due as of `now`.

    - Cash: due date passed and not settled
    - Installments: the next unpaid installment's due date has passed
    - Down payment + installments: unpaid down payment past due, or, once
      it is paid, any unpaid installment past due

    Missing schedule data is treated as not overdue.
    """
    now = to_datetime(now)
    payment_type = obligation.payment_type

    if payment_type == PaymentType.CASH:
        overdue = _cash_overdue(obligation, now)
    elif payment_type == PaymentType.DOWN_PAYMENT_PLUS_INSTALLMENTS:
        overdue = _down_payment_overdue(obligation, now)
    else:
        overdue = _installments_overdue(obligation, now)

    logger.debug("Overdue check: type=%s overdue=%s", payment_type.value, overdue)
    return overdue


def _all_payments_marked(obligation: Obligation) -> bool:
    if obligation.payment_type == PaymentType.CASH:
        return False
    plan_size = _plan_size(obligation)
    if obligation.payment_type == PaymentType.DOWN_PAYMENT_PLUS_INSTALLMENTS:
        return obligation.installments_paid >= 1 + plan_size
    return plan_size > 0 and obligation.installments_paid >= plan_size


def payment_status(obligation: Obligation, now: date | datetime) -> PaymentStatus:
    """Badge for reports: paid, overdue or pending"""
    if obligation.fully_paid or _all_payments_marked(obligation):
        return PaymentStatus.PAID
    if is_overdue(obligation, now):
        return PaymentStatus.OVERDUE
    return PaymentStatus.PENDING


@dataclass(frozen=True)
class _PaymentItem:
    label: str
    due_date: date
    amount: Decimal
    paid: bool
    is_installment: bool = True


def _payment_items(obligation: Obligation) -> List[_PaymentItem]:
    """Every dated payment of the obligation, in due order, with its paid flag"""
    if obligation.payment_type == PaymentType.CASH:
        if obligation.cash_due_date is None:
            return []
        return [
            _PaymentItem(
                "À vista",
                obligation.cash_due_date,
                obligation.total_amount,
                obligation.fully_paid,
                is_installment=False,
            )
        ]

    items = []
    paid_installments = obligation.installments_paid
    if obligation.payment_type == PaymentType.DOWN_PAYMENT_PLUS_INSTALLMENTS:
        down_paid = obligation.installments_paid >= 1
        if obligation.down_payment_due_date is not None:
            items.append(
                _PaymentItem(
                    "Entrada",
                    obligation.down_payment_due_date,
                    obligation.down_payment_amount,
                    obligation.fully_paid or down_paid,
                    is_installment=False,
                )
            )
        paid_installments = max(obligation.installments_paid - 1, 0)

    for inst in build_schedule(obligation):
        items.append(
            _PaymentItem(
                f"{inst.index + 1}ª Parcela",
                inst.due_date,
                inst.base_amount,
                obligation.fully_paid or inst.index < paid_installments,
            )
        )
    return items


def _late_items(obligation: Obligation, now: datetime) -> List[_PaymentItem]:
    """Unpaid past-due payments, empty unless the obligation is overdue"""
    if obligation.fully_paid or not is_overdue(obligation, now):
        return []

    items = [item for item in _payment_items(obligation) if not item.paid and _is_past(item.due_date, now)]
    if obligation.payment_type == PaymentType.DOWN_PAYMENT_PLUS_INSTALLMENTS and obligation.installments_paid == 0:
        # Installments are not chased until the down payment is in
        items = [item for item in items if not item.is_installment]
    return items


def payment_rows(obligation: Obligation, now: date | datetime) -> List[ScheduleRow]:
    """Report table rows: one per dated payment with its amount including late interest"""
    now = to_datetime(now)
    late_labels = {item.label for item in _late_items(obligation, now)}
    return [
        ScheduleRow(
            label=item.label,
            due_date=item.due_date,
            base_amount=item.amount,
            amount_with_interest=apply_progressive_interest(
                item.amount, item.due_date, obligation.late_interest_percent, now
            ),
            paid=item.paid,
            overdue=item.label in late_labels,
        )
        for item in _payment_items(obligation)
    ]


def delinquency_summary(obligation: Obligation, now: date | datetime) -> DelinquencySummary:
    """
    What is in arrears right now.

    overdue_amount sums the late payments with their accrued interest;
    max_days_late is the age in days of the oldest late payment. Nothing is
    in arrears while the obligation is not overdue, and a down payment plan
    with nothing paid only has the down payment in arrears.
    """
    now = to_datetime(now)
    overdue_amount = Decimal("0")
    overdue_count = 0
    max_days = 0

    for item in _late_items(obligation, now):
        overdue_amount += apply_progressive_interest(
            item.amount, item.due_date, obligation.late_interest_percent, now
        )
        overdue_count += 1
        max_days = max(max_days, days_between(item.due_date, now))

    return DelinquencySummary(
        overdue_amount=overdue_amount,
        overdue_installments=overdue_count,
        max_days_late=max_days,
    )
