"""Amounts owed: bid totals and principal plus accrued late interest"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from auction_payments.domain.interest import apply_progressive_interest
from auction_payments.domain.models import (
    CashObligation,
    DownPaymentObligation,
    InstallmentObligation,
    Obligation,
    PaymentType,
    ScheduledInstallment,
)
from auction_payments.domain.schedule import DEFAULT_DUE_DAY, build_schedule
from auction_payments.utils.money import Number, quantize_cents, to_decimal

logger = logging.getLogger(__name__)


def compute_total_value(bid: Number, factor: Number, commission_percent: Number = 0) -> Decimal:
    """
    Bid x multiplier factor, plus the auctioneer's commission, rounded to cents.

    Zero when bid or factor is not positive.
    """
    bid, factor, commission = to_decimal(bid), to_decimal(factor), to_decimal(commission_percent)
    if bid <= 0 or factor <= 0:
        return Decimal("0.00")

    value = bid * factor
    if commission > 0:
        value = value * (1 + commission / 100)
    return quantize_cents(value)


def bidder_total_amount(
    direct_amount: Optional[Number],
    uses_factor: bool = False,
    bid: Optional[Number] = None,
    factor: Optional[Number] = None,
    bidder_commission_percent: Optional[Number] = None,
    auction_commission_percent: Optional[Number] = None,
) -> Decimal:
    """
    Total a bidder owes for a lot.

    Bidders on the multiplier system owe bid x factor plus commission (their
    own commission rate first, then the auction's, else none). Everyone else
    owes the amount stored directly on the record.
    """
    if uses_factor and bid and factor:
        commission = bidder_commission_percent
        if commission is None:
            commission = auction_commission_percent
        return compute_total_value(bid, factor, commission or 0)

    return to_decimal(direct_amount or 0)


def principal_amount(obligation: Obligation) -> Decimal:
    """Amount owed before interest (down payment plans add the down payment)"""
    if obligation.payment_type == PaymentType.DOWN_PAYMENT_PLUS_INSTALLMENTS:
        return obligation.total_amount + obligation.down_payment_amount
    return obligation.total_amount


def _priced_schedule(obligation: InstallmentObligation) -> List[ScheduledInstallment]:
    return build_schedule(obligation, default_due_day=DEFAULT_DUE_DAY)


def _installments_with_interest(obligation: InstallmentObligation, now: date | datetime) -> Decimal:
    schedule = _priced_schedule(obligation)
    if not schedule:
        return obligation.total_amount

    # Each installment accrues on its own due date
    return sum(
        (
            apply_progressive_interest(inst.base_amount, inst.due_date, obligation.late_interest_percent, now)
            for inst in schedule
        ),
        Decimal("0"),
    )


def _cash_total(obligation: CashObligation, now: date | datetime) -> Decimal:
    if obligation.cash_due_date is None:
        return obligation.total_amount
    return apply_progressive_interest(
        obligation.total_amount, obligation.cash_due_date, obligation.late_interest_percent, now
    )


def _down_payment_total(obligation: DownPaymentObligation, now: date | datetime) -> Decimal:
    if obligation.start_month is None:
        return obligation.total_amount

    if obligation.down_payment_due_date is None:
        down_payment = obligation.down_payment_amount
    else:
        down_payment = apply_progressive_interest(
            obligation.down_payment_amount,
            obligation.down_payment_due_date,
            obligation.late_interest_percent,
            now,
        )
    return down_payment + _installments_with_interest(obligation, now)


def total_owed_with_interest(obligation: Obligation, now: date | datetime) -> Decimal:
    """
    Principal plus late interest accrued as of `now`.

    - Cash: interest on the whole amount from the cash due date
    - Installments: sum of each installment with interest from its own due date
    - Down payment + installments: down payment with interest plus the full
      installment schedule (built from total_amount, the down payment is not
      deducted from it)

    A 0% rate skips the walk and returns the principal. Without a start
    month the total is total_amount, so a down payment plan includes its
    down payment only at 0%. A missing due day is priced as the 15th.
    """
    if to_decimal(obligation.late_interest_percent) == 0:
        return principal_amount(obligation)

    payment_type = obligation.payment_type
    if payment_type == PaymentType.CASH:
        total = _cash_total(obligation, now)
    elif payment_type == PaymentType.DOWN_PAYMENT_PLUS_INSTALLMENTS:
        total = _down_payment_total(obligation, now)
    elif obligation.start_month is not None:
        total = _installments_with_interest(obligation, now)
    else:
        total = obligation.total_amount

    logger.debug("Total with interest: type=%s total=%s", payment_type.value, total)
    return total


def _accrual(amount: Decimal, due_date: Optional[date], rate: Number, now: date | datetime) -> Decimal:
    if due_date is None:
        return Decimal("0")
    return apply_progressive_interest(amount, due_date, rate, now) - amount


def interest_accrued(obligation: Obligation, now: date | datetime) -> Decimal:
    """Late interest alone, summed over every dated payment of the obligation"""
    rate = obligation.late_interest_percent
    if to_decimal(rate) == 0:
        return Decimal("0")

    if obligation.payment_type == PaymentType.CASH:
        return _accrual(obligation.total_amount, obligation.cash_due_date, rate, now)

    interest = sum(
        (_accrual(inst.base_amount, inst.due_date, rate, now) for inst in _priced_schedule(obligation)),
        Decimal("0"),
    )
    if obligation.payment_type == PaymentType.DOWN_PAYMENT_PLUS_INSTALLMENTS and obligation.start_month is not None:
        interest += _accrual(obligation.down_payment_amount, obligation.down_payment_due_date, rate, now)
    return interest
