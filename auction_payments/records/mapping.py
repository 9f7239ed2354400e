"""Map stored bidder/lot/auction records onto domain obligations"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import ValidationError

from auction_payments.config import settings
from auction_payments.domain.exceptions import InvalidRecordError
from auction_payments.domain.models import (
    CashObligation,
    DownPaymentObligation,
    InstallmentCounts,
    InstallmentObligation,
    Obligation,
    PaymentType,
)
from auction_payments.domain.totals import bidder_total_amount
from auction_payments.records.schemas import AuctionRecord, BidderRecord, LotRecord, RecordModel
from auction_payments.utils.date_utils import parse_iso_date, parse_month_year
from auction_payments.utils.money import parse_brl, quantize_cents

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=RecordModel)


def _load(model: Type[RecordT], data: Union[RecordT, Dict[str, Any], None]) -> Optional[RecordT]:
    if data is None or isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InvalidRecordError(f"Invalid {model.__name__}: {e}") from e


def resolve_payment_type(lot: Optional[LotRecord], auction: Optional[AuctionRecord]) -> PaymentType:
    """Lot setting wins over the auction default; installments when neither is set"""
    raw = (lot.payment_type if lot else None) or (auction.payment_type if auction else None)
    if not raw:
        return PaymentType.INSTALLMENTS
    try:
        return PaymentType(raw)
    except ValueError as e:
        raise InvalidRecordError(f"Unknown payment type: {raw!r}") from e


def to_obligation(
    bidder: Union[BidderRecord, Dict[str, Any]],
    lot: Union[LotRecord, Dict[str, Any], None] = None,
    auction: Union[AuctionRecord, Dict[str, Any], None] = None,
) -> Obligation:
    """
    Build the obligation for a bidder's won lot.

    Requirements:
    - Built fresh from the records on every call, nothing cached
    - Lot dates take precedence over auction dates
    - Bidders on the multiplier system owe bid x factor + commission,
      otherwise the stored amount (numeric field first, then the text one)
    - A missing down payment defaults to default_down_payment_ratio of the total

    Raises:
        InvalidRecordError: record fails validation or names an unknown payment type
    """
    bidder = _load(BidderRecord, bidder)
    lot = _load(LotRecord, lot)
    auction = _load(AuctionRecord, auction)

    payment_type = resolve_payment_type(lot, auction)

    direct_amount = bidder.amount if bidder.amount is not None else parse_brl(bidder.amount_text)
    total = bidder_total_amount(
        direct_amount,
        uses_factor=bidder.uses_factor,
        bid=bidder.bid,
        factor=bidder.factor,
        bidder_commission_percent=bidder.commission_percent,
        auction_commission_percent=auction.commission_percent if auction else None,
    )

    if payment_type == PaymentType.CASH:
        due_text = (lot.cash_due_date if lot else None) or (auction.cash_due_date if auction else None)
        return CashObligation(
            total_amount=total,
            late_interest_percent=bidder.late_interest_percent,
            fully_paid=bidder.fully_paid,
            cash_due_date=parse_iso_date(due_text),
        )

    plan = dict(
        total_amount=total,
        late_interest_percent=bidder.late_interest_percent,
        fully_paid=bidder.fully_paid,
        counts=InstallmentCounts(bidder.triple_count, bidder.double_count, bidder.single_count),
        start_month=parse_month_year(bidder.start_month),
        due_day=bidder.due_day,
        installments_paid=bidder.installments_paid,
    )

    if payment_type == PaymentType.INSTALLMENTS:
        return InstallmentObligation(**plan)

    down_payment = bidder.down_payment
    if down_payment is None:
        down_payment = quantize_cents(total * settings.default_down_payment_ratio)
        logger.debug("No down payment on record, defaulting to %s", down_payment)

    due_text = (lot.down_payment_due_date if lot else None) or (
        auction.down_payment_due_date if auction else None
    )
    return DownPaymentObligation(
        **plan,
        down_payment_amount=down_payment,
        down_payment_due_date=parse_iso_date(due_text),
    )
