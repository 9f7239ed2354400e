"""Unit tests for mapping stored records to obligations"""

import pytest
from datetime import date
from decimal import Decimal

from auction_payments.domain.exceptions import InvalidRecordError
from auction_payments.domain.models import (
    CashObligation,
    DownPaymentObligation,
    InstallmentCounts,
    InstallmentObligation,
    PaymentType,
)
from auction_payments.records.mapping import to_obligation
from auction_payments.records.schemas import BidderRecord


def test_installment_record(bidder_record):
    obligation = to_obligation(bidder_record, {"id": "lote-1", "tipoPagamento": "parcelamento"})

    assert isinstance(obligation, InstallmentObligation)
    assert obligation.payment_type == PaymentType.INSTALLMENTS
    assert obligation.total_amount == Decimal("12000")
    assert obligation.counts == InstallmentCounts(triple=1, double=1, single=4)
    assert obligation.start_month == (2024, 1)
    assert obligation.due_day == 10
    assert obligation.late_interest_percent == Decimal("2")


def test_missing_payment_type_defaults_to_installments(bidder_record):
    assert to_obligation(bidder_record).payment_type == PaymentType.INSTALLMENTS


def test_cash_record_lot_date_wins(bidder_record):
    obligation = to_obligation(
        bidder_record,
        {"tipoPagamento": "a_vista", "dataVencimentoVista": "2024-02-01"},
        {"dataVencimentoVista": "2024-05-01"},
    )
    assert isinstance(obligation, CashObligation)
    assert obligation.cash_due_date == date(2024, 2, 1)


def test_cash_record_falls_back_to_auction(bidder_record):
    obligation = to_obligation(bidder_record, None, {"tipoPagamento": "a_vista", "dataVencimentoVista": "2024-05-01"})
    assert obligation.cash_due_date == date(2024, 5, 1)


def test_down_payment_record_text_amount(bidder_record):
    bidder_record["valorEntrada"] = "R$ 3.000,00"
    obligation = to_obligation(
        bidder_record, {"tipoPagamento": "entrada_parcelamento", "dataEntrada": "2023-12-20"}
    )

    assert isinstance(obligation, DownPaymentObligation)
    assert obligation.down_payment_amount == Decimal("3000.00")
    assert obligation.down_payment_due_date == date(2023, 12, 20)


def test_down_payment_record_default_ratio(bidder_record):
    obligation = to_obligation(bidder_record, {"tipoPagamento": "entrada_parcelamento"})
    assert obligation.down_payment_amount == Decimal("3600.00")
    assert obligation.down_payment_due_date is None


def test_factor_based_total(bidder_record):
    bidder_record.update(
        {"usaFatorMultiplicador": True, "valorLance": "1.000,00", "fatorMultiplicador": "10"}
    )
    obligation = to_obligation(bidder_record, None, {"percentualComissaoLeiloeiro": 5})
    assert obligation.total_amount == Decimal("10500.00")


def test_text_amount_when_numeric_missing(bidder_record):
    del bidder_record["valorPagarNumerico"]
    bidder_record["valorPagar"] = "R$ 5.000,00"
    assert to_obligation(bidder_record).total_amount == Decimal("5000.00")


def test_null_fields_from_storage(bidder_record):
    bidder_record.update({"parcelasPagas": None, "percentualJurosAtraso": None, "pago": None})
    obligation = to_obligation(bidder_record)
    assert obligation.installments_paid == 0
    assert obligation.late_interest_percent == Decimal("0")
    assert obligation.fully_paid is False


def test_accepts_parsed_models(bidder_record):
    bidder = BidderRecord.model_validate(bidder_record)
    assert to_obligation(bidder).total_amount == Decimal("12000")


def test_unknown_payment_type(bidder_record):
    with pytest.raises(InvalidRecordError):
        to_obligation(bidder_record, {"tipoPagamento": "boleto"})


def test_invalid_record(bidder_record):
    bidder_record["parcelasPagas"] = -1
    with pytest.raises(InvalidRecordError):
        to_obligation(bidder_record)
