"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal

from auction_payments.domain.models import (
    CashObligation,
    DownPaymentObligation,
    InstallmentCounts,
    InstallmentObligation,
)


@pytest.fixture
def cash_obligation() -> CashObligation:
    """R$ 5.000,00 due 2024-01-15 at 1% a month late interest"""
    return CashObligation(
        total_amount=Decimal("5000.00"),
        late_interest_percent=Decimal("1"),
        cash_due_date=date(2024, 1, 15),
    )


@pytest.fixture
def installment_obligation() -> InstallmentObligation:
    """R$ 1.000,00 in 4 equal installments due on the 10th from January 2024, 2% a month"""
    return InstallmentObligation(
        total_amount=Decimal("1000.00"),
        late_interest_percent=Decimal("2"),
        counts=InstallmentCounts(single=4),
        start_month=(2024, 1),
        due_day=10,
        installments_paid=0,
    )


@pytest.fixture
def down_payment_obligation() -> DownPaymentObligation:
    """Same plan as installment_obligation plus R$ 300,00 down payment due 2023-12-20"""
    return DownPaymentObligation(
        total_amount=Decimal("1000.00"),
        late_interest_percent=Decimal("2"),
        counts=InstallmentCounts(single=4),
        start_month=(2024, 1),
        due_day=10,
        installments_paid=0,
        down_payment_amount=Decimal("300.00"),
        down_payment_due_date=date(2023, 12, 20),
    )


@pytest.fixture
def bidder_record() -> dict:
    """Stored bidder row on a weighted plan (1 triple, 1 double, 4 single)"""
    return {
        "loteId": "lote-1",
        "valorPagarNumerico": 12000,
        "pago": False,
        "parcelasPagas": 0,
        "mesInicioPagamento": "2024-01",
        "diaVencimentoMensal": 10,
        "percentualJurosAtraso": 2,
        "parcelasTriplas": 1,
        "parcelasDuplas": 1,
        "parcelasSimples": 4,
    }
