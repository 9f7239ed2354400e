"""Unit tests for the wizard payment-step checks"""

import pytest
from datetime import date
from decimal import Decimal
from pydantic import ValidationError

from auction_payments.domain.models import PaymentType
from auction_payments.forms import InstallmentFormState, check_form


def test_check_form_installments_match():
    """Test 1000 x 10 needs exactly 10 unit shares"""
    state = InstallmentFormState(bid_text="1.000,00", factor_text="10", single_count=10)
    result = check_form(state)

    assert result.valid is True
    assert result.total_owed == Decimal("10000.00")
    assert result.installment_quantity == 10
    assert result.structure == "10x simples"


def test_check_form_commission_adds_residual_share():
    """Test commission pushes the total past 10 shares, so 11 are required"""
    state = InstallmentFormState(bid_text="1.000,00", factor_text="10", triple_count=1, double_count=1, single_count=6)
    result = check_form(state, commission_percent=Decimal("5"))

    assert result.total_owed == Decimal("10500.00")
    assert result.configuration.required == 11
    assert result.configuration.configured == 11
    assert result.valid is True
    assert result.installment_quantity == 8


def test_check_form_mismatch_message():
    state = InstallmentFormState(bid_text="1.000,00", factor_text="10", single_count=8)
    result = check_form(state)

    assert result.valid is False
    assert "precisa ser igual a 10 parcelas" in result.message


def test_check_form_requires_bid_and_factor():
    result = check_form(InstallmentFormState(single_count=4))
    assert result.valid is False


def test_check_form_down_payment_plan():
    """Test down payment is added before computing required shares"""
    state = InstallmentFormState(
        payment_type=PaymentType.DOWN_PAYMENT_PLUS_INSTALLMENTS,
        bid_text="1.000,00",
        factor_text="10",
        down_payment_text="R$ 2.000,00",
        down_payment_due_date=date(2024, 1, 5),
        single_count=12,
    )
    result = check_form(state)

    assert result.total_owed == Decimal("12000.00")
    assert result.valid is True


def test_check_form_down_payment_missing_date():
    state = InstallmentFormState(
        payment_type=PaymentType.DOWN_PAYMENT_PLUS_INSTALLMENTS,
        bid_text="1.000,00",
        factor_text="10",
        down_payment_text="2.000,00",
        single_count=12,
    )
    result = check_form(state)
    assert result.valid is False
    assert "entrada" in result.message


def test_check_form_cash_skips_installments():
    state = InstallmentFormState(payment_type=PaymentType.CASH, bid_text="500", factor_text="2")
    result = check_form(state)
    assert result.valid is True
    assert result.total_owed == Decimal("1000.00")


def test_form_state_rejects_negative_counts():
    with pytest.raises(ValidationError):
        InstallmentFormState(single_count=-1)
