"""Serializable wizard state and the live installment checks run against it"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from auction_payments.domain.installments import (
    describe_structure,
    total_installments,
    validate_installment_configuration,
)
from auction_payments.domain.models import ConfigurationCheck, PaymentType
from auction_payments.domain.totals import compute_total_value
from auction_payments.utils.money import parse_brl


class InstallmentFormState(BaseModel):
    """Payment step of the bidder wizard, passed by value between checks"""

    model_config = ConfigDict(frozen=True)

    payment_type: PaymentType = PaymentType.INSTALLMENTS
    bid_text: str = ""
    factor_text: str = ""
    down_payment_text: str = ""
    down_payment_due_date: Optional[date] = None
    triple_count: int = Field(0, ge=0)
    double_count: int = Field(0, ge=0)
    single_count: int = Field(0, ge=0)
    due_day: Optional[int] = Field(None, ge=1, le=31)


@dataclass(frozen=True)
class FormCheck:
    """Result shown next to the installment fields"""

    valid: bool
    total_owed: Decimal
    installment_quantity: int
    structure: str
    configuration: Optional[ConfigurationCheck] = None
    message: str = ""


def check_form(state: InstallmentFormState, commission_percent: Decimal = Decimal("0")) -> FormCheck:
    """
    Validate the payment step as the user types.

    Requirements:
    - Bid and factor must be positive for installment plans
    - Down payment plans need a down payment amount and due date
    - The configured weighted installments must match the count needed to
      cover bid x factor (+ down payment) + commission at one bid per share,
      allowing a final residual share
    """
    quantity = total_installments(state.triple_count, state.double_count, state.single_count)
    structure = describe_structure(state.triple_count, state.double_count, state.single_count)

    bid = parse_brl(state.bid_text)
    factor = parse_brl(state.factor_text)
    lot_value = compute_total_value(bid, factor)

    if state.payment_type == PaymentType.CASH:
        return FormCheck(valid=True, total_owed=lot_value, installment_quantity=0, structure=structure)

    if bid <= 0 or factor <= 0:
        return FormCheck(
            valid=False,
            total_owed=Decimal("0"),
            installment_quantity=quantity,
            structure=structure,
            message="Informe o valor do lance e o fator multiplicador",
        )

    merchandise_value = lot_value
    if state.payment_type == PaymentType.DOWN_PAYMENT_PLUS_INSTALLMENTS:
        down_payment = parse_brl(state.down_payment_text)
        if down_payment <= 0 or state.down_payment_due_date is None:
            return FormCheck(
                valid=False,
                total_owed=lot_value,
                installment_quantity=quantity,
                structure=structure,
                message="Informe o valor e a data da entrada",
            )
        merchandise_value = lot_value + down_payment

    commission = merchandise_value * commission_percent / 100 if commission_percent > 0 else Decimal("0")
    total_owed = merchandise_value + commission

    check = validate_installment_configuration(
        total_owed, bid, state.triple_count, state.double_count, state.single_count
    )
    message = "" if check.valid else (
        f"A configuração de parcelas não está compatível. O total calculado ({check.configured}) "
        f"precisa ser igual a {check.required} parcelas"
    )
    return FormCheck(
        valid=check.valid,
        total_owed=total_owed,
        installment_quantity=quantity,
        structure=structure,
        configuration=check,
        message=message,
    )
