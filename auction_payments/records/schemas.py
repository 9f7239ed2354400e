"""Pydantic schemas for stored bidder, lot and auction records"""

from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from auction_payments.utils.money import parse_brl


class RecordModel(BaseModel):
    """Records are stored with camelCase keys; Python side uses snake_case"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class AuctionRecord(RecordModel):
    """Auction-level defaults a lot may leave unset"""

    id: Optional[str] = None
    payment_type: Optional[str] = Field(None, alias="tipoPagamento")
    cash_due_date: Optional[str] = Field(None, alias="dataVencimentoVista")
    down_payment_due_date: Optional[str] = Field(None, alias="dataEntrada")
    commission_percent: Optional[Decimal] = Field(None, alias="percentualComissaoLeiloeiro")


class LotRecord(RecordModel):
    """Payment terms configured on a lot"""

    id: Optional[str] = None
    payment_type: Optional[str] = Field(None, alias="tipoPagamento")
    cash_due_date: Optional[str] = Field(None, alias="dataVencimentoVista")
    down_payment_due_date: Optional[str] = Field(None, alias="dataEntrada")


class BidderRecord(RecordModel):
    """Winning bidder ("arrematante") as stored, including payment progress"""

    lot_id: Optional[str] = Field(None, alias="loteId")
    amount_text: Optional[str] = Field(None, alias="valorPagar")
    amount: Optional[Decimal] = Field(None, alias="valorPagarNumerico")
    fully_paid: bool = Field(False, alias="pago")
    installments_paid: int = Field(0, ge=0, alias="parcelasPagas")
    start_month: Optional[str] = Field(None, alias="mesInicioPagamento")
    due_day: Optional[int] = Field(None, alias="diaVencimentoMensal")
    late_interest_percent: Decimal = Field(Decimal("0"), ge=0, alias="percentualJurosAtraso")
    down_payment: Optional[Decimal] = Field(None, alias="valorEntrada")
    triple_count: int = Field(0, ge=0, alias="parcelasTriplas")
    double_count: int = Field(0, ge=0, alias="parcelasDuplas")
    single_count: int = Field(0, ge=0, alias="parcelasSimples")
    uses_factor: bool = Field(False, alias="usaFatorMultiplicador")
    bid: Optional[Decimal] = Field(None, alias="valorLance")
    factor: Optional[Decimal] = Field(None, alias="fatorMultiplicador")
    commission_percent: Optional[Decimal] = Field(None, alias="percentualComissaoLeiloeiro")

    @field_validator("down_payment", "bid", "factor", mode="before")
    @classmethod
    def parse_currency_text(cls, value: Union[str, int, float, Decimal, None]):
        """Form inputs store amounts as 'R$ 1.234,56' text"""
        if isinstance(value, str):
            return parse_brl(value)
        return value

    @field_validator("installments_paid", "triple_count", "double_count", "single_count", mode="before")
    @classmethod
    def null_count_is_zero(cls, value):
        return 0 if value is None else value

    @field_validator("late_interest_percent", mode="before")
    @classmethod
    def null_rate_is_zero(cls, value):
        return 0 if value is None else value

    @field_validator("fully_paid", "uses_factor", mode="before")
    @classmethod
    def null_flag_is_false(cls, value):
        return False if value is None else value
