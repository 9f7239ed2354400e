"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional, Tuple, Union


class PaymentType(str, Enum):
    """Payment plan chosen for a won lot (values match stored records)"""

    CASH = "a_vista"
    INSTALLMENTS = "parcelamento"
    DOWN_PAYMENT_PLUS_INSTALLMENTS = "entrada_parcelamento"


class PaymentStatus(str, Enum):
    """Badge shown in reports"""

    PAID = "pago"
    PENDING = "pendente"
    OVERDUE = "atrasado"


@dataclass(frozen=True)
class InstallmentCounts:
    """How many installments of each weight tier (x3, x2, x1)"""

    triple: int = 0
    double: int = 0
    single: int = 0


@dataclass(frozen=True)
class CashObligation:
    """Lump-sum payment due on a single date"""

    total_amount: Decimal
    late_interest_percent: Decimal = Decimal("0")
    fully_paid: bool = False
    cash_due_date: Optional[date] = None

    @property
    def payment_type(self) -> PaymentType:
        return PaymentType.CASH


@dataclass(frozen=True)
class InstallmentObligation:
    """Total split into weighted monthly installments"""

    total_amount: Decimal
    late_interest_percent: Decimal = Decimal("0")
    fully_paid: bool = False
    counts: InstallmentCounts = field(default_factory=InstallmentCounts)
    start_month: Optional[Tuple[int, int]] = None  # (year, month)
    due_day: Optional[int] = None
    installments_paid: int = 0

    @property
    def payment_type(self) -> PaymentType:
        return PaymentType.INSTALLMENTS


@dataclass(frozen=True)
class DownPaymentObligation(InstallmentObligation):
    """
    Down payment followed by weighted monthly installments.

    installments_paid counts the down payment first: 0 means nothing paid,
    k >= 1 means the down payment plus k - 1 installments are paid.
    """

    down_payment_amount: Decimal = Decimal("0")
    down_payment_due_date: Optional[date] = None

    @property
    def payment_type(self) -> PaymentType:
        return PaymentType.DOWN_PAYMENT_PLUS_INSTALLMENTS


Obligation = Union[CashObligation, InstallmentObligation, DownPaymentObligation]


@dataclass(frozen=True)
class Installment:
    """Single weighted payment in a plan, before calendar resolution"""

    index: int
    weight: int
    base_amount: Decimal


@dataclass(frozen=True)
class ScheduledInstallment:
    """Installment with its resolved due date"""

    index: int
    weight: int
    base_amount: Decimal
    due_date: date


@dataclass(frozen=True)
class DelinquencySummary:
    """What is currently in arrears for an obligation"""

    overdue_amount: Decimal
    overdue_installments: int
    max_days_late: int


@dataclass(frozen=True)
class ConfigurationCheck:
    """Outcome of checking a manually configured installment mix"""

    required: int
    configured: int
    valid: bool


@dataclass
class ScheduleRow:
    """One line of a report payment table"""

    label: str
    due_date: date
    base_amount: Decimal
    amount_with_interest: Decimal
    paid: bool
    overdue: bool

    @property
    def has_interest(self) -> bool:
        return self.amount_with_interest > self.base_amount


@dataclass
class ObligationReport:
    """Everything a report needs to render one obligation"""

    payment_type: PaymentType
    status: PaymentStatus
    principal: Decimal
    total_with_interest: Decimal
    interest: Decimal
    rows: List[ScheduleRow]
    delinquency: DelinquencySummary
