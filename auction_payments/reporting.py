"""Report-facing evaluation of obligations (status badge, amounts, payment table)"""

from datetime import date, datetime
from typing import Any, Dict, Union

from auction_payments.domain.delinquency import delinquency_summary, payment_rows, payment_status
from auction_payments.domain.models import Obligation, ObligationReport, PaymentStatus, PaymentType
from auction_payments.domain.totals import interest_accrued, principal_amount, total_owed_with_interest
from auction_payments.infrastructure.observability.logging import log_evaluation
from auction_payments.infrastructure.observability.metrics import record_evaluation
from auction_payments.records.mapping import to_obligation
from auction_payments.records.schemas import AuctionRecord, BidderRecord, LotRecord
from auction_payments.utils.money import format_brl, quantize_cents

STATUS_LABELS = {"pago": "Pago", "pendente": "Pendente", "atrasado": "Atrasado"}


def build_report(obligation: Obligation, now: date | datetime) -> ObligationReport:
    """
    Evaluate one obligation for a report as of `now`.

    Flow:
    1. Classify status (paid / pending / overdue)
    2. Compute total owed with late interest and the interest alone
    3. Build the payment table and arrears summary
    4. Log and record metrics
    """
    status = payment_status(obligation, now)
    total = total_owed_with_interest(obligation, now)
    interest = interest_accrued(obligation, now)
    rows = payment_rows(obligation, now)
    delinquency = delinquency_summary(obligation, now)

    principal = principal_amount(obligation)

    report = ObligationReport(
        payment_type=obligation.payment_type,
        status=status,
        principal=principal,
        total_with_interest=total,
        interest=interest,
        rows=rows,
        delinquency=delinquency,
    )

    record_evaluation(obligation.payment_type.value, status.value, interest, delinquency.max_days_late)
    log_evaluation(
        payment_type=obligation.payment_type.value,
        status=status.value,
        principal=str(quantize_cents(principal)),
        total_with_interest=str(quantize_cents(total)),
        overdue_installments=delinquency.overdue_installments,
        max_days_late=delinquency.max_days_late,
    )
    return report


def report_for_records(
    bidder: Union[BidderRecord, Dict[str, Any]],
    lot: Union[LotRecord, Dict[str, Any], None] = None,
    auction: Union[AuctionRecord, Dict[str, Any], None] = None,
    *,
    now: date | datetime,
) -> ObligationReport:
    """Map stored records to an obligation and evaluate it"""
    return build_report(to_obligation(bidder, lot, auction), now)


def status_label(report: ObligationReport) -> str:
    """Badge text as printed in generated documents"""
    return STATUS_LABELS[report.status.value]


def situation_text(report: ObligationReport) -> str:
    """One-line current situation printed under the badge"""
    is_cash = report.payment_type == PaymentType.CASH

    if report.status == PaymentStatus.PAID:
        return "Pagamento à vista quitado." if is_cash else "Todos os pagamentos processados com sucesso."

    if report.status == PaymentStatus.OVERDUE:
        count = report.delinquency.overdue_installments
        plural = "s" if count > 1 else ""
        return (
            f"{count} pagamento{plural} em atraso, total {format_brl(report.delinquency.overdue_amount)} "
            f"({report.delinquency.max_days_late} dias)."
        )

    if is_cash:
        return f"Pagamento à vista de {format_brl(report.total_with_interest)} pendente."
    return f"Pagamentos em dia, total {format_brl(report.total_with_interest)}."
