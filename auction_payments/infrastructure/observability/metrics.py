"""Prometheus metrics for monitoring payment status and late interest"""

from decimal import Decimal

from prometheus_client import Counter, Histogram

# Evaluation metrics
obligation_status_counter = Counter(
    "auction_obligation_status_total",
    "Obligations evaluated by payment status",
    ["payment_type", "status"],  # pago | pendente | atrasado
)

interest_applied_counter = Counter(
    "auction_interest_applied_total",
    "Evaluations where late interest was added",
    ["payment_type"],
)

days_late_histogram = Histogram(
    "auction_overdue_days",
    "Age in days of the oldest late payment of overdue obligations",
    buckets=[1, 7, 15, 30, 60, 90, 180, 365],
)


def record_evaluation(payment_type: str, status: str, interest: Decimal, max_days_late: int) -> None:
    """Record evaluation metrics for monitoring delinquency"""
    obligation_status_counter.labels(payment_type=payment_type, status=status).inc()

    if interest > 0:
        interest_applied_counter.labels(payment_type=payment_type).inc()

    if max_days_late > 0:
        days_late_histogram.observe(max_days_late)
