"""Installment structure for weighted auction payment plans"""

import logging
from decimal import Decimal
from typing import List, Optional

from auction_payments.domain.exceptions import InvalidAmountError, InvalidCountError
from auction_payments.domain.models import ConfigurationCheck, Installment
from auction_payments.utils.money import Number, quantize_cents, to_decimal

logger = logging.getLogger(__name__)

TIER_LABELS = {3: "tripla", 2: "dupla", 1: "simples"}


def _count(value: Optional[int]) -> int:
    return value or 0


def weighted_units(
    triple: Optional[int] = 0,
    double: Optional[int] = 0,
    single: Optional[int] = 0,
) -> int:
    """Number of unit shares the total is divided into: 3t + 2d + s"""
    return 3 * _count(triple) + 2 * _count(double) + _count(single)


def total_installments(
    triple: Optional[int] = 0,
    double: Optional[int] = 0,
    single: Optional[int] = 0,
) -> int:
    """Quantity of installments in the plan; unset tiers count as 0"""
    return _count(triple) + _count(double) + _count(single)


def build_installments(
    total_amount: Number,
    triple: int = 0,
    double: int = 0,
    single: int = 0,
) -> List[Installment]:
    """
    Split a total into weighted installments.

    Requirements:
    - Tier order: all triple-weight, then double, then single
    - Each installment is weight x (total / units), rounded half-up to cents
    - Last installment absorbs the rounding residual so the plan sums exactly

    Args:
        total_amount: Principal to split (commission already included)
        triple: Installments weighted x3
        double: Installments weighted x2
        single: Installments weighted x1

    Returns:
        Ordered list of Installment objects, empty when there are no units

    Raises:
        InvalidAmountError: total is negative or not finite
        InvalidCountError: any tier count is negative

    Example:
        12000.00 with 1 triple, 1 double, 4 single -> 9 units of 1333.33...
        [4000.00, 2666.67, 1333.33, 1333.33, 1333.33, 1333.34]
    """
    total = to_decimal(total_amount)
    if not total.is_finite() or total < 0:
        raise InvalidAmountError(f"Invalid total amount: {total_amount}")

    triple, double, single = _count(triple), _count(double), _count(single)
    if triple < 0 or double < 0 or single < 0:
        raise InvalidCountError(
            f"Installment counts must be non-negative (triple={triple}, double={double}, single={single})"
        )

    units = weighted_units(triple, double, single)
    if units == 0:
        return []

    unit_value = total / units

    weights = [3] * triple + [2] * double + [1] * single
    amounts = [quantize_cents(weight * unit_value) for weight in weights]

    # Last installment absorbs rounding remainder to ensure exact total
    delta = total - sum(amounts)
    amounts[-1] += delta

    if delta:
        logger.debug("Rounding residual %s assigned to installment %d", delta, len(amounts) - 1)

    return [
        Installment(index=i, weight=weight, base_amount=amount)
        for i, (weight, amount) in enumerate(zip(weights, amounts))
    ]


def required_installment_count(total_owed: Number, per_installment_amount: Number) -> int:
    """
    Unit shares needed to cover a total at a fixed per-installment amount.

    Whole shares plus one more when a residual is left over, so the final
    share may be irregular. Zero when the per-installment amount is not positive.
    """
    total = to_decimal(total_owed)
    per_installment = to_decimal(per_installment_amount)
    if per_installment <= 0 or total <= 0:
        return 0

    complete = int(total // per_installment)
    residual = total - complete * per_installment
    return complete + 1 if residual > 0 else complete


def validate_installment_configuration(
    total_owed: Number,
    per_installment_amount: Number,
    triple: Optional[int] = 0,
    double: Optional[int] = 0,
    single: Optional[int] = 0,
) -> ConfigurationCheck:
    """
    Check a manually configured installment mix against the required count.

    The configured side is the weighted unit count (a triple installment
    covers three shares). An empty configuration is always valid because
    the form has not asked for one yet.
    """
    required = required_installment_count(total_owed, per_installment_amount)
    configured = weighted_units(triple, double, single)

    if total_installments(triple, double, single) == 0:
        return ConfigurationCheck(required=required, configured=0, valid=True)

    return ConfigurationCheck(required=required, configured=configured, valid=configured == required)


def describe_structure(
    triple: Optional[int] = 0,
    double: Optional[int] = 0,
    single: Optional[int] = 0,
) -> str:
    """Short summary like '1x tripla + 1x dupla + 4x simples'"""
    parts = [
        f"{count}x {TIER_LABELS[weight]}"
        for weight, count in ((3, _count(triple)), (2, _count(double)), (1, _count(single)))
        if count > 0
    ]
    return " + ".join(parts) if parts else "sem parcelas"
