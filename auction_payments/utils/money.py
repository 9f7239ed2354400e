"""Money helpers - Decimal parsing, rounding and BRL formatting"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from auction_payments.config import settings
from auction_payments.domain.exceptions import InvalidAmountError

CENT = Decimal("0.01")

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """Convert to Decimal; floats go through str() so 0.1 stays 0.1"""
    if isinstance(value, Decimal):
        return value
    try:
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidAmountError(f"Not a valid amount: {value!r}") from e


def quantize_cents(value: Number) -> Decimal:
    """Round half-up to 2 decimal places"""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def parse_brl(value: str | None) -> Decimal:
    """
    Parse user-entered currency text into a Decimal.

    Accepts:
    - "R$ 1.234,56" (comma is the decimal separator, dots are thousands)
    - "1234.56"     (1-2 digits after the last dot: decimal point)
    - "1.234"       (3+ digits after the last dot: thousands separator)
    - ""            -> 0

    Unparsable text yields 0, like the form inputs this backs.
    """
    if not value:
        return Decimal("0")

    cleaned = value.replace("R$", "").replace("\xa0", "").replace(" ", "").strip()
    if not cleaned:
        return Decimal("0")

    if "," in cleaned:
        cleaned = cleaned.replace(".", "").replace(",", ".", 1)
    elif "." in cleaned:
        last_group = cleaned.rsplit(".", 1)[1]
        if len(last_group) >= 3:
            cleaned = cleaned.replace(".", "")

    try:
        return Decimal(cleaned)
    except InvalidOperation:
        return Decimal("0")


def format_brl(value: Number) -> str:
    """Format as Brazilian currency, e.g. R$ 1.234,56"""
    amount = quantize_cents(value)
    sign = "-" if amount < 0 else ""
    # Swap US separators for pt-BR ones
    body = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{settings.currency_symbol} {body}"
