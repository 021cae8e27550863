"""Amount parsing and miliunit conversion utilities."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re

from pocketbook.domain.errors import ValidationError

MILIUNITS_PER_UNIT = 1000


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValidationError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValidationError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = re.sub(r"[$€£¥]|R\$", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValidationError(f"Could not parse amount '{amount_str}'") from e
    if not amount.is_finite():
        raise ValidationError(f"Amount must be a finite number, got '{amount_str}'")
    return -amount if is_negative else amount


def convert_amount_to_miliunits(amount: Decimal | int | float) -> int:
    """Convert a currency amount to integer miliunits, rounding half up."""
    try:
        scaled = Decimal(str(amount)) * MILIUNITS_PER_UNIT
        return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    except (InvalidOperation, ValueError, OverflowError) as e:
        raise ValidationError(f"Amount out of range: {amount}") from e


def convert_amount_from_miliunits(amount: int) -> Decimal:
    """Convert integer miliunits back to a currency amount."""
    return Decimal(amount) / MILIUNITS_PER_UNIT


def format_miliunits(amount: int) -> str:
    """Format miliunits as a currency string, e.g. ``-$1,234.50``."""
    value = convert_amount_from_miliunits(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"
