from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

Amount = Union[Decimal, int, str, float]

# Money amounts stay below 10^16 and keep at most cents
MAX_AMOUNT_ADJUSTED_EXPONENT = 15
AMOUNT_DECIMAL_PLACES = 2

CENTS = Decimal('0.01')


def to_decimal(amount: Amount) -> Decimal:
    """Coerce an amount to Decimal"""
    if isinstance(amount, Decimal):
        return amount
    # Go through str so that 0.1 stays 0.1
    return Decimal(str(amount))


def decimal_places(value: Decimal) -> int:
    """Number of significant digits after the decimal point"""
    _, digits, exponent = value.as_tuple()
    # Trailing zeros (1.500) don't count
    while exponent < 0 and digits and digits[-1] == 0:
        digits = digits[:-1]
        exponent += 1
    return max(0, -exponent)


def to_amount(amount: Amount, places: Optional[int] = AMOUNT_DECIMAL_PLACES) -> Optional[Decimal]:
    """
    Coerce an amount to a finite Decimal within the money bounds.

    Returns None for unparseable, NaN/infinite or oversized values, and for
    values with more than ``places`` decimal places (``places=None`` skips
    that check).
    """
    try:
        value = to_decimal(amount)
    except (InvalidOperation, ValueError, TypeError):
        return None

    if not value.is_finite():
        return None
    if value and value.adjusted() > MAX_AMOUNT_ADJUSTED_EXPONENT:
        return None
    if places is not None and decimal_places(value) > places:
        return None
    return value


def format_currency(amount: Decimal) -> str:
    """Format money"""
    return f"€{amount.quantize(CENTS, rounding=ROUND_HALF_UP)}"


def parse_amount(text: Optional[str]) -> Optional[Decimal]:
    """Parse user input into a non-negative amount, None if invalid"""
    if text is None:
        return None
    value = to_amount(text.strip())
    if value is None or value < 0:
        return None
    return value
