"""
Monetary amount normalization.

Amounts are truncated to whole cents before reaching the account
service so fractional cents are never credited or debited.
"""

from decimal import ROUND_FLOOR, Decimal, InvalidOperation

from app.domain.accounts.errors import InvalidAmountError

CENT = Decimal("0.01")


def truncate_to_cents(amount: Decimal) -> Decimal:
    """Return floor(amount * 100) / 100 computed in decimal arithmetic.

    Never rounds up and never rejects sub-cent input:
    10.005 becomes 10.00 and -5.999 becomes -6.00.

    Args:
        amount: The raw monetary amount.

    Returns:
        The amount quantized to two decimal places.

    Raises:
        InvalidAmountError: If the amount is NaN, infinite, or too large
            to be represented with two decimal places.
    """
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be a finite number, got {amount}")
    try:
        return amount.quantize(CENT, rounding=ROUND_FLOOR)
    except InvalidOperation:
        raise InvalidAmountError(f"Amount is out of range: {amount}") from None
