from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Optional, Union

Number = Union[int, float]

class DiscountMode(str, Enum):
    PERCENT = "percent"
    AMOUNT = "amount"

def round_half_up(value: Number) -> int:
    """Round half away from zero (Python's round() is banker's rounding)."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def final_price(
    original: Optional[Number] = None,
    discount: Optional[Number] = None,
    mode: Union[DiscountMode, str] = DiscountMode.AMOUNT,
) -> Optional[Number]:
    """
    Price after discount, floored at 0.

    Returns None when the original price is unknown. Percent discounts are
    rounded to whole units, amount discounts are subtracted as-is.
    """
    if original is None:
        return None
    if not discount:
        return original

    if DiscountMode(mode) == DiscountMode.PERCENT:
        return max(0, round_half_up(original * (1 - discount / 100)))
    return max(0, original - discount)

def savings(
    original: Optional[Number] = None,
    final: Optional[Number] = None,
    quantity: int = 1,
) -> Number:
    if original is None or final is None:
        return 0
    return max(0, (original - final) * quantity)
