from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

CURRENCY_SYMBOL = "Rs"


def format_pkr(amount: Optional[Union[int, float, Decimal, str]]) -> str:
    """Pakistani Rupee with thousands grouping and no fractional digits."""
    if amount is None or amount == "":
        amount = 0
    value = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL} {abs(value):,.0f}"
