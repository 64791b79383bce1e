from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

NAIRA = "₦"


def format_naira(amount: Decimal, places: int = 2) -> str:
    exponent = Decimal(1).scaleb(-places)
    q = Decimal(amount).quantize(exponent, rounding=ROUND_HALF_UP)
    return f"{NAIRA}{q:,}"


def whole_naira(amount: Decimal) -> str:
    return format_naira(amount, places=0)
