"""Numeric wrappers for currency amounts and rates.

Every amount in the engine is a ``Decimal`` tagged as ``Money`` (Naira) or
``Rate`` (a fraction, 0.15 means 15%). Build them with ``to_money`` and
``to_rate`` rather than calling ``Decimal`` directly: the factories route
floats through ``str()`` so 0.1 stays 0.1, and they turn anything that is
not a finite number into zero instead of raising.
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import NewType, Union

Money = NewType("Money", Decimal)
Rate = NewType("Rate", Decimal)

AmountLike = Union[Decimal, int, float, str, None]

ZERO = Money(Decimal("0"))
MONTHS_PER_YEAR = 12
QUARTERS_PER_YEAR = 4
DAYS_PER_YEAR = 365


def _to_decimal(value: AmountLike) -> Decimal:
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        number = value
    else:
        text = str(value).strip().replace(",", "")
        if not text:
            return Decimal("0")
        try:
            number = Decimal(text)
        except InvalidOperation:
            return Decimal("0")
    if not number.is_finite():
        return Decimal("0")
    return number


def to_money(value: AmountLike) -> Money:
    """Coerce user-facing input into a Naira amount (unparseable -> 0)."""
    return Money(_to_decimal(value))


def to_rate(value: AmountLike) -> Rate:
    return Rate(_to_decimal(value))
