"""Weight values cross the store boundary as fixed two-decimal text.

The application layer only ever sees floats; ``WeightType`` does the
conversion on every bind and every result row.
"""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import Numeric
from sqlalchemy.types import TypeDecorator

CENTS = Decimal("0.01")


def to_storage(weight: float) -> str:
    """Format a weight with exactly two fractional digits (half away from zero)."""
    # str() first so 135.5 becomes Decimal("135.5"), not its binary expansion
    return str(Decimal(str(weight)).quantize(CENTS, rounding=ROUND_HALF_UP))


def from_storage(value: str | Decimal) -> float:
    return float(Decimal(str(value)))


class WeightType(TypeDecorator):
    impl = Numeric(8, 2)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return Decimal(to_storage(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return from_storage(value)
