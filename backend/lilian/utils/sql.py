"""
SQL utilities for consistent handling of query results.

SQLModel/SQLAlchemy may return aggregate results as plain values or as a
1-tuple/Row, and SQLite hands SUM over NUMERIC back as int or float.
"""
from decimal import Decimal
from typing import Any

CENTS = Decimal("0.01")


def _unwrap(x: Any) -> Any:
    if isinstance(x, (tuple, list)) or hasattr(x, "_mapping"):
        return x[0]
    return x


def scalar_int(x: Any) -> int:
    """Convert COUNT/aggregate result to int. Handles int or 1-tuple/Row."""
    value = _unwrap(x)
    return int(value) if value is not None else 0


def scalar_decimal(x: Any) -> Decimal:
    """Convert a SUM over money columns to a 2-place Decimal; None becomes 0.00."""
    value = _unwrap(x)
    if value is None:
        return Decimal("0.00")
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS)
