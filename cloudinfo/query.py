"""Query filters over numeric fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _passes(value: Any, flt: Any) -> bool:
    """Return whether the value satisfies every operator set on the filter."""
    if flt.eq is not None and not value == flt.eq:
        return False
    if flt.ne is not None and not value != flt.ne:
        return False
    if flt.lt is not None and not value < flt.lt:
        return False
    if flt.lte is not None and not value <= flt.lte:
        return False
    if flt.gt is not None and not value > flt.gt:
        return False
    if flt.gte is not None and not value >= flt.gte:
        return False
    if flt.in_ is not None and value not in flt.in_:
        return False
    # An exclusion list rejects the members of the inclusion list.
    if flt.nin is not None and flt.in_ is not None and value in flt.in_:
        return False
    return True


@dataclass
class FloatFilter:
    """Query operators for a float field."""

    lt: float | None = None
    lte: float | None = None
    gt: float | None = None
    gte: float | None = None
    eq: float | None = None
    ne: float | None = None
    in_: list[float] | None = None
    nin: list[float] | None = None

    def matches(self, value: float) -> bool:
        """Return whether the value satisfies every operator that is set."""
        return _passes(value, self)


@dataclass
class IntFilter:
    """Query operators for an int field."""

    lt: int | None = None
    lte: int | None = None
    gt: int | None = None
    gte: int | None = None
    eq: int | None = None
    ne: int | None = None
    in_: list[int] | None = None
    nin: list[int] | None = None

    def matches(self, value: int) -> bool:
        """Return whether the value satisfies every operator that is set."""
        return _passes(value, self)


def apply_float_filter(value: float, filter: FloatFilter) -> bool:
    """Return whether a float value passes the filter."""
    return filter.matches(value)


def apply_int_filter(value: int, filter: IntFilter) -> bool:
    """Return whether an int value passes the filter."""
    return filter.matches(value)