#
# Duration Units Table
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from collections.abc import Iterable, Mapping
from enum import StrEnum, unique
from types import MappingProxyType


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Unit(StrEnum):
    """
    Duration units, declared in strictly descending order of magnitude.

    Values are the canonical short keys used in unit lists, unit measures and
    language tables. Unit() also accepts short keys in any case ("MS") and
    long names such as "year" or "Minutes", resolving to the same member.
    """
    YEAR = "y"
    MONTH = "mo"
    WEEK = "w"
    DAY = "d"
    HOUR = "h"
    MINUTE = "m"
    SECOND = "s"
    MILLISECOND = "ms"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            name = value.strip().lower()
            for member in cls:
                if member.value == name:
                    return member
            return _LONG_NAMES.get(name) or _LONG_NAMES.get(name.removesuffix("s"))
        return None

    @property
    def rank(self) -> int:
        """Position in the canonical order, 0 for years."""
        return _RANKS[self]


# @formatter:off

_LONG_NAMES = {
    "year": Unit.YEAR, "month": Unit.MONTH, "week": Unit.WEEK, "day": Unit.DAY,
    "hour": Unit.HOUR, "minute": Unit.MINUTE, "second": Unit.SECOND, "millisecond": Unit.MILLISECOND,
}

_RANKS = {unit: rank for rank, unit in enumerate(Unit)}

# Milliseconds per unit; months and years are averages over the Julian year
UNIT_MEASURES: Mapping[Unit, int | float] = MappingProxyType({
    Unit.YEAR: 31557600000,
    Unit.MONTH: 2629800000,
    Unit.WEEK: 604800000,
    Unit.DAY: 86400000,
    Unit.HOUR: 3600000,
    Unit.MINUTE: 60000,
    Unit.SECOND: 1000,
    Unit.MILLISECOND: 1,
})

DEFAULT_UNITS: tuple[Unit, ...] = (
    Unit.YEAR, Unit.MONTH, Unit.WEEK, Unit.DAY, Unit.HOUR, Unit.MINUTE, Unit.SECOND,
)

# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def to_unit(key: "Unit | str") -> Unit:
    """
    Normalize a unit key to a Unit member.

    Raises:
        TypeError: If key is not a string.
        ValueError: If key names no known unit.

    Examples:
        >>> to_unit("mo")
        <Unit.MONTH: 'mo'>
        >>> to_unit("Minutes")
        <Unit.MINUTE: 'm'>
    """
    if isinstance(key, Unit):
        return key
    if not isinstance(key, str):
        raise TypeError(f"unit key must be str, got {type(key).__name__}: {key!r}")
    try:
        return Unit(key)
    except ValueError:
        valid = ", ".join(repr(u.value) for u in Unit)
        raise ValueError(f"unknown unit {key!r}, expected one of {valid}") from None


def sort_units(units: Iterable["Unit | str"]) -> tuple[Unit, ...]:
    """
    Normalize a collection of unit keys into canonical descending order.

    Caller order is ignored and duplicates collapse, so ("s", "h", "s") and
    ("h", "s") select the same units.

    Raises:
        ValueError: If no units are given or a key is unknown.
    """
    if isinstance(units, str):
        units = [units]
    selected = {to_unit(key) for key in units}
    if not selected:
        raise ValueError("units must name at least one unit")
    return tuple(sorted(selected, key=lambda unit: unit.rank))


def merge_unit_measures(
        base: Mapping["Unit | str", int | float],
        overrides: Mapping["Unit | str", int | float] | None = None,
) -> Mapping[Unit, int | float]:
    """
    Overlay unit measure overrides on a base table, key by key.

    Units missing from overrides keep their base factor, so {"d": 28800000}
    only redefines the day.

    Returns:
        A read-only mapping covering every Unit.

    Raises:
        TypeError: If a factor is not a real number.
        ValueError: If a factor is not finite and positive, a key is unknown, or
            the factors do not strictly decrease from years to milliseconds.
    """
    merged = {to_unit(key): value for key, value in base.items()}
    for key, value in (overrides or {}).items():
        merged[to_unit(key)] = value

    missing = [unit.value for unit in Unit if unit not in merged]
    if missing:
        raise ValueError(f"unit measures missing for {missing}")

    for unit, value in merged.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"unit measure for {unit.value!r} must be int | float, got {type(value).__name__}")
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"unit measure for {unit.value!r} must be finite and positive, got {value!r}")

    for larger, smaller in zip(Unit, list(Unit)[1:]):
        if merged[larger] <= merged[smaller]:
            raise ValueError(f"unit measures must strictly decrease from years to milliseconds, "
                             f"but {larger.value!r} = {merged[larger]!r} <= {smaller.value!r} = {merged[smaller]!r}")

    return MappingProxyType({unit: merged[unit] for unit in Unit})


# Module Sanity Checks -------------------------------------------------------------------------------------------------

if any(UNIT_MEASURES[a] <= UNIT_MEASURES[b] for a, b in zip(Unit, list(Unit)[1:])):
    raise AssertionError("Configuration Error: UNIT_MEASURES must strictly decrease from years to milliseconds.")
