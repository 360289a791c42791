#
# Duration Decomposition
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass, replace as dataclasses_replace
from datetime import timedelta
from decimal import Decimal, ROUND_DOWN

# Local ----------------------------------------------------------------------------------------------------------------
from .config import HumanizerConfig
from .units import Unit


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Piece:
    """
    One unit/value pair of a decomposed duration.

    Attributes:
        unit: The unit this piece counts.
        value: Whole count, or a fraction for the smallest unit when not rounding.
        is_last: True for the final piece of the output.
    """
    unit: Unit
    value: int | float
    is_last: bool = False


# Methods --------------------------------------------------------------------------------------------------------------

def decompose(ms: int | float | timedelta, config: HumanizerConfig) -> list[Piece]:
    """
    Split a duration into pieces over the configured units, largest first.

    Every unit except the smallest gets a whole count; the smallest gets the
    fractional remainder, or a rounded count with carry when config.round is
    set. Otherwise the remainder is truncated to config.max_decimal_points.
    Zero pieces are dropped, then only the first config.largest pieces
    are kept. A zero duration yields a single zero piece of the smallest unit.

    Negative durations are decomposed by magnitude: the sign is dropped.

    Args:
        ms: Duration in milliseconds, or a timedelta.
        config: Effective configuration for this call.

    Returns:
        At least one Piece, ordered by descending unit magnitude.

    Raises:
        TypeError: If ms is not a real number or timedelta.
        ValueError: If ms is NaN or infinite.

    Examples:
        >>> [(p.unit.value, p.value) for p in decompose(363000, HumanizerConfig())]
        [('m', 6), ('s', 3)]
    """
    remainder = abs(_to_milliseconds(ms))
    units = config.units
    measures = config.unit_measures

    values: list[int | float] = []
    for index, unit in enumerate(units):
        factor = measures[unit]
        if index == len(units) - 1:
            value = remainder / factor
        else:
            value = math.floor(remainder / factor)
        values.append(value)
        remainder -= value * factor

    if config.round:
        _round_with_carry(values, units, measures, largest=config.largest)
    elif config.max_decimal_points is not None:
        values[-1] = truncate_decimals(values[-1], config.max_decimal_points)

    pieces = [Piece(unit, _whole_as_int(value)) for unit, value in zip(units, values) if value]
    if not pieces:
        pieces = [Piece(units[-1], 0)]

    if config.largest is not None:
        pieces = pieces[:config.largest]

    pieces[-1] = dataclasses_replace(pieces[-1], is_last=True)
    return pieces


def round_half_up(value: int | float) -> int:
    """Round to the nearest integer with halves going up, unlike the builtin round()."""
    return math.floor(value + 0.5)


def truncate_decimals(value: int | float, max_decimal_points: int) -> int | float:
    """
    Cut a count to max_decimal_points decimals without rounding.

    Examples:
        >>> truncate_decimals(0.019, 2)
        0.01
        >>> truncate_decimals(1.999, 0)
        1
    """
    if not isinstance(value, float):
        return value
    exact = Decimal(repr(value))
    if -exact.as_tuple().exponent <= max_decimal_points:
        return _whole_as_int(value)
    quantum = Decimal(1).scaleb(-max_decimal_points)
    return _whole_as_int(float(exact.quantize(quantum, rounding=ROUND_DOWN)))


# Private methods ------------------------------------------------------------------------------------------------------

def _round_with_carry(values: list[int | float], units, measures, largest: int | None = None) -> None:
    """
    Round values in place from the smallest unit up, carrying into larger units.

    A rounded count that is an exact multiple of the next-larger unit moves
    into that unit (60 s → +1 min), and the move can cascade. With largest set,
    counts outside the largest-N window (measured from the first non-zero
    unit) are folded into their larger neighbour before it is rounded.
    """
    first_occupied = next((index for index, value in enumerate(values) if value), 0)

    for index in range(len(values) - 1, -1, -1):
        values[index] = round_half_up(values[index])
        if index == 0:
            break

        ratio = measures[units[index - 1]] / measures[units[index]]
        outside_window = largest is not None and index - first_occupied > largest - 1
        if values[index] % ratio == 0 or outside_window:
            values[index - 1] += values[index] / ratio
            values[index] = 0


def _to_milliseconds(ms: int | float | timedelta) -> int | float:
    if isinstance(ms, timedelta):
        return ms / timedelta(milliseconds=1)
    if isinstance(ms, bool) or not isinstance(ms, (int, float)):
        raise TypeError(f"duration must be int | float | timedelta milliseconds, got {type(ms).__name__}")
    if math.isnan(ms) or math.isinf(ms):
        raise ValueError(f"duration must be finite, got {ms!r}")
    return ms


def _whole_as_int(value: int | float) -> int | float:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
