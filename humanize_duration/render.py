#
# Piece Rendering and Joining
#

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import Mapping, Sequence
from decimal import Decimal

# Local ----------------------------------------------------------------------------------------------------------------
from .config import HumanizerConfig
from .decompose import Piece, truncate_decimals
from .languages import DECIMAL_KEY, unit_label


# Methods --------------------------------------------------------------------------------------------------------------

def format_count(value: int | float, decimal: str = ".", max_decimal_points: int | None = None) -> str:
    """
    Format a piece count, substituting decimal for the radix point.

    Whole numbers render without a fractional part. Fractions are written
    positionally, never in exponent notation, and are cut to
    max_decimal_points when it is set.

    Examples:
        >>> format_count(6)
        '6'
        >>> format_count(1.234, decimal=",")
        '1,234'
        >>> format_count(0.019, max_decimal_points=2)
        '0.01'
        >>> format_count(1e-05)
        '0.00001'
    """
    value = _display_value(value, max_decimal_points)
    if isinstance(value, float):
        return format(Decimal(repr(value)), "f").replace(".", decimal)
    return str(value).replace(".", decimal)


def render_piece(
        piece: Piece,
        language: Mapping,
        *,
        spacer: str = " ",
        decimal: str = ".",
        max_decimal_points: int | None = None,
        name: str | None = None,
) -> str:
    """
    Render one piece as count, spacer and unit label.

    The language renderer receives the count as displayed, so agreement
    follows what the reader sees.

    Raises:
        MissingRendererError: If the language has no renderer for piece.unit.
    """
    value = _display_value(piece.value, max_decimal_points)
    label = unit_label(language, piece.unit, value, name=name)
    return f"{format_count(value, decimal)}{spacer}{label}"


def join_pieces(
        parts: Sequence[str],
        delimiter: str = ", ",
        conjunction: str | None = None,
        serial_comma: bool = True,
) -> str:
    """
    Join rendered pieces into the final phrase.

    With a conjunction, the last part is attached with delimiter + conjunction
    for three or more parts when serial_comma is set, or with the bare
    conjunction otherwise.

    Examples:
        >>> join_pieces(["3 hours", "1 minute", "14 seconds"], conjunction=" and ")
        '3 hours, 1 minute, and 14 seconds'
        >>> join_pieces(["3 days", "14 minutes"], conjunction=" and ")
        '3 days and 14 minutes'
    """
    if not parts:
        raise ValueError("cannot join an empty sequence of pieces")
    if len(parts) == 1:
        return parts[0]
    if not conjunction:
        return delimiter.join(parts)

    head = delimiter.join(parts[:-1])
    if len(parts) > 2 and serial_comma:
        return f"{head}{delimiter}{conjunction}{parts[-1]}"
    return f"{head}{conjunction}{parts[-1]}"


def render_pieces(
        pieces: Sequence[Piece],
        config: HumanizerConfig,
        language: Mapping,
        *,
        name: str | None = None,
) -> str:
    """
    Render decomposed pieces with the options of config.

    The radix separator is config.decimal when set, else the language's own
    "decimal" entry, else ".".
    """
    decimal = config.decimal if config.decimal is not None else language.get(DECIMAL_KEY, ".")
    parts = [
        render_piece(piece, language,
                     spacer=config.spacer,
                     decimal=decimal,
                     max_decimal_points=config.max_decimal_points,
                     name=name)
        for piece in pieces
    ]
    return join_pieces(parts,
                       delimiter=config.delimiter,
                       conjunction=config.conjunction,
                       serial_comma=config.serial_comma)


# Private methods ------------------------------------------------------------------------------------------------------

def _display_value(value: int | float, max_decimal_points: int | None) -> int | float:
    if max_decimal_points is not None:
        value = truncate_decimals(value, max_decimal_points)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
