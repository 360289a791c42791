"""
Humanizer: a configurable, callable duration formatter.

A Humanizer keeps its own default options and its own language registry.
Options can be changed by plain attribute assignment; call-time keyword
overrides apply to that call only.

Example:
    >>> h = Humanizer(conjunction=" and ")
    >>> h(10874000)
    '3 hours, 1 minute, and 14 seconds'
    >>> h.delimiter = "+"
    >>> h(363000, conjunction=None)
    '6 minutes+3 seconds'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import os
from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .config import DEFAULT_CONFIG, HumanizerConfig, load_config
from .languages import BUILTIN_LANGUAGES, Language, LanguageRegistry, require_units
from .decompose import decompose
from .render import render_pieces
from .units import Unit

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

class Humanizer:
    """
    Convert millisecond durations into phrases like "6 minutes, 3 seconds".

    Construction clones the built-in languages into a private registry, merges
    the languages option into it per language key, and overlays the remaining
    options on DEFAULT_CONFIG. Every option is then available as an attribute:
    assigning one affects later calls of this humanizer only.

    Assignment replaces the whole frozen config, so a call running at the same
    time sees either the old options or the new ones.

    Args:
        languages: Extra or replacement language tables, merged per key.
        **options: Any HumanizerConfig field (units, unit_measures, language,
            fallbacks, round, largest, delimiter, spacer, conjunction,
            serial_comma, decimal, max_decimal_points).

    Raises:
        TypeError, ValueError: If an option is invalid.
    """

    name = "humanizer"

    def __init__(self, *, languages: Mapping[str, Language] | None = None, **options: Any) -> None:
        self._languages = LanguageRegistry(BUILTIN_LANGUAGES).merged(languages)
        self._config = DEFAULT_CONFIG.merge(**options)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str], section: str | None = "humanizer") -> Self:
        """Create a humanizer from options stored in a TOML file, see load_config()."""
        return cls(**load_config(path, section=section))

    def __call__(self, ms: int | float | timedelta, **overrides: Any) -> str:
        return self.render(ms, **overrides)

    def __repr__(self) -> str:
        units = [unit.value for unit in self._config.units]
        return f"Humanizer(language={self._config.language!r}, units={units!r})"

    @property
    def config(self) -> HumanizerConfig:
        """Current default options as a frozen HumanizerConfig."""
        return self._config

    @property
    def languages(self) -> LanguageRegistry:
        """This humanizer's language registry; edits affect only this instance."""
        return self._languages

    @languages.setter
    def languages(self, value: Mapping[str, Language]) -> None:
        self._languages = LanguageRegistry(value)

    @property
    def units(self) -> tuple[Unit, ...]:
        return self._config.units

    @units.setter
    def units(self, value) -> None:
        self._config = self._config.merge(units=value)

    @property
    def unit_measures(self) -> Mapping[Unit, int | float]:
        """Milliseconds per unit. Assigning a mapping redefines only the units it names."""
        return self._config.unit_measures

    @unit_measures.setter
    def unit_measures(self, value: Mapping[Unit | str, int | float]) -> None:
        self._config = self._config.merge(unit_measures=value)

    @property
    def language(self) -> str:
        return self._config.language

    @language.setter
    def language(self, value: str) -> None:
        self._config = self._config.merge(language=value)

    @property
    def fallbacks(self) -> tuple[str, ...]:
        return self._config.fallbacks

    @fallbacks.setter
    def fallbacks(self, value) -> None:
        self._config = self._config.merge(fallbacks=value)

    @property
    def round(self) -> bool:
        return self._config.round

    @round.setter
    def round(self, value: bool) -> None:
        self._config = self._config.merge(round=value)

    @property
    def largest(self) -> int | None:
        return self._config.largest

    @largest.setter
    def largest(self, value: int | None) -> None:
        self._config = self._config.merge(largest=value)

    @property
    def delimiter(self) -> str:
        return self._config.delimiter

    @delimiter.setter
    def delimiter(self, value: str) -> None:
        self._config = self._config.merge(delimiter=value)

    @property
    def spacer(self) -> str:
        return self._config.spacer

    @spacer.setter
    def spacer(self, value: str) -> None:
        self._config = self._config.merge(spacer=value)

    @property
    def conjunction(self) -> str | None:
        return self._config.conjunction

    @conjunction.setter
    def conjunction(self, value: str | None) -> None:
        self._config = self._config.merge(conjunction=value)

    @property
    def serial_comma(self) -> bool:
        return self._config.serial_comma

    @serial_comma.setter
    def serial_comma(self, value: bool) -> None:
        self._config = self._config.merge(serial_comma=value)

    @property
    def decimal(self) -> str | None:
        return self._config.decimal

    @decimal.setter
    def decimal(self, value: str | None) -> None:
        self._config = self._config.merge(decimal=value)

    @property
    def max_decimal_points(self) -> int | None:
        return self._config.max_decimal_points

    @max_decimal_points.setter
    def max_decimal_points(self, value: int | None) -> None:
        self._config = self._config.merge(max_decimal_points=value)

    def render(self, ms: int | float | timedelta, **overrides: Any) -> str:
        """
        Humanize a duration.

        Args:
            ms: Duration in milliseconds, or a timedelta. Negative durations
                render as their magnitude.
            **overrides: Options for this call only, same names as the
                constructor. A languages override merges per key into a copy
                of this humanizer's registry.

        Returns:
            The humanized duration, e.g. "6 days, 6 hours".

        Raises:
            LanguageNotFoundError: If the language (and fallbacks) is not registered.
            MissingRendererError: If the language lacks a renderer for a selected unit.
            TypeError, ValueError: If ms or an override is invalid.
        """
        languages = overrides.pop('languages', None)
        config = self._config.merge(**overrides)
        registry = self._languages if languages is None else self._languages.merged(languages)

        key, language = registry.resolve(config.language, config.fallbacks)
        require_units(language, config.units, name=key)
        logger.debug("Humanizing %r ms in %r over units %s", ms, key, [unit.value for unit in config.units])

        pieces = decompose(ms, config)
        return render_pieces(pieces, config, language, name=key)


# Methods --------------------------------------------------------------------------------------------------------------

def humanizer(**options: Any) -> Humanizer:
    """Create a Humanizer with the given default options."""
    return Humanizer(**options)


def humanize_duration(ms: int | float | timedelta, **options: Any) -> str:
    """
    Humanize a duration with the library defaults and the given options.

    Examples:
        >>> humanize_duration(1000)
        '1 second'
        >>> humanize_duration(540360012, largest=2)
        '6 days, 6 hours'
    """
    return Humanizer().render(ms, **options)
