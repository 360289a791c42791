"""
Language tables and per-instance language registries.

A language maps every unit key to a renderer: a function taking the count and
returning the unit label in the right grammatical form, or a plain string used
for any count. An optional "decimal" entry sets the radix separator that the
language uses when no explicit decimal option is given.

Each Humanizer owns a LanguageRegistry cloned from BUILTIN_LANGUAGES. Clones
copy every language table, so editing one registry never leaks into another.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from types import MappingProxyType
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .units import Unit, to_unit

logger = logging.getLogger(__name__)

Renderer = Callable[[int | float], str] | str
Language = Mapping[str, Renderer]

DECIMAL_KEY = "decimal"


# Exceptions -----------------------------------------------------------------------------------------------------------

class LanguageNotFoundError(LookupError):
    """No language registered under the requested key or any of its fallbacks."""

    def __init__(self, language: str, fallbacks: Iterable[str] = ()):
        self.language = language
        self.fallbacks = tuple(fallbacks)
        message = f"no language registered for {language!r}"
        if self.fallbacks:
            message += f" or fallbacks {list(self.fallbacks)!r}"
        super().__init__(message)


class MissingRendererError(LookupError):
    """A language table lacks the renderer for a unit it is asked to render."""

    def __init__(self, language: str | None, unit: Unit):
        self.language = language
        self.unit = unit
        super().__init__(f"language {language!r} has no renderer for unit {unit.value!r}")


# Pluralization rules --------------------------------------------------------------------------------------------------

def _english(singular: str) -> Callable[[int | float], str]:
    def render(count: int | float) -> str:
        return singular if count == 1 else f"{singular}s"

    return render


def _spanish(singular: str, plural: str) -> Callable[[int | float], str]:
    def render(count: int | float) -> str:
        return singular if count == 1 else plural

    return render


def _slavic(one: str, few: str, many: str) -> Callable[[int | float], str]:
    """East Slavic agreement: 1 день, 2 дні, 5 днів; fractions take the 'few' form."""

    def render(count: int | float) -> str:
        if count != int(count):
            return few
        count = abs(int(count))
        if count % 10 == 1 and count % 100 != 11:
            return one
        elif count % 10 in [2, 3, 4] and count % 100 not in [12, 13, 14]:
            return few
        else:
            return many

    return render


# @formatter:off

_ENGLISH = {
    Unit.YEAR: _english("year"),
    Unit.MONTH: _english("month"),
    Unit.WEEK: _english("week"),
    Unit.DAY: _english("day"),
    Unit.HOUR: _english("hour"),
    Unit.MINUTE: _english("minute"),
    Unit.SECOND: _english("second"),
    Unit.MILLISECOND: _english("millisecond"),
    DECIMAL_KEY: ".",
}

_SPANISH = {
    Unit.YEAR: _spanish("año", "años"),
    Unit.MONTH: _spanish("mes", "meses"),
    Unit.WEEK: _spanish("semana", "semanas"),
    Unit.DAY: _spanish("día", "días"),
    Unit.HOUR: _spanish("hora", "horas"),
    Unit.MINUTE: _spanish("minuto", "minutos"),
    Unit.SECOND: _spanish("segundo", "segundos"),
    Unit.MILLISECOND: _spanish("milisegundo", "milisegundos"),
    DECIMAL_KEY: ",",
}

_UKRAINIAN = {
    Unit.YEAR: _slavic("рік", "роки", "років"),
    Unit.MONTH: _slavic("місяць", "місяці", "місяців"),
    Unit.WEEK: _slavic("тиждень", "тижні", "тижнів"),
    Unit.DAY: _slavic("день", "дні", "днів"),
    Unit.HOUR: _slavic("година", "години", "годин"),
    Unit.MINUTE: _slavic("хвилина", "хвилини", "хвилин"),
    Unit.SECOND: _slavic("секунда", "секунди", "секунд"),
    Unit.MILLISECOND: _slavic("мілісекунда", "мілісекунди", "мілісекунд"),
    DECIMAL_KEY: ",",
}

BUILTIN_LANGUAGES: Mapping[str, Language] = MappingProxyType({
    "en": MappingProxyType(_ENGLISH),
    "es": MappingProxyType(_SPANISH),
    "uk": MappingProxyType(_UKRAINIAN),
})

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

class LanguageRegistry(MutableMapping[str, dict]):
    """
    Mutable mapping from language key to language table.

    Every language stored is copied on the way in and its unit keys are
    normalized to Unit members, so the registry never shares a table with the
    mapping it was built from.
    """

    def __init__(self, initial: Mapping[str, Language] | None = None) -> None:
        self._languages: dict[str, dict] = {}
        if initial:
            self.update(initial)

    # ----- MutableMapping required methods -----

    def __getitem__(self, key: str) -> dict:
        return self._languages[key]

    def __setitem__(self, key: str, language: Language) -> None:
        if not isinstance(key, str):
            raise TypeError(f"language key must be str, got {type(key).__name__}: {key!r}")
        self._languages[key] = _copy_language(key, language)

    def __delitem__(self, key: str) -> None:
        del self._languages[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._languages)

    def __len__(self) -> int:
        return len(self._languages)

    def __repr__(self) -> str:
        return f"LanguageRegistry({sorted(self._languages)!r})"

    # ----- Registry operations -----

    def clone(self) -> Self:
        """Return an independent copy, table by table."""
        return type(self)(self._languages)

    def merged(self, other: Mapping[str, Language] | None) -> Self:
        """
        Return a copy with the languages of other merged in per language key.

        Languages not named in other stay available.
        """
        registry = self.clone()
        if other:
            registry.update(other)
        return registry

    def resolve(self, language: str, fallbacks: Iterable[str] = ()) -> tuple[str, dict]:
        """
        Find the table for language, trying fallbacks in order if it is absent.

        Returns:
            The matched key and a private copy of its table.

        Raises:
            LanguageNotFoundError: If neither language nor any fallback is registered.
        """
        fallbacks = tuple(fallbacks)
        for index, key in enumerate((language, *fallbacks)):
            table = self._languages.get(key)
            if table is not None:
                if index:
                    logger.debug("Language %r not registered, falling back to %r", language, key)
                return key, dict(table)
        raise LanguageNotFoundError(language, fallbacks)


# Methods --------------------------------------------------------------------------------------------------------------

def get_supported_languages() -> list[str]:
    """Keys of the built-in languages, sorted."""
    return sorted(BUILTIN_LANGUAGES)


def require_units(language: Mapping[Any, Renderer], units: Iterable[Unit], *, name: str | None = None) -> None:
    """
    Check that a language table can render every one of units.

    Raises:
        MissingRendererError: For the first unit without a renderer.
    """
    for unit in units:
        if language.get(unit) is None:
            raise MissingRendererError(name, unit)


def unit_label(language: Mapping[Any, Renderer], unit: Unit, count: int | float, *, name: str | None = None) -> str:
    """
    Render the label for count units of unit in the given language table.

    Raises:
        MissingRendererError: If the table has no entry for the unit.
    """
    renderer = language.get(unit)
    if renderer is None:
        raise MissingRendererError(name, unit)
    if isinstance(renderer, str):
        return renderer
    return renderer(count)


def _copy_language(key: str, language: Language) -> dict:
    """Copy a language table, normalizing unit keys and checking renderer types."""
    if not isinstance(language, Mapping):
        raise TypeError(f"language {key!r} must be a mapping of unit renderers, got {type(language).__name__}")

    table: dict = {}
    for entry, renderer in language.items():
        if entry == DECIMAL_KEY:
            if not isinstance(renderer, str):
                raise TypeError(f"language {key!r} decimal must be str, got {type(renderer).__name__}")
            table[DECIMAL_KEY] = renderer
            continue
        if not (callable(renderer) or isinstance(renderer, str)):
            raise TypeError(
                f"language {key!r} renderer for {entry!r} must be callable or str, got {type(renderer).__name__}"
            )
        table[to_unit(entry)] = renderer
    return table
