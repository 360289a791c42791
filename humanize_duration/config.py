"""
Humanizer configuration: defaults, layered overrides and TOML loading.

Effective options for one call are resolved in three layers:

    DEFAULT_CONFIG  <-  humanizer defaults  <-  call-time overrides

Each layer is a frozen HumanizerConfig; HumanizerConfig.merge() builds the
next one and never mutates the receiver. The overlay is per field, except
unit_measures, which overlays per unit key.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace as dataclasses_replace
from typing import Any

# Third-party ----------------------------------------------------------------------------------------------------------
import toml

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import UNSET, UnsetType
from .units import DEFAULT_UNITS, UNIT_MEASURES, Unit, merge_unit_measures, sort_units


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class HumanizerConfig:
    """
    Options controlling how a duration is split into pieces and rendered.

    Attributes:
        units: Units the output may use; always stored largest first.
        unit_measures: Milliseconds per unit, one entry per Unit.
        language: Key of the language table used for labels.
        fallbacks: Language keys tried in order when language is not registered.
        round: Round the smallest unit and carry into larger units.
        largest: Maximum number of pieces to output, None for no limit.
        delimiter: Separator between pieces.
        spacer: Separator between a count and its label.
        conjunction: Inserted before the last piece when set, e.g. " and ".
        serial_comma: Keep the delimiter before the conjunction for 3+ pieces.
        decimal: Radix separator; None uses the language's own separator.
        max_decimal_points: Truncate fractional counts to this many decimals.
    """
    units: tuple[Unit, ...] = DEFAULT_UNITS
    unit_measures: Mapping[Unit, int | float] = field(default_factory=lambda: UNIT_MEASURES)
    language: str = "en"
    fallbacks: tuple[str, ...] = ()
    round: bool = False
    largest: int | None = None
    delimiter: str = ", "
    spacer: str = " "
    conjunction: str | None = None
    serial_comma: bool = True
    decimal: str | None = None
    max_decimal_points: int | None = None

    def __post_init__(self):
        object.__setattr__(self, 'units', sort_units(self.units))
        if not isinstance(self.unit_measures, Mapping):
            raise TypeError(f"unit_measures must be a mapping, got {_type_name(self.unit_measures)}")
        object.__setattr__(self, 'unit_measures', merge_unit_measures(UNIT_MEASURES, self.unit_measures))

        fallbacks = (self.fallbacks,) if isinstance(self.fallbacks, str) else tuple(self.fallbacks)
        object.__setattr__(self, 'fallbacks', fallbacks)

        self._validate_strings()
        self._validate_flags()
        self._validate_counts()

    def merge(self,
              units: Any = UNSET,
              unit_measures: Mapping[Unit | str, int | float] | UnsetType = UNSET,
              language: str | UnsetType = UNSET,
              fallbacks: Any = UNSET,
              round: bool | UnsetType = UNSET,
              largest: int | None | UnsetType = UNSET,
              delimiter: str | UnsetType = UNSET,
              spacer: str | UnsetType = UNSET,
              conjunction: str | None | UnsetType = UNSET,
              serial_comma: bool | UnsetType = UNSET,
              decimal: str | None | UnsetType = UNSET,
              max_decimal_points: int | None | UnsetType = UNSET,
              ) -> "HumanizerConfig":
        """
        Create a new HumanizerConfig with the given options overlaid.

        Parameters not provided (UNSET) are inherited from the current instance.
        unit_measures overlays per unit key: units not named keep this
        config's factors.

        Returns:
            New validated HumanizerConfig.

        Raises:
            TypeError, ValueError: If an overridden option is invalid.
        """
        changes = {
            'units': units,
            'language': language,
            'fallbacks': fallbacks,
            'round': round,
            'largest': largest,
            'delimiter': delimiter,
            'spacer': spacer,
            'conjunction': conjunction,
            'serial_comma': serial_comma,
            'decimal': decimal,
            'max_decimal_points': max_decimal_points,
        }
        changes = {name: value for name, value in changes.items() if value is not UNSET}
        if unit_measures is not UNSET:
            if not isinstance(unit_measures, Mapping):
                raise TypeError(f"unit_measures must be a mapping, got {_type_name(unit_measures)}")
            changes['unit_measures'] = merge_unit_measures(self.unit_measures, unit_measures)
        if not changes:
            return self
        return dataclasses_replace(self, **changes)

    def _validate_strings(self):
        for name in ('language', 'delimiter', 'spacer'):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"{name} must be str, but got {_type_name(value)}")
        for name in ('conjunction', 'decimal'):
            value = getattr(self, name)
            if not isinstance(value, (str, type(None))):
                raise TypeError(f"{name} must be str | None, but got {_type_name(value)}")
        for key in self.fallbacks:
            if not isinstance(key, str):
                raise TypeError(f"fallbacks must contain str language keys, but got {_type_name(key)}")

    def _validate_flags(self):
        for name in ('round', 'serial_comma'):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise TypeError(f"{name} must be bool, but got {_type_name(value)}")

    def _validate_counts(self):
        if self.largest is not None:
            if isinstance(self.largest, bool) or not isinstance(self.largest, int):
                raise TypeError(f"largest must be int | None, but got {_type_name(self.largest)}")
            if self.largest < 1:
                raise ValueError(f"largest must be >= 1, got {self.largest}")

        if self.max_decimal_points is not None:
            if isinstance(self.max_decimal_points, bool) or not isinstance(self.max_decimal_points, int):
                raise TypeError(f"max_decimal_points must be int | None, but got {_type_name(self.max_decimal_points)}")
            if self.max_decimal_points < 0:
                raise ValueError(f"max_decimal_points must be >= 0, got {self.max_decimal_points}")


DEFAULT_CONFIG = HumanizerConfig()

CONFIG_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(HumanizerConfig))
OPTION_NAMES: frozenset[str] = frozenset(CONFIG_FIELDS) | {'languages'}


# Methods --------------------------------------------------------------------------------------------------------------

def load_config(path: str | os.PathLike[str], section: str | None = "humanizer") -> dict[str, Any]:
    """
    Read humanizer options from a TOML file.

    Options live in the [humanizer] table by default, or at the top level when
    section is None. Languages may be declared as nested tables of string
    labels, which apply to every count:

        [humanizer]
        language = "short"
        units = ["h", "m"]

        [humanizer.languages.short]
        h = "h"
        m = "min"

    Returns:
        Option dict suitable for Humanizer(**options).

    Raises:
        FileNotFoundError: If path does not exist.
        toml.TomlDecodeError: If the file is not valid TOML.
        ValueError: If the section is missing or holds unknown options.
    """
    with open(path, encoding="utf-8") as f:
        data = toml.load(f)

    if section is not None:
        if section not in data:
            raise ValueError(f"no [{section}] table in {os.fspath(path)!r}")
        data = data[section]
    if not isinstance(data, dict):
        raise ValueError(f"[{section}] in {os.fspath(path)!r} must be a table, got {_type_name(data)}")

    unknown = sorted(set(data) - OPTION_NAMES)
    if unknown:
        raise ValueError(f"unknown humanizer options {unknown} in {os.fspath(path)!r}")
    return dict(data)


def _type_name(value: Any) -> str:
    return f"<{type(value).__name__}: {value!r}>"
