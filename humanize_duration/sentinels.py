"""
Sentinel for option arguments that were not passed at all.

Several humanizer options accept None as a meaningful value (no conjunction,
unbounded largest, language decimal), so "not given" needs its own marker.
UNSET uses identity checks (`is`) and is falsy.

Example:
    >>> def render(ms, largest: int | None | UnsetType = UNSET):
    ...     largest = ifunset(largest, default=config.largest)
"""

from typing import Any, Final

__all__ = [
    'UNSET',
    'UnsetType',
    'ifunset',
]


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Sentinel type for UNSET.

    Marks an optional argument the caller did not provide, as opposed to None.
    """
    __slots__ = ()

    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


UNSET: Final[UnsetType] = UnsetType()


# Methods --------------------------------------------------------------------------------------------------------------

def ifunset(value: Any, *, default: Any) -> Any:
    """Return default if value is UNSET, otherwise return value."""
    return default if value is UNSET else value
