"""
humanize_duration: millisecond durations as human-readable, localized phrases.

    >>> from humanize_duration import humanize_duration, humanizer
    >>> humanize_duration(363000)
    '6 minutes, 3 seconds'
    >>> h = humanizer(language="es", round=True)
    >>> h(3692131200000, largest=2)
    '117 años'
"""

# Standard library -----------------------------------------------------------------------------------------------------
from importlib.metadata import PackageNotFoundError, version as metadata_version

# Local ----------------------------------------------------------------------------------------------------------------
from .config import DEFAULT_CONFIG, HumanizerConfig, load_config
from .decompose import Piece, decompose
from .humanizer import Humanizer, humanize_duration, humanizer
from .languages import (
    BUILTIN_LANGUAGES,
    LanguageNotFoundError,
    LanguageRegistry,
    MissingRendererError,
    get_supported_languages,
)
from .render import format_count, join_pieces, render_pieces
from .units import DEFAULT_UNITS, UNIT_MEASURES, Unit

try:
    __version__ = metadata_version("humanize-duration")
except PackageNotFoundError:
    # Source tree without an installed distribution
    __version__ = "0.0.0"

__all__ = [
    'BUILTIN_LANGUAGES',
    'DEFAULT_CONFIG',
    'DEFAULT_UNITS',
    'Humanizer',
    'HumanizerConfig',
    'LanguageNotFoundError',
    'LanguageRegistry',
    'MissingRendererError',
    'Piece',
    'UNIT_MEASURES',
    'Unit',
    'decompose',
    'format_count',
    'get_supported_languages',
    'humanize_duration',
    'humanizer',
    'join_pieces',
    'load_config',
    'render_pieces',
]
