#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pathlib
from typing import Callable

import pytest


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def terse_language() -> dict:
    """Language table with one-letter labels and no pluralization."""
    return {
        "y": lambda count: "y",
        "mo": lambda count: "mo",
        "w": lambda count: "w",
        "d": lambda count: "d",
        "h": lambda count: "h",
        "m": lambda count: "m",
        "s": lambda count: "s",
        "ms": lambda count: "ms",
    }


@pytest.fixture
def toml_file(tmp_path: pathlib.Path) -> Callable[[str], pathlib.Path]:
    """Fixture to write a TOML config file with the given content."""

    def _create_file(content: str) -> pathlib.Path:
        file_path = tmp_path / "humanizer.toml"
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _create_file
