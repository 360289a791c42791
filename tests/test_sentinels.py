#
# Sentinels Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import pickle

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from humanize_duration.sentinels import UNSET, UnsetType, ifunset


# Tests ----------------------------------------------------------------------------------------------------------------

class TestUnset:
    def test_singleton_identity(self):
        assert UNSET is UnsetType()

    def test_repr_clean(self):
        assert repr(UNSET) == "<UNSET>"

    def test_falsy(self):
        assert bool(UNSET) is False

    def test_distinct_from_none(self):
        assert UNSET is not None
        assert UNSET != None  # noqa: E711

    def test_pickle_roundtrip(self):
        assert pickle.loads(pickle.dumps(UNSET)) is UNSET

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            pytest.param(UNSET, "fallback", id="unset"),
            pytest.param(None, None, id="none-kept"),
            pytest.param(0, 0, id="falsy-kept"),
            pytest.param("x", "x", id="value-kept"),
        ],
    )
    def test_ifunset(self, value, expected):
        assert ifunset(value, default="fallback") == expected
