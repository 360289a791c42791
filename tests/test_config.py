#
# Humanizer Configuration Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
import toml

# Local ----------------------------------------------------------------------------------------------------------------
from humanize_duration.config import DEFAULT_CONFIG, OPTION_NAMES, HumanizerConfig, load_config
from humanize_duration.units import DEFAULT_UNITS, UNIT_MEASURES, Unit


# Tests ----------------------------------------------------------------------------------------------------------------

class TestHumanizerConfig:

    def test_defaults(self):
        config = DEFAULT_CONFIG
        assert config.units == DEFAULT_UNITS
        assert dict(config.unit_measures) == dict(UNIT_MEASURES)
        assert config.language == "en"
        assert config.fallbacks == ()
        assert config.round is False
        assert config.largest is None
        assert config.delimiter == ", "
        assert config.spacer == " "
        assert config.conjunction is None
        assert config.serial_comma is True
        assert config.decimal is None
        assert config.max_decimal_points is None

    def test_units_sorted(self):
        config = HumanizerConfig(units=["s", "y", "minute"])
        assert config.units == (Unit.YEAR, Unit.MINUTE, Unit.SECOND)

    def test_fallbacks_str(self):
        assert HumanizerConfig(fallbacks="es").fallbacks == ("es",)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.delimiter = "+"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "options, exc_type, match",
        [
            pytest.param({"units": []}, ValueError, "at least one unit", id="empty-units"),
            pytest.param({"units": ["fortnight"]}, ValueError, "unknown unit", id="unknown-unit"),
            pytest.param({"unit_measures": {"s": 0}}, ValueError, "positive", id="zero-measure"),
            pytest.param({"unit_measures": [1000]}, TypeError, "mapping", id="measures-not-mapping"),
            pytest.param({"unit_measures": {"w": 10**12}}, ValueError, "strictly decrease", id="measures-out-of-order"),
            pytest.param({"unit_measures": {"h": 60000}}, ValueError, "'h' = 60000 <= 'm' = 60000", id="measures-equal"),
            pytest.param({"language": None}, TypeError, "language must be str", id="language-none"),
            pytest.param({"delimiter": 1}, TypeError, "delimiter must be str", id="delimiter-int"),
            pytest.param({"conjunction": 1}, TypeError, "conjunction must be str | None", id="conjunction-int"),
            pytest.param({"decimal": b","}, TypeError, "decimal must be str | None", id="decimal-bytes"),
            pytest.param({"fallbacks": [1]}, TypeError, "fallbacks", id="fallbacks-int"),
            pytest.param({"round": 1}, TypeError, "round must be bool", id="round-int"),
            pytest.param({"serial_comma": "no"}, TypeError, "serial_comma must be bool", id="serial-comma-str"),
            pytest.param({"largest": 0}, ValueError, "largest must be >= 1", id="largest-zero"),
            pytest.param({"largest": 2.0}, TypeError, "largest must be int", id="largest-float"),
            pytest.param({"largest": True}, TypeError, "largest must be int", id="largest-bool"),
            pytest.param({"max_decimal_points": -1}, ValueError, "max_decimal_points", id="max-decimals-negative"),
        ],
    )
    def test_invalid(self, options, exc_type, match):
        with pytest.raises(exc_type, match=match):
            HumanizerConfig(**options)


class TestMerge:

    def test_unset_inherits(self):
        assert DEFAULT_CONFIG.merge() is DEFAULT_CONFIG

    def test_overlay(self):
        config = DEFAULT_CONFIG.merge(delimiter="+", largest=2)
        assert config.delimiter == "+"
        assert config.largest == 2
        assert config.spacer == DEFAULT_CONFIG.spacer
        assert DEFAULT_CONFIG.delimiter == ", "

    def test_none_is_a_value(self):
        """Passing None clears an option instead of inheriting it."""
        config = DEFAULT_CONFIG.merge(conjunction=" and ", largest=3)
        cleared = config.merge(conjunction=None, largest=None)
        assert cleared.conjunction is None
        assert cleared.largest is None

    def test_layers(self):
        """Call-time layer wins over instance layer, which wins over defaults."""
        instance = DEFAULT_CONFIG.merge(delimiter="+", spacer="_")
        call = instance.merge(delimiter="|")
        assert (call.delimiter, call.spacer, call.language) == ("|", "_", "en")
        assert (instance.delimiter, instance.spacer) == ("+", "_")

    def test_unit_measures_per_key(self):
        instance = DEFAULT_CONFIG.merge(unit_measures={"d": 28800000})
        call = instance.merge(unit_measures={"h": 1800000})
        assert call.unit_measures[Unit.DAY] == 28800000
        assert call.unit_measures[Unit.HOUR] == 1800000
        assert call.unit_measures[Unit.MINUTE] == 60000
        assert instance.unit_measures[Unit.HOUR] == 3600000

    def test_unknown_option(self):
        with pytest.raises(TypeError):
            DEFAULT_CONFIG.merge(colour="red")

    def test_invalid_override(self):
        with pytest.raises(ValueError):
            DEFAULT_CONFIG.merge(largest=-1)


class TestLoadConfig:

    def test_section(self, toml_file):
        path = toml_file(
            '[humanizer]\n'
            'language = "es"\n'
            'units = ["h", "m"]\n'
            'conjunction = " y "\n'
            'round = true\n'
            '\n'
            '[humanizer.unit_measures]\n'
            'd = 28800000\n'
        )
        options = load_config(path)
        assert options == {
            "language": "es",
            "units": ["h", "m"],
            "conjunction": " y ",
            "round": True,
            "unit_measures": {"d": 28800000},
        }
        assert HumanizerConfig(**options).units == (Unit.HOUR, Unit.MINUTE)

    def test_top_level(self, toml_file):
        path = toml_file('delimiter = "+"\nlargest = 2\n')
        assert load_config(path, section=None) == {"delimiter": "+", "largest": 2}

    def test_languages(self, toml_file):
        path = toml_file(
            '[humanizer.languages.short]\n'
            'h = "h"\n'
            'm = "min"\n'
        )
        assert load_config(path) == {"languages": {"short": {"h": "h", "m": "min"}}}

    def test_missing_section(self, toml_file):
        path = toml_file('[other]\nlanguage = "en"\n')
        with pytest.raises(ValueError, match="no \\[humanizer\\] table"):
            load_config(path)

    def test_unknown_options(self, toml_file):
        path = toml_file('[humanizer]\nlanguage = "en"\ncolour = "red"\n')
        with pytest.raises(ValueError, match="unknown humanizer options \\['colour'\\]"):
            load_config(path)

    def test_invalid_toml(self, toml_file):
        path = toml_file('[humanizer\n')
        with pytest.raises(toml.TomlDecodeError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.toml")

    def test_option_names(self):
        assert "languages" in OPTION_NAMES
        assert "serial_comma" in OPTION_NAMES
