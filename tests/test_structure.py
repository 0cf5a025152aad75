from lazyini import IniStructure, Section
from lazyini.type_converters import bool_converter, numeric_converter
import pytest


class TestSection:

    @pytest.mark.parametrize(
        "value,stored",
        [
            ("text", "text"),
            (True, "yes"),
            (False, "no"),
            (12, "12"),
            (1.5, "1.5"),
            (None, "None"),
        ],
    )
    def test_value_conversion(self, value, stored):
        section = Section()
        section["key"] = value
        assert section["key"] == stored

    @pytest.mark.parametrize(
        "value,result",
        [
            ("1", True),
            ("true", True),
            ("Yes", True),
            ("y", True),
            (" ON ", True),
            ("0", False),
            ("FALSE", False),
            ("no", False),
            ("n", False),
            ("off", False),
        ],
    )
    def test_get_bool(self, value, result):
        section = Section({"key": value})
        assert section.get_bool("key") is result
        assert section.get_bool("key", default=not result) is result

    def test_get_bool_default(self):
        section = Section({"key": "maybe"})
        assert section.get_bool("key") is False
        assert section.get_bool("key", True) is True
        assert section.get_bool("missing", True) is True

    @pytest.mark.parametrize(
        "value,result",
        [("12", 12), ("-3", -3), (" 7 ", 7), ("1,000", 1000), ("1.5", 0), ("abc", 0)],
    )
    def test_get_int(self, value, result):
        assert Section({"key": value}).get_int("key") == result

    @pytest.mark.parametrize(
        "value,result",
        [("1.5", 1.5), ("2", 2.0), ("1,000.25", 1000.25), ("1,00", -1.0), ("x", -1.0)],
    )
    def test_get_float(self, value, result):
        assert Section({"key": value}).get_float("key", -1.0) == result

    def test_get_str(self):
        section = Section({"Key": "value"})
        assert section.get_str("KEY") == "value"
        assert section.get_str("missing") == ""
        assert section.get_str("missing", "default") == "default"

    def test_typed_round_trip(self):
        section = Section()
        section.set({"flag": True, "count": 3, "ratio": 0.25})
        assert section.get_bool("flag") is True
        assert section.get_int("count") == 3
        assert section.get_float("ratio") == 0.25


class TestIniStructure:

    def test_sections_from_mappings(self):
        ini = IniStructure()
        ini["s"] = {"a": 1}
        ini.set("t", {"b": True})
        assert isinstance(ini["s"], Section)
        assert ini["s"]["a"] == "1"
        assert ini["T"]["B"] == "yes"

    def test_section_is_stored_as_is(self):
        ini = IniStructure()
        section = Section()
        ini["s"] = section
        section["a"] = "1"
        assert ini["s"]["a"] == "1"

    def test_wrong_section_type(self):
        ini = IniStructure()
        with pytest.raises(TypeError):
            ini["s"] = "value"

    def test_ensure_section(self):
        ini = IniStructure()
        created = ini.ensure_section("Section")
        created["key"] = "value"
        assert ini.ensure_section("SECTION") is created
        assert list(ini) == ["Section"]

    def test_ensure_empty_section(self):
        ini = IniStructure()
        section = ini.ensure_section("  ")
        section["key"] = "value"
        assert ini.size() == 0

    def test_deep_copy(self):
        ini = IniStructure({"s": {"a": "1"}})
        copied = ini.copy()
        copied["s"]["a"] = "2"
        copied["t"] = {}
        assert ini["s"]["a"] == "1"
        assert "t" not in ini
        assert isinstance(copied, IniStructure)

    def test_equality(self):
        assert IniStructure({"S": {"A": "1"}}) == IniStructure({"s": {"a": "1"}})
        assert IniStructure({"s": {"a": "1"}}) != IniStructure({"s": {"a": "2"}})


class TestConverters:

    def test_custom_bool_converter(self):
        to_bool = bool_converter(true="ja", false=("nein", "nee"))
        assert to_bool("JA") is True
        assert to_bool("nee") is False
        assert to_bool("yes") == "yes"

    def test_numeric_converter(self):
        to_num = numeric_converter(decimal_sep=",", thousands_sep=".")
        assert to_num("1.000,5") == 1000.5
        assert to_num("12") == 12
        assert to_num("1.00") == "1.00"
        assert to_num(5) == 5
