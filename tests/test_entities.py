from lazyini.entities import (
    LineType,
    SectionName,
    Option,
    parse_line,
    value_offset,
    is_empty_section_name,
)
from lazyini.exceptions_warnings import ExtractionError
import pytest


class TestParseLine:

    @pytest.mark.parametrize(
        "line,line_type,name,value",
        [
            ("", LineType.NONE, "", ""),
            (" \t \f\v", LineType.NONE, "", ""),
            (";comment", LineType.COMMENT, "", ""),
            ("   ;  [section]", LineType.COMMENT, "", ""),
            (";key=value", LineType.COMMENT, "", ""),
            (";", LineType.COMMENT, "", ""),
            ("\t; [a] = b", LineType.COMMENT, "", ""),
            ("[section]", LineType.SECTION, "section", ""),
            ("  [  My Section ]  ", LineType.SECTION, "My Section", ""),
            ("[section] ; trailing comment", LineType.SECTION, "section", ""),
            ("[section]garbage", LineType.SECTION, "section", ""),
            ("[a]b]", LineType.SECTION, "a", ""),
            ("[key]=value", LineType.SECTION, "key", ""),
            ("key=value", LineType.KEYVALUE, "key", "value"),
            ("  key   =   value  ", LineType.KEYVALUE, "key", "value"),
            ("key=", LineType.KEYVALUE, "key", ""),
            ("key = a=b", LineType.KEYVALUE, "key", "a=b"),
            ("key = value ; no comment", LineType.KEYVALUE, "key", "value ; no comment"),
            ("[]=x", LineType.KEYVALUE, "[]", "x"),
            ("[ ]", LineType.UNKNOWN, "", ""),
            ("[section", LineType.UNKNOWN, "", ""),
            ("=value", LineType.UNKNOWN, "", ""),
            ("   = value", LineType.UNKNOWN, "", ""),
            ("GARBAGE", LineType.UNKNOWN, "", ""),
            ("GARBAGE ; with comment", LineType.UNKNOWN, "", ""),
        ],
    )
    def test_classification(self, line, line_type, name, value):
        parsed = parse_line(line)
        assert parsed.type is line_type
        assert parsed.name == name
        assert parsed.value == value


class TestEntities:

    @pytest.mark.parametrize("line", ["[]", "[   ]", "section]", "[section"])
    def test_section_name_fails(self, line):
        with pytest.raises(ExtractionError):
            SectionName(line)

    def test_option(self):
        option = Option.from_string(" key  =  some value ")
        assert option == Option("key", "some value")
        assert option.to_string() == "key=some value"
        assert option.to_string(pretty=True) == "key = some value"
        with pytest.raises(ExtractionError):
            Option.from_string("no delimiter")
        with pytest.raises(ExtractionError):
            Option.from_string(" =value")

    @pytest.mark.parametrize(
        "line,offset",
        [
            ("a=1", 2),
            ("a = 1", 4),
            ("a =\t 1", 5),
            ("  abc   =   1", 12),
            ("a=", 2),
            ("a=   ", 5),
            ("a= b = c", 3),
        ],
    )
    def test_value_offset(self, line, offset):
        assert value_offset(line) == offset

    @pytest.mark.parametrize(
        "line,result",
        [
            ("[]", True),
            ("  [ \t ] garbage", True),
            ("[]=x", True),
            ("[a]", False),
            ("a=[]", False),
            (";[]", False),
            ("", False),
        ],
    )
    def test_is_empty_section_name(self, line, result):
        assert is_empty_section_name(line) is result
