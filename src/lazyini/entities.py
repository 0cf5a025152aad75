"""Ini lines are either empty, a comment, a section name, an option or unknown."""

from typing import Self
from dataclasses import dataclass
from enum import Enum
import contextlib
from .exceptions_warnings import ExtractionError
from .globals import (
    COMMENT_PREFIX,
    OPTION_DELIMITER,
    SECTION_OPEN,
    SECTION_CLOSE,
    WHITESPACE,
)
from .utils import trim


class LineType(Enum):
    """Classification of a raw ini line."""

    NONE = "none"
    COMMENT = "comment"
    SECTION = "section"
    KEYVALUE = "keyvalue"
    UNKNOWN = "unknown"


@dataclass(slots=True, frozen=True)
class ParsedLine:
    """Result of classifying one line.

    Args:
        type (LineType): The kind of line.
        name (str): The trimmed section name (SECTION) or option key (KEYVALUE).
            Empty otherwise.
        value (str): The trimmed option value (KEYVALUE). Empty otherwise.
    """

    type: LineType
    name: str = ""
    value: str = ""


class SectionName(str):
    """A configuration section's name."""

    def __new__(cls, name_with_brackets: str) -> Self:
        """
        Args:
            name_with_brackets (str): The raw line holding the section name within
                brackets. Anything after the closing bracket is ignored.

        Raises:
            ExtractionError: If the line holds no bracketed, non-empty name.
        """
        stripped = trim(name_with_brackets)
        if stripped.startswith(SECTION_OPEN):
            closing = stripped.find(SECTION_CLOSE)
            if closing != -1 and (section_name := trim(stripped[1:closing])):
                return super().__new__(cls, section_name)
        raise ExtractionError(
            f"Could not extract section name from {name_with_brackets}"
        )


@dataclass(slots=True)
class Option:
    """Option holding a key and its value."""

    key: str
    value: str

    def to_string(self, pretty: bool = False) -> str:
        """Convert the Option into an ini string.

        Args:
            pretty (bool, optional): Whether to put spaces around the delimiter.
                Defaults to False.

        Returns:
            str: The ini string.
        """
        delimiter = f" {OPTION_DELIMITER} " if pretty else OPTION_DELIMITER
        return f"{self.key}{delimiter}{self.value}"

    @classmethod
    def from_string(cls, string: str) -> Self:
        """Create an Option from a string. The key is everything before the first
        delimiter, the value everything after it (both trimmed). Semicolons are part
        of the value.

        Args:
            string (str): The string that contains the option key and value.

        Raises:
            ExtractionError: If there is no delimiter or the key is empty.

        Returns:
            Self: A new option with the extracted key and value.
        """
        key, delimiter, value = string.partition(OPTION_DELIMITER)
        if delimiter and (key := trim(key)):
            return cls(key=key, value=trim(value))
        raise ExtractionError("Option could not be extracted.")


def value_offset(line: str) -> int:
    """Get the index where the value of an option line starts, i.e. the index after the
    delimiter and any whitespace following it.

    Args:
        line (str): An option line.

    Returns:
        int: Offset of the value (or the line's length if there is no value).
    """
    offset = line.index(OPTION_DELIMITER) + len(OPTION_DELIMITER)
    return len(line) - len(line[offset:].lstrip(WHITESPACE))


def parse_line(line: str) -> ParsedLine:
    """Classify a raw line.

    Args:
        line (str): The line to classify (without line terminator).

    Returns:
        ParsedLine: The classification, with section name or option key and value
            where applicable.
    """
    stripped = trim(line)
    if not stripped:
        return ParsedLine(LineType.NONE)
    if stripped.startswith(COMMENT_PREFIX):
        return ParsedLine(LineType.COMMENT)
    with contextlib.suppress(ExtractionError):
        return ParsedLine(LineType.SECTION, name=SectionName(stripped))
    with contextlib.suppress(ExtractionError):
        option = Option.from_string(stripped)
        return ParsedLine(LineType.KEYVALUE, name=option.key, value=option.value)
    return ParsedLine(LineType.UNKNOWN)


def is_empty_section_name(line: str) -> bool:
    """Check whether a line looks like a section name but the name is empty
    (e.g. "[ ]").
    """
    stripped = trim(line)
    closing = stripped.find(SECTION_CLOSE)
    return (
        stripped.startswith(SECTION_OPEN)
        and closing != -1
        and not trim(stripped[1:closing])
    )
