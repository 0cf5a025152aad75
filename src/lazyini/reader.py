"""Reading ini files into an IniStructure."""

from pathlib import Path
import re
import warnings
from charset_normalizer import from_bytes as read_from_bytes
from .args import Parameters
from .entities import LineType, parse_line, is_empty_section_name
from .exceptions_warnings import (
    EmptySectionNameWarning,
    EncodingFallbackWarning,
    IniFileWarning,
    OrphanedOptionWarning,
)
from .globals import DEFAULT_ENCODING, UTF8_BOM
from .structure import IniStructure, Section

_LINE_SPLIT = re.compile(r"\r\n|\n")


def split_lines(text: str) -> tuple[list[str], bool]:
    """Split text into lines, accepting "\\n" and "\\r\\n" as terminators.

    Args:
        text (str): The text to split.

    Returns:
        tuple[list[str], bool]: The lines without terminators and whether the last
            line was terminated. Empty text counts as terminated.
    """
    if not text:
        return [], True
    lines = _LINE_SPLIT.split(text)
    if terminated := (lines[-1] == ""):
        lines.pop()
    return lines, terminated


class IniReader:
    """Reads one ini file. Keeps the raw lines if requested, so that they can be
    reconciled with changed content later on.
    """

    def __init__(
        self,
        path: str | Path,
        parameters: Parameters | None = None,
        keep_lines: bool = False,
    ) -> None:
        """
        Args:
            path (str | Path): Path to the ini file.
            parameters (Parameters | None, optional): Parameters for reading. If None,
                will use default Parameters. Defaults to None.
            keep_lines (bool, optional): Whether to keep the raw lines after reading.
                Defaults to False.
        """
        self.path = Path(path)
        self.parameters = Parameters() if parameters is None else parameters
        self.keep_lines = keep_lines

        self.lines: list[str] | None = None
        """Raw lines of the file (without BOM and terminators) if keep_lines."""
        self.is_bom: bool = False
        """Whether the file started with a UTF-8 byte order mark."""
        self.encoding: str = self.parameters.encoding or DEFAULT_ENCODING
        """Encoding the file was decoded with."""
        self.terminated: bool = True
        """Whether the last line of the file ended with a line terminator."""

    def _decode(self, raw: bytes) -> str:
        """Decode the file content, detecting a BOM and guessing the encoding if the
        content is not valid UTF-8 (and no encoding was set).
        """
        if raw.startswith(UTF8_BOM) and self.encoding == DEFAULT_ENCODING:
            self.is_bom = True
            raw = raw[len(UTF8_BOM) :]

        if self.parameters.encoding is not None:
            return raw.decode(self.encoding, errors="surrogateescape")

        try:
            return raw.decode(DEFAULT_ENCODING)
        except UnicodeDecodeError:
            pass

        if (best := read_from_bytes(raw).best()) is not None:
            self.encoding = best.encoding
            warnings.warn(
                f"'{self.path}' is not valid {DEFAULT_ENCODING}, reading it as"
                f" {self.encoding}.",
                EncodingFallbackWarning,
            )
            return str(best)

        # keep undecodable bytes as they are
        return raw.decode(DEFAULT_ENCODING, errors="surrogateescape")

    def read_lines(self) -> list[str] | None:
        """Read the raw lines of the file.

        Returns:
            list[str] | None: The lines or None if the file could not be read.
        """
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            warnings.warn(f"Could not read '{self.path}': {e}", IniFileWarning)
            return None
        lines, self.terminated = split_lines(self._decode(raw))
        return lines

    def read(self, structure: IniStructure) -> bool:
        """Read the file and add its content to structure.

        Options before the first section name are ignored. Sections that appear more
        than once are merged, options that appear more than once keep the last value
        (at the position of the first occurrence).

        Args:
            structure (IniStructure): The structure to add the content to.

        Returns:
            bool: Whether the file could be read.
        """
        if (lines := self.read_lines()) is None:
            return False

        current_section: Section | None = None

        for index, line in enumerate(lines):
            parsed = parse_line(line)

            if parsed.type is LineType.SECTION:
                current_section = structure.ensure_section(parsed.name)
                continue

            if is_empty_section_name(line):
                warnings.warn(
                    f"Line {index} is no section name because the name is empty.",
                    EmptySectionNameWarning,
                )
            if parsed.type is LineType.KEYVALUE:
                if current_section is None:
                    warnings.warn(
                        f"Line {index} is being ignored because it's not inside of"
                        " a section.",
                        OrphanedOptionWarning,
                    )
                else:
                    current_section[parsed.name] = parsed.value

        if self.keep_lines:
            self.lines = lines
        return True
