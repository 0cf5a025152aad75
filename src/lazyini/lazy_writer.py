"""Lazy writing: reconcile the lines of an existing ini file with changed content.

Only lines whose content changed are touched. Comments, empty lines, custom spacing and
unknown lines are kept as they are. New options are inserted after the last option of
their section, new sections are appended at the end of the file.
"""

from collections.abc import Sequence
from .entities import LineType, Option, parse_line, value_offset
from .generator import option_lines, section_name_line
from .globals import OPTION_DELIMITER
from .structure import IniStructure, Section
from .utils import fold, trim


class LineCursor:
    """Index based cursor over a sequence of lines that can step back one line
    to have it processed again.
    """

    def __init__(self, lines: Sequence[str]) -> None:
        self.lines = lines
        self.index: int = -1
        """Index of the current line, -1 before the first advance."""

    @property
    def at_end(self) -> bool:
        return self.index + 1 >= len(self.lines)

    @property
    def current(self) -> str:
        if not 0 <= self.index < len(self.lines):
            raise IndexError("Cursor is not on a line.")
        return self.lines[self.index]

    def advance(self) -> str:
        """Move to the next line and return it.

        Raises:
            IndexError: If there is no next line.
        """
        if self.at_end:
            raise IndexError("No more lines.")
        self.index += 1
        return self.lines[self.index]

    def push_back(self) -> None:
        """Step back one line, so the next advance returns the current line again.

        Raises:
            IndexError: If the cursor hasn't advanced yet.
        """
        if self.index < 0:
            raise IndexError("Can't push back before the first line.")
        self.index -= 1


def _last_section_headers(lines: Sequence[str]) -> dict[str, int]:
    """Map every folded section name to the index of its last section name line."""
    last: dict[str, int] = {}
    for index, line in enumerate(lines):
        parsed = parse_line(line)
        if parsed.type is LineType.SECTION:
            last[fold(parsed.name)] = index
    return last


class _LazyWriter:

    def __init__(
        self,
        lines: Sequence[str],
        original: IniStructure,
        target: IniStructure,
        pretty: bool,
    ) -> None:
        """Reconcile lines with target. For more info cf. reconcile."""
        self.cursor = LineCursor(lines)
        self.original = original
        self.target = target
        self.pretty = pretty
        self.output: list[str] = []

        self.last_headers = _last_section_headers(lines)

        # ----
        # define variables for the write process
        # ----
        self.section_name: str | None = None
        """Name of the section that is currently parsed."""
        self.header_index: int = -1
        """Index (in lines) of the current section's name line."""
        self.in_section: bool = False
        """Whether the current section is kept."""
        self.discarding: bool = False
        """Whether the current section was removed and its lines are dropped."""
        self.discard_next_blank: bool = False
        self.anchor: int = 0
        """Output index to insert new options of the current section at."""
        # ----

    def run(self) -> list[str]:
        while not self.cursor.at_end:
            line = self.cursor.advance()
            parsed = parse_line(line)

            match parsed.type:
                case LineType.SECTION:
                    if self.in_section:
                        # finish the open section, then handle this line again
                        self.cursor.push_back()
                        self._close_section()
                    else:
                        self._open_section(line, parsed.name)

                case LineType.KEYVALUE:
                    if self.in_section:
                        self._handle_option(line, Option(parsed.name, parsed.value))
                    elif not self.discarding:
                        # option before any section name, not part of any section
                        self.output.append(line)

                case LineType.NONE:
                    if self.discarding and self.discard_next_blank:
                        self.discard_next_blank = False
                    else:
                        self.output.append(line)

                case LineType.COMMENT:
                    self.output.append(line)

                case LineType.UNKNOWN:
                    if not self.discarding:
                        self.output.append(line)

        if self.in_section:
            self._close_section()

        self._append_new_sections()
        return self.output

    def _open_section(self, line: str, name: str) -> None:
        self.section_name = name
        self.header_index = self.cursor.index
        if name in self.target:
            self.in_section = True
            self.discarding = False
            self.discard_next_blank = False
            self.output.append(line)
            self.anchor = len(self.output)
        else:
            self.discarding = True
            self.discard_next_blank = True

    def _handle_option(self, line: str, option: Option) -> None:
        assert self.section_name is not None
        section = self.target[self.section_name]
        if option.key not in section:
            # removed option
            return
        value = section[option.key]
        if value == option.value:
            self.output.append(line)
        else:
            offset = value_offset(line)
            new_line = line[:offset]
            if self.pretty and offset == line.index(OPTION_DELIMITER) + 1:
                new_line += " "
            self.output.append(new_line + value)
        self.anchor = len(self.output)

    def _close_section(self) -> None:
        """Insert options that are new to the current section after its last option.
        New options of a section whose name appears more than once are only inserted
        after the last of these sections.
        """
        assert self.section_name is not None
        self.in_section = False
        if self.last_headers.get(fold(self.section_name)) != self.header_index:
            return
        existing = self.original.get(self.section_name, Section())
        new_options = Section(
            (key, value)
            for key, value in self.target[self.section_name].items()
            if key not in existing
        )
        self.output[self.anchor : self.anchor] = option_lines(new_options, self.pretty)

    def _append_new_sections(self) -> None:
        for name, section in self.target.items():
            if name in self.original:
                continue
            if self.pretty and self.output and trim(self.output[-1]):
                self.output.append("")
            self.output.append(section_name_line(name))
            self.output.extend(option_lines(section, self.pretty))


def reconcile(
    lines: Sequence[str],
    original: IniStructure,
    target: IniStructure,
    pretty: bool = False,
) -> list[str]:
    """Update the lines of an ini file to reflect target, changing as few lines as
    possible.

    Args:
        lines (Sequence[str]): The file's lines as read.
        original (IniStructure): The structure read from lines.
        target (IniStructure): The structure the output should reflect.
        pretty (bool, optional): Whether new options are written as "key = value"
            (and a space is added after the delimiter of changed options that have
            none), and new sections are preceded by an empty line. Defaults to False.

    Returns:
        list[str]: The updated lines.
    """
    return _LazyWriter(lines, original, target, pretty).run()
