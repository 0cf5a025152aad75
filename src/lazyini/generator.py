"""Generating ini lines from scratch."""

from .entities import Option
from .globals import SECTION_OPEN, SECTION_CLOSE
from .structure import IniStructure, Section


def section_name_line(name: str) -> str:
    return f"{SECTION_OPEN}{name}{SECTION_CLOSE}"


def option_lines(section: Section, pretty: bool = False) -> list[str]:
    return [Option(key, value).to_string(pretty) for key, value in section.items()]


def generate_lines(structure: IniStructure, pretty: bool = False) -> list[str]:
    """Convert a structure into ini lines, discarding any formatting.

    Args:
        structure (IniStructure): The structure to convert.
        pretty (bool, optional): Whether to write "key = value" and put an empty line
            between sections. Defaults to False.

    Returns:
        list[str]: The lines (without terminators).
    """
    out: list[str] = []
    for index, (name, section) in enumerate(structure.items()):
        if pretty and index:
            out.append("")
        out.append(section_name_line(name))
        out.extend(option_lines(section, pretty))
    return out
