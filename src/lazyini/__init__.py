from .interface import IniFile, read_ini, write_ini, generate_ini
from .structure import IniStructure, Section
from .args import Parameters
from .reader import IniReader
from .generator import generate_lines
from .lazy_writer import reconcile
from .entities import LineType, ParsedLine, parse_line
from . import exceptions_warnings
