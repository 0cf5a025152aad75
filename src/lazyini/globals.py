import os
import codecs

WHITESPACE = " \t\n\r\f\v"
"""Characters trimmed from keys, values and section names."""
COMMENT_PREFIX = ";"
OPTION_DELIMITER = "="
SECTION_OPEN = "["
SECTION_CLOSE = "]"
UTF8_BOM = codecs.BOM_UTF8
DEFAULT_ENCODING = "utf-8"
LINE_TERMINATORS = ("\n", "\r\n")
"""Terminators that can be used for written files."""

LINE_TERMINATOR = "\r\n" if os.environ.get("LAZYINI_ENDL_CRLF") else os.linesep
"""Default terminator for written lines. Set the environment variable
LAZYINI_ENDL_CRLF before importing lazyini to always write CRLF."""
