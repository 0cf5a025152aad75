"""lazyini-specific exceptions and warnings"""

# ---------- #
# Exceptions
# ---------- #


class ExtractionError(Exception):
    """Raised when an entity could not be extracted from a line."""


class EntityNotFound(KeyError):
    """Raised when a section or key was to be accessed but doesn't exist."""


class WrongType(Exception):
    """Raised by a converter if a string can't be converted."""


# ---------- #
# Warnings
# ---------- #


class IniStructureWarning(Warning):
    """Raised when the ini contains content that can't be assigned to a section."""


class OrphanedOptionWarning(IniStructureWarning):
    """Raised when an option is encountered before the first section name."""


class EmptySectionNameWarning(IniStructureWarning):
    """Raised when a section name in brackets is empty."""


class IniFileWarning(Warning):
    """Raised when an ini file could not be read or written."""


class EncodingFallbackWarning(Warning):
    """Raised when an ini file is not valid UTF-8 and its encoding had to be guessed."""
