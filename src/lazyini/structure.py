"""In-memory representation of an ini file: sections holding options."""

from collections.abc import Mapping
from typing import Any
from .utils import IniMap, fold
from .type_converters import (
    TypeConverter,
    DEFAULT_BOOL_CONVERTER,
    DEFAULT_INT_CONVERTER,
    DEFAULT_FLOAT_CONVERTER,
)


class Section(IniMap[str]):
    """A configuration section. Maps option keys to their (string) values.

    Keys are case insensitive and trimmed. Values that aren't strings are converted on
    assignment: booleans become "yes" or "no", everything else is passed to str().
    """

    def _convert(self, value: Any) -> str:
        if isinstance(value, bool):
            return "yes" if value else "no"
        return value if isinstance(value, str) else str(value)

    def _get_converted[T](
        self, key: str, default: T, type_converter: TypeConverter[T]
    ) -> T:
        if (value := self.get(key)) is None:
            return default
        converted = type_converter(value)
        return default if isinstance(converted, str) else converted

    def get_str(self, key: str, default: str = "") -> str:
        return self.get(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get an option's value as bool.

        Args:
            key (str): The option key.
            default (bool, optional): Returned if the option doesn't exist or its
                value isn't a known boolean string. Defaults to False.

        Returns:
            bool: The converted value.
        """
        return self._get_converted(key, default, DEFAULT_BOOL_CONVERTER)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get an option's value as int.

        Args:
            key (str): The option key.
            default (int, optional): Returned if the option doesn't exist or its
                value isn't an integer. Defaults to 0.

        Returns:
            int: The converted value.
        """
        return self._get_converted(key, default, DEFAULT_INT_CONVERTER)

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Get an option's value as float.

        Args:
            key (str): The option key.
            default (float, optional): Returned if the option doesn't exist or its
                value isn't a number. Defaults to 0.0.

        Returns:
            float: The converted value.
        """
        return self._get_converted(key, default, DEFAULT_FLOAT_CONVERTER)


class IniStructure(IniMap[Section]):
    """All sections of an ini file in order. Section names are case insensitive and
    trimmed. Any mapping assigned as a section is stored as a Section copy.
    """

    def _convert(self, value: Any) -> Section:
        if isinstance(value, Section):
            return value
        if isinstance(value, Mapping):
            return Section(value)
        raise TypeError(
            f"Sections must be mappings of option keys to values, got {type(value)}."
        )

    def _copy_value(self, value: Section) -> Section:
        return value.copy()

    def ensure_section(self, name: str) -> Section:
        """Get a section, creating it if it doesn't exist yet.

        Args:
            name (str): The section name.

        Returns:
            Section: The existing or newly created section. A section with an empty
                name is never stored, a detached Section is returned instead.
        """
        if name not in self:
            if not fold(name):
                return Section()
            self[name] = Section()
        return self[name]
