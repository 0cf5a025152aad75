from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, overload
from .exceptions_warnings import EntityNotFound
from .globals import WHITESPACE

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def trim(string: str) -> str:
    """Remove leading and trailing whitespace (space, tab, newline, carriage return,
    form feed and vertical tab).

    Args:
        string (str): The string to trim.

    Returns:
        str: The trimmed string.
    """
    return string.strip(WHITESPACE)


def fold(key: str) -> str:
    """Normalize a section name or option key for identity comparison.

    Only ASCII letters are lowercased, any other character is kept as is.

    Args:
        key (str): The key to fold.

    Returns:
        str: The trimmed and lowercased key.
    """
    return trim(key).translate(_ASCII_LOWER)


### Ordered map with case insensitive keys

_VT = TypeVar("_VT")


@dataclass(slots=True)
class _Entry(Generic[_VT]):
    """One stored item of an IniMap."""

    key: str
    value: _VT


class IniMap(MutableMapping[str, _VT]):
    """Mapping that keeps insertion order and identifies keys by their folded form.

    Entries live in an arena, the folded key points to the entry's slot and a separate
    list of slots keeps the iteration order. The first (trimmed) spelling of a key is
    kept for display.
    """

    def __init__(
        self, data: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None, /
    ) -> None:
        self._entries: list[_Entry[_VT] | None] = []
        self._slots: dict[str, int] = {}
        self._order: list[int] = []
        if data is not None:
            self.set(data)

    def _convert(self, value: Any) -> _VT:
        """Convert a value before it is stored. Subclasses may override."""
        return value

    def _copy_value(self, value: _VT) -> _VT:
        return value

    def __getitem__(self, key: str) -> _VT:
        slot = self._slots.get(fold(key))
        if slot is None:
            raise EntityNotFound(key)
        entry = self._entries[slot]
        assert entry is not None
        return entry.value

    def __setitem__(self, key: str, value: Any) -> None:
        folded = fold(key)
        if not folded:
            # empty keys are never stored
            return
        value = self._convert(value)
        if (slot := self._slots.get(folded)) is not None:
            entry = self._entries[slot]
            assert entry is not None
            entry.value = value
            return
        self._slots[folded] = len(self._entries)
        self._order.append(len(self._entries))
        self._entries.append(_Entry(trim(key), value))

    def __delitem__(self, key: str) -> None:
        slot = self._slots.pop(fold(key), None)
        if slot is None:
            raise EntityNotFound(key)
        self._entries[slot] = None
        self._order.remove(slot)

    def __iter__(self) -> Iterator[str]:
        for slot in self._order:
            entry = self._entries[slot]
            assert entry is not None
            yield entry.key

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and fold(key) in self._slots

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(k in self and self[k] == v for k, v in other.items())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self.items())!r})"

    @overload
    def set(self, key: str, value: Any, /) -> None: ...
    @overload
    def set(
        self, items: Mapping[str, Any] | Iterable[tuple[str, Any]], /
    ) -> None: ...

    def set(self, *args) -> None:
        """Set one value by key or several values from a mapping or from
        (key, value) pairs, in their order.
        """
        if len(args) == 2:
            self[args[0]] = args[1]
            return
        if len(args) != 1:
            raise TypeError("set takes either key and value or one mapping.")
        items = args[0]
        if isinstance(items, Mapping):
            items = items.items()
        for key, value in items:
            self[key] = value

    def has(self, key: str) -> bool:
        """Check whether key exists."""
        return key in self

    def remove(self, key: str) -> bool:
        """Remove a key.

        Args:
            key (str): The key to remove.

        Returns:
            bool: False if the key didn't exist.
        """
        try:
            del self[key]
        except EntityNotFound:
            return False
        return True

    def clear(self) -> None:
        self._entries.clear()
        self._slots.clear()
        self._order.clear()

    def size(self) -> int:
        return len(self)

    def copy(self):
        """Copy the map. Nested maps are copied as well."""
        new = self.__class__()
        for key, value in self.items():
            new[key] = self._copy_value(value)
        return new

    def __copy__(self):
        return self.copy()
