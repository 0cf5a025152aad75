"""Converter functions for reading option values as other types."""

from functools import wraps
from typing import Callable, Any
import re
import contextlib
from ..exceptions_warnings import WrongType

type TypeConverter[ConvertedType] = Callable[[Any], ConvertedType | Any]
"""Type of type converter functions. To create a type converter, use converter decorator."""


def converter[T](processor: Callable[[str], T]) -> TypeConverter[T]:
    """Create a new TypeConverter.

    Args:
        processor (Callable[[str], T]): Callable to process an option value and
            convert it. If conversion is not possible, should raise
            exceptions_warnings.WrongType.

    Returns:
        TypeConverter[T]: TypeConverter that returns the processed value or the value
            itself if it could not be converted.
    """

    @wraps(processor)
    def convert(value: Any) -> T | Any:
        if isinstance(value, str):
            with contextlib.suppress(WrongType):
                return processor(value)
        return value

    return convert


def _as_tuple(words: str | tuple[str, ...]) -> tuple[str, ...]:
    return tuple(w.lower() for w in ((words,) if isinstance(words, str) else words))


def bool_converter(
    true: str | tuple[str, ...] = ("1", "true", "yes", "y", "on"),
    false: str | tuple[str, ...] = ("0", "false", "no", "n", "off"),
) -> TypeConverter[bool]:
    """Create a new bool converter. Matching is case insensitive.

    Args:
        true (str | tuple[str, ...], optional): Value(s) read as True.
            Defaults to ("1", "true", "yes", "y", "on").
        false (str | tuple[str, ...], optional): Value(s) read as False.
            Defaults to ("0", "false", "no", "n", "off").

    Returns:
        TypeConverter[bool]: The bool converter.
    """
    true_words, false_words = _as_tuple(true), _as_tuple(false)

    @converter
    def to_bool(string: str) -> bool:
        match string.strip().lower():
            case word if word in true_words:
                return True
            case word if word in false_words:
                return False
        raise WrongType

    return to_bool


type Numerics = int | float
"""Possible numeric conversion result types."""


def numeric_converter[T: Numerics](
    numeric_type: type[T] | tuple[type[T], ...] = (int, float),
    decimal_sep: str = ".",
    thousands_sep: str = ",",
) -> TypeConverter[T]:
    """Create a new numeric type converter.

    Args:
        numeric_type (type[T] | tuple[type[T], ...], optional): The type to convert
            to. If multiple are given, the first successful conversion is returned.
            Defaults to (int, float).
        decimal_sep (str, optional): Decimal separator. Defaults to ".".
        thousands_sep (str, optional): Thousands separator. Only accepted between
            groups of three digits. Defaults to ",".

    Returns:
        TypeConverter[T]: The numeric type converter.
    """
    numeric_types = numeric_type if isinstance(numeric_type, tuple) else (numeric_type,)
    ts, ds = re.escape(thousands_sep), re.escape(decimal_sep)
    # integer part either without separators or grouped by three
    pattern = re.compile(
        rf"(?P<sign>[+-]?)(?P<int>\d+|\d{{1,3}}(?:{ts}\d{{3}})+)(?:{ds}(?P<frac>\d*))?"
    )

    @converter
    def to_num(string: str) -> T:
        if (match := pattern.fullmatch(string.replace(" ", ""))) is None:
            raise WrongType
        number = match["sign"] + match["int"].replace(thousands_sep, "")
        if match["frac"] is not None:
            number += f".{match['frac']}"
        for numeric in numeric_types:
            with contextlib.suppress(ValueError):
                return numeric(number)
        raise WrongType

    return to_num


# default converters
DEFAULT_BOOL_CONVERTER = bool_converter()
"""Bool converter with default conversion parameters."""
DEFAULT_INT_CONVERTER = numeric_converter(int)
"""Integer converter with default conversion parameters."""
DEFAULT_FLOAT_CONVERTER = numeric_converter(float)
"""Float converter with default conversion parameters."""
