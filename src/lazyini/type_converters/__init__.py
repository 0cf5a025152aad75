from .converters import (
    TypeConverter,
    converter,
    bool_converter,
    numeric_converter,
    DEFAULT_BOOL_CONVERTER,
    DEFAULT_INT_CONVERTER,
    DEFAULT_FLOAT_CONVERTER,
)
