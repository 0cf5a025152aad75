import codecs
from . import globals as ini_globals
from .globals import LINE_TERMINATORS


class Parameters:
    """Parameters for reading and writing."""

    def __init__(
        self,
        pretty: bool = False,
        line_terminator: str | None = None,
        encoding: str | None = None,
    ) -> None:
        """
        Args:
            pretty (bool, optional): Whether to write options as "key = value" and
                separate generated sections by an empty line. Can be overridden for
                every write. Defaults to False.
            line_terminator (str | None, optional): Terminator for written lines,
                either "\\n" or "\\r\\n". Reading accepts both regardless. If None,
                will use lazyini.globals.LINE_TERMINATOR. Defaults to None.
            encoding (str | None, optional): Encoding to read and write with. If None,
                files are read as UTF-8 and the encoding is guessed for files that
                aren't valid UTF-8. Defaults to None.
        """
        self.pretty = pretty
        self.line_terminator = line_terminator
        self.encoding = encoding

    @property
    def line_terminator(self) -> str:
        return self._line_terminator

    @line_terminator.setter
    def line_terminator(self, value: str | None) -> None:
        if value is None:
            value = ini_globals.LINE_TERMINATOR
        if value not in LINE_TERMINATORS:
            raise ValueError(
                f"Line terminator must be one of {LINE_TERMINATORS}, got {value!r}."
            )
        self._line_terminator = value

    @property
    def encoding(self) -> str | None:
        return self._encoding

    @encoding.setter
    def encoding(self, value: str | None) -> None:
        if value is not None:
            try:
                value = codecs.lookup(value).name
            except LookupError as e:
                raise ValueError(f"Unknown encoding '{value}'.") from e
        self._encoding = value

    def update(self, **kwargs) -> None:
        """Update parameters with kwargs

        Args:
            **kwargs: Keyword-arguments to update the parameters with.
        """
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"'{k}' is no known parameter.")
            setattr(self, k, v)

    def copy(self) -> "Parameters":
        return Parameters(
            pretty=self.pretty,
            line_terminator=self.line_terminator,
            encoding=self.encoding,
        )

    def __repr__(self) -> str:
        return (
            f"Parameters(pretty={self.pretty!r}, "
            f"line_terminator={self.line_terminator!r}, encoding={self.encoding!r})"
        )
