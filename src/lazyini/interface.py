"""Interface classes exist for coder interaction, to simplify the process
behind lazyini."""

from collections.abc import Sequence
from pathlib import Path
import warnings
from .args import Parameters
from .exceptions_warnings import IniFileWarning, IniStructureWarning
from .generator import generate_lines
from .globals import DEFAULT_ENCODING, UTF8_BOM
from .lazy_writer import reconcile
from .reader import IniReader
from .structure import IniStructure


class IniFile:
    """An ini file on disk. Reads into and writes from an IniStructure.

    Files are opened for every operation only, nothing is held open in between.
    """

    def __init__(
        self,
        path: str | Path,
        parameters: Parameters | None = None,
        **kwargs,
    ) -> None:
        """
        Args:
            path (str | Path): Path to the ini file.
            parameters (Parameters | None, optional): Parameters for reading and
                writing. If None, default Parameters are used. Defaults to None.
            **kwargs (optional): Parameters as kwargs, overriding the ones passed as
                Parameters object. See doc of Parameters for details.
        """
        self.path = path
        self.parameters = Parameters() if parameters is None else parameters.copy()
        if kwargs:
            self.parameters.update(**kwargs)
        self.is_bom: bool = False
        """Whether the file started with a UTF-8 byte order mark when last read."""

    def _valid_path(self) -> bool:
        return bool(str(self.path))

    def read(self, structure: IniStructure) -> bool:
        """Replace the content of structure with the file's content.

        Args:
            structure (IniStructure): The structure to read into. Will be cleared
                even if the file can't be read.

        Returns:
            bool: Whether the file could be read.
        """
        structure.clear()
        if not self._valid_path():
            return False
        reader = IniReader(self.path, self.parameters)
        success = reader.read(structure)
        self.is_bom = reader.is_bom
        return success

    def generate(self, structure: IniStructure, pretty: bool | None = None) -> bool:
        """Write structure to the file, replacing any existing content and formatting.

        Args:
            structure (IniStructure): The structure to write.
            pretty (bool | None, optional): Whether to write "key = value" and
                separate sections by an empty line. If None, will use the pretty
                parameter. Defaults to None.

        Returns:
            bool: Whether the file could be written.
        """
        if not self._valid_path():
            return False
        if pretty is None:
            pretty = self.parameters.pretty
        return self._write_lines(generate_lines(structure, pretty))

    def write(self, structure: IniStructure, pretty: bool | None = None) -> bool:
        """Write structure to the file. If the file exists, only the changes between
        the file's content and structure are written, keeping comments, empty lines
        and formatting. Otherwise the file is generated.

        Args:
            structure (IniStructure): The structure to write.
            pretty (bool | None, optional): Whether to write new options as
                "key = value" and to separate new sections by an empty line. If None,
                will use the pretty parameter. Defaults to None.

        Returns:
            bool: Whether the file could be written.
        """
        if not self._valid_path():
            return False
        if pretty is None:
            pretty = self.parameters.pretty
        if not Path(self.path).exists():
            return self.generate(structure, pretty)

        original = IniStructure()
        reader = IniReader(self.path, self.parameters, keep_lines=True)
        with warnings.catch_warnings():
            # already reported when the file was read
            warnings.simplefilter("ignore", IniStructureWarning)
            if not reader.read(original):
                return False
        assert reader.lines is not None

        output = reconcile(reader.lines, original, structure, pretty)
        return self._write_lines(
            output,
            terminated=reader.terminated,
            encoding=reader.encoding,
            bom=reader.is_bom,
        )

    def _write_lines(
        self,
        lines: Sequence[str],
        terminated: bool = True,
        encoding: str | None = None,
        bom: bool = False,
    ) -> bool:
        """Write lines to the file.

        Args:
            lines (Sequence[str]): The lines to write.
            terminated (bool, optional): Whether to end the last line with a line
                terminator. Defaults to True.
            encoding (str | None, optional): The encoding to use. If None, will use
                the encoding parameter or UTF-8. Defaults to None.
            bom (bool, optional): Whether to start the file with a UTF-8 byte order
                mark. Defaults to False.

        Returns:
            bool: Whether the file could be written.
        """
        if encoding is None:
            encoding = self.parameters.encoding or DEFAULT_ENCODING
        terminator = self.parameters.line_terminator
        text = terminator.join(lines)
        if terminated and lines:
            text += terminator
        try:
            content = text.encode(encoding, errors="surrogateescape")
        except UnicodeEncodeError as e:
            warnings.warn(
                f"Could not encode content of '{self.path}' as {encoding}: {e}",
                IniFileWarning,
            )
            return False
        if bom:
            content = UTF8_BOM + content
        try:
            Path(self.path).write_bytes(content)
        except OSError as e:
            warnings.warn(f"Could not write '{self.path}': {e}", IniFileWarning)
            return False
        return True

    def __repr__(self) -> str:
        return f"IniFile({str(self.path)!r}, {self.parameters!r})"


def read_ini(
    path: str | Path, parameters: Parameters | None = None, **kwargs
) -> tuple[IniStructure, bool]:
    """Read an ini file.

    Args:
        path (str | Path): Path to the ini file.
        parameters (Parameters | None, optional): Parameters for reading.
            Defaults to None.
        **kwargs (optional): Parameters as kwargs.

    Returns:
        tuple[IniStructure, bool]: The content (empty if the file couldn't be read)
            and whether the file could be read.
    """
    structure = IniStructure()
    success = IniFile(path, parameters, **kwargs).read(structure)
    return structure, success


def write_ini(
    path: str | Path,
    structure: IniStructure,
    pretty: bool | None = None,
    parameters: Parameters | None = None,
    **kwargs,
) -> bool:
    """Write structure to an ini file, keeping the formatting of an existing file.
    Cf. IniFile.write.
    """
    return IniFile(path, parameters, **kwargs).write(structure, pretty)


def generate_ini(
    path: str | Path,
    structure: IniStructure,
    pretty: bool | None = None,
    parameters: Parameters | None = None,
    **kwargs,
) -> bool:
    """Write structure to an ini file, replacing it. Cf. IniFile.generate."""
    return IniFile(path, parameters, **kwargs).generate(structure, pretty)
