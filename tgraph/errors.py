"""Errors raised when reading or writing graph files."""

from pathlib import Path
from typing import Optional, Union


class GraphFileError(Exception):

    """Base class for all graph file errors.

    Graph operations themselves never raise. Only serialization and
    deserialization do, and always with a subclass of this.
    """


class FileIOError(GraphFileError):

    """The file could not be read or written."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path


class FormatError(GraphFileError):

    """The text does not have the expected structure."""

    def __init__(self, message: str, line: Optional[int] = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class ParseError(GraphFileError):

    """A token could not be converted to its target type.

    The conversion error is available as __cause__.
    """

    def __init__(self, token: str, target: str, line: Optional[int] = None):
        message = f"cannot parse {token!r} as {target}"
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.token = token
        self.target = target
        self.line = line
