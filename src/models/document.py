"""
Document adapter contract

The modeline core never touches an editor directly. Everything it reads
and everything it changes goes through the DocumentAdapter protocol below,
which a host implements (see lib/document.py for the in-memory one).
"""

from enum import Enum
from typing import Protocol, runtime_checkable


class IndentMode(Enum):
    """Whether indentation uses tab or space characters"""
    TABS = "tabs"
    SPACES = "spaces"


class WrapMode(Enum):
    """Physical word-wrap render mode"""
    NONE = "none"
    WORD = "word"


class DocumentReloadError(ValueError):
    """Raised when a document cannot be re-read under a given encoding"""
    pass


@runtime_checkable
class DocumentAdapter(Protocol):
    """
    Host-side document interface

    Read side:
        is_valid, lineCount_get(), line_get(index)

    Write side:
        indentMode_set(), indentWidth_set(), lineWrapping_set(),
        encoding_set(), encoding_reload()

    line_get() may raise IndexError if the buffer shrank under the scanner;
    callers treat that as end of input.
    """

    is_valid: bool
    encoding: str

    def lineCount_get(self) -> int: ...

    def line_get(self, index: int) -> str: ...

    def indentMode_set(self, mode: IndentMode) -> None: ...

    def indentWidth_set(self, width: int) -> None: ...

    def lineWrapping_set(self, enabled: bool) -> None: ...

    def encoding_set(self, name: str) -> None: ...

    def encoding_reload(self, name: str) -> None: ...
