"""
In-memory document adapter

BufferDocument implements the DocumentAdapter protocol over a byte buffer
decoded into lines. It is what the CLI scans, and what tests use in place
of a live editor.
"""

import codecs
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config import appsettings
from ..models.document import DocumentReloadError, IndentMode, WrapMode


_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class BufferDocument:
    """
    Formatting state and text of a single document

    Attributes:
        raw: Undecoded file contents
        lines: Decoded lines (line terminators stripped)
        encoding: Current text encoding name
        indent_mode: Tabs or spaces
        indent_width: Indent/tab width
        line_wrapping: Logical wrapping flag
        wrap_mode: Render mode, always WORD when line_wrapping else NONE
        is_valid: Whether the document may be scanned
        lines_read: Number of line_get() calls served
        path: Source file, if loaded from disk
    """

    def __init__(
        self,
        raw: bytes = b"",
        encoding: Optional[str] = None,
        path: Optional[Path] = None,
    ):
        self.raw = raw
        self.encoding = encoding or appsettings.default_encoding
        self.path = path
        self.indent_mode = IndentMode.TABS
        self.indent_width = 4
        self.line_wrapping = False
        self.wrap_mode = WrapMode.NONE
        self.is_valid = True
        self.lines_read = 0
        self.lines: List[str] = self.text_decode(self.encoding, errors="replace")

    @classmethod
    def from_text(cls, text: str, encoding: Optional[str] = None) -> "BufferDocument":
        """Build a document from already-decoded text"""
        encoding = encoding or appsettings.default_encoding
        return cls(raw=text.encode(encoding), encoding=encoding)

    @classmethod
    def from_path(cls, path: Path, encoding: Optional[str] = None) -> "BufferDocument":
        """
        Read a document from disk

        Undecodable bytes are replaced until the document is reloaded
        under the encoding its modeline declares.

        Raises:
            OSError: If the file cannot be read
        """
        return cls(raw=Path(path).read_bytes(), encoding=encoding, path=Path(path))

    def text_decode(self, encoding: str, errors: str = "strict") -> List[str]:
        """
        Decode raw bytes under an encoding and split into lines

        Only LF, CR and CRLF end a line; form feeds, U+0085 and other
        Unicode separators stay inside it. A trailing line break does not
        start an extra empty line.
        """
        lines = _LINE_BREAK.split(self.raw.decode(encoding, errors=errors))
        if lines[-1] == "":
            lines.pop()
        return lines

    # Read side

    def lineCount_get(self) -> int:
        return len(self.lines)

    def line_get(self, index: int) -> str:
        self.lines_read += 1
        return self.lines[index]

    # Write side

    def indentMode_set(self, mode: IndentMode) -> None:
        self.indent_mode = mode

    def indentWidth_set(self, width: int) -> None:
        """Set indent width, keeping the current indent mode"""
        self.indent_width = width
        self.indentMode_set(self.indent_mode)

    def lineWrapping_set(self, enabled: bool) -> None:
        self.line_wrapping = enabled
        self.wrap_mode = WrapMode.WORD if enabled else WrapMode.NONE

    def encoding_set(self, name: str) -> None:
        self.encoding = name

    def encoding_reload(self, name: str) -> None:
        """
        Re-decode the buffer under an encoding

        Raises:
            DocumentReloadError: Unknown codec, or bytes invalid for it
        """
        try:
            codecs.lookup(name)
            lines = self.text_decode(name)
        except (LookupError, UnicodeDecodeError) as e:
            raise DocumentReloadError(f"Cannot reload as '{name}': {e}") from e
        self.lines = lines
        self.encoding = name

    def settings_snapshot(self) -> Dict[str, Any]:
        """Current formatting state as plain values"""
        return {
            'indent_mode': self.indent_mode.value,
            'indent_width': self.indent_width,
            'line_wrapping': self.line_wrapping,
            'wrap_mode': self.wrap_mode.value,
            'encoding': self.encoding,
        }

    def __repr__(self) -> str:
        return f"BufferDocument(path='{self.path}', lines={len(self.lines)}, encoding='{self.encoding}')"
