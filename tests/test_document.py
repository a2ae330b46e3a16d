"""
BufferDocument tests

Tests the in-memory adapter: line access, setter semantics, reload and
snapshot.
"""

import pytest

from modeline.lib.document import BufferDocument
from modeline.models.document import DocumentAdapter, DocumentReloadError, IndentMode, WrapMode


class TestConstruction:
    """Test building documents"""

    def test_satisfies_protocol(self):
        """BufferDocument is a DocumentAdapter"""
        assert isinstance(BufferDocument(), DocumentAdapter)

    def test_defaults(self):
        """Fresh document uses tabs, width 4, no wrapping, UTF-8"""
        document = BufferDocument()
        assert document.settings_snapshot() == {
            'indent_mode': 'tabs',
            'indent_width': 4,
            'line_wrapping': False,
            'wrap_mode': 'none',
            'encoding': 'UTF-8',
        }

    def test_from_text(self):
        """Text is split into lines without terminators"""
        document = BufferDocument.from_text("a\r\nb\nc")
        assert document.lineCount_get() == 3
        assert document.line_get(1) == "b"

    def test_from_path(self, tmp_path):
        """File contents are read from disk"""
        path = tmp_path / "x.c"
        path.write_bytes(b"/* vim: et */\nint x;\n")
        document = BufferDocument.from_path(path)
        assert document.path == path
        assert document.line_get(0) == "/* vim: et */"

    def test_form_feed_not_a_line_break(self):
        """Form feed and vertical tab stay inside their line"""
        document = BufferDocument.from_text("a\fb\nc\vd\n")
        assert document.lines == ["a\fb", "c\vd"]

    def test_nel_not_a_line_break(self):
        """Byte 0x85 decoded as latin-1 (U+0085) stays inside its line"""
        document = BufferDocument(raw=b"a\x85b\nc", encoding="latin-1")
        assert document.lineCount_get() == 2
        assert document.line_get(0) == "a\x85b"

    def test_line_breaks(self):
        """LF, CR and CRLF all end a line; a trailing break adds no line"""
        assert BufferDocument.from_text("a\nb\rc\r\nd\n").lines == ["a", "b", "c", "d"]
        assert BufferDocument.from_text("a\n\n").lines == ["a", ""]
        assert BufferDocument.from_text("").lines == []

    def test_undecodable_bytes_replaced(self):
        """Initial decode never fails"""
        document = BufferDocument(raw=b"caf\xe9")
        assert document.line_get(0).startswith("caf")

    def test_line_reads_counted(self):
        """line_get calls are counted"""
        document = BufferDocument.from_text("a\nb")
        document.line_get(0)
        document.line_get(1)
        assert document.lines_read == 2

    def test_line_out_of_range(self):
        """Reading past the end raises IndexError"""
        with pytest.raises(IndexError):
            BufferDocument.from_text("a").line_get(5)


class TestSetters:
    """Test adapter write side"""

    def test_wrapping_lockstep(self):
        """Logical flag and render mode change together"""
        document = BufferDocument()
        document.lineWrapping_set(True)
        assert (document.line_wrapping, document.wrap_mode) == (True, WrapMode.WORD)
        document.lineWrapping_set(False)
        assert (document.line_wrapping, document.wrap_mode) == (False, WrapMode.NONE)

    def test_width_keeps_mode(self):
        """Setting a width does not reset indent mode"""
        document = BufferDocument()
        document.indentMode_set(IndentMode.SPACES)
        document.indentWidth_set(2)
        assert document.indent_mode is IndentMode.SPACES

    def test_width_not_validated(self):
        """Zero and negative widths are stored as given"""
        document = BufferDocument()
        document.indentWidth_set(0)
        assert document.indent_width == 0
        document.indentWidth_set(-3)
        assert document.indent_width == -3


class TestReload:
    """Test re-decoding under a new encoding"""

    def test_reload(self):
        """Reload re-decodes raw bytes"""
        document = BufferDocument(raw="é".encode("latin-1"))
        document.encoding_reload("ISO-8859-1")
        assert document.line_get(0) == "é"
        assert document.encoding == "ISO-8859-1"

    def test_unknown_codec(self):
        """Unknown codec raises and keeps text"""
        document = BufferDocument.from_text("abc")
        with pytest.raises(DocumentReloadError):
            document.encoding_reload("no-such-codec")
        assert document.lines == ["abc"]
        assert document.encoding == "UTF-8"

    def test_invalid_bytes(self):
        """Bytes invalid for the codec raise"""
        document = BufferDocument(raw=b"\xff\xfe\xfa", encoding="latin-1")
        with pytest.raises(DocumentReloadError):
            document.encoding_reload("ascii")
