"""
Modeline scanner

Looks through the leading lines of a document for a modeline and hands
the first one it finds to the DirectiveInterpreter.

A line is a modeline when, after trimming, it contains one of the prefix
markers (" geany:", " vi:", " vim:", " ex:") anywhere in it. Only the
first such line within the scan window is used; later modelines are never
read.

Example:
    >>> document = BufferDocument.from_text("/* vim: et ts=2 */\\nint x;\\n")
    >>> result = ModelineScanner().document_scan(document)
    >>> result.line_index, document.indent_width
    (0, 2)
"""

from typing import List, Optional

from ..config import appsettings
from ..models.directives import ScanResult
from ..models.document import DocumentAdapter
from .interpreter import DirectiveInterpreter
from .log import LOG


class ModelineScanner:
    """
    Finds and applies the modeline of a document

    Each call is independent; the scanner keeps no per-document state.

    Attributes:
        interpreter: Interpreter the modeline is handed to
        markers: Prefix markers that identify a modeline
        window: Maximum number of leading lines inspected
    """

    def __init__(
        self,
        interpreter: Optional[DirectiveInterpreter] = None,
        markers: Optional[List[str]] = None,
        window: Optional[int] = None,
    ):
        if interpreter is None:
            interpreter = DirectiveInterpreter()
        self.interpreter = interpreter
        self.markers = list(markers) if markers is not None else list(appsettings.prefix_markers)
        self.window = window if window is not None else appsettings.scan_window

    def line_isModeline(self, line: str) -> bool:
        """Check if a trimmed line contains any prefix marker"""
        return any(marker in line for marker in self.markers)

    def document_resolve(self, document: DocumentAdapter) -> ScanResult:
        """
        Locate the modeline and resolve its directives without applying them

        Args:
            document: Document to read from

        Returns:
            ScanResult; result.found is False if no modeline was found or
            the document was not valid
        """
        result = ScanResult()

        if not document.is_valid:
            LOG("document not valid, skipping scan", level=3)
            return result

        limit = min(document.lineCount_get(), self.window)
        for index in range(limit):
            try:
                line = document.line_get(index).strip()
            except IndexError:
                # Buffer shrank while scanning
                LOG(f"line {index} vanished during scan", level=3)
                break
            result.lines_read += 1

            if self.line_isModeline(line):
                LOG(f"modeline on line {index}", level=3)
                result.line_index = index
                result.line = line
                result.applications = self.interpreter.line_resolve(line)
                break

        return result

    def document_scan(self, document: DocumentAdapter) -> ScanResult:
        """
        Locate the modeline and apply its directives to the document

        Directives are applied left to right, so the last one touching a
        setting wins.

        Returns:
            ScanResult describing what was applied
        """
        result = self.document_resolve(document)
        for application in result.applications:
            application.apply(document)
        return result


def document_onOpen(
    document: DocumentAdapter, scanner: Optional[ModelineScanner] = None
) -> ScanResult:
    """
    "Document opened" lifecycle hook

    Scans the document, then reloads it under its current encoding so a
    fileencoding directive takes effect on the buffer text. If the modeline
    set no encoding, the document's prior encoding is used.

    Raises:
        DocumentReloadError: If the document cannot be decoded with it
    """
    if scanner is None:
        scanner = ModelineScanner()
    result = scanner.document_scan(document)
    if document.is_valid:
        document.encoding_reload(document.encoding)
    return result


def document_onSave(
    document: DocumentAdapter, scanner: Optional[ModelineScanner] = None
) -> ScanResult:
    """"Document saved" lifecycle hook: scan only, no reload"""
    if scanner is None:
        scanner = ModelineScanner()
    return scanner.document_scan(document)
