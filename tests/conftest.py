"""
Shared fixtures

RecordingDocument is a BufferDocument that also logs every setter call,
so tests can assert on what the interpreter invoked and in which order.
"""

import pytest

from modeline.lib.document import BufferDocument


class RecordingDocument(BufferDocument):
    """BufferDocument that records setter calls as (method, value) tuples"""

    def __init__(self, *args, **kwargs):
        self.calls = []
        super().__init__(*args, **kwargs)

    def indentMode_set(self, mode):
        self.calls.append(("indentMode_set", mode))
        super().indentMode_set(mode)

    def indentWidth_set(self, width):
        self.calls.append(("indentWidth_set", width))
        super().indentWidth_set(width)

    def lineWrapping_set(self, enabled):
        self.calls.append(("lineWrapping_set", enabled))
        super().lineWrapping_set(enabled)

    def encoding_set(self, name):
        self.calls.append(("encoding_set", name))
        super().encoding_set(name)

    def encoding_reload(self, name):
        self.calls.append(("encoding_reload", name))
        super().encoding_reload(name)

    def calls_named(self, method):
        return [value for name, value in self.calls if name == method]


@pytest.fixture
def recorder():
    """Empty recording document"""
    return RecordingDocument()


@pytest.fixture
def document_make():
    """Factory building a recording document from text"""

    def make(text: str) -> RecordingDocument:
        return RecordingDocument(raw=text.encode("utf-8"), encoding="UTF-8")

    return make
