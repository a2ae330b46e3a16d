"""
modeline - Editor modeline interpreter

Detects vim/geany-style modelines near the top of a document and applies
their formatting directives.
"""

__version__ = "1.0.0"
__author__ = "Matt Hayes"
__email__ = "nobomb@gmail.com"

from .lib import (
    OptionRegistry,
    DirectiveInterpreter,
    ModelineScanner,
    BufferDocument,
    document_onOpen,
    document_onSave,
    tokenize,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "OptionRegistry",
    "DirectiveInterpreter",
    "ModelineScanner",
    "BufferDocument",
    "document_onOpen",
    "document_onSave",
    "tokenize",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
