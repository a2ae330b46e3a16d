"""
modeline - Editor modeline interpreter

Detects vim/geany-style modelines near the top of a document and applies
their formatting directives.
"""

__version__ = "1.0.0"
__author__ = "Matt Hayes"
__email__ = "nobomb@gmail.com"

from .options import OptionRegistry, OptionRegistryError
from .tokenizer import tokenize, token_parse, integer_parse
from .interpreter import DirectiveInterpreter
from .scanner import ModelineScanner, document_onOpen, document_onSave
from .document import BufferDocument
from .report import ReportError
from .log import LOG, state_connectToLogger, document_connectToLogger, document_logger

__all__ = [
    "OptionRegistry",
    "OptionRegistryError",
    "tokenize",
    "token_parse",
    "integer_parse",
    "DirectiveInterpreter",
    "ModelineScanner",
    "document_onOpen",
    "document_onSave",
    "BufferDocument",
    "ReportError",
    "LOG",
    "state_connectToLogger",
    "document_connectToLogger",
    "document_logger",
    "__version__",
]
