"""
Models package for modeline

Contains data structures and type definitions for the scan pipeline.
"""

from .state import ProgramState, pipeline
from .options import ArgShape, OptionSpec
from .document import DocumentAdapter, DocumentReloadError, IndentMode, WrapMode
from .directives import (
    DirectiveApplication,
    ParsedToken,
    ScanResult,
    SkippedDirective,
    SkipReason,
)

__all__ = [
    "ProgramState",
    "pipeline",
    "ArgShape",
    "OptionSpec",
    "DocumentAdapter",
    "DocumentReloadError",
    "IndentMode",
    "WrapMode",
    "DirectiveApplication",
    "ParsedToken",
    "ScanResult",
    "SkippedDirective",
    "SkipReason",
]
