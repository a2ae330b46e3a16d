"""
Directive resolution models

Type-safe structures produced while a modeline is tokenized, resolved
and applied.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, List, Optional

from .options import OptionSpec


class SkipReason(Enum):
    """Why a token did not produce a setter call"""
    EMPTY = "empty token"
    MALFORMED = "empty key or value around '='"
    UNKNOWN_KEY = "no option matches key"
    MISSING_VALUE = "option requires a value"


@dataclass(frozen=True)
class ParsedToken:
    """
    A token split into key and value

    Attributes:
        key: Text before the first '=' (or the whole token)
        value: Text after the first '=', None if the token had no '='

    Example:
        "ts=4"      -> ParsedToken(key="ts", value="4")
        "et"        -> ParsedToken(key="et", value=None)
        "a=b=c"     -> ParsedToken(key="a", value="b=c")
    """
    key: str
    value: Optional[str] = None


@dataclass(frozen=True)
class DirectiveApplication:
    """
    A resolved directive, ready to be handed to its setter

    Attributes:
        spec: Matched registry entry
        value: Coerced value (bool, int or str, per spec.arg_shape)
        token: Original token text
    """
    spec: OptionSpec
    value: Any
    token: str

    def apply(self, target: Any) -> None:
        """Invoke the option setter against a document"""
        self.spec.setter(target, self.value)


@dataclass(frozen=True)
class SkippedDirective:
    """
    Diagnostic record for a token that was ignored

    Attributes:
        token: Original token text
        reason: Why it was skipped
        key: Parsed key, if parsing got that far
    """
    token: str
    reason: SkipReason
    key: Optional[str] = None


@dataclass
class ScanResult:
    """
    Outcome of scanning one document

    Attributes:
        line_index: 0-based index of the modeline, None if none was found
        line: Trimmed modeline text
        applications: Directives resolved from that line, in order
        lines_read: Number of lines pulled from the document
    """
    line_index: Optional[int] = None
    line: str = ""
    applications: List[DirectiveApplication] = field(default_factory=list)
    lines_read: int = 0

    @property
    def found(self) -> bool:
        return self.line_index is not None
