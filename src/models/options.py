"""
Option specification models

Defines the argument shapes a modeline directive can take and the
immutable OptionSpec entries held by the OptionRegistry.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Callable, Optional


class ArgShape(Enum):
    """
    Type contract for a directive's value

    Determines how the value text of a token is interpreted and what the
    option's setter receives.
    """
    FLAG_TRUE = "flag-true"      # et, wrap -> setter(True)
    FLAG_FALSE = "flag-false"    # noexpandtab, nowrap -> setter(False)
    INTEGER = "integer"          # ts=4 -> setter(4)
    STRING = "string"            # encoding=UTF-8 -> setter("UTF-8")


@dataclass(frozen=True)
class OptionSpec:
    """
    Specification for a single modeline option

    Attributes:
        name: Canonical directive name (compared case-insensitively)
        arg_shape: How the token's value is coerced before dispatch
        setter: Side-effecting callable (target, value) -> None
        alias: Optional short alias (e.g. 'ts' for 'tabstop')
        description: Human-readable description
    """
    name: str
    arg_shape: ArgShape
    setter: Callable[[Any, Any], None]
    alias: Optional[str] = None
    description: str = ""

    def matches(self, key: str) -> bool:
        """
        Check if this spec answers to a directive key

        Args:
            key: Key text from a modeline token

        Returns:
            True if key equals the name or the alias, ignoring case
        """
        lowered = key.lower()
        if self.name.lower() == lowered:
            return True
        return self.alias is not None and self.alias.lower() == lowered
