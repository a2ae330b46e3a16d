"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the current ProgramState's
verbosity level without requiring explicit state passing, and tags each
line with the document being scanned.

The scanner and interpreter call LOG() at level 3 for trace output
(modeline found, token interpreted, setter invoked). When no state has been
connected, as is the case when the library is embedded in a host editor,
LOG() is silent.

Usage:
    from modeline.lib.log import LOG, state_connectToLogger, document_connectToLogger

    # At start of pipeline function:
    state_connectToLogger(state)

    # While working on one file:
    document_connectToLogger("src/main.c")
    LOG("interpret [ts=4]", level=3)    # ... │ src/main.c ║ interpret [ts=4]
    document_connectToLogger(None)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Current ProgramState and current document name
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)
_document_name: ContextVar[Optional[str]] = ContextVar('document_name', default=None)

NO_DOCUMENT = "-"

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<magenta>{extra[document]: <24}</magenta> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.configure(extra={"document": NO_DOCUMENT})
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Call this at the start of each pipeline function to make the state's
    verbosity setting available to LOG() calls throughout that context.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def document_connectToLogger(name: Optional[str]) -> None:
    """
    Tag subsequent log lines with a document name.

    Args:
        name: Document name (e.g. path relative to inputdir), None to clear
    """
    _document_name.set(name)


def document_logger() -> Any:
    """Loguru logger bound to the current document name"""
    return logger.bind(document=_document_name.get() or NO_DOCUMENT)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata

    Verbosity levels:
        1 = Normal output (default)
        2 = Verbose (-v)
        3 = Debug (-vv or higher)
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        document_logger().debug(message, **kwargs)
