"""
Tokenizer for modeline text

Splits a modeline into candidate directive tokens and splits a single
token into its key and value.

Example:
    >>> tokenize("// vim: expandtab:ts=8:encoding=UTF-8")
    ['//', 'vim', '', 'expandtab', 'ts=8', 'encoding=UTF-8']
    >>> token_parse("ts=8")
    ParsedToken(key='ts', value='8')
"""

import re
from typing import List, Optional

from ..config import appsettings
from ..models.directives import ParsedToken


def tokenize(line: str, delimiters: Optional[str] = None) -> List[str]:
    """
    Split a modeline on every delimiter character

    Empty fields are kept, so index 0 is always whatever preceded the
    first delimiter (the comment sign, by convention).

    Args:
        line: Modeline text
        delimiters: Separator characters (default: appsettings.token_delimiters)

    Returns:
        Tokens in left-to-right order
    """
    if delimiters is None:
        delimiters = appsettings.token_delimiters
    if not delimiters:
        return [line]
    return re.split(f"[{re.escape(delimiters)}]", line)


def token_parse(token: str) -> Optional[ParsedToken]:
    """
    Split a token on its first '='

    Args:
        token: A single non-empty token

    Returns:
        ParsedToken, or None if '=' is present with nothing before or
        nothing after it (e.g. "=4", "ts=", "=")
    """
    if '=' not in token:
        return ParsedToken(key=token)

    key, value = token.split('=', 1)
    if not key or not value:
        return None
    return ParsedToken(key=key, value=value)


_LEADING_INTEGER = re.compile(r'[+-]?[0-9]+')


def integer_parse(text: str) -> int:
    """
    Permissive base-10 parse of a directive value

    Surrounding whitespace is ignored and only the leading ASCII digits
    count; text with no leading digits parses as 0.

    Example:
        >>> integer_parse("8")
        8
        >>> integer_parse("4spaces")
        4
        >>> integer_parse("four")
        0
    """
    match = _LEADING_INTEGER.match(text.strip())
    if match is None:
        return 0
    return int(match.group(0))
