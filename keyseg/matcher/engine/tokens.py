# Path: keyseg/matcher/engine/tokens.py
"""
Token Helpers

Splitting an input on a matcher's separator and joining token runs back
into candidate segments.

The separator is a regular expression when splitting, so consecutive or
boundary separators produce empty tokens. When joining, the separator text
is inserted literally.
"""

import re
from typing import Sequence

from ..errors import InvalidSeparatorError


def compile_separator(separator: str) -> 're.Pattern[str]':
    """
    Compile a matcher separator.

    Raises:
        InvalidSeparatorError: If the separator is None, empty or malformed
    """
    if separator is None:
        raise InvalidSeparatorError("Cannot use a null separator.")
    if not isinstance(separator, str) or separator == '':
        raise InvalidSeparatorError(f"Separator must be a non-empty string, got {separator!r}.")
    try:
        return re.compile(separator)
    except re.error as e:
        raise InvalidSeparatorError(f"Invalid separator {separator!r}: {e}") from e


def split_tokens(text: str, separator: 're.Pattern[str]') -> list[str]:
    """
    Split text into tokens.

    The empty string has no tokens, unlike a plain regex split which
    returns one empty token; a keyword accepting the empty string therefore
    never matches empty input. Groups captured by the separator are not
    returned as tokens.

    Example:
        split_tokens("4 Privet Drive", re.compile(" "))   # ["4", "Privet", "Drive"]
        split_tokens("a  b", re.compile(" "))             # ["a", "", "b"]
    """
    if not text:
        return []
    parts = separator.split(text)
    if separator.groups:
        # re.split interleaves every captured group after each token
        parts = parts[::separator.groups + 1]
    return parts


def join_tokens(tokens: Sequence[str], start: int, end: int, separator: str) -> str:
    """Join tokens[start:end] with the literal separator text."""
    return separator.join(tokens[start:end])


__all__ = ['compile_separator', 'split_tokens', 'join_tokens']
