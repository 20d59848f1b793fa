# Path: keyseg/matcher/verifiers.py
"""
Named Verifiers

Acceptance checks a regular expression cannot express, addressable by
name from grammar files (keyword `verify:` entries).

Built-in verifiers:
- iso_date: calendar-valid YYYY-MM-DD
- iso_time: valid HH:MM or HH:MM:SS
- iso_datetime: valid date and time joined by 'T' or a space
- non_blank: contains something other than whitespace
"""

from datetime import date, datetime, time
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from .errors import UnknownVerifierError

Verifier = Callable[[str], bool]


def _parses(parser: Callable[[str], object]) -> Verifier:
    def verify(segment: str) -> bool:
        try:
            parser(segment)
        except ValueError:
            return False
        return True
    return verify


def verify_non_blank(segment: str) -> bool:
    return bool(segment.strip())


BUILTIN_VERIFIERS: Mapping[str, Verifier] = MappingProxyType({
    'iso_date': _parses(date.fromisoformat),
    'iso_time': _parses(time.fromisoformat),
    'iso_datetime': _parses(datetime.fromisoformat),
    'non_blank': verify_non_blank,
})


def resolve_verifier(
    name: str,
    extra: Optional[Mapping[str, Verifier]] = None
) -> Verifier:
    """
    Look up a verifier by name.

    Args:
        name: Verifier name as written in a grammar file
        extra: Caller-supplied verifiers, consulted before the built-ins

    Returns:
        The verifier callable

    Raises:
        UnknownVerifierError: If no verifier has that name
    """
    if extra and name in extra:
        return extra[name]
    if name in BUILTIN_VERIFIERS:
        return BUILTIN_VERIFIERS[name]
    raise UnknownVerifierError(name)


__all__ = ['BUILTIN_VERIFIERS', 'resolve_verifier', 'verify_non_blank']
