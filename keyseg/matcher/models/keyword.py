# Path: keyseg/matcher/models/keyword.py
"""
Keyword Models

A keyword is one named, pattern-matched segment type of an input, such as
a forename, a house number or an ISO date. Anything that offers a `name`
and a `pattern` can act as a keyword; `verify` and `weight` are optional
and fall back to "always accept" and 1.0.

Example:
    class Keywords(Enum):
        HOUSENR = r"\\d+"
        STREET = r"[A-Z][A-Za-z]*( [A-Z][A-Za-z]*)*"

        @property
        def pattern(self):
            return self.value

    # or, without defining a type:
    HOUSENR = Keyword("HOUSENR", r"\\d+")
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Protocol, Union, runtime_checkable

from ...constants import DEFAULT_KEYWORD_WEIGHT
from ..errors import GrammarError, InvalidPatternError, NullArgumentError


class Occurrence(str, Enum):
    """How a keyword may occur within its matcher."""
    FIXED = "fixed"
    OPTIONAL = "optional"
    EXCLUSIVE = "exclusive"


@runtime_checkable
class KeywordLike(Protocol):
    """Structural type accepted wherever the engine expects a keyword."""

    @property
    def name(self) -> str: ...

    @property
    def pattern(self) -> Union[str, 're.Pattern[str]']: ...


Verifier = Callable[[str], bool]
Weigher = Callable[[str, str], float]


@dataclass(frozen=True)
class Keyword:
    """
    Default keyword implementation.

    Attributes:
        name: Identifier of the keyword, unique within a matcher
        pattern: Regular expression a segment must match entirely
        verifier: Extra acceptance check for what a regex cannot express
        weigher: Constant weight or callable(input, segment) -> float
    """
    name: str
    pattern: str
    verifier: Optional[Verifier] = field(default=None, compare=False, repr=False)
    weigher: Union[float, Weigher, None] = field(default=None, compare=False, repr=False)

    def verify(self, segment: str) -> bool:
        if self.verifier is None:
            return True
        return bool(self.verifier(segment))

    def weight(self, input: str, segment: str) -> float:
        if self.weigher is None:
            return DEFAULT_KEYWORD_WEIGHT
        if callable(self.weigher):
            return float(self.weigher(input, segment))
        return float(self.weigher)

    def __str__(self) -> str:
        return self.name


def keyword_name(keyword: Any) -> str:
    """Return the display name of a keyword."""
    name = getattr(keyword, 'name', None)
    return name if isinstance(name, str) else str(keyword)


def keyword_verify(keyword: Any, segment: str) -> bool:
    """Run a keyword's verify predicate, accepting when it has none."""
    verify = getattr(keyword, 'verify', None)
    if verify is None:
        return True
    return bool(verify(segment))


def keyword_weight(keyword: Any, input: str, segment: str) -> float:
    """Return a keyword's weight for a segment, 1.0 when it has none."""
    weight = getattr(keyword, 'weight', None)
    if weight is None:
        return DEFAULT_KEYWORD_WEIGHT
    return float(weight(input, segment))


@dataclass(frozen=True)
class Slot:
    """
    A keyword at its fixed position within a matcher.

    Attributes:
        keyword: The keyword occupying the slot
        occurrence: How the keyword may occur
        compiled: The keyword's pattern, compiled once at construction
    """
    keyword: Any
    occurrence: Occurrence
    compiled: 're.Pattern[str]' = field(compare=False, repr=False)

    @classmethod
    def compile(cls, keyword: Any, occurrence: Occurrence) -> 'Slot':
        """
        Build a slot, compiling the keyword's pattern.

        Raises:
            NullArgumentError: If keyword or occurrence is None
            InvalidPatternError: If the pattern is missing or malformed
        """
        if keyword is None:
            raise NullArgumentError("Cannot add null keyword.")
        if occurrence is None:
            raise NullArgumentError(
                f"Cannot add keyword '{keyword_name(keyword)}' using a null occurrence."
            )
        try:
            occurrence = Occurrence(occurrence)
        except ValueError as e:
            raise GrammarError(
                f"Keyword '{keyword_name(keyword)}' has an unknown occurrence {occurrence!r}."
            ) from e

        pattern = getattr(keyword, 'pattern', None)
        if isinstance(pattern, re.Pattern):
            return cls(keyword=keyword, occurrence=occurrence, compiled=pattern)
        if not isinstance(pattern, str):
            raise InvalidPatternError(
                keyword_name(keyword), repr(pattern), "pattern must be a string"
            )
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise InvalidPatternError(keyword_name(keyword), pattern, str(e)) from e
        return cls(keyword=keyword, occurrence=occurrence, compiled=compiled)

    def accepts(self, segment: str) -> bool:
        """Whether a joined segment fully matches the pattern and verifies."""
        if self.compiled.fullmatch(segment) is None:
            return False
        return keyword_verify(self.keyword, segment)


__all__ = [
    'Occurrence',
    'KeywordLike',
    'Keyword',
    'Slot',
    'keyword_name',
    'keyword_verify',
    'keyword_weight',
]
