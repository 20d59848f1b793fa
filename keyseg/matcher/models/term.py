# Path: keyseg/matcher/models/term.py
"""
Term Models

A term is a named category an input may belong to (a full name, an
address, a birthday). Each term is backed by one keyword matcher and
ranked by a weight computed over every segmentation that matcher found.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol, Sequence, Union, runtime_checkable

from ...constants import DEFAULT_TERM_WEIGHT


@runtime_checkable
class TermLike(Protocol):
    """Structural type accepted wherever the engine expects a term."""

    @property
    def name(self) -> str: ...


TermWeigher = Callable[[str, Sequence[Any]], float]


@dataclass(frozen=True)
class Term:
    """
    Default term implementation.

    Attributes:
        name: Identifier of the term
        weigher: Constant weight or callable(input, segmentations) -> float
    """
    name: str
    weigher: Union[float, TermWeigher, None] = field(default=None, compare=False, repr=False)

    def weight(self, input: str, segmentations: Sequence[Any]) -> float:
        if self.weigher is None:
            return DEFAULT_TERM_WEIGHT
        if callable(self.weigher):
            return float(self.weigher(input, segmentations))
        return float(self.weigher)

    def __str__(self) -> str:
        return self.name


def term_name(term: Any) -> str:
    """Return the display name of a term."""
    name = getattr(term, 'name', None)
    return name if isinstance(name, str) else str(term)


def term_weight(term: Any, input: str, segmentations: Sequence[Any]) -> float:
    """Return a term's weight, 1.0 when it declares none."""
    weight: Optional[Callable] = getattr(term, 'weight', None)
    if weight is None:
        return DEFAULT_TERM_WEIGHT
    return float(weight(input, segmentations))


__all__ = ['TermLike', 'Term', 'term_name', 'term_weight']
