# Path: keyseg/matcher/models/analysis_result.py
"""
Analysis Result Models

Models representing the outcome of analyzing one input against every
term of an aggregator.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional

from .segmentation import Segmentation
from .term import term_name


@dataclass(frozen=True)
class WeightedTerm:
    """
    A term that matched an input, with its computed weight.

    Attributes:
        term: The matching term
        segmentations: Every segmentation its matcher produced
        weight: The term's weight over those segmentations
        position: Registration index of the term in its aggregator
    """
    term: Any
    segmentations: tuple[Segmentation, ...]
    weight: float
    position: int = field(default=0, compare=False)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'term': term_name(self.term),
            'weight': self.weight,
            'segmentations': [s.to_dict() for s in self.segmentations],
        }


class AnalysisResult(Mapping):
    """
    Ordered mapping of term -> segmentations, by descending term weight.

    Only terms with at least one segmentation are present.

    Example:
        result = aggregator.analyze("Harry James Potter")
        list(result)              # [FULLNAME, FULLADDRESS]
        result[FULLNAME]          # [Segmentation(FORENAME='Harry James', ...)]
        result.best().term        # FULLNAME
    """

    __slots__ = ('input', '_ranked', '_lookup')

    def __init__(self, input: str, ranked: Iterable[WeightedTerm] = ()):
        self.input = input
        self._ranked = tuple(ranked)
        self._lookup = {wt.term: wt for wt in self._ranked}

    def __getitem__(self, term: Any) -> list[Segmentation]:
        return list(self._lookup[term].segmentations)

    def __iter__(self) -> Iterator[Any]:
        return (wt.term for wt in self._ranked)

    def __len__(self) -> int:
        return len(self._ranked)

    def __repr__(self) -> str:
        body = ', '.join(
            f"{term_name(wt.term)}({wt.weight:g})={list(wt.segmentations)!r}"
            for wt in self._ranked
        )
        return f"AnalysisResult({body})"

    @property
    def ranked(self) -> tuple[WeightedTerm, ...]:
        """Weighted terms in result order."""
        return self._ranked

    def weight_of(self, term: Any) -> float:
        """Return the computed weight of a matching term."""
        return self._lookup[term].weight

    def best(self) -> Optional[WeightedTerm]:
        """Return the highest ranked term, or None when nothing matched."""
        return self._ranked[0] if self._ranked else None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'input': self.input,
            'terms': [wt.to_dict() for wt in self._ranked],
        }


__all__ = ['WeightedTerm', 'AnalysisResult']
