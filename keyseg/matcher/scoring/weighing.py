# Path: keyseg/matcher/scoring/weighing.py
"""
Weighing

Computes the weights used to rank segmentations within a matcher and
terms within an aggregator.
"""

from typing import Any, Sequence

from ...core.logger import get_process_logger
from ..models.keyword import keyword_weight
from ..models.segmentation import Segmentation
from ..models.term import term_name, term_weight


class SegmentationWeigher:
    """
    Weighs a segmentation as the sum of its keywords' weights.

    Example:
        weigher = SegmentationWeigher()
        weigher.weigh("4 Privet Drive", segmentation)   # 3.0 with default weights
    """

    def __init__(self):
        """Initialize segmentation weigher."""
        self.logger = get_process_logger('matcher.scoring.segmentation_weigher')

    def weigh(self, input: str, segmentation: Segmentation) -> float:
        """
        Sum the keyword weights of a segmentation.

        Args:
            input: The analyzed input
            segmentation: One segmentation of that input

        Returns:
            Total weight
        """
        return sum(
            keyword_weight(keyword, input, segment)
            for keyword, segment in segmentation.entries
        )

    def rank(self, input: str, segmentations: Sequence[Segmentation]) -> list[Segmentation]:
        """
        Order segmentations by descending weight.

        Segmentations of equal weight keep their enumeration order.
        """
        weights = [self.weigh(input, segmentation) for segmentation in segmentations]
        order = sorted(range(len(segmentations)), key=lambda i: -weights[i])
        return [segmentations[i] for i in order]


class TermWeigher:
    """Weighs a term over every segmentation its matcher produced."""

    def __init__(self):
        """Initialize term weigher."""
        self.logger = get_process_logger('matcher.scoring.term_weigher')

    def weigh(self, term: Any, input: str, segmentations: Sequence[Segmentation]) -> float:
        """
        Compute a term's weight.

        Args:
            term: The matching term
            input: The analyzed input
            segmentations: Non-empty list of the term's segmentations

        Returns:
            The term's weight
        """
        weight = term_weight(term, input, segmentations)
        self.logger.debug(
            f"Term {term_name(term)} weighs {weight:g} "
            f"over {len(segmentations)} segmentation(s)"
        )
        return weight


__all__ = ['SegmentationWeigher', 'TermWeigher']
