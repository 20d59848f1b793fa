# Path: keyseg/matcher/scoring/tiebreaker.py
"""
Tiebreaker

Orders weighted terms by descending weight and resolves exact ties.
"""

import logging
from typing import Callable, Iterable, Union

from ...constants import DEFAULT_TIEBREAKER, TiebreakerType
from ...core.logger import get_process_logger
from ..models.analysis_result import WeightedTerm
from ..models.term import term_name


class Tiebreaker:
    """
    Ranks terms and resolves ties between equally weighted terms.

    Tiebreaker strategies:
    - DECLARATION_ORDER: Prefer terms registered earlier
    - TERM_NAME: Prefer terms whose name sorts first
    - FEWEST_SEGMENTATIONS: Prefer the least ambiguous term

    Every strategy falls back to declaration order, so the ranking is the
    same whether terms were evaluated sequentially or in parallel.

    Example:
        tiebreaker = Tiebreaker()
        ranked = tiebreaker.order(weighted_terms, TiebreakerType.TERM_NAME)
    """

    def __init__(self):
        """Initialize tiebreaker."""
        self.logger = get_process_logger('matcher.scoring.tiebreaker')

    def order(
        self,
        weighted_terms: Iterable[WeightedTerm],
        strategy: Union[TiebreakerType, str] = DEFAULT_TIEBREAKER
    ) -> list[WeightedTerm]:
        """
        Order terms by descending weight, breaking ties by strategy.

        Args:
            weighted_terms: Terms with computed weights
            strategy: Tiebreaker strategy to use

        Returns:
            Ranked list of weighted terms

        Raises:
            ValueError: If strategy is not a known tiebreaker
        """
        strategy = TiebreakerType(strategy)
        tie_key = self._tie_key(strategy)
        ranked = sorted(weighted_terms, key=lambda wt: (-wt.weight, tie_key(wt)))

        if self.logger.isEnabledFor(logging.DEBUG):
            weights = [wt.weight for wt in ranked]
            if len(set(weights)) < len(weights):
                self.logger.debug(
                    f"Resolved weight ties using {strategy.value}: "
                    f"{[term_name(wt.term) for wt in ranked]}"
                )

        return ranked

    def _tie_key(self, strategy: TiebreakerType) -> Callable[[WeightedTerm], tuple]:
        if strategy == TiebreakerType.TERM_NAME:
            return self._by_term_name
        elif strategy == TiebreakerType.FEWEST_SEGMENTATIONS:
            return self._by_segmentation_count
        return self._by_declaration_order

    def _by_declaration_order(self, weighted_term: WeightedTerm) -> tuple:
        """Prefer terms registered earlier."""
        return (weighted_term.position,)

    def _by_term_name(self, weighted_term: WeightedTerm) -> tuple:
        """Prefer terms whose name sorts first."""
        return (term_name(weighted_term.term), weighted_term.position)

    def _by_segmentation_count(self, weighted_term: WeightedTerm) -> tuple:
        """Prefer terms with fewer segmentations."""
        return (len(weighted_term.segmentations), weighted_term.position)


__all__ = ['Tiebreaker']
