# Path: keyseg/matcher/engine/term_aggregator.py
"""
Term Aggregator

The main entry point for matching one input against several terms.
Dispatches the input to every term's keyword matcher and ranks the terms
that matched by weight.
"""

from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Iterable, Optional, TypeVar, Union

from ...constants import DEFAULT_MAX_WORKERS, DEFAULT_TIEBREAKER, TiebreakerType
from ...core.logger import get_process_logger
from ..errors import DuplicateTermError, NullArgumentError, UnknownTermError
from ..models.analysis_result import AnalysisResult, WeightedTerm
from ..models.segmentation import Segmentation
from ..models.term import term_name
from ..scoring import TermWeigher, Tiebreaker
from .keyword_matcher import KeywordMatcher

T = TypeVar('T')


class TermAggregator:
    """
    Ranks the terms an input could belong to.

    The aggregator:
    1. Dispatches the input to the keyword matcher of every term
    2. Drops terms whose matcher found no segmentation
    3. Weighs each remaining term over its segmentations
    4. Orders terms by descending weight, ties by the tiebreaker

    Terms are evaluated one after another unless max_workers > 1, in which
    case a thread pool is used. The ranking is identical either way.

    Example:
        aggregator = TermAggregator({
            FULLNAME: name_matcher,
            FULLADDRESS: address_matcher,
        })

        result = aggregator.analyze("Harry James Potter")
        # AnalysisResult(FULLNAME=[...], FULLADDRESS=[...])
    """

    def __init__(
        self,
        terms: Union[Mapping, Iterable[tuple[Any, KeywordMatcher]]] = (),
        max_workers: int = DEFAULT_MAX_WORKERS,
        tiebreaker: Union[TiebreakerType, str] = DEFAULT_TIEBREAKER
    ):
        """
        Initialize term aggregator.

        Args:
            terms: Term -> matcher mapping, or (term, matcher) pairs
            max_workers: Threads used to evaluate terms; 1 is sequential
            tiebreaker: Strategy ordering terms of equal weight

        Raises:
            NullArgumentError: If a term or matcher is None
            DuplicateTermError: If a term is registered twice
            ValueError: If the tiebreaker is unknown
        """
        self.logger = get_process_logger('matcher.term_aggregator')

        pairs = terms.items() if isinstance(terms, Mapping) else terms
        registered: dict[Any, KeywordMatcher] = {}
        for term, matcher in pairs:
            if term is None:
                raise NullArgumentError("Cannot add a matcher for a null term.")
            if matcher is None:
                raise NullArgumentError(f"Cannot add a null matcher for the term '{term}'.")
            if term in registered:
                raise DuplicateTermError(term)
            registered[term] = matcher

        self._matchers = registered
        self._terms = tuple(registered)
        self._max_workers = max(1, int(max_workers))
        self._strategy = TiebreakerType(tiebreaker)

        self.term_weigher = TermWeigher()
        self.tiebreaker = Tiebreaker()

    @property
    def terms(self) -> tuple[Any, ...]:
        """Registered terms in registration order."""
        return self._terms

    @property
    def max_workers(self) -> int:
        return self._max_workers

    @property
    def tiebreaker_strategy(self) -> TiebreakerType:
        return self._strategy

    def __len__(self) -> int:
        return len(self._terms)

    def __contains__(self, term: Any) -> bool:
        return term in self._matchers

    def __repr__(self) -> str:
        names = ', '.join(term_name(term) for term in self._terms)
        return f"TermAggregator([{names}])"

    def matcher_for(self, term: Any) -> KeywordMatcher:
        """
        Return the matcher registered for a term.

        Raises:
            UnknownTermError: If the term is None or not registered
        """
        if term is None or term not in self._matchers:
            raise UnknownTermError(term)
        return self._matchers[term]

    def matches(self, input: Optional[str]) -> bool:
        """Return whether any term's matcher matches the input."""
        if self._max_workers == 1:
            return any(self._matchers[term].matches(input) for term in self._terms)
        return any(self._dispatch(lambda matcher: matcher.matches(input)))

    def matches_term(self, input: Optional[str], term: Any) -> bool:
        """
        Return whether the matcher of one term matches the input.

        Raises:
            UnknownTermError: If the term is None or not registered
        """
        return self.matcher_for(term).matches(input)

    def matching(self, input: Optional[str]) -> set[Any]:
        """Return the set of terms whose matcher matches the input."""
        outcomes = self._dispatch(lambda matcher: matcher.matches(input))
        return {term for term, matched in zip(self._terms, outcomes) if matched}

    def analyze(self, input: Optional[str]) -> AnalysisResult:
        """
        Analyze the input against every term.

        Args:
            input: The input to analyze; None is treated as ""

        Returns:
            AnalysisResult mapping each matching term to its segmentations,
            ordered by descending term weight; empty if nothing matched
        """
        text = '' if input is None else input
        outcomes = self._dispatch(lambda matcher: matcher.analyze(text))

        weighted = []
        for position, (term, segmentations) in enumerate(zip(self._terms, outcomes)):
            if not segmentations:
                continue
            weighted.append(WeightedTerm(
                term=term,
                segmentations=tuple(segmentations),
                weight=self.term_weigher.weigh(term, text, segmentations),
                position=position,
            ))

        ranked = self.tiebreaker.order(weighted, self._strategy)

        self.logger.debug(
            f"{len(ranked)} of {len(self._terms)} term(s) matched: "
            f"{[term_name(wt.term) for wt in ranked]}"
        )
        return AnalysisResult(text, ranked)

    def analyze_term(self, input: Optional[str], term: Any) -> list[Segmentation]:
        """
        Analyze the input against one term's matcher.

        Raises:
            UnknownTermError: If the term is None or not registered
        """
        return self.matcher_for(term).analyze(input)

    def _dispatch(self, evaluate: Callable[[KeywordMatcher], T]) -> list[T]:
        """Evaluate every matcher, returning outcomes in registration order."""
        matchers = [self._matchers[term] for term in self._terms]
        if self._max_workers == 1 or len(matchers) < 2:
            return [evaluate(matcher) for matcher in matchers]

        workers = min(self._max_workers, len(matchers))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(evaluate, matchers))


__all__ = ['TermAggregator']
