# Path: keyseg/matcher/engine/keyword_matcher.py
"""
Keyword Matcher

Segmentation engine for a single term: splits an input on a separator and
finds every way its ordered keywords can claim the resulting tokens.
"""

from typing import Any, Iterable, Optional, Union

from ...constants import DEFAULT_ANY_MUST_MATCH, DEFAULT_SEPARATOR
from ...core.logger import get_process_logger
from ..errors import DuplicateKeywordError, NullArgumentError
from ..models.keyword import Occurrence, Slot
from ..models.segmentation import Segmentation
from ..scoring.weighing import SegmentationWeigher
from .activation import enumerate_activations
from .assignment import assign_tokens
from .tokens import compile_separator, split_tokens

SlotSpec = Union[Slot, tuple[Any, Occurrence]]


class KeywordMatcher:
    """
    Matches an input against an ordered sequence of keywords.

    The matcher is immutable once constructed and may be shared between
    threads.

    Example:
        matcher = KeywordMatcher([
            (HOUSENR, Occurrence.OPTIONAL),
            (STREET, Occurrence.FIXED),
            (CITY, Occurrence.FIXED),
        ])

        matcher.analyze("4 Privet Drive Little Whinging")
        # [{HOUSENR: "4", STREET: "Privet", CITY: "Drive Little Whinging"},
        #  {HOUSENR: "4", STREET: "Privet Drive", CITY: "Little Whinging"},
        #  {HOUSENR: "4", STREET: "Privet Drive Little", CITY: "Whinging"}]
    """

    def __init__(
        self,
        slots: Iterable[SlotSpec] = (),
        separator: str = DEFAULT_SEPARATOR,
        any_must_match: bool = DEFAULT_ANY_MUST_MATCH
    ):
        """
        Initialize keyword matcher.

        Args:
            slots: (keyword, occurrence) pairs or prepared Slots, in order
            separator: Regular expression splitting an input into tokens
            any_must_match: Whether at least one keyword has to match; only
                            matters when every keyword is optional, where
                            False lets the empty input match

        Raises:
            NullArgumentError: If a keyword or occurrence is None
            DuplicateKeywordError: If a keyword is declared twice
            InvalidPatternError: If a keyword pattern does not compile
            InvalidSeparatorError: If the separator is empty or malformed
        """
        self.logger = get_process_logger('matcher.keyword_matcher')

        self._separator_pattern = compile_separator(separator)
        self._separator = separator
        self._any_must_match = bool(any_must_match)

        prepared: list[Slot] = []
        for spec in slots:
            if isinstance(spec, Slot):
                slot = spec
            elif spec is None:
                raise NullArgumentError("Cannot add null keyword.")
            else:
                keyword, occurrence = spec
                slot = Slot.compile(keyword, occurrence)
            if any(existing.keyword == slot.keyword for existing in prepared):
                raise DuplicateKeywordError(slot.keyword)
            prepared.append(slot)

        self._slots = tuple(prepared)
        self._occurrences = tuple(slot.occurrence for slot in self._slots)
        self._weigher = SegmentationWeigher()

    @property
    def slots(self) -> tuple[Slot, ...]:
        """Slots in declaration order."""
        return self._slots

    @property
    def keywords(self) -> list[Any]:
        """Keywords in declaration order."""
        return [slot.keyword for slot in self._slots]

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def any_must_match(self) -> bool:
        return self._any_must_match

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        keywords = ', '.join(
            f"{slot.keyword}:{slot.occurrence.value}" for slot in self._slots
        )
        return f"KeywordMatcher([{keywords}], separator={self._separator!r})"

    def matches(self, input: Optional[str]) -> bool:
        """
        Return whether the input can be segmented by this matcher.

        Args:
            input: The input to match; None is treated as ""

        Returns:
            True if analyze() would return at least one segmentation
        """
        return bool(self.analyze(input))

    def analyze(self, input: Optional[str]) -> list[Segmentation]:
        """
        Return every segmentation of the input, in enumeration order.

        Activation vectors are explored depth-first (optional keywords
        absent before present, an exclusive keyword's solo assignment after
        the assignments without it), and at each keyword shorter token runs
        come before longer ones. Identical segmentations reached through
        different activation vectors are all kept.

        Args:
            input: The input to analyze; None is treated as ""

        Returns:
            List of segmentations; empty if the input does not match
        """
        text = '' if input is None else input
        tokens = split_tokens(text, self._separator_pattern)

        results: list[Segmentation] = []
        vectors = 0
        for activation in enumerate_activations(self._occurrences, self._any_must_match):
            vectors += 1
            active_slots = [
                slot for slot, is_active in zip(self._slots, activation) if is_active
            ]
            results.extend(assign_tokens(tokens, active_slots, self._separator))

        self.logger.debug(
            f"{len(tokens)} token(s), {vectors} activation vector(s), "
            f"{len(results)} segmentation(s)"
        )
        return results

    def rank(self, input: Optional[str]) -> list[Segmentation]:
        """
        Return every segmentation ordered by descending keyword weight.

        A segmentation weighs the sum of its keywords' weights; equal
        weights keep enumeration order.
        """
        text = '' if input is None else input
        return self._weigher.rank(text, self.analyze(text))


__all__ = ['KeywordMatcher']
