# Path: keyseg/matcher/engine/builders.py
"""
Grammar Builders

Mutable, configuration-time assembly of keyword matchers and term
aggregators. Each add/remove is validated immediately and reported to an
optional change handler; build() returns the immutable engine object.
"""

from typing import Any, Optional, Union

from ...constants import (
    DEFAULT_ANY_MUST_MATCH,
    DEFAULT_MAX_WORKERS,
    DEFAULT_SEPARATOR,
    DEFAULT_TIEBREAKER,
    TiebreakerType,
)
from ...core.logger import get_input_logger
from ..errors import DuplicateKeywordError, DuplicateTermError, NullArgumentError
from ..models.events import GrammarEvent, GrammarEventHandler, GrammarEventType
from ..models.keyword import Occurrence, Slot, keyword_name
from ..models.term import term_name
from .keyword_matcher import KeywordMatcher
from .term_aggregator import TermAggregator
from .tokens import compile_separator


class KeywordMatcherBuilder:
    """
    Assembles a KeywordMatcher keyword by keyword.

    Example:
        matcher = (
            KeywordMatcherBuilder(on_change=events.append)
            .add_keyword(FORENAME)
            .add_keyword(UNDESIRABLE_NUMBER, Occurrence.EXCLUSIVE)
            .add_keyword(LASTNAME)
            .build()
        )
    """

    def __init__(
        self,
        separator: str = DEFAULT_SEPARATOR,
        any_must_match: bool = DEFAULT_ANY_MUST_MATCH,
        on_change: Optional[GrammarEventHandler] = None
    ):
        """
        Initialize keyword matcher builder.

        Args:
            separator: Regular expression splitting an input into tokens
            any_must_match: Whether at least one keyword has to match
            on_change: Called with a GrammarEvent after every change

        Raises:
            InvalidSeparatorError: If the separator is empty or malformed
        """
        self.logger = get_input_logger('grammar.keyword_matcher_builder')
        compile_separator(separator)
        self.separator = separator
        self.any_must_match = any_must_match
        self._on_change = on_change
        self._slots: list[Slot] = []

    @property
    def keywords(self) -> list[Any]:
        """Keywords added so far, in declaration order."""
        return [slot.keyword for slot in self._slots]

    def add_keyword(
        self,
        keyword: Any,
        occurrence: Union[Occurrence, str] = Occurrence.FIXED
    ) -> 'KeywordMatcherBuilder':
        """
        Append a keyword.

        Args:
            keyword: The keyword to add
            occurrence: How the keyword may occur; FIXED by default

        Returns:
            self

        Raises:
            NullArgumentError: If keyword or occurrence is None
            DuplicateKeywordError: If the keyword was already added
            InvalidPatternError: If the keyword pattern does not compile
        """
        if keyword is None:
            raise NullArgumentError("Cannot add null keyword.")
        if any(slot.keyword == keyword for slot in self._slots):
            raise DuplicateKeywordError(keyword)

        slot = Slot.compile(keyword, occurrence)
        self._slots.append(slot)
        self.logger.debug(f"Added keyword {keyword_name(keyword)} ({slot.occurrence.value})")
        self._emit(GrammarEvent(
            kind=GrammarEventType.KEYWORD_ADDED,
            subject=keyword,
            occurrence=slot.occurrence,
        ))
        return self

    def remove_keyword(self, keyword: Any) -> 'KeywordMatcherBuilder':
        """
        Remove a keyword if present.

        Returns:
            self
        """
        kept = []
        for slot in self._slots:
            if slot.keyword == keyword:
                self.logger.debug(f"Removed keyword {keyword_name(keyword)}")
                self._emit(GrammarEvent(
                    kind=GrammarEventType.KEYWORD_REMOVED,
                    subject=slot.keyword,
                    occurrence=slot.occurrence,
                ))
            else:
                kept.append(slot)
        self._slots = kept
        return self

    def build(self) -> KeywordMatcher:
        """Create an immutable matcher from the current keywords."""
        return KeywordMatcher(
            list(self._slots),
            separator=self.separator,
            any_must_match=self.any_must_match,
        )

    def _emit(self, event: GrammarEvent) -> None:
        if self._on_change is not None:
            self._on_change(event)


class TermAggregatorBuilder:
    """
    Assembles a TermAggregator term by term.

    Example:
        aggregator = (
            TermAggregatorBuilder()
            .add_term(FULLNAME, name_matcher)
            .add_term(FULLADDRESS, address_builder)   # built on add
            .build(max_workers=4)
        )
    """

    def __init__(self, on_change: Optional[GrammarEventHandler] = None):
        """
        Initialize term aggregator builder.

        Args:
            on_change: Called with a GrammarEvent after every change
        """
        self.logger = get_input_logger('grammar.term_aggregator_builder')
        self._on_change = on_change
        self._terms: dict[Any, KeywordMatcher] = {}

    @property
    def terms(self) -> list[Any]:
        """Terms added so far, in registration order."""
        return list(self._terms)

    def add_term(
        self,
        term: Any,
        matcher: Union[KeywordMatcher, KeywordMatcherBuilder]
    ) -> 'TermAggregatorBuilder':
        """
        Register a term with its matcher.

        Args:
            term: The term to add
            matcher: Its matcher; a builder is built on the spot

        Returns:
            self

        Raises:
            NullArgumentError: If term or matcher is None
            DuplicateTermError: If the term was already added
        """
        if term is None:
            raise NullArgumentError("Cannot add a matcher for a null term.")
        if matcher is None:
            raise NullArgumentError(f"Cannot add a null matcher for the term '{term}'.")
        if term in self._terms:
            raise DuplicateTermError(term)

        if isinstance(matcher, KeywordMatcherBuilder):
            matcher = matcher.build()

        self._terms[term] = matcher
        self.logger.debug(f"Added term {term_name(term)}")
        self._emit(GrammarEvent(
            kind=GrammarEventType.TERM_ADDED,
            subject=term,
            matcher=matcher,
        ))
        return self

    def remove_term(self, term: Any) -> 'TermAggregatorBuilder':
        """
        Remove a term if present.

        Returns:
            self
        """
        if term in self._terms:
            matcher = self._terms.pop(term)
            self.logger.debug(f"Removed term {term_name(term)}")
            self._emit(GrammarEvent(
                kind=GrammarEventType.TERM_REMOVED,
                subject=term,
                matcher=matcher,
            ))
        return self

    def build(
        self,
        max_workers: int = DEFAULT_MAX_WORKERS,
        tiebreaker: Union[TiebreakerType, str] = DEFAULT_TIEBREAKER
    ) -> TermAggregator:
        """Create an immutable aggregator from the current terms."""
        return TermAggregator(
            dict(self._terms),
            max_workers=max_workers,
            tiebreaker=tiebreaker,
        )

    def _emit(self, event: GrammarEvent) -> None:
        if self._on_change is not None:
            self._on_change(event)


__all__ = ['KeywordMatcherBuilder', 'TermAggregatorBuilder']
