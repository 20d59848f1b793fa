# Path: keyseg/matcher/__init__.py
"""
Matching Engine - Keyword Segmentation

The matching engine splits a free-text input into tokens and finds every
way an ordered sequence of keywords can claim contiguous runs of those
tokens. Several terms, each backed by its own keyword sequence, are ranked
against one input by weight.

Core Components:
    - KeywordMatcher: Segmentation engine for a single term
    - TermAggregator: Main entry point over several terms
    - Builders: Mutable assembly with change events
    - GrammarLoader: YAML grammars as validated models
    - Scoring: Keyword and term weights, tie resolution

Example:
    from keyseg.matcher import GrammarLoader

    aggregator = GrammarLoader().load_aggregator()
    result = aggregator.analyze("4 Privet Drive Little Whinging")

    # result maps term -> segmentations, best term first
    # e.g., {FULLADDRESS: [{HOUSENR: "4", STREET: "Privet", ...}, ...]}
"""

from .engine import (
    KeywordMatcher,
    TermAggregator,
    KeywordMatcherBuilder,
    TermAggregatorBuilder,
    GrammarLoader,
)
from .models import (
    Occurrence,
    Keyword,
    KeywordLike,
    Term,
    TermLike,
    Segmentation,
    WeightedTerm,
    AnalysisResult,
    GrammarEvent,
    GrammarEventType,
    GrammarDefinition,
)
from .errors import (
    GrammarError,
    NullArgumentError,
    DuplicateKeywordError,
    DuplicateTermError,
    InvalidPatternError,
    InvalidSeparatorError,
    UnknownTermError,
    UnknownVerifierError,
    GrammarFileError,
)
from .verifiers import BUILTIN_VERIFIERS

__all__ = [
    'KeywordMatcher',
    'TermAggregator',
    'KeywordMatcherBuilder',
    'TermAggregatorBuilder',
    'GrammarLoader',
    'Occurrence',
    'Keyword',
    'KeywordLike',
    'Term',
    'TermLike',
    'Segmentation',
    'WeightedTerm',
    'AnalysisResult',
    'GrammarEvent',
    'GrammarEventType',
    'GrammarDefinition',
    'GrammarError',
    'NullArgumentError',
    'DuplicateKeywordError',
    'DuplicateTermError',
    'InvalidPatternError',
    'InvalidSeparatorError',
    'UnknownTermError',
    'UnknownVerifierError',
    'GrammarFileError',
    'BUILTIN_VERIFIERS',
]
