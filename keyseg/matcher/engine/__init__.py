# Path: keyseg/matcher/engine/__init__.py
"""
Matching Engine Core

Core components of the matching engine:
- KeywordMatcher: Segments an input for one term
- TermAggregator: Main entry point, ranks terms for an input
- KeywordMatcherBuilder / TermAggregatorBuilder: Step-by-step assembly
- GrammarLoader: Builds aggregators from YAML grammar files
"""

from .keyword_matcher import KeywordMatcher
from .term_aggregator import TermAggregator
from .builders import KeywordMatcherBuilder, TermAggregatorBuilder
from .grammar_loader import GrammarLoader

__all__ = [
    'KeywordMatcher',
    'TermAggregator',
    'KeywordMatcherBuilder',
    'TermAggregatorBuilder',
    'GrammarLoader',
]
