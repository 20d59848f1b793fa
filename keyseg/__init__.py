# Path: keyseg/__init__.py
"""
keyseg - Keyword Segmentation

Grammar-driven segmentation of short free-text inputs. An input is split
into tokens and every way an ordered sequence of keywords can claim those
tokens is found; several terms are then ranked against the input.

Example:
    from keyseg import Keyword, KeywordMatcher, Occurrence

    HOUSENR = Keyword("HOUSENR", r"\\d+")
    STREET = Keyword("STREET", r"[A-Z][A-Za-z]*( [A-Z][A-Za-z]*)*")

    matcher = KeywordMatcher([(HOUSENR, Occurrence.OPTIONAL), (STREET, Occurrence.FIXED)])
    matcher.analyze("4 Privet Drive")
    # [Segmentation(HOUSENR='4', STREET='Privet Drive')]
"""

from .matcher import (
    KeywordMatcher,
    TermAggregator,
    KeywordMatcherBuilder,
    TermAggregatorBuilder,
    GrammarLoader,
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
    GrammarError,
)
from .constants import TiebreakerType

__version__ = '0.1.0'

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
    'GrammarError',
    'TiebreakerType',
    '__version__',
]
