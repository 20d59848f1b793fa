# Path: keyseg/matcher/models/__init__.py
"""
Matcher Models

Data models for the matching engine:
- Keyword / Occurrence / Slot: what a matcher looks for, and where
- Term: a category backed by one matcher
- Segmentation: one valid keyword -> segment assignment
- AnalysisResult: ranked terms for one input
- GrammarEvent: configuration change notifications
- GrammarDefinition: grammar files as validated models
"""

from .keyword import (
    Occurrence,
    KeywordLike,
    Keyword,
    Slot,
    keyword_name,
    keyword_verify,
    keyword_weight,
)

from .term import (
    TermLike,
    Term,
    term_name,
    term_weight,
)

from .segmentation import Segmentation

from .analysis_result import (
    WeightedTerm,
    AnalysisResult,
)

from .events import (
    GrammarEventType,
    GrammarEvent,
    GrammarEventHandler,
)

from .grammar_definition import (
    KeywordDefinition,
    SlotDefinition,
    TermDefinition,
    GrammarDefinition,
)

__all__ = [
    'Occurrence',
    'KeywordLike',
    'Keyword',
    'Slot',
    'keyword_name',
    'keyword_verify',
    'keyword_weight',
    'TermLike',
    'Term',
    'term_name',
    'term_weight',
    'Segmentation',
    'WeightedTerm',
    'AnalysisResult',
    'GrammarEventType',
    'GrammarEvent',
    'GrammarEventHandler',
    'KeywordDefinition',
    'SlotDefinition',
    'TermDefinition',
    'GrammarDefinition',
]
