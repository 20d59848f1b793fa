# Path: keyseg/matcher/models/events.py
"""
Grammar Change Events

Emitted by the grammar builders while a grammar is being assembled.
Built matchers and aggregators are immutable and never emit.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from .keyword import Occurrence, keyword_name
from .term import term_name


class GrammarEventType(str, Enum):
    """Kind of configuration change."""
    KEYWORD_ADDED = "keyword_added"
    KEYWORD_REMOVED = "keyword_removed"
    TERM_ADDED = "term_added"
    TERM_REMOVED = "term_removed"


@dataclass(frozen=True)
class GrammarEvent:
    """
    A single configuration change.

    Attributes:
        kind: What happened
        subject: The keyword or term that was added or removed
        occurrence: Occurrence of the keyword (keyword events only)
        matcher: Matcher registered for the term (term events only)
    """
    kind: GrammarEventType
    subject: Any
    occurrence: Optional[Occurrence] = None
    matcher: Any = None

    @property
    def added(self) -> bool:
        return self.kind in (GrammarEventType.KEYWORD_ADDED, GrammarEventType.TERM_ADDED)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        is_keyword = self.kind in (
            GrammarEventType.KEYWORD_ADDED, GrammarEventType.KEYWORD_REMOVED
        )
        return {
            'kind': self.kind.value,
            'subject': keyword_name(self.subject) if is_keyword else term_name(self.subject),
            'occurrence': self.occurrence.value if self.occurrence else None,
        }


GrammarEventHandler = Callable[[GrammarEvent], None]


__all__ = ['GrammarEventType', 'GrammarEvent', 'GrammarEventHandler']
