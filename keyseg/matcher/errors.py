# Path: keyseg/matcher/errors.py
"""
Grammar Errors

Configuration-class failures of the matching engine. All of them are
raised while a grammar is being assembled or referenced, never while an
input is being segmented. A candidate segment that fails its pattern is
not an error; it simply prunes a branch.
"""

from pathlib import Path
from typing import Optional


class GrammarError(ValueError):
    """Base class for invalid grammar configuration or usage."""


class NullArgumentError(GrammarError):
    """A required grammar element was None."""


class DuplicateKeywordError(GrammarError):
    """A keyword was declared twice within one matcher."""

    def __init__(self, keyword):
        super().__init__(f"Cannot add keyword '{keyword}' twice.")
        self.keyword = keyword


class DuplicateTermError(GrammarError):
    """A term was registered twice within one aggregator."""

    def __init__(self, term):
        super().__init__(f"Cannot add a matcher for the term '{term}' twice.")
        self.term = term


class InvalidPatternError(GrammarError):
    """A keyword pattern could not be compiled."""

    def __init__(self, keyword, pattern: str, reason: str):
        super().__init__(
            f"Keyword '{keyword}' has an invalid pattern {pattern!r}: {reason}"
        )
        self.keyword = keyword
        self.pattern = pattern


class InvalidSeparatorError(GrammarError):
    """A matcher separator was empty or could not be compiled."""


class UnknownTermError(GrammarError):
    """A term was referenced that is not registered with the aggregator."""

    def __init__(self, term):
        super().__init__(f"The term '{term}' is unknown to this aggregator.")
        self.term = term


class UnknownVerifierError(GrammarError):
    """A grammar file named a verifier that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"No verifier registered under the name '{name}'.")
        self.name = name


class GrammarFileError(GrammarError):
    """A grammar file could not be read, parsed or validated."""

    def __init__(self, path: Path, reason: str, cause: Optional[Exception] = None):
        super().__init__(f"Invalid grammar file {path}: {reason}")
        self.path = path
        self.cause = cause


__all__ = [
    'GrammarError',
    'NullArgumentError',
    'DuplicateKeywordError',
    'DuplicateTermError',
    'InvalidPatternError',
    'InvalidSeparatorError',
    'UnknownTermError',
    'UnknownVerifierError',
    'GrammarFileError',
]
