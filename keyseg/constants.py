# Path: keyseg/constants.py
"""
System-Wide Constants for keyseg

Central repository for constant values used across the system.
Module code reads its defaults from here.

Constants are organized by category:
- Tokenization
- Weights
- Tie Resolution
- Environment Defaults
- CLI Exit Codes
"""

from enum import Enum
from typing import Final


# ==============================================================================
# TOKENIZATION
# ==============================================================================

# Separator used by matchers that do not declare one. Interpreted as a
# regular expression when splitting, joined back as literal text.
DEFAULT_SEPARATOR: Final[str] = ' '

# A fully inactive activation vector is rejected unless a matcher opts out.
DEFAULT_ANY_MUST_MATCH: Final[bool] = True


# ==============================================================================
# WEIGHTS
# ==============================================================================

DEFAULT_KEYWORD_WEIGHT: Final[float] = 1.0
DEFAULT_TERM_WEIGHT: Final[float] = 1.0


# ==============================================================================
# TIE RESOLUTION
# ==============================================================================

class TiebreakerType(str, Enum):
    """How to order terms whose computed weights are equal."""
    DECLARATION_ORDER = "declaration_order"
    TERM_NAME = "term_name"
    FEWEST_SEGMENTATIONS = "fewest_segmentations"


DEFAULT_TIEBREAKER: Final[TiebreakerType] = TiebreakerType.DECLARATION_ORDER


# ==============================================================================
# ENVIRONMENT DEFAULTS
# ==============================================================================

ENV_PREFIX: Final[str] = 'KEYSEG_'

DEFAULT_LOG_LEVEL: Final[str] = 'INFO'
DEFAULT_MAX_WORKERS: Final[int] = 1
DEFAULT_JSON_INDENT: Final[int] = 2

GRAMMAR_FILE_SUFFIXES: Final[tuple[str, ...]] = ('.yaml', '.yml')


# ==============================================================================
# CLI EXIT CODES
# ==============================================================================

EXIT_ALL_MATCHED: Final[int] = 0
EXIT_UNMATCHED_INPUT: Final[int] = 1
EXIT_CONFIGURATION_ERROR: Final[int] = 2


__all__ = [
    'DEFAULT_SEPARATOR',
    'DEFAULT_ANY_MUST_MATCH',
    'DEFAULT_KEYWORD_WEIGHT',
    'DEFAULT_TERM_WEIGHT',
    'TiebreakerType',
    'DEFAULT_TIEBREAKER',
    'ENV_PREFIX',
    'DEFAULT_LOG_LEVEL',
    'DEFAULT_MAX_WORKERS',
    'DEFAULT_JSON_INDENT',
    'GRAMMAR_FILE_SUFFIXES',
    'EXIT_ALL_MATCHED',
    'EXIT_UNMATCHED_INPUT',
    'EXIT_CONFIGURATION_ERROR',
]
