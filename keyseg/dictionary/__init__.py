# Path: keyseg/dictionary/__init__.py
"""
Dictionary Module - Grammar Definitions

YAML grammars describing terms by the ordered keywords that make them up.
New categories need no code changes, only a new grammar file.

Structure:
    dictionary/
    └── grammars/         # Keyword and term definitions
        └── personal_data.yaml

Example:
    from keyseg.matcher import GrammarLoader

    loader = GrammarLoader()              # reads GRAMMARS_DIR
    aggregator = loader.load_aggregator()
"""

from pathlib import Path

# Dictionary root path
DICTIONARY_ROOT = Path(__file__).parent

# Subdirectory paths
GRAMMARS_DIR = DICTIONARY_ROOT / 'grammars'

__all__ = [
    'DICTIONARY_ROOT',
    'GRAMMARS_DIR',
]
