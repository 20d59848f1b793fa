# Path: tests/unit/test_tokens.py
"""
Unit Tests for Token Helpers

Tests separator compilation, splitting and joining.
"""

import re
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from keyseg.matcher.engine.tokens import compile_separator, join_tokens, split_tokens
from keyseg.matcher.errors import GrammarError, InvalidSeparatorError


class TestCompileSeparator:
    """Test separator validation."""

    def test_space_compiles(self):
        """A single space should compile to a pattern."""
        assert compile_separator(' ').pattern == ' '

    def test_null_separator_rejected(self):
        """None should raise InvalidSeparatorError."""
        with pytest.raises(InvalidSeparatorError):
            compile_separator(None)

    def test_empty_separator_rejected(self):
        """The empty string would split between every character."""
        with pytest.raises(InvalidSeparatorError):
            compile_separator('')

    def test_malformed_separator_rejected(self):
        """An uncompilable expression should raise."""
        with pytest.raises(InvalidSeparatorError):
            compile_separator('(')

    def test_error_is_grammar_error(self):
        """Separator errors belong to the GrammarError family."""
        with pytest.raises(GrammarError):
            compile_separator('')


class TestSplitTokens:
    """Test splitting an input into tokens."""

    def test_splits_on_separator(self):
        """Tokens should come back in input order."""
        tokens = split_tokens('4 Privet Drive', re.compile(' '))
        assert tokens == ['4', 'Privet', 'Drive']

    def test_empty_input_has_no_tokens(self):
        """The empty string should produce zero tokens."""
        assert split_tokens('', re.compile(' ')) == []

    def test_consecutive_separators_produce_empty_token(self):
        """Two separators in a row leave an empty token between them."""
        assert split_tokens('a  b', re.compile(' ')) == ['a', '', 'b']

    def test_boundary_separators_produce_empty_tokens(self):
        """Leading and trailing separators are kept as empty tokens."""
        assert split_tokens(' a ', re.compile(' ')) == ['', 'a', '']

    def test_regex_separator(self):
        """The separator is a regular expression when splitting."""
        assert split_tokens('a, b,c', re.compile(', ?')) == ['a', 'b', 'c']

    def test_captured_groups_are_not_tokens(self):
        """Groups captured by the separator should be dropped."""
        tokens = split_tokens('a-b/c', re.compile('(-)|(/)'))
        assert tokens == ['a', 'b', 'c']

    def test_input_without_separator(self):
        """An input without separator is a single token."""
        assert split_tokens('Harry', re.compile(' ')) == ['Harry']


class TestJoinTokens:
    """Test joining token runs."""

    def test_joins_run(self):
        """Tokens in [start, end) should be joined."""
        assert join_tokens(['a', 'b', 'c'], 0, 2, ' ') == 'a b'

    def test_single_token(self):
        """A run of one token is the token itself."""
        assert join_tokens(['a', 'b', 'c'], 2, 3, ' ') == 'c'

    def test_separator_joined_literally(self):
        """Joining inserts the separator text, not what it matched."""
        tokens = split_tokens('a   b', re.compile(' +'))
        assert join_tokens(tokens, 0, 2, ' +') == 'a +b'
