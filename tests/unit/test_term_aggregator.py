# Path: tests/unit/test_term_aggregator.py
"""
Unit Tests for TermAggregator

Tests term dispatch, ranking, tie resolution and threaded evaluation.
"""

import sys
from pathlib import Path

import pytest

# Add project root and tests directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from keyseg.constants import TiebreakerType
from keyseg.matcher.engine import KeywordMatcher, TermAggregator
from keyseg.matcher.errors import DuplicateTermError, NullArgumentError, UnknownTermError
from keyseg.matcher.models import Occurrence, Term
from fixtures.sample_grammar import (
    BIRTHDAY,
    CITY,
    FORENAME,
    FULLADDRESS,
    FULLNAME,
    HOUSENR,
    ISOLOCALDATE,
    LASTNAME,
    STREET,
    TEST_ADDRESS,
    TEST_BIRTHDAY,
    TEST_FULLNAME,
    TEST_INVALID_BIRTHDAY,
    TEST_NICKNAME,
    UNDESIRABLE_NUMBER,
)

NAME_SEGMENTATIONS = [{FORENAME: 'Harry James', LASTNAME: 'Potter'}]
NAME_AS_ADDRESS_SEGMENTATIONS = [
    {STREET: 'Harry', CITY: 'James Potter'},
    {STREET: 'Harry James', CITY: 'Potter'},
]


class TestConstruction:
    """Test validation at construction time."""

    def test_duplicate_term(self, name_matcher):
        """A term cannot be registered twice."""
        with pytest.raises(DuplicateTermError):
            TermAggregator([(FULLNAME, name_matcher), (FULLNAME, name_matcher)])

    def test_null_term(self, name_matcher):
        """A None term is rejected."""
        with pytest.raises(NullArgumentError):
            TermAggregator([(None, name_matcher)])

    def test_null_matcher(self):
        """A None matcher is rejected."""
        with pytest.raises(NullArgumentError):
            TermAggregator([(FULLNAME, None)])

    def test_unknown_tiebreaker(self, name_matcher):
        """Tiebreaker names are validated."""
        with pytest.raises(ValueError):
            TermAggregator({FULLNAME: name_matcher}, tiebreaker='random')

    def test_max_workers_floor(self, name_matcher):
        """max_workers below one means sequential."""
        assert TermAggregator({FULLNAME: name_matcher}, max_workers=0).max_workers == 1

    def test_registration_order(self, sample_aggregator):
        """Terms keep the order they were registered in."""
        assert sample_aggregator.terms == (FULLNAME, FULLADDRESS, BIRTHDAY)
        assert len(sample_aggregator) == 3
        assert FULLNAME in sample_aggregator
        assert Term('NICKNAME') not in sample_aggregator


class TestMatching:
    """Test boolean queries."""

    def test_matches_term(self, sample_aggregator):
        """Each term's matcher can be queried on its own."""
        assert sample_aggregator.matches_term(TEST_FULLNAME, FULLNAME)
        assert sample_aggregator.matches_term(TEST_NICKNAME, FULLNAME)
        assert sample_aggregator.matches_term(TEST_ADDRESS, FULLADDRESS)
        assert not sample_aggregator.matches_term(TEST_ADDRESS, FULLNAME)

    def test_matches_any(self, sample_aggregator):
        """matches() is true when any term matches."""
        assert sample_aggregator.matches(TEST_FULLNAME)
        assert sample_aggregator.matches(TEST_NICKNAME)
        assert sample_aggregator.matches(TEST_ADDRESS)
        assert not sample_aggregator.matches(TEST_INVALID_BIRTHDAY)

    def test_matching(self, sample_aggregator):
        """matching() returns the set of matching terms."""
        assert sample_aggregator.matching(TEST_FULLNAME) == {FULLNAME, FULLADDRESS}
        assert sample_aggregator.matching(TEST_NICKNAME) == {FULLNAME}
        assert sample_aggregator.matching(TEST_ADDRESS) == {FULLADDRESS}
        assert sample_aggregator.matching(TEST_BIRTHDAY) == {BIRTHDAY}

    def test_unknown_term(self, sample_aggregator):
        """Querying an unregistered term raises."""
        with pytest.raises(UnknownTermError):
            sample_aggregator.matches_term(TEST_FULLNAME, Term('NICKNAME'))

    def test_null_term_query(self, sample_aggregator):
        """Querying a None term raises UnknownTermError."""
        with pytest.raises(UnknownTermError):
            sample_aggregator.analyze_term(TEST_FULLNAME, None)


class TestAnalyze:
    """Test full analysis."""

    def test_analyze_term(self, sample_aggregator):
        """analyze_term() returns one term's segmentations."""
        assert sample_aggregator.analyze_term(TEST_FULLNAME, FULLNAME) == NAME_SEGMENTATIONS
        assert sample_aggregator.analyze_term(TEST_ADDRESS, FULLNAME) == []

    def test_analyze_all_terms(self, sample_aggregator):
        """Only matching terms appear in the result."""
        result = sample_aggregator.analyze(TEST_FULLNAME)

        assert result == {
            FULLNAME: NAME_SEGMENTATIONS,
            FULLADDRESS: NAME_AS_ADDRESS_SEGMENTATIONS,
        }
        assert list(result) == [FULLNAME, FULLADDRESS]

    def test_analyze_exclusive(self, sample_aggregator):
        """The nickname is only a name."""
        assert sample_aggregator.analyze(TEST_NICKNAME) == {
            FULLNAME: [{UNDESIRABLE_NUMBER: TEST_NICKNAME}]
        }

    def test_analyze_verified(self, sample_aggregator):
        """Verification decides between a date and nothing."""
        assert sample_aggregator.analyze(TEST_BIRTHDAY) == {
            BIRTHDAY: [{ISOLOCALDATE: TEST_BIRTHDAY}]
        }
        assert sample_aggregator.analyze(TEST_INVALID_BIRTHDAY) == {}

    def test_analyze_none(self, sample_aggregator):
        """None is analyzed as the empty string."""
        result = sample_aggregator.analyze(None)
        assert result == {}
        assert result.input == ''
        assert result.best() is None

    def test_result_accessors(self, sample_aggregator):
        """Weights and the best term are exposed."""
        result = sample_aggregator.analyze(TEST_FULLNAME)

        assert result.best().term == FULLNAME
        assert result.weight_of(FULLADDRESS) == 1.0
        assert [wt.position for wt in result.ranked] == [0, 1]

    def test_to_dict(self, sample_aggregator):
        """Results convert to JSON-friendly dictionaries keyed by name."""
        assert sample_aggregator.analyze(TEST_NICKNAME).to_dict() == {
            'input': TEST_NICKNAME,
            'terms': [{
                'term': 'FULLNAME',
                'weight': 1.0,
                'segmentations': [{'UNDESIRABLE_NUMBER': TEST_NICKNAME}],
            }],
        }


class TestRanking:
    """Test term weights and tie resolution."""

    def test_heavier_term_first(self, name_matcher, address_matcher):
        """A heavier term ranks first whatever its registration order."""
        address = Term('FULLADDRESS', weigher=2.0)
        aggregator = TermAggregator({FULLNAME: name_matcher, address: address_matcher})

        result = aggregator.analyze(TEST_FULLNAME)

        assert list(result) == [address, FULLNAME]
        assert result.weight_of(address) == 2.0

    def test_weigher_sees_segmentations(self, name_matcher, address_matcher):
        """Term weighers receive the input and every segmentation."""
        seen = []

        def by_ambiguity(input, segmentations):
            seen.append((input, len(segmentations)))
            return 1.0 / len(segmentations)

        address = Term('FULLADDRESS', weigher=by_ambiguity)
        aggregator = TermAggregator({address: address_matcher, FULLNAME: name_matcher})

        result = aggregator.analyze(TEST_FULLNAME)

        assert seen == [(TEST_FULLNAME, 2)]
        assert list(result) == [FULLNAME, address]

    def test_ties_keep_declaration_order(self, name_matcher, address_matcher):
        """Equal weights keep registration order by default."""
        aggregator = TermAggregator({FULLADDRESS: address_matcher, FULLNAME: name_matcher})
        assert list(aggregator.analyze(TEST_FULLNAME)) == [FULLADDRESS, FULLNAME]

    def test_ties_by_fewest_segmentations(self, name_matcher, address_matcher):
        """The least ambiguous term wins a tie when configured."""
        aggregator = TermAggregator(
            {FULLADDRESS: address_matcher, FULLNAME: name_matcher},
            tiebreaker=TiebreakerType.FEWEST_SEGMENTATIONS,
        )
        assert list(aggregator.analyze(TEST_FULLNAME)) == [FULLNAME, FULLADDRESS]

    def test_ties_by_term_name(self, name_matcher, address_matcher):
        """Term names break ties when configured."""
        aggregator = TermAggregator(
            {FULLNAME: name_matcher, FULLADDRESS: address_matcher},
            tiebreaker='term_name',
        )
        assert list(aggregator.analyze(TEST_FULLNAME)) == [FULLADDRESS, FULLNAME]


class TestThreadedEvaluation:
    """Test evaluation with a thread pool."""

    INPUTS = [TEST_FULLNAME, TEST_NICKNAME, TEST_ADDRESS, TEST_BIRTHDAY, TEST_INVALID_BIRTHDAY]

    @pytest.mark.parametrize('text', INPUTS)
    def test_same_result_as_sequential(self, name_matcher, address_matcher, birthday_matcher, text):
        """Threads do not change results or their order."""
        terms = [
            (FULLADDRESS, address_matcher),
            (FULLNAME, name_matcher),
            (BIRTHDAY, birthday_matcher),
        ]
        sequential = TermAggregator(terms)
        threaded = TermAggregator(terms, max_workers=4)

        assert threaded.analyze(text) == sequential.analyze(text)
        assert list(threaded.analyze(text)) == list(sequential.analyze(text))
        assert threaded.matching(text) == sequential.matching(text)
        assert threaded.matches(text) == sequential.matches(text)

    def test_many_terms(self):
        """Every registered term is evaluated."""
        terms = {
            Term(f'NUMBER_{i}'): KeywordMatcher([(HOUSENR, Occurrence.FIXED)])
            for i in range(10)
        }
        aggregator = TermAggregator(terms, max_workers=3)

        assert list(aggregator.analyze('42')) == list(terms)
