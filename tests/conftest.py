# Path: tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for keyseg

Provides common test fixtures used across all test modules.
"""

import logging
import os
import sys
import tempfile
from io import StringIO
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root and tests directory to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
TESTS_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(TESTS_ROOT))

from keyseg.matcher.engine import KeywordMatcher, TermAggregator
from keyseg.matcher.models import Occurrence
from fixtures.sample_grammar import (
    FORENAME,
    LASTNAME,
    UNDESIRABLE_NUMBER,
    HOUSENR,
    STREET,
    CITY,
    ISOLOCALDATE,
    FULLNAME,
    FULLADDRESS,
    BIRTHDAY,
)


# ==============================================================================
# KEYWORD & TERM FIXTURES
# ==============================================================================

@pytest.fixture
def name_matcher():
    """FORENAME, exclusive UNDESIRABLE_NUMBER, LASTNAME."""
    return KeywordMatcher([
        (FORENAME, Occurrence.FIXED),
        (UNDESIRABLE_NUMBER, Occurrence.EXCLUSIVE),
        (LASTNAME, Occurrence.FIXED),
    ])


@pytest.fixture
def address_matcher():
    """Optional HOUSENR, STREET, CITY."""
    return KeywordMatcher([
        (HOUSENR, Occurrence.OPTIONAL),
        (STREET, Occurrence.FIXED),
        (CITY, Occurrence.FIXED),
    ])


@pytest.fixture
def birthday_matcher():
    """Single verified ISOLOCALDATE."""
    return KeywordMatcher([(ISOLOCALDATE, Occurrence.FIXED)])


@pytest.fixture
def sample_aggregator(name_matcher, address_matcher, birthday_matcher):
    """Aggregator over FULLNAME, FULLADDRESS and BIRTHDAY."""
    return TermAggregator({
        FULLNAME: name_matcher,
        FULLADDRESS: address_matcher,
        BIRTHDAY: birthday_matcher,
    })


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'KEYSEG_ENVIRONMENT': 'test',
        'KEYSEG_DEBUG': 'false',
        'KEYSEG_GRAMMAR_DIR': '/tmp/keyseg_test/grammars',
        'KEYSEG_DEFAULT_SEPARATOR': ',',
        'KEYSEG_MAX_WORKERS': '4',
        'KEYSEG_TIEBREAKER': 'term_name',
        'KEYSEG_LOG_DIR': '/tmp/keyseg_test/logs',
        'KEYSEG_LOG_LEVEL': 'warning',
        'KEYSEG_LOG_CONSOLE': 'false',
        'KEYSEG_JSON_INDENT': '4',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def clean_env():
    """Remove every KEYSEG_ variable for the duration of a test."""
    cleaned = {key: value for key, value in os.environ.items() if not key.startswith('KEYSEG_')}
    with patch.dict(os.environ, cleaned, clear=True):
        yield


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def capture_logs():
    """Capture log output for testing."""
    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    previous_level = root_logger.level
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG)

    yield log_capture

    root_logger.removeHandler(handler)
    root_logger.setLevel(previous_level)


@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from keyseg.config_loader import ConfigLoader

    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


@pytest.fixture
def restore_logging():
    """Remove handlers installed by setup_ipo_logging and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level

    yield

    for handler in list(root_logger.handlers):
        if type(handler) in (logging.FileHandler, logging.StreamHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
