"""
Shared test configuration for TweetSpan.
"""

import logging

import pytest

from tweetspan.core.config import ExtractionConfig
from tweetspan.core.extraction import Extractor
from tweetspan.core.patterns import default_pattern_set
from tweetspan.core.types import Entity, EntityKind
from tweetspan.core.validation import Validator
from tweetspan.settings import get_settings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as exercising several layers at once"
    )


# =============================================================================
# PATTERN / EXTRACTOR FIXTURES
# =============================================================================

@pytest.fixture(scope="session")
def patterns():
    """The shared default pattern set."""
    return default_pattern_set()


@pytest.fixture
def extractor(patterns):
    """Extractor with default options."""
    return Extractor(patterns)


@pytest.fixture
def strict_extractor(patterns):
    """Extractor that only accepts URLs with a protocol."""
    return Extractor(patterns, ExtractionConfig.strict())


@pytest.fixture
def raw_extractor(patterns):
    """Extractor without URL overlap checks."""
    return Extractor(patterns, ExtractionConfig.raw())


@pytest.fixture
def validator(patterns):
    return Validator(patterns)


# =============================================================================
# ENTITY FACTORY FUNCTIONS
# =============================================================================

def make_entity(start: int, end: int, kind: EntityKind = EntityKind.HASHTAG) -> Entity:
    """Entity whose text is filler of the right length."""
    return Entity(kind=kind, text="x" * (end - start), start=start, end=end)


@pytest.fixture
def entity_factory():
    return make_entity


# =============================================================================
# ISOLATION
# =============================================================================

@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Run with no tweetspan.yaml in reach and no TWEETSPAN_* variables."""
    import os

    for key in list(os.environ):
        if key.startswith("TWEETSPAN_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo handler changes made by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
