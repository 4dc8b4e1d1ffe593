import itertools
from datetime import datetime, timedelta, timezone

import pytest
from fridgechef.services.preference_store import PreferenceStore
from fridgechef.services.recommendation_engine import RecommendationEngine
from fridgechef.services.storage import InMemoryStore


@pytest.fixture
def memory_store():
    """Fixture for an empty in-memory key/value store."""
    return InMemoryStore()


@pytest.fixture
def clock():
    """Clock that moves forward one minute per call."""
    start = datetime(2024, 5, 1, 18, 0, tzinfo=timezone.utc)
    ticks = itertools.count()
    return lambda: start + timedelta(minutes=next(ticks))


@pytest.fixture
def preference_store(memory_store, clock):
    """Fixture for PreferenceStore instance."""
    return PreferenceStore(memory_store, clock=clock)


@pytest.fixture
def engine(preference_store):
    """Fixture for RecommendationEngine instance."""
    return RecommendationEngine(preference_store)
