import os
import random

# Must be set before config is imported so the app never dials Redis in tests
os.environ.setdefault("USE_REDIS", "0")

import pytest

from game.engine import DeckEngine
from game.loader import DictDeckLoader
from game.store import SessionStore

TEMPLATES = {
    "Pair": {"deck": {"name": "Pair", "cards": [{"name": "A"}, {"name": "B"}]}},
    "Numbers": {"deck": {"name": "Numbers", "cards": [
        {"name": str(n), "data": {"value": n}} for n in range(1, 11)
    ]}},
    "Empty": {"deck": {"name": "Empty", "cards": []}},
}


@pytest.fixture
def rng():
    """Seeded random source so shuffles and random picks are repeatable."""
    return random.Random(1234)


@pytest.fixture
def loader():
    return DictDeckLoader(TEMPLATES)


@pytest.fixture
def store():
    return SessionStore(use_redis=False)


@pytest.fixture
def engine(store, loader, rng):
    return DeckEngine(store, loader, rng=rng)
