"""
Tests for SessionState persistence: values survive a round trip through
storage (simulating a different worker) and only change on put().
"""

import pickle
import threading

import pytest

from game.session_state import SessionState
from game.store import SessionStore


class FakeRedis:
    """Minimal stand-in for the redis-py calls the store makes."""

    def __init__(self):
        self.data = {}
        self.ttls = {}
        self.locked = []

    def get(self, key):
        return self.data.get(key)

    def setex(self, key, ttl, value):
        self.data[key] = value
        self.ttls[key] = ttl

    def delete(self, key):
        self.data.pop(key, None)

    def scan_iter(self, match=None):
        prefix = match.rstrip("*")
        return [k.encode("utf-8") for k in self.data if k.startswith(prefix)]

    def lock(self, name, timeout=None, blocking_timeout=None):
        self.locked.append(name)
        return threading.Lock()


@pytest.fixture
def populated_state(loader, rng):
    state = SessionState()
    state.add_deck("Numbers", loader, rng=rng)
    state.add_deck("Pair", loader, rng=rng)
    return state


class TestInMemoryStore:

    def test_missing_key(self, store):
        assert store.get("nope") is None

    def test_state_survives_round_trip(self, store, populated_state):
        store.put("table-1", populated_state)

        restored = store.get("table-1")

        assert [d.id for d in restored.decks] == [d.id for d in populated_state.decks]
        assert restored.decks[0].cards == populated_state.decks[0].cards

    def test_get_returns_fresh_copy(self, store, populated_state):
        store.put("table-1", populated_state)

        copy = store.get("table-1")
        copy.decks[0].draw(5)

        assert len(store.get("table-1").decks[0].cards) == 10

    def test_last_write_wins(self, store, populated_state):
        store.put("table-1", populated_state)
        first = store.get("table-1")
        second = store.get("table-1")

        first.decks[0].draw(1)
        second.remove_deck(second.decks[1].id)
        store.put("table-1", first)
        store.put("table-1", second)

        final = store.get("table-1")
        assert final.deck_count == 1
        assert len(final.decks[0].cards) == 10

    def test_delete(self, store, populated_state):
        store.put("table-1", populated_state)
        store.delete("table-1")
        store.delete("table-1")

        assert store.get("table-1") is None

    def test_list_sessions(self, store):
        store.put("b", SessionState())
        store.put("a", SessionState())

        assert store.list_sessions() == ["a", "b"]

    def test_lock_is_per_key(self, store):
        with store.lock("table-1"):
            with store.lock("table-2"):
                pass
        with store.lock("table-1"):
            pass


class TestRedisStore:

    def test_uses_prefixed_keys_and_ttl(self, populated_state):
        client = FakeRedis()
        store = SessionStore(redis_client=client, ttl=60)

        store.put("table-1", populated_state)

        assert store.use_redis is True
        assert client.ttls == {"session:table-1": 60}
        assert pickle.loads(client.data["session:table-1"]).deck_count == 2
        assert store.get("table-1").deck_count == 2

    def test_delete_and_list(self):
        client = FakeRedis()
        store = SessionStore(redis_client=client)
        store.put("a", SessionState())
        store.put("b", SessionState())

        store.delete("a")

        assert store.list_sessions() == ["b"]
        assert store.get("a") is None

    def test_lock_uses_redis_lock(self):
        client = FakeRedis()
        store = SessionStore(redis_client=client)

        with store.lock("table-1"):
            pass

        assert client.locked == ["lock:session:table-1"]


def test_disabled_redis_falls_back_to_memory():
    store = SessionStore(use_redis=False)

    assert store.use_redis is False
    assert store.redis_client is None
