import logging
import pickle
import threading
from contextlib import contextmanager

import redis

from config import StoreConfig

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Redis-backed SessionState storage for multi-worker deployments.
    Falls back to in-memory storage if Redis is unavailable (development).

    Values are pickled in both modes, so every get() hands back a fresh
    copy and changes only stick once put() is called. Last write wins.
    """

    def __init__(self, redis_client=None, use_redis=None, ttl=StoreConfig.SESSION_TTL_SECONDS):
        self.ttl = ttl
        self.redis_client = None
        self.use_redis = False
        self.sessions = {}
        self._locks = {}
        self._locks_guard = threading.Lock()

        if redis_client is not None:
            self.redis_client = redis_client
            self.use_redis = True
            return

        if use_redis is None:
            use_redis = StoreConfig.USE_REDIS
        if not use_redis:
            logger.info("[STORE] Redis disabled. Using in-memory storage.")
            return

        try:
            client = redis.Redis(
                host=StoreConfig.REDIS_HOST,
                port=StoreConfig.REDIS_PORT,
                password=StoreConfig.REDIS_PASSWORD,
                decode_responses=False,  # values are pickled bytes
                socket_connect_timeout=StoreConfig.CONNECT_TIMEOUT_SECONDS
            )
            client.ping()
            self.redis_client = client
            self.use_redis = True
            logger.info("[STORE] Connected to Redis at %s:%s", StoreConfig.REDIS_HOST, StoreConfig.REDIS_PORT)
        except redis.exceptions.RedisError as e:
            logger.warning("[STORE] Redis connection failed: %s. Using in-memory storage.", e)

    # -----------------------------
    # GET / PUT / DELETE
    # -----------------------------

    def get(self, session_key):
        """
        Returns the stored SessionState, or None if the key is unknown.
        """
        if self.use_redis:
            serialized = self.redis_client.get(self._key(session_key))
        else:
            serialized = self.sessions.get(session_key)

        if serialized is None:
            return None
        return pickle.loads(serialized)

    def put(self, session_key, state):
        serialized = pickle.dumps(state)
        if self.use_redis:
            self.redis_client.setex(self._key(session_key), self.ttl, serialized)
        else:
            self.sessions[session_key] = serialized

    def delete(self, session_key):
        if self.use_redis:
            self.redis_client.delete(self._key(session_key))
        else:
            self.sessions.pop(session_key, None)
        logger.info("[STORE] Deleted session %s", session_key)

    # -----------------------------
    # LOCKING
    # -----------------------------

    @contextmanager
    def lock(self, session_key):
        """
        Serialize read-modify-write cycles on one session key.
        """
        if self.use_redis:
            with self.redis_client.lock(
                StoreConfig.LOCK_PREFIX + self._key(session_key),
                timeout=StoreConfig.LOCK_TIMEOUT_SECONDS,
                blocking_timeout=StoreConfig.LOCK_TIMEOUT_SECONDS
            ):
                yield
            return

        with self._locks_guard:
            key_lock = self._locks.setdefault(session_key, threading.Lock())
        with key_lock:
            yield

    # -----------------------------
    # LIST SESSIONS (DEBUG / ADMIN)
    # -----------------------------

    def list_sessions(self):
        if self.use_redis:
            prefix = StoreConfig.KEY_PREFIX
            return sorted(
                key.decode('utf-8')[len(prefix):]
                for key in self.redis_client.scan_iter(match=f"{prefix}*")
            )
        return sorted(self.sessions)

    def _key(self, session_key):
        return f"{StoreConfig.KEY_PREFIX}{session_key}"
