"""
Scratchpad Configuration
Centralized settings for the deck scratchpad
"""
import os


class DeckConfig:
    """Deck and session limits"""

    MAX_DECKS = 10
    DEFAULT_DRAW_COUNT = 1
    MAX_DRAW_COUNT = 500

    # Directory holding <template name>.json deck definitions
    DECK_PATH = os.getenv(
        'DECK_PATH',
        os.path.join(os.path.dirname(os.path.abspath(__file__)), 'decks')
    )

    # Discard visibility policies
    DISCARD_HIDDEN = 'hidden'
    DISCARD_VISIBLE = 'visible'
    DISCARD_TOP_N = 'top_n'
    DEFAULT_DISCARD_VISIBLE_COUNT = 1


class StoreConfig:
    """Session store configuration"""

    USE_REDIS = os.getenv('USE_REDIS', '1') != '0'
    REDIS_HOST = os.getenv('REDIS_HOST', 'localhost')
    REDIS_PORT = int(os.getenv('REDIS_PORT', 6379))
    REDIS_PASSWORD = os.getenv('REDIS_PASSWORD', None)
    CONNECT_TIMEOUT_SECONDS = 2

    SESSION_TTL_SECONDS = 86400
    KEY_PREFIX = 'session:'
    LOCK_PREFIX = 'lock:'
    LOCK_TIMEOUT_SECONDS = 5


class AppConfig:
    """Flask application configuration"""

    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-only-change-me')
    # The API is consumed as JSON; enable when serving browser forms
    WTF_CSRF_ENABLED = os.getenv('WTF_CSRF_ENABLED', '0') == '1'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
