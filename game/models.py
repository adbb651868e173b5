import uuid
from enum import Enum
from functools import total_ordering

from config import DeckConfig

# -----------------------------
# RESULT STATUS
# -----------------------------

class OpStatus(str, Enum):
    """
    Outcome of a deck/session operation.
    """
    OK = "ok"
    NOT_FOUND = "not_found"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    INVALID = "invalid"


class DiscardVisibility(str, Enum):
    """
    How much of a deck's discard pile the presentation layer may show.
    """
    HIDDEN = DeckConfig.DISCARD_HIDDEN
    VISIBLE = DeckConfig.DISCARD_VISIBLE
    TOP_N = DeckConfig.DISCARD_TOP_N


# -----------------------------
# CARD
# -----------------------------

@total_ordering
class Card:
    """
    A single card instance. Identity is the generated id, never the
    name or data: two "Ace" cards loaded from the same template are
    different cards.
    """
    __slots__ = ("_id", "_name", "_data")

    def __init__(self, name, data=None):
        self._id = str(uuid.uuid4())
        self._name = name
        self._data = dict(data or {})

    @property
    def id(self):
        return self._id

    @property
    def name(self):
        return self._name

    @property
    def data(self):
        return dict(self._data)

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self._id == other._id

    def __lt__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self._id < other._id

    def __hash__(self):
        return hash(self._id)

    def __repr__(self):
        return f"Card({self._name!r}, id={self._id[:8]})"
