import logging
import random

from config import DeckConfig
from game.models import DiscardVisibility, OpStatus
from game.session_state import SessionState

logger = logging.getLogger(__name__)


# ---------------------
# SESSION-LEVEL OPERATIONS
# ---------------------
# These act on an already fetched SessionState and never touch storage,
# so each one can be replayed against a fresh copy of the state.

def draw_cards(state, deck_id, count):
    deck = state.find_deck(deck_id)
    if deck is None:
        return OpStatus.NOT_FOUND, []

    drawn = deck.draw(count)
    # Latest draw replaces the previous one for this deck
    state.drawn_cards[deck.id] = drawn
    return OpStatus.OK, drawn


def move_random_card(state, source_deck_id, target_deck_id, rng=None):
    source_deck = state.find_deck(source_deck_id)
    target_deck = state.find_deck(target_deck_id)
    if source_deck is None or target_deck is None or not source_deck.cards:
        return OpStatus.NOT_FOUND, None

    picked = (rng or random).choice(source_deck.cards)
    card = source_deck.select_and_remove(picked.id)
    target_deck.add_cards_to_top(card)
    return OpStatus.OK, card


def move_specific_card(state, source_deck_id, target_deck_id, card_id):
    source_deck = state.find_deck(source_deck_id)
    target_deck = state.find_deck(target_deck_id)
    if source_deck is None or target_deck is None:
        return OpStatus.NOT_FOUND, None

    card = source_deck.select_and_remove(card_id)
    if card is None:
        return OpStatus.NOT_FOUND, None

    target_deck.add_cards_to_top(card)
    return OpStatus.OK, card


def merge_decks(state, deck_id_one, deck_id_two):
    deck_one = state.find_deck(deck_id_one)
    deck_two = state.find_deck(deck_id_two)
    if deck_one is None or deck_two is None:
        return OpStatus.NOT_FOUND
    if deck_one is deck_two:
        return OpStatus.INVALID

    deck_one.merge(deck_two)
    state.remove_deck(deck_two.id)
    state.drawn_cards.pop(deck_two.id, None)
    return OpStatus.OK


# ---------------------
# ENGINE
# ---------------------

class DeckEngine:
    """
    Runs each operation as one lock -> fetch -> mutate -> store cycle
    against the session store.

    Every method returns a dict with "ok" and "status"; nothing here raises
    for unknown sessions, decks, cards or templates.
    """

    def __init__(self, store, loader, rng=None):
        self.store = store
        self.loader = loader
        self.rng = rng or random.Random()

    # ---------------------
    # SESSION LIFECYCLE
    # ---------------------

    def start_session(self, session_key):
        """Create an empty session unless one already exists under the key."""
        with self.store.lock(session_key):
            state = self.store.get(session_key)
            if state is None:
                state = SessionState()
                self.store.put(session_key, state)
                logger.info("[ENGINE] Started session %s", session_key)
        return state

    def end_session(self, session_key):
        self.store.delete(session_key)

    def get_state(self, session_key):
        return self.store.get(session_key)

    def list_templates(self):
        return self.loader.list_template_names()

    # ---------------------
    # DECK OPERATIONS
    # ---------------------

    def add_deck(self, session_key, template_name,
                 discard_visibility=DiscardVisibility.VISIBLE,
                 discard_visible_count=DeckConfig.DEFAULT_DISCARD_VISIBLE_COUNT):
        def op(state):
            status, deck = state.add_deck(
                template_name, self.loader, rng=self.rng,
                discard_visibility=discard_visibility,
                discard_visible_count=discard_visible_count,
            )
            return _result(status, deck_id=deck.id if deck else None)

        return self._mutate(session_key, op)

    def remove_deck(self, session_key, deck_id):
        def op(state):
            status = state.remove_deck(deck_id)
            if status is OpStatus.OK:
                state.drawn_cards.pop(deck_id, None)
            return _result(status)

        return self._mutate(session_key, op)

    def shuffle(self, session_key, deck_id):
        def op(state):
            deck = state.find_deck(deck_id)
            if deck is None:
                return _result(OpStatus.NOT_FOUND)
            deck.shuffle(self.rng)
            return _result(OpStatus.OK)

        return self._mutate(session_key, op)

    def shuffle_with_discard(self, session_key, deck_id):
        def op(state):
            deck = state.find_deck(deck_id)
            if deck is None:
                return _result(OpStatus.NOT_FOUND)
            deck.shuffle_discard_into_deck(self.rng)
            return _result(OpStatus.OK)

        return self._mutate(session_key, op)

    def draw(self, session_key, deck_id, count=DeckConfig.DEFAULT_DRAW_COUNT):
        def op(state):
            status, drawn = draw_cards(state, deck_id, count)
            return _result(status, drawn=[card.id for card in drawn])

        return self._mutate(session_key, op)

    def move_random_card(self, session_key, source_deck_id, target_deck_id):
        def op(state):
            status, card = move_random_card(state, source_deck_id, target_deck_id, self.rng)
            return _result(status, card_id=card.id if card else None)

        return self._mutate(session_key, op)

    def move_specific_card(self, session_key, source_deck_id, target_deck_id, card_id):
        def op(state):
            status, card = move_specific_card(state, source_deck_id, target_deck_id, card_id)
            return _result(status, card_id=card.id if card else None)

        return self._mutate(session_key, op)

    def merge_decks(self, session_key, deck_id_one, deck_id_two):
        def op(state):
            return _result(merge_decks(state, deck_id_one, deck_id_two))

        return self._mutate(session_key, op)

    # ---------------------
    # HELPERS
    # ---------------------

    def _mutate(self, session_key, op):
        with self.store.lock(session_key):
            state = self.store.get(session_key)
            if state is None:
                logger.info("[ENGINE] Unknown session %s", session_key)
                return _result(OpStatus.NOT_FOUND, error="Session not found")

            result = op(state)
            # Stored even when unchanged, matching a plain fetch/store cycle
            self.store.put(session_key, state)

        logger.debug("[ENGINE] %s -> %s", session_key, result["status"])
        return result


def _result(status, **extra):
    return {"ok": status is OpStatus.OK, "status": status.value, **extra}
