import logging

from config import DeckConfig
from game.deck import Deck
from game.models import Card, DiscardVisibility, OpStatus

logger = logging.getLogger(__name__)


class SessionState:
    """
    Everything one session holds: its live decks (insertion order is the
    order users see) and the most recent draw per deck for display.
    """

    def __init__(self):
        self.decks = []
        self.drawn_cards = {}  # deck_id -> cards from the latest draw
        self._deck_counter = 0

    @property
    def deck_count(self):
        return len(self.decks)

    def add_deck(self, template_name, loader, rng=None,
                 discard_visibility=DiscardVisibility.VISIBLE,
                 discard_visible_count=DeckConfig.DEFAULT_DISCARD_VISIBLE_COUNT):
        """
        Instantiate template_name as a new, shuffled deck.

        Returns (status, deck). Nothing changes unless status is OK.
        """
        if len(self.decks) >= DeckConfig.MAX_DECKS:
            logger.info("[SESSION] Deck limit of %d reached", DeckConfig.MAX_DECKS)
            return OpStatus.CAPACITY_EXCEEDED, None

        template = loader.find(template_name)
        if template is None:
            logger.info("[SESSION] Template %r not found", template_name)
            return OpStatus.NOT_FOUND, None

        # Fresh card ids every time, so loading a template twice never collides
        cards = [Card(entry["name"], entry.get("data")) for entry in template.cards]

        deck = Deck(
            self._next_deck_id(),
            template.name,
            cards,
            discard_visibility=discard_visibility,
            discard_visible_count=discard_visible_count,
        )
        deck.shuffle(rng)
        self.decks.append(deck)
        logger.info("[SESSION] Added deck %s (%s, %d cards)", deck.id, deck.name, len(cards))
        return OpStatus.OK, deck

    def find_deck(self, deck_id):
        for deck in self.decks:
            if deck.id == deck_id:
                return deck
        return None

    def remove_deck(self, deck_id):
        """Drop the deck and its cards. drawn_cards is left as-is."""
        deck = self.find_deck(deck_id)
        if deck is None:
            return OpStatus.NOT_FOUND
        self.decks.remove(deck)
        return OpStatus.OK

    def _next_deck_id(self):
        # Counter never rewinds, so ids stay unique after removals
        self._deck_counter += 1
        return f"deck-{self._deck_counter}"
