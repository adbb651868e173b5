import random

from config import DeckConfig
from game.models import Card, DiscardVisibility


class Deck:
    """
    A named pile of cards plus its discard pile.

    Both piles are lists whose END is the top: draw pops from the end,
    add_cards_to_top appends.
    """

    def __init__(self, deck_id, name, cards=None,
                 discard_visibility=DiscardVisibility.VISIBLE,
                 discard_visible_count=DeckConfig.DEFAULT_DISCARD_VISIBLE_COUNT):
        self.id = deck_id
        self.name = name
        self.cards = list(cards or [])
        self.discard_pile = []
        self.discard_visibility = DiscardVisibility(discard_visibility)
        self.discard_visible_count = discard_visible_count

    def __repr__(self):
        return f"Deck({self.id!r}, {self.name!r}, cards={len(self.cards)}, discard={len(self.discard_pile)})"

    # ---------------------
    # LOOKUP
    # ---------------------

    def find_card(self, card_id):
        """Card with this id in the main pile, or None. Discards are not searched."""
        for card in self.cards:
            if card.id == card_id:
                return card
        return None

    # ---------------------
    # SHUFFLING
    # ---------------------

    def shuffle(self, rng=None):
        (rng or random).shuffle(self.cards)

    def shuffle_discard_into_deck(self, rng=None):
        self.cards.extend(self.discard_pile)
        self.discard_pile = []
        self.shuffle(rng)

    # ---------------------
    # DRAW
    # ---------------------

    def draw(self, n=1):
        """
        Take up to n cards off the top, top card first, and put them on the
        discard pile in that order. Returns the drawn cards; drawing from a
        short or empty deck returns fewer than n.
        """
        drawn = []
        while len(drawn) < n and self.cards:
            drawn.append(self.cards.pop())
        self.discard_pile.extend(drawn)
        return drawn

    # ---------------------
    # MOVING CARDS
    # ---------------------

    def select_and_remove(self, card_id):
        """
        Remove a card from the main pile and hand it to the caller.
        The card is NOT discarded; the caller decides where it goes.
        """
        for index, card in enumerate(self.cards):
            if card.id == card_id:
                return self.cards.pop(index)
        return None

    def add_cards_to_top(self, cards):
        self.cards.extend(_as_list(cards))

    def add_cards_to_bottom(self, cards):
        self.cards[0:0] = _as_list(cards)

    def merge(self, other_deck):
        # It's up to the caller to clean up the other deck
        self.cards.extend(other_deck.cards)
        self.discard_pile.extend(other_deck.discard_pile)


def _as_list(cards):
    if isinstance(cards, Card):
        return [cards]
    return list(cards)
