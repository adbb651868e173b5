from flask import jsonify

from game.models import DiscardVisibility, OpStatus

HTTP_STATUS = {
    OpStatus.OK.value: 200,
    OpStatus.NOT_FOUND.value: 404,
    OpStatus.CAPACITY_EXCEEDED.value: 409,
    OpStatus.INVALID.value: 400,
}


# -----------------------------
# SERIALIZATION
# -----------------------------

def serialize_card(card):
    return {"id": card.id, "name": card.name, "data": card.data}


def serialize_deck(deck):
    data = {
        "id": deck.id,
        "name": deck.name,
        "card_count": len(deck.cards),
        "cards": [serialize_card(c) for c in deck.cards],
        "discard_count": len(deck.discard_pile),
        "discard_visibility": deck.discard_visibility.value,
    }

    # Top of the pile is the end of the list
    if deck.discard_visibility is DiscardVisibility.VISIBLE:
        shown = deck.discard_pile
    elif deck.discard_visibility is DiscardVisibility.TOP_N and deck.discard_visible_count > 0:
        shown = deck.discard_pile[-deck.discard_visible_count:]
    else:
        shown = []
    data["discard_pile"] = [serialize_card(c) for c in shown]
    return data


def serialize_state(state):
    return {
        "deck_count": state.deck_count,
        "decks": [serialize_deck(d) for d in state.decks],
        "drawn_cards": {
            deck_id: [serialize_card(c) for c in cards]
            for deck_id, cards in state.drawn_cards.items()
        },
    }


# -----------------------------
# CONTROLLER
# -----------------------------

class FlaskDeckController:
    """
    Binds a DeckEngine to the caller's session key and turns engine
    results into JSON responses carrying the updated session state.
    """

    def __init__(self, engine, session_key):
        self.engine = engine
        self.session_key = session_key

    def get_state(self):
        state = self.engine.get_state(self.session_key)
        if state is None:
            return jsonify({"ok": False, "status": OpStatus.NOT_FOUND.value,
                            "error": "Session not found"}), 404
        return jsonify({
            "session_id": self.session_key,
            "templates": self.engine.list_templates(),
            "state": serialize_state(state),
        })

    def add_deck(self, deck_name, discard_visibility, discard_visible_count):
        return self._respond(self.engine.add_deck(
            self.session_key, deck_name,
            discard_visibility=DiscardVisibility(discard_visibility),
            discard_visible_count=discard_visible_count,
        ))

    def remove_deck(self, deck_id):
        return self._respond(self.engine.remove_deck(self.session_key, deck_id))

    def shuffle(self, deck_id):
        return self._respond(self.engine.shuffle(self.session_key, deck_id))

    def shuffle_with_discard(self, deck_id):
        return self._respond(self.engine.shuffle_with_discard(self.session_key, deck_id))

    def draw(self, deck_id, count):
        return self._respond(self.engine.draw(self.session_key, deck_id, count))

    def move_random(self, source_deck_id, target_deck_id):
        return self._respond(self.engine.move_random_card(
            self.session_key, source_deck_id, target_deck_id))

    def move_specific(self, source_deck_id, target_deck_id, card_id):
        return self._respond(self.engine.move_specific_card(
            self.session_key, source_deck_id, target_deck_id, card_id))

    def merge(self, deck_id_one, deck_id_two):
        return self._respond(self.engine.merge_decks(self.session_key, deck_id_one, deck_id_two))

    def _respond(self, result):
        state = self.engine.get_state(self.session_key)
        body = {
            "results": result,
            "state": serialize_state(state) if state is not None else None,
        }
        return jsonify(body), HTTP_STATUS[result["status"]]
