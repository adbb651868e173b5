import logging

from flask import Flask, jsonify, session
from redis.exceptions import RedisError

from config import AppConfig, DeckConfig
from controllers.flask_controller import FlaskDeckController
from controllers.session_controller import form_errors, get_engine, session_bp, session_required
from Forms import AddDeckForm, DrawForm, MergeDecksForm, MoveCardForm
from game.engine import DeckEngine
from game.loader import DeckLoader
from game.store import SessionStore
from utils import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

app = Flask(__name__)

app.config['SECRET_KEY'] = AppConfig.SECRET_KEY
app.config['WTF_CSRF_ENABLED'] = AppConfig.WTF_CSRF_ENABLED

# -----------------------------
# DECK ENGINE (GLOBAL)
# -----------------------------

app.extensions['deck_engine'] = DeckEngine(SessionStore(), DeckLoader())
app.register_blueprint(session_bp)


def controller():
    return FlaskDeckController(get_engine(), session['session_id'])


# -----------------------------
# ERRORS
# -----------------------------

@app.errorhandler(RedisError)
def session_store_unavailable(e):
    logger.error("[APP] Session store failure: %s", e)
    return jsonify({'ok': False, 'error': 'Session store unavailable'}), 503


# -----------------------------
# ROUTES
# -----------------------------

@app.route("/api/templates")
def templates():
    return jsonify({"templates": get_engine().list_templates()})


@app.route("/api/decks", methods=["POST"])
@session_required
def add_deck():
    form = AddDeckForm()
    if not form.validate_on_submit():
        return form_errors(form)

    count = form.discard_visible_count.data
    if count is None:
        count = DeckConfig.DEFAULT_DISCARD_VISIBLE_COUNT
    return controller().add_deck(
        form.deck_name.data.strip(),
        form.discard_visibility.data or DeckConfig.DISCARD_VISIBLE,
        count,
    )


@app.route("/api/decks/<deck_id>", methods=["DELETE"])
@session_required
def remove_deck(deck_id):
    return controller().remove_deck(deck_id)


# -----------------------------
# DECK ACTIONS
# -----------------------------

@app.route("/api/decks/<deck_id>/shuffle", methods=["POST"])
@session_required
def shuffle(deck_id):
    return controller().shuffle(deck_id)


@app.route("/api/decks/<deck_id>/shuffle_with_discard", methods=["POST"])
@session_required
def shuffle_with_discard(deck_id):
    return controller().shuffle_with_discard(deck_id)


@app.route("/api/decks/<deck_id>/draw", methods=["POST"])
@session_required
def draw(deck_id):
    form = DrawForm()
    if not form.validate_on_submit():
        return form_errors(form)

    count = form.count.data
    if count is None:
        count = DeckConfig.DEFAULT_DRAW_COUNT
    return controller().draw(deck_id, count)


@app.route("/api/decks/move_random", methods=["POST"])
@session_required
def move_random():
    form = MoveCardForm()
    if not form.validate_on_submit():
        return form_errors(form)
    return controller().move_random(form.source_deck_id.data, form.target_deck_id.data)


@app.route("/api/decks/move_specific", methods=["POST"])
@session_required
def move_specific():
    form = MoveCardForm()
    if not form.validate_on_submit():
        return form_errors(form)
    if not form.card_id.data:
        return jsonify({'ok': False, 'status': 'invalid',
                        'errors': {'card_id': ['This field is required.']}}), 400
    return controller().move_specific(
        form.source_deck_id.data, form.target_deck_id.data, form.card_id.data)


@app.route("/api/decks/merge", methods=["POST"])
@session_required
def merge():
    form = MergeDecksForm()
    if not form.validate_on_submit():
        return form_errors(form)
    return controller().merge(form.deck_id_one.data, form.deck_id_two.data)


if __name__ == "__main__":
    app.run(debug=True)
