"""
Session Controller
Starts, inspects and terminates scratchpad sessions
"""
import logging
from functools import wraps

from flask import Blueprint, current_app, jsonify, session

from Forms import SessionStartForm
from controllers.flask_controller import FlaskDeckController

logger = logging.getLogger(__name__)

session_bp = Blueprint('session', __name__)


def get_engine():
    return current_app.extensions['deck_engine']


def session_required(f):
    """Decorator to require an active scratchpad session"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if 'session_id' not in session:
            return jsonify({'ok': False, 'error': 'No active session'}), 401
        return f(*args, **kwargs)
    return decorated_function


def form_errors(form):
    return jsonify({'ok': False, 'status': 'invalid', 'errors': form.errors}), 400


@session_bp.route('/api/session', methods=['POST'])
def create_session():
    """
    Start a session, or join an existing one under the same id

    Request:
        session_id: str
    """
    form = SessionStartForm()
    if not form.validate_on_submit():
        return form_errors(form)

    session_id = form.session_id.data.strip()
    session['session_id'] = session_id
    get_engine().start_session(session_id)
    logger.info("[SESSION] Client joined session %s", session_id)

    return FlaskDeckController(get_engine(), session_id).get_state()


@session_bp.route('/api/session', methods=['GET'])
@session_required
def show_session():
    return FlaskDeckController(get_engine(), session['session_id']).get_state()


@session_bp.route('/api/session', methods=['DELETE'])
@session_required
def destroy_session():
    session_id = session.pop('session_id')
    get_engine().end_session(session_id)
    return jsonify({'ok': True, 'message': 'Session terminated.'})
