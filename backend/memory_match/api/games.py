from flask import Blueprint, jsonify, request, current_app, abort
from memory_match.services.games import COMPLETED
from memory_match.services.games.deck import InvalidDeckError, cards_from_payload, default_cards
from memory_match.services.games.sessions import create_session, get_session
from memory_match.services.games.scheduler import (
    emit_state_update, schedule_leaderboard_refresh, schedule_selection_clear,
)


games = Blueprint('games', __name__)


def _leaderboard():
    return current_app.extensions['leaderboard']


def _require_name() -> bool:
    return bool(current_app.config.get('REQUIRE_PLAYER_NAME', True))


def _session_ttl() -> float:
    try:
        return float(current_app.config.get('SESSION_TTL_SEC', 1800))
    except Exception:
        return 0.0


def _name_from(data):
    name = data.get('player_name')
    return name if isinstance(name, str) else None


def _session_or_404(game_code: str):
    session = get_session(game_code)
    if session is None:
        abort(404)
    return session


def _state(game_code: str, session, **extra):
    payload = session.to_dict()
    payload['game_code'] = game_code.upper()
    payload['leaderboard'] = [e.to_dict() for e in _leaderboard().cached]
    payload.update(extra)
    return payload


def _submit_result(game_code: str, session) -> None:
    """Report a completed game in the background; the local score stands regardless."""
    if not session.player_name:
        try:
            current_app.logger.info(f"[submit-skip] game={game_code} no player name")
        except Exception:
            pass
        return
    schedule_leaderboard_refresh(
        current_app._get_current_object(), game_code,
        (session.player_name, session.score, session.attempts),
    )


@games.errorhandler(404)
def not_found(_exc):
    return jsonify({'error': 'Game not found'}), 404


@games.route('/create', methods=['POST'])
def create_game():
    data = request.get_json(silent=True) or {}
    player_name = (data.get('player_name') or '').strip() or None
    try:
        cards = cards_from_payload(data['cards']) if data.get('cards') is not None else default_cards()
        code = create_session(
            cards, require_name=_require_name(), player_name=player_name, ttl=_session_ttl(),
        )
    except InvalidDeckError as exc:
        return jsonify({'error': f'Invalid deck: {exc}'}), 400

    try:
        current_app.logger.info(f"[create] game={code} pairs={len(cards) // 2} player={player_name}")
    except Exception:
        pass
    schedule_leaderboard_refresh(current_app._get_current_object(), code)
    return jsonify(_state(code, get_session(code))), 201


@games.route('/<string:game_code>/state', methods=['GET'])
def get_game_state(game_code):
    session = _session_or_404(game_code)
    payload = _state(game_code, session)
    payload['reveal_cooldown_ms'] = int(current_app.config.get('REVEAL_COOLDOWN_MS', 700))
    return jsonify(payload)


@games.route('/<string:game_code>/start', methods=['POST'])
def start_game(game_code):
    data = request.get_json(silent=True) or {}
    session = _session_or_404(game_code)
    try:
        session.start_game(_name_from(data))
    except ValueError as exc:
        return jsonify({'error': str(exc)}), 400

    emit_state_update(game_code.upper())
    return jsonify(_state(game_code, session))


@games.route('/<string:game_code>/select', methods=['POST'])
def select_card(game_code):
    data = request.get_json(silent=True) or {}
    card_id = data.get('card_id')
    session = _session_or_404(game_code)
    if not isinstance(card_id, int) or isinstance(card_id, bool) or session.get_card(card_id) is None:
        return jsonify({'error': 'Card not found'}), 404

    accepted = session.select_card(card_id)
    if not accepted:
        # Ignored clicks leave the state untouched
        return jsonify(_state(game_code, session, accepted=False))

    code = game_code.upper()
    if session.status == COMPLETED:
        try:
            current_app.logger.info(f"[complete] game={code} attempts={session.attempts} score={session.score}")
        except Exception:
            pass
        _submit_result(code, session)

    # Snapshot before the clear task can run so the second card is visible
    payload = _state(code, session, accepted=True)
    emit_state_update(code)
    if len(session.selected) == 2:
        schedule_selection_clear(current_app._get_current_object(), code, session.pending_token)
    return jsonify(payload)


@games.route('/<string:game_code>/restart', methods=['POST'])
def restart_game(game_code):
    data = request.get_json(silent=True) or {}
    session = _session_or_404(game_code)
    session.start_new_game(_name_from(data))
    try:
        current_app.logger.info(f"[restart] game={game_code.upper()} epoch={session.epoch}")
    except Exception:
        pass
    emit_state_update(game_code.upper())
    return jsonify(_state(game_code, session))


@games.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    return jsonify([e.to_dict() for e in _leaderboard().fetch_top()])
