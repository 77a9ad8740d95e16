from flask import Blueprint, jsonify, request, current_app
from memory_match import db
from memory_match.models import ScoreRecord


leaderboard = Blueprint('leaderboard', __name__)


def _limit() -> int:
    try:
        return int(current_app.config.get('LEADERBOARD_LIMIT', 5))
    except Exception:
        return 5


def _standings():
    return [r.to_dict() for r in ScoreRecord.ranked().limit(_limit()).all()]


@leaderboard.route('', methods=['GET'])
def get_leaderboard():
    """Top scores, best first."""
    return jsonify(_standings())


@leaderboard.route('', methods=['POST'])
def submit_score():
    """Record one finished game and return the updated standings.

    Scores are taken as reported by the client.
    """
    data = request.get_json(silent=True) or {}
    player_name = (data.get('playerName') or '').strip()
    score = data.get('score')
    attempts = data.get('attempts')

    if not player_name:
        return jsonify({'error': 'playerName is required'}), 400
    if not isinstance(score, int) or isinstance(score, bool):
        return jsonify({'error': 'score must be an integer'}), 400
    if attempts is None:
        attempts = 0
    if not isinstance(attempts, int) or isinstance(attempts, bool) or attempts < 0:
        return jsonify({'error': 'attempts must be a non-negative integer'}), 400

    record = ScoreRecord(player_name=player_name[:64], score=score, attempts=attempts)
    db.session.add(record)
    db.session.commit()
    try:
        current_app.logger.info(f"[score] player={record.player_name} score={score} attempts={attempts}")
    except Exception:
        pass

    return jsonify(_standings()), 201
