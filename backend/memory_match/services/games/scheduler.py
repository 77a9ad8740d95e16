import time

from memory_match import socketio
from .sessions import get_session


def emit_state_update(game_code: str) -> None:
    socketio.emit('state_update', {'game_code': game_code}, to=f"game:{game_code}", namespace='/ws')


def schedule_selection_clear(app, game_code: str, token: int) -> None:
    """Flip the pending pair of a session back after the reveal cooldown.

    - Runs inline in TESTING mode (unless ENABLE_SCHEDULER_IN_TESTS) so
      requests observe the cleared state
    - The task only carries (game_code, token); a token issued before
      start_new_game is stale and the task aborts
    - Emits state_update when the selection was cleared
    """
    if token is None:
        return
    try:
        delay = max(0, int(app.config.get('REVEAL_COOLDOWN_MS', 700))) / 1000.0
    except Exception:
        delay = 0.7

    try:
        app.logger.info(f"[clear-set] game={game_code} token={token} delay={delay}s")
    except Exception:
        pass

    def _worker(code: str, expected_token: int, wait: float):
        if wait:
            time.sleep(wait)
        session = get_session(code)
        if not session:
            try:
                app.logger.info(f"[clear-abort] game={code} session gone")
            except Exception:
                pass
            return
        if not session.clear_selection(expected_token):
            try:
                app.logger.info(
                    f"[clear-abort] game={code} token={expected_token} pending={session.pending_token} epoch={session.epoch}"
                )
            except Exception:
                pass
            return
        try:
            app.logger.info(f"[clear-fire] game={code} token={expected_token}")
        except Exception:
            pass
        emit_state_update(code)

    _run(app, _worker, game_code, token, delay)


def _run(app, fn, *args) -> None:
    if app.config.get('TESTING') and not app.config.get('ENABLE_SCHEDULER_IN_TESTS'):
        fn(*args)
    else:
        socketio.start_background_task(fn, *args)


def schedule_leaderboard_refresh(app, game_code: str, result=None) -> None:
    """Talk to the leaderboard off the request path.

    ``result`` is ``(player_name, score, attempts)`` for a finished game;
    without it the standings are only re-read. The gateway cache is updated
    either way and clients in the game room get a state_update.
    """
    def _worker(code: str, submission):
        with app.app_context():
            gateway = app.extensions['leaderboard']
            if submission:
                gateway.submit(*submission)
            else:
                gateway.fetch_top()
        try:
            app.logger.info(f"[leaderboard-refresh] game={code} submitted={bool(submission)}")
        except Exception:
            pass
        emit_state_update(code)

    _run(app, _worker, game_code, result)
