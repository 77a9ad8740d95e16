import random
import string
import time
from typing import Dict, Optional

from .session import GameSession

# Live sessions keyed by game code. Runtime only; not persisted.
_sessions: Dict[str, GameSession] = {}
_last_seen: Dict[str, float] = {}


def _now() -> float:
    return time.monotonic()


def generate_game_code(length=4):
    """Generate a unique, short game code."""
    while True:
        code = ''.join(random.choices(string.ascii_uppercase + string.digits, k=length))
        if code not in _sessions:
            return code


def evict_idle_sessions(ttl: Optional[float]) -> int:
    """Drop sessions untouched for more than ``ttl`` seconds. 0/None keeps all."""
    if not ttl or ttl <= 0:
        return 0
    cutoff = _now() - ttl
    idle = [code for code, seen in _last_seen.items() if seen < cutoff]
    for code in idle:
        drop_session(code)
    return len(idle)


def create_session(cards, require_name: bool = True, player_name: Optional[str] = None,
                   ttl: Optional[float] = None) -> str:
    evict_idle_sessions(ttl)
    session = GameSession(cards, require_name=require_name, player_name=player_name)
    code = generate_game_code()
    _sessions[code] = session
    _last_seen[code] = _now()
    return code


def get_session(game_code: str) -> Optional[GameSession]:
    if not game_code:
        return None
    code = game_code.upper()
    session = _sessions.get(code)
    if session is not None:
        _last_seen[code] = _now()
    return session


def drop_session(game_code: str) -> bool:
    code = game_code.upper()
    _last_seen.pop(code, None)
    return _sessions.pop(code, None) is not None


def session_count() -> int:
    return len(_sessions)


def clear_sessions() -> None:
    _sessions.clear()
    _last_seen.clear()
