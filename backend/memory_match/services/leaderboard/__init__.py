"""Leaderboard gateway and its storage adapters.

``build_leaderboard`` picks the adapter named by LEADERBOARD_BACKEND and
wraps it in the best-effort gateway the game routes talk to.
"""

from .gateway import LeaderboardEntry, LeaderboardError, LeaderboardGateway, LeaderboardStore


def build_leaderboard(app) -> LeaderboardGateway:
    cfg = app.config
    backend = (cfg.get('LEADERBOARD_BACKEND') or 'database').lower()
    limit = int(cfg.get('LEADERBOARD_LIMIT', 5))
    if backend == 'http':
        from .remote import HttpLeaderboard
        store = HttpLeaderboard(cfg.get('LEADERBOARD_URL'), timeout=float(cfg.get('LEADERBOARD_TIMEOUT_SEC', 5)))
    elif backend == 'local':
        from .local import LocalLeaderboard
        store = LocalLeaderboard(cfg.get('LEADERBOARD_FILE', 'leaderboard.json'), limit=limit)
    elif backend == 'database':
        from .database import DatabaseLeaderboard
        store = DatabaseLeaderboard(limit=limit)
    else:
        raise ValueError(f"Unknown LEADERBOARD_BACKEND: {backend}")
    app.logger.info(f"[leaderboard] backend={backend} store={type(store).__name__}")
    return LeaderboardGateway(store, logger=app.logger)
