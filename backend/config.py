import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///memory_match.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # How long a second revealed card stays visible before both flip back (ms)
    REVEAL_COOLDOWN_MS = int(os.environ.get('REVEAL_COOLDOWN_MS', '700'))
    # Name entry phase before each game. 0 starts games immediately.
    REQUIRE_PLAYER_NAME = os.environ.get('REQUIRE_PLAYER_NAME', '1') not in ('0', 'false', 'False', '')
    # Leaderboard storage: database, http or local
    LEADERBOARD_BACKEND = os.environ.get('LEADERBOARD_BACKEND', 'database')
    LEADERBOARD_URL = os.environ.get('LEADERBOARD_URL')
    LEADERBOARD_TIMEOUT_SEC = float(os.environ.get('LEADERBOARD_TIMEOUT_SEC', '5'))
    LEADERBOARD_FILE = os.environ.get('LEADERBOARD_FILE', 'leaderboard.json')
    LEADERBOARD_LIMIT = int(os.environ.get('LEADERBOARD_LIMIT', '5'))
    # Grace period before a session whose owner disconnected is dropped (sec)
    OWNER_GRACE_SEC = float(os.environ.get('OWNER_GRACE_SEC', '2.0'))
    # Sessions idle longer than this are dropped on the next create (sec). 0 disables.
    SESSION_TTL_SEC = float(os.environ.get('SESSION_TTL_SEC', '1800'))
