from typing import List

from memory_match import db
from memory_match.models import ScoreRecord
from .gateway import LeaderboardEntry, LeaderboardStore


class DatabaseLeaderboard(LeaderboardStore):
    """Scores kept in the backend's own database (score_record table)."""

    def __init__(self, limit: int = 5):
        self.limit = limit

    def fetch_top(self) -> List[LeaderboardEntry]:
        return [LeaderboardEntry.from_dict(r.to_dict()) for r in ScoreRecord.ranked().limit(self.limit).all()]

    def submit(self, player_name: str, score: int, attempts: int) -> List[LeaderboardEntry]:
        try:
            db.session.add(ScoreRecord(player_name=player_name, score=score, attempts=attempts))
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return self.fetch_top()
