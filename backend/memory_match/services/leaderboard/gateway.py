import logging
from dataclasses import dataclass
from typing import List, Optional


class LeaderboardError(Exception):
    """A leaderboard store could not be read or written."""


@dataclass(frozen=True)
class LeaderboardEntry:
    player_name: str
    score: int
    attempts: int
    date: Optional[str] = None

    def to_dict(self):
        return {
            'playerName': self.player_name,
            'score': self.score,
            'attempts': self.attempts,
            'date': self.date,
        }

    @classmethod
    def from_dict(cls, data) -> 'LeaderboardEntry':
        try:
            name = data.get('playerName', data.get('name'))
            if name is None:
                raise KeyError('playerName')
            return cls(
                player_name=str(name),
                score=int(data['score']),
                attempts=int(data.get('attempts') or 0),
                date=data.get('date'),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise LeaderboardError(f'malformed leaderboard entry: {data!r}') from exc


class LeaderboardStore:
    """Storage adapter behind the gateway.

    Stores own ordering and truncation: both methods return the standings
    as the store ranks them. Failures raise.
    """

    def fetch_top(self) -> List[LeaderboardEntry]:
        raise NotImplementedError

    def submit(self, player_name: str, score: int, attempts: int) -> List[LeaderboardEntry]:
        raise NotImplementedError


class LeaderboardGateway:
    """Best-effort front for a LeaderboardStore.

    Never raises. A failed call is logged and answered with the last
    standings that were read successfully (empty before the first one).
    """

    def __init__(self, store: LeaderboardStore, logger: Optional[logging.Logger] = None):
        self.store = store
        self.logger = logger or logging.getLogger(__name__)
        self._cache: List[LeaderboardEntry] = []

    @property
    def cached(self) -> List[LeaderboardEntry]:
        return list(self._cache)

    def fetch_top(self) -> List[LeaderboardEntry]:
        try:
            self._cache = list(self.store.fetch_top())
        except Exception as exc:
            self.logger.warning(f"[leaderboard-fetch-failed] store={type(self.store).__name__} error={exc}")
        return self.cached

    def submit(self, player_name: str, score: int, attempts: int) -> List[LeaderboardEntry]:
        try:
            self._cache = list(self.store.submit(player_name, score, attempts))
            self.logger.info(f"[leaderboard-submit] player={player_name} score={score} attempts={attempts}")
        except Exception as exc:
            self.logger.warning(f"[leaderboard-submit-failed] store={type(self.store).__name__} error={exc}")
        return self.cached
