from typing import List, Optional

import requests

from .gateway import LeaderboardEntry, LeaderboardError, LeaderboardStore


class HttpLeaderboard(LeaderboardStore):
    """Remote leaderboard API.

    ``GET <url>`` returns a JSON array of entries; ``POST <url>`` with
    ``{playerName, score, attempts}`` records one, after which the list is
    fetched again. Ranking is whatever the server returns.
    """

    def __init__(self, url: str, timeout: float = 5.0, session: Optional[requests.Session] = None):
        if not url:
            raise ValueError('LEADERBOARD_URL is required for the http leaderboard')
        self.url = url
        self.timeout = timeout
        self.http = session or requests.Session()

    def fetch_top(self) -> List[LeaderboardEntry]:
        resp = self.http.get(self.url, timeout=self.timeout)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, list):
            raise LeaderboardError(f'expected a JSON array from {self.url}')
        return [LeaderboardEntry.from_dict(item) for item in data]

    def submit(self, player_name: str, score: int, attempts: int) -> List[LeaderboardEntry]:
        resp = self.http.post(
            self.url,
            json={'playerName': player_name, 'score': score, 'attempts': attempts},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return self.fetch_top()
