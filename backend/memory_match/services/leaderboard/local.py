import json
from datetime import date
from pathlib import Path
from typing import List

from .gateway import LeaderboardEntry, LeaderboardError, LeaderboardStore

RECORD_KEY = 'memory-leaderboard'


class LocalLeaderboard(LeaderboardStore):
    """A single keyed record in a JSON file.

    The file maps RECORD_KEY to JSON text encoding
    ``[{name, attempts, score, date}]``, best score first, capped at
    ``limit``. The record is overwritten on every submit.
    """

    def __init__(self, path, limit: int = 5):
        self.path = Path(path)
        self.limit = limit

    def _read_records(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            records = json.loads(self.path.read_text(encoding='utf-8') or '{}')
        except ValueError as exc:
            raise LeaderboardError(f'unreadable leaderboard file {self.path}') from exc
        if not isinstance(records, dict):
            raise LeaderboardError(f'unexpected leaderboard file layout in {self.path}')
        return records

    def _read_entries(self) -> List[dict]:
        raw = self._read_records().get(RECORD_KEY)
        if not raw:
            return []
        try:
            entries = json.loads(raw)
        except ValueError as exc:
            raise LeaderboardError(f'unreadable {RECORD_KEY} record') from exc
        return entries if isinstance(entries, list) else []

    def fetch_top(self) -> List[LeaderboardEntry]:
        return [LeaderboardEntry.from_dict(e) for e in self._read_entries()]

    def submit(self, player_name: str, score: int, attempts: int) -> List[LeaderboardEntry]:
        entries = self._read_entries()
        entries.append({
            'name': player_name,
            'attempts': attempts,
            'score': score,
            'date': date.today().isoformat(),
        })
        # sorted() is stable: equal scores keep insertion order
        entries = sorted(entries, key=lambda e: e.get('score', 0), reverse=True)[:self.limit]

        records = self._read_records()
        records[RECORD_KEY] = json.dumps(entries)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(records, indent=2), encoding='utf-8')
        return [LeaderboardEntry.from_dict(e) for e in entries]
