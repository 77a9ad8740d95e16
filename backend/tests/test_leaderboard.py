import json

import pytest
import requests

from memory_match.services.leaderboard import LeaderboardEntry, LeaderboardGateway, LeaderboardStore
from memory_match.services.leaderboard.database import DatabaseLeaderboard
from memory_match.services.leaderboard.local import RECORD_KEY, LocalLeaderboard
from memory_match.services.leaderboard.remote import HttpLeaderboard


class FlakyStore(LeaderboardStore):
    def __init__(self):
        self.entries = []
        self.fail = False

    def fetch_top(self):
        if self.fail:
            raise ConnectionError('down')
        return list(self.entries)

    def submit(self, player_name, score, attempts):
        if self.fail:
            raise ConnectionError('down')
        self.entries.append(LeaderboardEntry(player_name, score, attempts))
        return list(self.entries)


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code}')

    def json(self):
        return self.payload


class FakeHttp:
    def __init__(self, rows):
        self.rows = rows
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append(('GET', url, None))
        return FakeResponse(self.rows)

    def post(self, url, json=None, timeout=None):
        self.calls.append(('POST', url, json))
        self.rows.append(json)
        return FakeResponse({}, status=201)


def test_gateway_returns_cache_when_store_fails():
    store = FlakyStore()
    gateway = LeaderboardGateway(store)
    assert gateway.fetch_top() == []

    standings = gateway.submit('Alice', 100, 8)
    assert standings == [LeaderboardEntry('Alice', 100, 8)]

    store.fail = True
    assert gateway.fetch_top() == standings
    assert gateway.submit('Bob', 50, 16) == standings


def test_gateway_failure_before_first_read_is_empty():
    store = FlakyStore()
    store.fail = True
    gateway = LeaderboardGateway(store)
    assert gateway.fetch_top() == []
    assert gateway.submit('Alice', 100, 8) == []


def test_local_store_keeps_top_five(tmp_path):
    path = tmp_path / 'board.json'
    store = LocalLeaderboard(path, limit=5)
    assert store.fetch_top() == []

    for name, score in [('a', 10), ('b', 90), ('c', 50), ('d', 70), ('e', 30), ('f', 100), ('g', 5)]:
        store.submit(name, score, 8)

    top = store.fetch_top()
    assert [e.player_name for e in top] == ['f', 'b', 'd', 'c', 'e']
    assert all(e.date for e in top)

    record = json.loads(path.read_text(encoding='utf-8'))
    stored = json.loads(record[RECORD_KEY])
    assert set(stored[0]) == {'name', 'attempts', 'score', 'date'}


def test_local_store_unreadable_file_falls_back_through_gateway(tmp_path):
    path = tmp_path / 'board.json'
    path.write_text('not json', encoding='utf-8')
    gateway = LeaderboardGateway(LocalLeaderboard(path))
    assert gateway.fetch_top() == []


def test_http_store_posts_then_refetches():
    http = FakeHttp([{'playerName': 'Zed', 'score': 90}])
    store = HttpLeaderboard('http://scores.test/api', session=http)

    standings = store.submit('Alice', 100, 8)
    assert [c[0] for c in http.calls] == ['POST', 'GET']
    assert http.calls[0][2] == {'playerName': 'Alice', 'score': 100, 'attempts': 8}
    # order is whatever the server returned
    assert [e.player_name for e in standings] == ['Zed', 'Alice']
    assert standings[0].attempts == 0


def test_http_store_rejects_non_list_payload():
    http = FakeHttp({'oops': True})
    gateway = LeaderboardGateway(HttpLeaderboard('http://scores.test/api', session=http))
    assert gateway.fetch_top() == []


def test_http_store_requires_url():
    with pytest.raises(ValueError):
        HttpLeaderboard('')


def test_database_store_ranks_and_truncates(flask_app):
    store = DatabaseLeaderboard(limit=3)
    store.submit('a', 50, 16)
    store.submit('b', 100, 8)
    store.submit('c', 50, 10)
    standings = store.submit('d', 20, 40)

    assert [e.player_name for e in standings] == ['b', 'c', 'a']
    assert standings[0].date is not None
