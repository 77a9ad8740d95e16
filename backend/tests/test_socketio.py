from memory_match.services.games.sessions import get_session


def test_socket_connect_and_join(sio_client):
    # the fixture normally connects already
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')

    # drop the connected greeting
    try:
        sio_client.get_received('/ws')
    except Exception:
        pass

    # any code can be joined; rooms exist independently of games
    sio_client.emit('join_game', {'game_code': 'ABCD'}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] in ('connected', 'joined') for pkt in received)


def test_selection_broadcasts_state_update(sio_client, client):
    code = client.post('/api/games/create', json={'player_name': 'Alice'}).get_json()['game_code']
    sio_client.emit('join_game', {'game_code': code}, namespace='/ws')
    sio_client.get_received('/ws')

    card_id = get_session(code).deck[0].id
    client.post(f'/api/games/{code}/select', json={'card_id': card_id})
    events = sio_client.get_received('/ws')
    updates = [e for e in events if e['name'] == 'state_update']
    assert updates
    assert updates[0]['args'][0] == {'game_code': code}


def test_owner_disconnect_drops_game(flask_app, sio_client, client):
    # the owner is the browser tab that created the game
    res = client.post('/api/games/create')
    code = res.get_json()['game_code']
    assert get_session(code) is not None

    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    # the owner tab joins with is_session_owner, a spectator joins without
    from memory_match import socketio as _sio
    owner_client = _sio.test_client(flask_app, namespace='/ws')
    owner_client.emit('join_game', {'game_code': code, 'is_session_owner': True}, namespace='/ws')

    sio_client.emit('join_game', {'game_code': code}, namespace='/ws')
    sio_client.get_received('/ws')

    # closing the owner tab ends the game for everyone watching
    owner_client.disconnect(namespace='/ws')
    import time
    deadline = time.time() + 3.0
    got = False
    while time.time() < deadline and not got:
        events = sio_client.get_received('/ws')
        got = any(e['name'] == 'session_ended' for e in events)
        if not got:
            time.sleep(0.1)
    assert got
    assert get_session(code) is None
