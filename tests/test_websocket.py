import pytest


@pytest.fixture
def ws_client(app, socketio):
    client = socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()


@pytest.fixture
def game_id(game_service):
    return game_service.create_new_game("SPEED")


def events(client, name):
    return [event["args"][0] for event in client.get_received() if event["name"] == name]


def test_join_game_sends_state(ws_client, game_id):
    ws_client.emit("join_game", {"game_id": game_id})

    [payload] = events(ws_client, "game_state")
    assert payload["success"] is True
    assert payload["state"]["game_id"] == game_id
    assert payload["state"]["num_guesses"] == 0


@pytest.mark.parametrize("data, error", [
    ({}, "Game ID is required"),
    ({"game_id": "missing"}, "Game not found"),
])
def test_join_game_errors(ws_client, data, error):
    ws_client.emit("join_game", data)

    [payload] = events(ws_client, "error")
    assert payload == {"success": False, "error": error}


def test_submit_guess_broadcasts_to_room(app, socketio, ws_client, game_id):
    watcher = socketio.test_client(app)
    watcher.emit("join_game", {"game_id": game_id})
    watcher.get_received()

    ws_client.emit("submit_guess", {"game_id": game_id, "guess": "erase"})

    [own] = events(ws_client, "game_state_update")
    [seen] = events(watcher, "game_state_update")
    assert own == seen
    assert own["guess"] == "ERASE"
    assert own["feedback"] == "+..++"
    assert own["state"]["letter_states"]["S"] == "MISPOSITIONED"
    watcher.disconnect()


def test_submit_invalid_guess(ws_client, game_id, game_service):
    ws_client.emit("submit_guess", {"game_id": game_id, "guess": "ZZZZZ"})

    [payload] = events(ws_client, "error")
    assert payload["error"] == "Not in word list"
    assert game_service.get_game_state(game_id).num_guesses == 0


def test_submit_winning_guess(ws_client, game_id):
    ws_client.emit("submit_guess", {"game_id": game_id, "guess": "SPEED"})

    [payload] = events(ws_client, "game_state_update")
    assert payload["state"]["won"] is True
    assert payload["state"]["message"] == "Genius"
    assert payload["state"]["answer"] == "SPEED"


def test_leave_game_stops_updates(app, socketio, ws_client, game_id):
    watcher = socketio.test_client(app)
    watcher.emit("join_game", {"game_id": game_id})
    watcher.emit("leave_game", {"game_id": game_id})
    watcher.get_received()

    ws_client.emit("submit_guess", {"game_id": game_id, "guess": "ERASE"})

    assert events(watcher, "game_state_update") == []
    watcher.disconnect()
