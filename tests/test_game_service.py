import pytest

from wordgame.services import GameService


@pytest.fixture
def service(word_source):
    return GameService(word_source)


def test_new_game_hides_answer(service):
    game_id = service.create_new_game()
    state = service.get_game_state(game_id)

    assert state.game_id == game_id
    assert state.num_guesses == 0
    assert state.max_turns == 6
    assert state.game_over is False
    assert state.answer is None
    assert state.message is None
    assert service.get_round(game_id).game.secret_word in {"CRANE", "SPEED", "ALLOW"}


def test_unknown_game(service):
    assert service.get_game_state("missing") is None
    assert service.is_valid_guess("missing", "CRANE") == (False, "Game not found")
    assert service.make_guess("missing", "CRANE") is None


@pytest.mark.parametrize("guess, error", [
    (None, "Guess must be a valid string"),
    ("", "Guess must be a valid string"),
    (12345, "Guess must be a valid string"),
    ("CRAN", "Your guess was not 5 letters long."),
    ("CR4NE", "The guess must consist only of upper-case English letters."),
    ("ZZZZZ", "Not in word list"),
])
def test_invalid_guesses(service, guess, error):
    game_id = service.create_new_game("CRANE")

    assert service.is_valid_guess(game_id, guess) == (False, error)
    assert service.make_guess(game_id, guess) is None
    assert service.get_game_state(game_id).num_guesses == 0


def test_guess_is_normalized(service):
    game_id = service.create_new_game("CRANE")

    feedback, state = service.make_guess(game_id, "  eerie ")

    assert feedback == "..+.*"
    assert state.guesses == ["EERIE"]
    assert state.feedback == ["..+.*"]
    assert state.letter_states == {"E": "RIGHT", "I": "UNUSED", "R": "MISPOSITIONED"}


def test_repeated_guess_is_replayed_without_word_list_check(service, word_source):
    game_id = service.create_new_game("SPEED")
    service.make_guess(game_id, "ERASE")

    word_source.legal_words = frozenset()

    assert service.is_valid_guess(game_id, "ERASE") == (True, "")
    feedback, state = service.make_guess(game_id, "ERASE")
    assert feedback == "+..++"
    assert state.num_guesses == 1


def test_win_reveals_answer_and_blocks_more_guesses(service):
    game_id = service.create_new_game("CRANE")

    feedback, state = service.make_guess(game_id, "CRANE")

    assert feedback == "*****"
    assert state.won is True
    assert state.game_over is True
    assert state.answer == "CRANE"
    assert state.message == "Genius"
    assert service.is_valid_guess(game_id, "SPEED") == (False, "Game is already over")


def test_loss_after_six_guesses(service):
    game_id = service.create_new_game("CRANE")
    for guess in ["ABOUT", "BEGIN", "DREAM", "FLOOR", "GHOST", "HOUSE"]:
        feedback, state = service.make_guess(game_id, guess)

    assert state.game_over is True
    assert state.won is False
    assert state.answer == "CRANE"
    assert state.message == "CRANE"


def test_active_game_count_and_delete(service):
    first = service.create_new_game("CRANE")
    second = service.create_new_game("SPEED")
    service.make_guess(first, "CRANE")

    assert service.active_game_count() == 1
    assert service.delete_game(second) is True
    assert service.delete_game(second) is False
    assert service.active_game_count() == 0
    assert list(service.games) == [first]


def test_invalid_secret_word(service):
    with pytest.raises(ValueError):
        service.create_new_game("TOOLONG")
